import logging
import os
import unittest
from unittest.mock import patch

from crm.core import logging_config


class LoggingConfigTests(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("crm")
        self._old_level = self.logger.level

    def tearDown(self):
        self.logger.setLevel(self._old_level)

    def test_log_level_defaults_to_info(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(logging_config.log_level(), "INFO")

    def test_log_level_is_normalized(self):
        with patch.dict(os.environ, {"LOG_LEVEL": " debug "}):
            self.assertEqual(logging_config.log_level(), "DEBUG")

    def test_blank_log_level_falls_back_to_info(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "   "}):
            self.assertEqual(logging_config.log_level(), "INFO")

    def test_configure_applies_level_to_package_logger(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}):
            logging_config.configure_logging()

        self.assertEqual(self.logger.level, logging.WARNING)

    def test_unknown_level_falls_back_to_info(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "chatty"}):
            logging_config.configure_logging()

        self.assertEqual(self.logger.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
