import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from crm.clients import router as clients_router
from crm.core import db, errors, schema
from crm.core.logging_config import configure_logging

PORT = 3000

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # One pool per process; a failure here stops the server from starting.
    database = await db.Database.connect(db.database_settings())
    try:
        if schema.schema_bootstrap_enabled():
            await schema.ensure_schema(database)
        app.state.db = database
        logger.info("Servidor corriendo en el puerto %s", PORT)
        yield
    finally:
        app.state.db = None
        await database.close()


app = FastAPI(title="crm-clients", lifespan=lifespan)

errors.register_error_handlers(app)

app.include_router(clients_router.router, tags=["clients"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
