"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that features share (DB wiring, schema
bootstrap, logging, error responses). Feature-specific SQL and business logic
live in the corresponding feature package (e.g. `clients/`).
"""
