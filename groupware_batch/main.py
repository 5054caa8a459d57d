"""
Groupware batch API - trigger batch runs and read their history over HTTP
"""
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

from groupware_batch.api.router import api_router
from groupware_batch.core.config import settings
from groupware_batch.core.errors import (
    http_exception_handler,
    batch_exception_handler,
    validation_exception_handler,
    generic_exception_handler,
)
from groupware_batch.core.exceptions import BatchError
from groupware_batch.core.logging import setup_logging
from groupware_batch.db.session import init_schema

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Groupware Batch",
    description="Attendance ledger creation and paid leave acquisition/grant batches",
    version=settings.VERSION or "1.0.0"
)

app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(BatchError, batch_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup_schema() -> None:
    """Create tables for local SQLite databases"""
    init_schema()
    logger.info(f"Batch API started (env={settings.APP_ENV})")
