"""
FieldOps Backend - Main Application Entry Point
"""
import logging
from urllib.parse import urlparse, urlunparse

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from fieldops.api.router import api_router
from fieldops.core.config import settings
from fieldops.core.errors import (
    DomainError,
    domain_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from fieldops.core.logging import setup_logging
from fieldops.db.init_db import ensure_initial_admin
from fieldops.db.session import SessionLocal

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


def _mask_database_url(url: str) -> str:
    """Mask password in DATABASE_URL for safe logging; show full path for sqlite."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return "***"
    if parsed.scheme.startswith("sqlite"):
        return url
    if parsed.password:
        netloc = f"{parsed.username}:****@{parsed.hostname or ''}"
        if parsed.port:
            netloc += f":{parsed.port}"
        return urlunparse(parsed._replace(netloc=netloc))
    return url


app = FastAPI(
    title="FieldOps Backend",
    description="Field technician attendance, GPS distance tracking and payroll",
    version=settings.VERSION or "1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(DomainError, domain_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup_log_config() -> None:
    """Log DATABASE_URL at startup so it can be verified against Alembic."""
    logger.info("DATABASE_URL (app): %s", _mask_database_url(settings.DATABASE_URL))
    logger.info("Business time zone: %s", settings.TZ)


@app.on_event("startup")
def bootstrap_initial_admin() -> None:
    """Make sure at least one admin can log in."""
    db = SessionLocal()
    try:
        ensure_initial_admin(db)
    except OperationalError as e:
        db.rollback()
        if "no such table" in str(e).lower():
            logger.warning("Database tables not ready yet (run alembic upgrade head), skipping admin bootstrap")
        else:
            logger.error("Database error during admin bootstrap: %s", e)
    finally:
        db.close()
