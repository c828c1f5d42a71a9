"""
Central error handling for the FieldOps backend

Domain errors raised by the distance/payroll core are plain exceptions so the
core stays free of HTTP concerns; the handlers below translate them (and the
usual FastAPI errors) into one JSON envelope.
"""
import logging
import math
import traceback

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """Base class for errors raised by the computation core."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(DomainError):
    """Malformed input to a core computation (e.g. out-of-range coordinates)."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidConfiguration(DomainError):
    """Employee configuration cannot support the requested computation."""

    status_code = status.HTTP_409_CONFLICT


def _error_body(status_code: int, detail, request: Request) -> dict:
    return {
        "error": True,
        "status_code": status_code,
        "detail": detail,
        "path": str(request.url.path),
    }


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """
    Handle HTTPException with consistent JSON response format

    Args:
        request: FastAPI request object
        exc: HTTPException instance

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, exc.detail, request),
        headers=getattr(exc, "headers", None),
    )


async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Map core domain errors (InvalidInput, InvalidConfiguration) to HTTP responses."""
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    body = _error_body(exc.status_code, exc.message, request)
    body["kind"] = type(exc).__name__
    return JSONResponse(status_code=exc.status_code, content=body)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle RequestValidationError with consistent JSON response format

    Does not leak internal validation details in production.
    """
    from fieldops.core.config import settings

    if settings.APP_ENV == "prod":
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(422, "Validation error: Invalid request data", request),
        )

    # ctx may carry exception objects (e.g. ValueError) and input may be inf/nan; neither is valid JSON
    errors = []
    for e in exc.errors():
        err = dict(e)
        if isinstance(err.get("input"), float) and not math.isfinite(err["input"]):
            err["input"] = str(err["input"])
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {
                k: (str(v) if not isinstance(v, (str, int, float, bool, type(None))) else v)
                for k, v in err["ctx"].items()
            }
        errors.append(err)
    body = _error_body(422, "Validation error", request)
    body["errors"] = errors
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions with consistent JSON response format

    Does not leak internal error details in production.
    """
    from fieldops.core.config import settings

    logger.error("Unhandled exception: %s", exc, exc_info=True)

    if settings.APP_ENV == "prod":
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(500, "Internal server error", request),
        )

    body = _error_body(500, str(exc), request)
    body["traceback"] = traceback.format_exc() if settings.APP_ENV == "local" else None
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
