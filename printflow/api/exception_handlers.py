"""
Exception handlers for the FastAPI application.

Domain exceptions are translated to HTTP responses here, so routes and use
cases only ever raise domain errors.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from printflow.core.domain import (
    DomainException,
    EntityNotFoundException,
    IntegrationException,
    PersistenceException,
    ValidationException,
)

logger = logging.getLogger(__name__)

# Named constant moved between Starlette releases
HTTP_422 = 422


def _error_body(message: str, status_code: int, code: str | None = None, details=None) -> dict:
    body = {"error": True, "message": message, "status_code": status_code}
    if code:
        body["code"] = code
    if details is not None:
        body["details"] = details
    return body


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception."""
    if isinstance(exc, EntityNotFoundException):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationException):
        return HTTP_422
    if isinstance(exc, PersistenceException):
        return status.HTTP_502_BAD_GATEWAY
    if isinstance(exc, IntegrationException):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle domain exceptions with the consistent response format."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = status_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    details = dict(exc.details)
    if isinstance(exc, PersistenceException):
        details["retryable"] = exc.retryable

    return JSONResponse(
        status_code=status_code,
        content=_error_body(exc.message, status_code, code=exc.code, details=details),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content=_error_body(str(http_exc.detail), http_exc.status_code),
        headers=http_exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with detailed error messages."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=HTTP_422, content=_error_body(str(exc), HTTP_422))

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=HTTP_422,
        content=_error_body("Validation error", HTTP_422, code="VALIDATION_ERROR", details=errors),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
