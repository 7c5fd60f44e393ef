"""Error Handlers - global exception handlers for the NC News API.

Invariants:
    - Every handler answers with the error_body() envelope: {"msg", "error"}
    - NcNewsError -> its own status and to_response() body
    - RequestValidationError (unparseable body) -> 400 "Invalid column value"
    - Starlette HTTPException (unmatched route, wrong method) -> same status
    - Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ncnews.core.domain_types import ErrorReason
from ncnews.core.errors import (
    ErrorCategory, ErrorSeverity, NcNewsError, error_body,
)

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NcNewsError)
    async def domain_error_handler(request: Request, exc: NcNewsError):
        """Handle all NC News client and infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"NcNewsError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Bodies FastAPI could not parse at all share the column-value message."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                ErrorReason.INVALID_COLUMN.value, "BAD_REQUEST",
                ErrorCategory.VALIDATION, ErrorSeverity.WARNING,
            ),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        if exc.status_code == 404:
            content = error_body(
                ROUTE_NOT_FOUND, "ROUTE_NOT_FOUND",
                ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.INFO,
            )
        else:
            content = error_body(
                str(exc.detail), "HTTP_ERROR",
                ErrorCategory.VALIDATION, ErrorSeverity.INFO,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                "An unexpected error occurred", "INTERNAL_ERROR",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )
