"""Error Handlers: global exception handlers for the Blog API.

Invariants:
    - BlogError → its own status and envelope ({error, success: false} or {message, success: false})
    - RequestValidationError → 400 naming the first offending field
    - Router 405 → {"message": "Method not allowed", "success": false}, Allow header kept
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (BlogError), validation (Pydantic), routing
      (Starlette HTTPException), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.core.errors import (
    BlogError, ErrorSeverity, InvalidParameterError, MethodNotAllowedError,
    MissingParameterError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_blog_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_blog_error_handler(app: FastAPI) -> None:
    """Register Blog API domain/data-access error handler."""

    @app.exception_handler(BlogError)
    async def blog_error_handler(request: Request, exc: BlogError):
        """Handle all Blog API errors."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.info
        )
        log(
            f"BlogError: {exc.message}",
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
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = validation_error_to_blog_error(exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 unknown path, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            logger.info(
                f"Method {request.method} not allowed on {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=exc.status_code,
                content=MethodNotAllowedError(request.method).to_response(),
                headers=exc.headers,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "success": False},
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "success": False},
        )


def validation_error_to_blog_error(exc: RequestValidationError) -> BlogError:
    """Map the first validation error to MissingParameterError or InvalidParameterError."""
    errors = exc.errors()
    if not errors:
        return InvalidParameterError("request")
    first = errors[0]
    field = _field_name(first.get("loc", ()))
    if first.get("type") == "missing":
        return MissingParameterError(field)
    return InvalidParameterError(field)


def _field_name(loc) -> str:
    """Last named element of an error location: ("body", "userId") -> "userId"."""
    names = [str(part) for part in loc if isinstance(part, str)]
    if len(names) > 1:
        return names[-1]
    return names[0] if names else "request"
