"""Error Handlers: global exception handlers for the Resource API.

Invariants:
    - ResourceApiError → its own http_status with {"error": message}
    - RequestValidationError → 400 with {"error": "<field>: <msg>; ..."}
    - Starlette HTTPException (unmatched route, wrong method) → its status with {"error": detail}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Layered handlers: domain (ResourceApiError), framework HTTP, validation (Pydantic), catch-all (Exception)
    - Kept out of main.py so tests can build an app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resource_api.core.errors import ErrorSeverity, ResourceApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register Resource API domain/infrastructure error handler."""

    @app.exception_handler(ResourceApiError)
    async def resource_api_error_handler(request: Request, exc: ResourceApiError):
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.INFO
        )
        logger.log(
            level,
            f"ResourceApiError: {exc.message}",
            extra={
                **exc.log_extra(),
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTP error handler (404 no route, 405 wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.info(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.status_code,
            },
        )
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": detail},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": format_validation_errors(exc.errors())},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def format_validation_errors(errors) -> str:
    """Flatten Pydantic error dicts into one readable message."""
    parts = []
    for e in errors:
        # Drop the leading "body"/"path"/"query" location segment
        loc = [str(p) for p in e.get("loc", ())[1:]]
        field = ".".join(loc)
        parts.append(f"{field}: {e['msg']}" if field else e["msg"])
    return "; ".join(parts) or "Invalid request data"
