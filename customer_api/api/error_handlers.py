"""Error Handlers — global exception handlers for the Customer API.

Invariants:
    - CustomerApiError → plain-text message with the error's own status
    - RequestValidationError → 400 plain text ("Invalid id" for path errors)
    - Exception (catch-all) → 500, never leaks internal details
    - Error bodies are never wrapped in the {"data": ...} envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from customer_api.core.errors import CustomerApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_customer_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_customer_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CustomerApiError)
    async def customer_api_error_handler(request: Request, exc: CustomerApiError):
        """Handle all domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level,
            f"CustomerApiError: {exc.message}",
            extra={**exc.to_log_extra(), "path": request.url.path},
        )
        return PlainTextResponse(exc.to_response(), status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors on path, query and body."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return PlainTextResponse(
            build_validation_message(exc.errors()),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def build_validation_message(errors) -> str:
    """Flatten Pydantic errors into a one-line plain-text message."""
    if any(e["loc"] and e["loc"][0] == "path" for e in errors):
        return "Invalid id"
    for e in errors:
        if e["type"] == "json_invalid":
            return f"Invalid JSON body: {e['msg']}"
    parts = []
    for e in errors:
        loc = [str(part) for part in e["loc"]]
        field = ".".join(loc[1:]) or ".".join(loc) or "request"
        parts.append(f"{field}: {e['msg']}")
    return "Invalid request: " + "; ".join(parts)
