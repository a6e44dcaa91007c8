"""Global exception handlers.

- RequestValidationError (body missing, not JSON, not an object) -> 400
- Exception (catch-all) -> 500, never leaks internal details

Field-level validation of registration and login happens in the use cases
and is returned as data, not raised.
"""
# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..application.dto.auth_dto import ErrorResponse
from ..domain.constants import AuthMessages

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Only error types are logged; inputs may carry passwords
        error_types = [error.get("type") for error in exc.errors()]
        logger.warning(f"Unreadable request body on {request.url.path}: {error_types}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=AuthMessages.INVALID_BODY).model_dump(exclude_none=True),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: logs the traceback, returns no internal details."""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(message=AuthMessages.INTERNAL_ERROR).model_dump(exclude_none=True),
        )
