"""
Error handling middleware.
"""

import traceback
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from job_tracker.api.schemas.common import ErrorResponse
from job_tracker.config.logging import get_logger
from job_tracker.domain.exceptions.not_found_error import JobNotFoundError
from job_tracker.domain.exceptions.sheets_error import (
    SheetsConfigurationError,
    SheetsError,
)
from job_tracker.domain.exceptions.validation_error import ValidationError

logger = get_logger(__name__)


class OperationFailedError(Exception):
    """Raised by routes when an operation fails for a non-client reason."""

    def __init__(self, message: str, cause: Exception):
        self.message = message
        self.cause = cause
        super().__init__(message)

    @property
    def status_code(self) -> int:
        if isinstance(self.cause, SheetsError) and not isinstance(
            self.cause, SheetsConfigurationError
        ):
            return 502
        return 500


def error_response(
    status_code: int, message: str, error_type: str, error: Optional[Any] = None
) -> JSONResponse:
    body = ErrorResponse(message=message, type=error_type, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Validation error", error=str(exc), path=request.url.path)
        return error_response(400, str(exc), "validation_error")

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        fields = [
            ".".join(str(part) for part in err["loc"] if part != "body")
            for err in exc.errors()
        ]
        logger.warning("Invalid request body", fields=fields, path=request.url.path)
        return error_response(
            400,
            "Invalid request body",
            "validation_error",
            error=[
                {"field": field, "message": err["msg"]}
                for field, err in zip(fields, exc.errors())
            ],
        )

    @app.exception_handler(JobNotFoundError)
    async def not_found_error_handler(request: Request, exc: JobNotFoundError):
        logger.warning("Job not found", job_number=exc.job_number, path=request.url.path)
        return error_response(404, str(exc), "not_found")

    @app.exception_handler(OperationFailedError)
    async def operation_failed_handler(request: Request, exc: OperationFailedError):
        logger.error(
            exc.message,
            error=str(exc.cause),
            error_class=type(exc.cause).__name__,
            path=request.url.path,
        )
        return error_response(
            exc.status_code, exc.message, "operation_error", error=str(exc.cause)
        )

    @app.exception_handler(SheetsError)
    async def sheets_error_handler(request: Request, exc: SheetsError):
        logger.error("Spreadsheet error", error=str(exc), path=request.url.path)
        status_code = 500 if isinstance(exc, SheetsConfigurationError) else 502
        return error_response(
            status_code, "Spreadsheet backend error", "sheets_error", error=str(exc)
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return error_response(exc.status_code, str(exc.detail), "http_error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return error_response(
            500, "An unexpected error occurred", "internal_error", error=str(exc)
        )
