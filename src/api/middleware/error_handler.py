"""
Error handling middleware.

Standardizes all API error responses to include:
- error_code: machine-readable identifier
- message: human-readable description
- hint: suggested recovery action
"""

import traceback
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from src.application.dto.responses import ErrorResponse
from src.config import get_logger
from src.core.exceptions import (
    AccessDeniedError,
    BookkeepingError,
    ConfigurationError,
    CsvNotFoundError,
    CsvParseError,
    DeliveryError,
    FileTooLargeError,
    StorageError,
    UpstreamForwardError,
    UpstreamNotConfiguredError,
    ValidationError,
)

logger = get_logger(__name__)


# Map exceptions to HTTP status codes, most specific first
EXCEPTION_STATUS_MAP: dict[type[Exception], int] = {
    FileTooLargeError: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AccessDeniedError: status.HTTP_403_FORBIDDEN,
    CsvNotFoundError: status.HTTP_404_NOT_FOUND,
    CsvParseError: 422,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    UpstreamForwardError: status.HTTP_502_BAD_GATEWAY,
    UpstreamNotConfiguredError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    DeliveryError: status.HTTP_502_BAD_GATEWAY,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ValueError: status.HTTP_400_BAD_REQUEST,
}

# Hint messages per error code / exception type
HINT_MAP: dict[str, str] = {
    "MISSING_IDENTITY": "Send companyNo, or companyName with an optional reference.",
    "FILE_TOO_LARGE": "Split the master list or raise STORAGE_MAX_UPLOAD_SIZE.",
    "INVALID_UPLOAD_SECRET": "Send the shared secret in the x-upload-secret header.",
    "ORIGIN_NOT_ALLOWED": "Add the site origin to CORS_ORIGIN.",
    "CSV_NOT_FOUND": "Upload a master list with POST /api/upload-csv first.",
    "CSV_PARSE_ERROR": "Check that the file is UTF-8 CSV with a header row.",
    "STORAGE_WRITE_ERROR": "The reminders file could not be written. Check disk space and permissions.",
    "UPSTREAM_NOT_CONFIGURED": "Set TARGET_URL to the Apps Script web app URL.",
    "UPSTREAM_FORWARD_FAILED": "The spreadsheet endpoint is unreachable. Retry later.",
    "DELIVERY_FAILED": "Check the SMTP_* settings and the relay status.",
    "VALIDATION_ERROR": "Check the request body against the API schema.",
    "ValueError": "A parameter value is invalid. Check the request.",
}

# Default hints by HTTP status code
STATUS_HINTS: dict[int, str] = {
    400: "Check the request parameters and body.",
    403: "The request is not allowed from this client.",
    404: "The requested resource was not found.",
    413: "The request body is too large.",
    422: "The request could not be processed. Check the input format.",
    500: "An internal error occurred. Check server logs.",
    502: "An upstream service failed. Retry later.",
}


def _get_hint(error_code: str, status_code: int) -> str:
    """Resolve hint from error code, falling back to status-based hint."""
    return HINT_MAP.get(error_code) or STATUS_HINTS.get(status_code, "")


def _status_for(exc: Exception) -> int:
    for exc_type, code in EXCEPTION_STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(
    request: Request,
    exc: Exception,
    status_code: int,
) -> JSONResponse:
    """Build the standardized JSON error body for an exception."""
    if isinstance(exc, BookkeepingError):
        error_code = exc.code
        message = exc.message
    else:
        error_code = exc.__class__.__name__
        message = str(exc)

    error_response = ErrorResponse(
        error_code=error_code,
        message=message,
        hint=_get_hint(error_code, status_code),
        path=request.url.path,
    )

    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(mode="json"),
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Converts exceptions that escaped the route handlers to standardized
    JSON error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)

        except Exception as e:
            status_code = _status_for(e)

            logger.error(
                "unhandled_exception",
                request_id=getattr(request.state, "request_id", None),
                path=request.url.path,
                error_type=e.__class__.__name__,
                error=str(e),
                traceback=traceback.format_exc() if status_code >= 500 else None,
            )

            return _error_response(request, e, status_code)


def setup_exception_handlers(app: FastAPI) -> None:
    """Set up FastAPI exception handlers."""
    from fastapi.exceptions import RequestValidationError
    from starlette.exceptions import HTTPException

    @app.exception_handler(BookkeepingError)
    async def domain_exception_handler(
        request: Request,
        exc: BookkeepingError,
    ) -> JSONResponse:
        """Handle domain errors raised by use cases and dependencies."""
        status_code = _status_for(exc)

        log = logger.error if status_code >= 500 else logger.warning
        log(
            "request_error",
            request_id=getattr(request.state, "request_id", None),
            path=request.url.path,
            error_code=exc.code,
            error=exc.message,
            details=exc.details,
        )

        return _error_response(request, exc, status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
                hint="Check the request body fields and types.",
                detail="; ".join(errors),
                path=request.url.path,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request,
        exc: HTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with standardized format."""
        error_code = _infer_error_code(exc.status_code)
        hint = _get_hint(error_code, exc.status_code)

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error_code=error_code,
                message=exc.detail or "An error occurred",
                hint=hint,
                path=request.url.path,
            ).model_dump(mode="json"),
        )


def _infer_error_code(status_code: int) -> str:
    """Infer a machine-readable error code from an HTTP status."""
    return {
        400: "BAD_REQUEST",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        413: "PAYLOAD_TOO_LARGE",
        422: "UNPROCESSABLE_ENTITY",
    }.get(status_code, "HTTP_ERROR")
