"""
Domain exceptions for the bookkeeping reminders service.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class BookkeepingError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(BookkeepingError):
    """Base exception for storage operations."""

    pass


class StorageReadError(StorageError):
    """Backing file missing, unreadable or malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not read '{path}': {reason}",
            code="STORAGE_READ_ERROR",
            details={"path": path, "reason": reason},
        )


class StorageWriteError(StorageError):
    """Backing file could not be rewritten."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not write '{path}': {reason}",
            code="STORAGE_WRITE_ERROR",
            details={"path": path, "reason": reason},
        )


class CsvNotFoundError(StorageError):
    """No master CSV has been uploaded yet."""

    def __init__(self, path: str):
        super().__init__(
            "CSV not found",
            code="CSV_NOT_FOUND",
            details={"path": path},
        )


class CsvParseError(StorageError):
    """Master CSV could not be parsed."""

    def __init__(self, reason: str, line: int | None = None):
        super().__init__(
            f"CSV parse error: {reason}",
            code="CSV_PARSE_ERROR",
            details={"reason": reason, "line": line},
        )


# Delivery Exceptions
class DeliveryError(BookkeepingError):
    """Mail relay rejected the message or could not be reached."""

    def __init__(self, recipient: str, reason: str):
        super().__init__(
            f"Failed to deliver mail to {recipient}: {reason}",
            code="DELIVERY_FAILED",
            details={"recipient": recipient, "reason": reason},
        )


# Upstream Exceptions
class UpstreamError(BookkeepingError):
    """Base exception for the spreadsheet endpoint."""

    pass


class UpstreamForwardError(UpstreamError):
    """Spreadsheet endpoint unreachable or the request failed in transit."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            "Bad gateway",
            code="UPSTREAM_FORWARD_FAILED",
            details={"url": url, "reason": reason},
        )


class UpstreamNotConfiguredError(UpstreamError):
    """No spreadsheet endpoint URL configured."""

    def __init__(self):
        super().__init__(
            "TARGET_URL (Apps Script URL) not configured",
            code="UPSTREAM_NOT_CONFIGURED",
        )


# Validation Exceptions
class ValidationError(BookkeepingError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class MissingIdentityError(ValidationError):
    """Neither company number nor company name was supplied."""

    def __init__(self):
        message = "companyNo or companyName required"
        super().__init__(field="companyNo", message=message)
        self.code = "MISSING_IDENTITY"
        # The web form shows this text as-is
        self.message = message
        self.args = (message,)


class FileTooLargeError(ValidationError):
    """Uploaded file exceeds size limit."""

    def __init__(self, filename: str, size: int, max_size: int):
        super().__init__(
            field="file",
            message=f"File '{filename}' is too large ({size} bytes, max {max_size})",
        )
        self.code = "FILE_TOO_LARGE"
        self.details.update(
            {
                "filename": filename,
                "size": size,
                "max_size": max_size,
            }
        )


# Access Exceptions
class AccessDeniedError(BookkeepingError):
    """Caller is not allowed to perform the request."""

    pass


class OriginNotAllowedError(AccessDeniedError):
    """Request Origin is not on the allowlist."""

    def __init__(self, origin: str):
        super().__init__(
            "Origin not allowed",
            code="ORIGIN_NOT_ALLOWED",
            details={"origin": origin},
        )


class UploadForbiddenError(AccessDeniedError):
    """Upload secret missing or wrong."""

    def __init__(self):
        super().__init__("Invalid upload secret", code="INVALID_UPLOAD_SECRET")


class ConfigurationError(BookkeepingError):
    """Configuration error."""

    pass
