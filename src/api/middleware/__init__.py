"""API middleware."""

from src.api.middleware.error_handler import ErrorHandlerMiddleware
from src.api.middleware.logging import LoggingMiddleware
from src.api.middleware.origin import origin_allowed, require_allowed_origin

__all__ = [
    "LoggingMiddleware",
    "ErrorHandlerMiddleware",
    "origin_allowed",
    "require_allowed_origin",
]
