"""Data transfer objects for API contracts."""

from src.application.dto.requests import CompleteReminderRequest, UpsertReminderRequest
from src.application.dto.responses import (
    CsvDataResponse,
    CsvUploadResponse,
    ErrorResponse,
    HealthResponse,
    ProviderHealthResponse,
    ReminderCompleteResponse,
    ReminderListResponse,
    ReminderResponse,
    ReminderUpsertResponse,
    RootResponse,
    SweepResponse,
)

__all__ = [
    # Requests
    "UpsertReminderRequest",
    "CompleteReminderRequest",
    # Responses
    "ReminderResponse",
    "ReminderUpsertResponse",
    "ReminderCompleteResponse",
    "ReminderListResponse",
    "SweepResponse",
    "CsvUploadResponse",
    "CsvDataResponse",
    "RootResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
]
