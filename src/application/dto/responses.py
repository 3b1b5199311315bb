"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.core.entities.reminder import ReminderRecord


class _CamelModel(BaseModel):
    """Serialized with camelCase keys (FastAPI dumps by alias)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReminderResponse(_CamelModel):
    """Reminder record as returned to the web form."""

    key: str
    company_no: str = ""
    company_name: str = ""
    bookkeeper: str = ""
    bookkeeper_email: str = ""
    email: str = ""
    status: str = ""
    period: str = ""
    reference: str = ""
    active: bool = True
    last_notified_at: datetime | None = None
    created_at: datetime

    @classmethod
    def from_entity(cls, record: ReminderRecord) -> "ReminderResponse":
        return cls.model_validate(record.model_dump())


class ReminderUpsertResponse(BaseModel):
    """Result of creating or updating a reminder."""

    success: bool = True
    entry: ReminderResponse


class ReminderCompleteResponse(BaseModel):
    """Result of marking reminders complete."""

    success: bool = True
    matched: int = Field(default=0, description="Records marked completed")


class ReminderListResponse(BaseModel):
    """All stored reminders in insertion order."""

    ok: bool = True
    count: int
    reminders: list[ReminderResponse]


class SweepResponse(BaseModel):
    """Result of a manually triggered reminder sweep."""

    ok: bool = True
    message: str = "send-now executed"
    total: int = 0
    sent: int = 0
    failed: int = 0
    skipped_inactive: int = 0
    skipped_already_notified: int = 0
    skipped_no_recipient: int = 0


class CsvUploadResponse(BaseModel):
    """Result of a master CSV upload."""

    ok: bool = True
    path: str


class CsvDataResponse(BaseModel):
    """Master CSV rows keyed by header."""

    ok: bool = True
    rows: list[dict[str, Any]]


class RootResponse(_CamelModel):
    """Service banner."""

    message: str = "Proxy alive"
    proxying_to: str
    reminders_mounted: bool = True


class ProviderHealthResponse(BaseModel):
    """Provider health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    storage: ProviderHealthResponse | None = None
    mail: ProviderHealthResponse | None = None
    scheduler: ProviderHealthResponse | None = None
    upstream: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. MISSING_IDENTITY)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)

    # Backward-compatible aliases
    @property
    def error(self) -> str:
        """Alias for message (backward compat)."""
        return self.message

    @property
    def code(self) -> str:
        """Alias for error_code (backward compat)."""
        return self.error_code
