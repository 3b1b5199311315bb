"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Accepts the web form's camelCase keys as well as snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class UpsertReminderRequest(_CamelModel):
    """Request to create or update a reminder.

    Either company_no or company_name must be non-empty; the check lives
    in the reminder service so the error shape matches other domain errors.
    """

    company_no: str | None = Field(default=None, description="Company registration number")
    company_name: str | None = Field(default=None, description="Company name")
    bookkeeper: str | None = Field(default=None, description="Bookkeeper display name")
    bookkeeper_email: str | None = Field(default=None, description="Bookkeeper email")
    email: str | None = Field(
        default=None,
        description="Generic contact email, used when bookkeeperEmail is empty",
    )
    status: str | None = Field(
        default=None,
        description="Task status; 'Completed' deactivates the reminder",
        examples=["Pending", "In Progress", "Completed"],
    )
    period: str | None = Field(default=None, description="Accounting period", examples=["Q1 2025"])
    reference: str | None = Field(default=None, description="Free-text reference")


class CompleteReminderRequest(_CamelModel):
    """Request to mark reminders complete by company number or name."""

    company_no: str | None = Field(default=None, description="Company registration number")
    company_name: str | None = Field(default=None, description="Company name")
