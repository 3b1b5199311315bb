"""Reminder record entity for bookkeeping task tracking."""

from datetime import date, datetime, tzinfo
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

COMPLETED_STATUS = "Completed"

_TEXT_FIELDS = frozenset(
    {
        "companyNo",
        "company_no",
        "companyName",
        "company_name",
        "bookkeeper",
        "bookkeeperEmail",
        "bookkeeper_email",
        "email",
        "status",
        "period",
        "reference",
    }
)


def local_now() -> datetime:
    """Current time as an aware datetime in the server's local zone."""
    return datetime.now().astimezone()


def derive_key(company_no: str, company_name: str, reference: str = "") -> str:
    """
    Derive the identity key of a record.

    The company number wins when present; otherwise the company name is
    combined with the free-text reference.
    """
    if company_no:
        return company_no
    return f"{company_name}::{reference or ''}"


class ReminderRecord(BaseModel):
    """
    One tracked bookkeeping task for a company.

    Serialized with camelCase keys so the backing JSON file stays readable
    by the web form that produced it.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

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
    created_at: datetime = Field(default_factory=local_now)

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy(cls, data: Any) -> Any:
        """Fill in fields that older files store as null or leave out."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, value in list(data.items()):
            if value is None and name in _TEXT_FIELDS:
                data[name] = ""
        if not data.get("key"):
            company_no = data.get("companyNo") or data.get("company_no") or ""
            company_name = data.get("companyName") or data.get("company_name") or ""
            data["key"] = derive_key(company_no, company_name, data.get("reference") or "")
        return data

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED_STATUS

    @property
    def recipient(self) -> str | None:
        """Notification target, bookkeeper address first."""
        return self.bookkeeper_email or self.email or None

    @property
    def display_name(self) -> str:
        return self.company_name or self.company_no

    def was_notified_on(self, day: date, tz: tzinfo | None = None) -> bool:
        """Check whether the last notification fell on the given calendar day."""
        if self.last_notified_at is None:
            return False
        return self.last_notified_at.astimezone(tz).date() == day

    def mark_completed(self) -> None:
        """Deactivate the record and flag its task as done."""
        self.active = False
        self.status = COMPLETED_STATUS

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize using the persisted camelCase layout."""
        return self.model_dump(mode="json", by_alias=True)
