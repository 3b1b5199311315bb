"""
Reminder Service.

Create-or-update, complete and list operations over the reminder
record store. Every call is a full load-mutate-save cycle.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from src.config import get_logger
from src.core.entities.reminder import (
    COMPLETED_STATUS,
    ReminderRecord,
    derive_key,
    local_now,
)
from src.core.exceptions import MissingIdentityError
from src.core.interfaces.storage import IReminderStore

logger = get_logger(__name__)

# Fields a client submission may set; key and timestamps are owned here.
SUBMITTABLE_FIELDS = frozenset(
    {
        "company_no",
        "company_name",
        "bookkeeper",
        "bookkeeper_email",
        "email",
        "status",
        "period",
        "reference",
    }
)


def _clean(value: Any) -> str:
    return str(value).strip() if value is not None else ""


class ReminderService:
    """
    Layer-pure service owning reminder identity and lifecycle rules.

    Identity is the derived key: company number, else company name plus
    reference. Records are soft-deactivated, never deleted.
    """

    def __init__(
        self,
        store: IReminderStore,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._store = store
        self._clock = clock

    async def upsert(self, fields: Mapping[str, Any]) -> ReminderRecord:
        """
        Create a reminder or update the one sharing its identity key.

        Args:
            fields: Submitted record fields (snake_case). Only fields
                present are applied when updating.

        Returns:
            The stored record.

        Raises:
            MissingIdentityError: If neither company number nor name is given.
        """
        submitted = {
            name: _clean(value)
            for name, value in fields.items()
            if name in SUBMITTABLE_FIELDS and value is not None
        }
        company_no = submitted.get("company_no", "")
        company_name = submitted.get("company_name", "")
        if not company_no and not company_name:
            raise MissingIdentityError()

        if submitted.get("email") and not submitted.get("bookkeeper_email"):
            submitted["bookkeeper_email"] = submitted["email"]

        key = derive_key(company_no, company_name, submitted.get("reference", ""))
        records = await self._store.load()

        for idx, existing in enumerate(records):
            if existing.key == key:
                record = existing.model_copy(update=submitted)
                record.active = not record.is_completed
                records[idx] = record
                created = False
                break
        else:
            record = ReminderRecord(
                key=key,
                active=submitted.get("status") != COMPLETED_STATUS,
                last_notified_at=None,
                created_at=self._clock(),
                **submitted,
            )
            records.append(record)
            created = True

        await self._store.save(records)

        logger.info(
            "reminder_upserted",
            key=key,
            created=created,
            active=record.active,
            total=len(records),
        )
        return record

    async def complete(
        self,
        company_no: str | None = None,
        company_name: str | None = None,
    ) -> int:
        """
        Deactivate every record matching either identifier.

        Matching is an OR across company number and company name, so one
        call may close several records. Zero matches is not an error.

        Returns:
            Number of records marked completed.

        Raises:
            MissingIdentityError: If both identifiers are empty.
        """
        company_no = _clean(company_no)
        company_name = _clean(company_name)
        if not company_no and not company_name:
            raise MissingIdentityError()

        records = await self._store.load()
        matched = 0
        for record in records:
            if (company_no and record.company_no == company_no) or (
                company_name and record.company_name == company_name
            ):
                record.mark_completed()
                matched += 1

        await self._store.save(records)

        logger.info(
            "reminders_completed",
            company_no=company_no or None,
            company_name=company_name or None,
            matched=matched,
        )
        return matched

    async def list_all(self) -> list[ReminderRecord]:
        """Return every stored record in insertion order."""
        return await self._store.load()
