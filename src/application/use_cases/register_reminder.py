"""
Register Reminder Use Case.

Upserts a submitted reminder and, when an operator address is
configured, mails a "new reminder created" notice.
"""

from collections.abc import Mapping
from typing import Any

from src.config import get_logger
from src.core.entities.reminder import ReminderRecord
from src.core.services.notifier import ReminderNotifier
from src.core.services.reminder_service import ReminderService

logger = get_logger(__name__)


class RegisterReminderUseCase:
    """Use case behind ``POST /api/reminders``."""

    def __init__(
        self,
        service: ReminderService | None = None,
        notifier: ReminderNotifier | None = None,
        notice_to: str | None = None,
    ):
        self._service = service
        self._notifier = notifier
        self._notice_to = notice_to

    def _get_service(self) -> ReminderService:
        if self._service is None:
            from src.application.services import get_reminder_service
            self._service = get_reminder_service()
        return self._service

    def _get_notifier(self) -> ReminderNotifier:
        if self._notifier is None:
            from src.application.services import get_reminder_notifier
            self._notifier = get_reminder_notifier()
        return self._notifier

    def _get_notice_to(self) -> str:
        if self._notice_to is None:
            from src.config import get_settings
            self._notice_to = get_settings().scheduler.created_notice_to
        return self._notice_to

    async def execute(self, fields: Mapping[str, Any]) -> ReminderRecord:
        """
        Store the submission and send the optional operator notice.

        Raises:
            MissingIdentityError: If no company number or name was submitted.
        """
        record = await self._get_service().upsert(fields)

        notice_to = self._get_notice_to()
        if notice_to:
            # Outcome is logged by the notifier; never fails the request
            await self._get_notifier().send_created_notice(record, notice_to)

        return record
