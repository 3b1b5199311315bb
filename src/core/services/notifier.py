"""
Reminder notifier.

Formats reminder mails and hands them to the configured mailer.
"""

from enum import Enum

from src.config import get_logger
from src.core.entities.reminder import ReminderRecord
from src.core.exceptions import DeliveryError
from src.core.interfaces.mailer import IMailer

logger = get_logger(__name__)

SIGNATURE = "- Automated Bookkeeping Reminder Bot"


class NotificationOutcome(str, Enum):
    """Result of a single notification attempt."""

    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


def format_reminder(record: ReminderRecord) -> tuple[str, str]:
    """Build subject and body of the daily pending-task reminder."""
    name = record.display_name
    subject = f"Reminder: {name} still pending"
    body = (
        f"Hi {record.bookkeeper or 'Team'},\n\n"
        f'This is a reminder that the bookkeeping task for "{name}" is still pending.\n\n'
        f"Status: {record.status or 'N/A'}\n"
        f"Period: {record.period or 'N/A'}\n\n"
        "Please complete or update the status if already done.\n\n"
        f"{SIGNATURE}"
    )
    return subject, body


def format_created_notice(record: ReminderRecord) -> tuple[str, str]:
    """Build subject and body of the operator notice for a new submission."""
    subject = f"New Reminder Created: {record.display_name}"
    body = (
        "A new reminder has been created.\n\n"
        f"Bookkeeper: {record.bookkeeper or 'N/A'}\n"
        f"Company: {record.company_name or 'N/A'} ({record.company_no or 'N/A'})\n"
        f"Status: {record.status or 'N/A'}\n"
        f"Period: {record.period or 'N/A'}\n"
        f"Reference: {record.reference or 'N/A'}\n"
        f"Created At: {record.created_at.isoformat()}\n\n"
        f"{SIGNATURE}"
    )
    return subject, body


class ReminderNotifier:
    """
    Sends reminder mails for individual records.

    Delivery failures are logged and reported as FAILED; the caller
    decides what to persist.
    """

    def __init__(self, mailer: IMailer) -> None:
        self._mailer = mailer

    async def send_reminder(self, record: ReminderRecord) -> NotificationOutcome:
        """Send the pending-task reminder to the record's bookkeeper."""
        to = record.recipient
        if not to:
            return NotificationOutcome.SKIPPED

        subject, body = format_reminder(record)
        return await self._deliver(to, subject, body, record, kind="reminder")

    async def send_created_notice(
        self, record: ReminderRecord, to: str
    ) -> NotificationOutcome:
        """Tell an operator address that a reminder was registered."""
        if not to:
            return NotificationOutcome.SKIPPED

        subject, body = format_created_notice(record)
        return await self._deliver(to, subject, body, record, kind="created_notice")

    async def _deliver(
        self,
        to: str,
        subject: str,
        body: str,
        record: ReminderRecord,
        kind: str,
    ) -> NotificationOutcome:
        try:
            await self._mailer.send(to, subject, body)
        except DeliveryError as e:
            logger.error(
                "reminder_send_failed",
                kind=kind,
                to=to,
                key=record.key,
                error=e.message,
            )
            return NotificationOutcome.FAILED

        logger.info("reminder_sent", kind=kind, to=to, company=record.display_name)
        return NotificationOutcome.SENT
