"""
Send Due Reminders Use Case.

One sweep over all stored reminders: every active record that has a
recipient and was not already notified today gets one reminder mail.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from src.config import get_logger
from src.core.entities.reminder import local_now
from src.core.interfaces.storage import IReminderStore
from src.core.services.notifier import NotificationOutcome, ReminderNotifier

logger = get_logger(__name__)


def zone_clock(timezone: str | None = None) -> Callable[[], datetime]:
    """Clock reading the current time in the given zone, or server local time."""
    if not timezone:
        return local_now
    zone = ZoneInfo(timezone)
    return lambda: datetime.now(zone)


@dataclass
class SweepResult:
    """Counters for one reminder sweep."""

    total: int = 0
    sent: int = 0
    failed: int = 0
    skipped_inactive: int = 0
    skipped_already_notified: int = 0
    skipped_no_recipient: int = 0


class SendDueRemindersUseCase:
    """
    Use case for the daily reminder sweep.

    Records are evaluated in file order. A failed send leaves the record
    untouched so the next day's sweep retries it. The collection is saved
    exactly once, after every record has been evaluated.
    """

    def __init__(
        self,
        reminder_store: IReminderStore | None = None,
        notifier: ReminderNotifier | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._store = reminder_store
        self._notifier = notifier
        self._clock = clock

    def _get_store(self) -> IReminderStore:
        if self._store is None:
            from src.infrastructure.storage.json_file import get_reminder_store
            self._store = get_reminder_store()
        return self._store

    def _get_notifier(self) -> ReminderNotifier:
        if self._notifier is None:
            from src.application.services import get_reminder_notifier
            self._notifier = get_reminder_notifier()
        return self._notifier

    def _get_clock(self) -> Callable[[], datetime]:
        if self._clock is None:
            from src.config import get_settings
            self._clock = zone_clock(get_settings().scheduler.timezone)
        return self._clock

    async def execute(self, now: datetime | None = None) -> SweepResult:
        """
        Run one sweep.

        Args:
            now: Sweep time; defaults to the current time in the sweep
                timezone (REMINDER_TIMEZONE, else server local). Its
                calendar day decides which records count as notified today.

        Returns:
            SweepResult with per-outcome counts.
        """
        store = self._get_store()
        notifier = self._get_notifier()

        now = now or self._get_clock()()
        today = now.date()

        records = await store.load()
        result = SweepResult(total=len(records))

        for record in records:
            if not record.active:
                result.skipped_inactive += 1
                continue
            if record.was_notified_on(today, now.tzinfo):
                result.skipped_already_notified += 1
                continue
            if not record.recipient:
                result.skipped_no_recipient += 1
                continue

            try:
                outcome = await notifier.send_reminder(record)
            except Exception as e:
                logger.error("reminder_send_error", key=record.key, error=str(e), exc_info=True)
                outcome = NotificationOutcome.FAILED

            if outcome is NotificationOutcome.SENT:
                record.last_notified_at = now
                result.sent += 1
            elif outcome is NotificationOutcome.FAILED:
                result.failed += 1
            else:
                result.skipped_no_recipient += 1

        await store.save(records)

        logger.info(
            "sweep_complete",
            day=today.isoformat(),
            total=result.total,
            sent=result.sent,
            failed=result.failed,
            skipped_inactive=result.skipped_inactive,
            skipped_already_notified=result.skipped_already_notified,
            skipped_no_recipient=result.skipped_no_recipient,
        )

        return result
