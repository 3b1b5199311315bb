"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.core.services import ReminderNotifier, ReminderService

if TYPE_CHECKING:
    from src.core.interfaces import IMailer, IReminderStore
    from src.infrastructure.scheduling import ReminderScheduler


# Singleton service instances
_reminder_service: ReminderService | None = None
_reminder_notifier: ReminderNotifier | None = None
_reminder_scheduler: "ReminderScheduler | None" = None


def get_reminder_service(
    store: "IReminderStore | None" = None,
) -> ReminderService:
    """
    Get or create ReminderService instance.

    Args:
        store: Optional reminder store override

    Returns:
        ReminderService instance
    """
    global _reminder_service

    if store is not None:
        return ReminderService(store=store)

    if _reminder_service is None:
        from src.infrastructure.storage.json_file import get_reminder_store

        _reminder_service = ReminderService(store=get_reminder_store())

    return _reminder_service


def get_reminder_notifier(
    mailer: "IMailer | None" = None,
) -> ReminderNotifier:
    """
    Get or create ReminderNotifier instance.

    The SMTP transport is created once and shared by every send.
    """
    global _reminder_notifier

    if mailer is not None:
        return ReminderNotifier(mailer=mailer)

    if _reminder_notifier is None:
        from src.infrastructure.mail import get_mailer

        _reminder_notifier = ReminderNotifier(mailer=get_mailer())

    return _reminder_notifier


def get_reminder_scheduler() -> "ReminderScheduler":
    """Get or create the daily sweep scheduler."""
    global _reminder_scheduler

    if _reminder_scheduler is None:
        from src.application.use_cases.send_due_reminders import SendDueRemindersUseCase
        from src.infrastructure.scheduling import ReminderScheduler

        use_case = SendDueRemindersUseCase()
        _reminder_scheduler = ReminderScheduler.from_settings(use_case.execute)

    return _reminder_scheduler


def reset_services() -> None:
    """Reset all singleton services (for testing)."""
    global _reminder_service, _reminder_notifier, _reminder_scheduler

    if _reminder_scheduler is not None:
        _reminder_scheduler.shutdown()

    _reminder_service = None
    _reminder_notifier = None
    _reminder_scheduler = None
