"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.notifier import (
    NotificationOutcome,
    ReminderNotifier,
    format_created_notice,
    format_reminder,
)
from src.core.services.reminder_service import ReminderService

__all__ = [
    # Reminders
    "ReminderService",
    # Notifications
    "ReminderNotifier",
    "NotificationOutcome",
    "format_reminder",
    "format_created_notice",
]
