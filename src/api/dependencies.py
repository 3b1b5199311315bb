"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from src.application.services import get_reminder_service
from src.application.use_cases import (
    ForwardSubmissionUseCase,
    RegisterReminderUseCase,
    SendDueRemindersUseCase,
)
from src.config import Settings, get_settings
from src.core.interfaces import ICsvStore
from src.core.services import ReminderService
from src.infrastructure.storage.csv_file import get_csv_store


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
def get_service() -> ReminderService:
    """Get reminder service."""
    return get_reminder_service()


# Use case dependencies
def get_register_reminder_use_case() -> RegisterReminderUseCase:
    """Get register reminder use case."""
    return RegisterReminderUseCase()


def get_send_due_reminders_use_case() -> SendDueRemindersUseCase:
    """Get reminder sweep use case."""
    return SendDueRemindersUseCase()


def get_forward_submission_use_case() -> ForwardSubmissionUseCase:
    """Get bookkeeping submission forwarding use case."""
    return ForwardSubmissionUseCase()


# Store dependencies
def get_master_list_store() -> ICsvStore:
    """Get master CSV store."""
    return get_csv_store()
