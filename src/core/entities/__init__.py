"""Core domain entities."""

from src.core.entities.reminder import (
    COMPLETED_STATUS,
    ReminderRecord,
    derive_key,
    local_now,
)

__all__ = [
    "COMPLETED_STATUS",
    "ReminderRecord",
    "derive_key",
    "local_now",
]
