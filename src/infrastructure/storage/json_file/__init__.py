"""JSON file storage implementations."""

from pathlib import Path

from src.infrastructure.storage.json_file.reminder_store import JsonFileReminderStore

# Singleton instance
_reminder_store: JsonFileReminderStore | None = None


def get_reminder_store(path: Path | None = None) -> JsonFileReminderStore:
    """Get singleton reminder store instance."""
    global _reminder_store
    if _reminder_store is None:
        if path is None:
            from src.config import get_settings

            path = get_settings().storage.reminders_path
        _reminder_store = JsonFileReminderStore(path)
    return _reminder_store


def reset_reminder_store() -> None:
    """Reset singleton (for testing)."""
    global _reminder_store
    _reminder_store = None


__all__ = [
    "JsonFileReminderStore",
    "get_reminder_store",
    "reset_reminder_store",
]
