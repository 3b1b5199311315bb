"""Storage infrastructure implementations."""

from src.infrastructure.storage.csv_file import (
    CsvMasterListStore,
    get_csv_store,
    reset_csv_store,
)
from src.infrastructure.storage.json_file import (
    JsonFileReminderStore,
    get_reminder_store,
    reset_reminder_store,
)

__all__ = [
    # Reminder records
    "JsonFileReminderStore",
    "get_reminder_store",
    "reset_reminder_store",
    # CSV master list
    "CsvMasterListStore",
    "get_csv_store",
    "reset_csv_store",
]
