"""
Abstract interfaces for storage providers.

Defines contracts for the reminder record store and the CSV master list.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from src.core.entities.reminder import ReminderRecord


class IReminderStore(ABC):
    """
    Abstract interface for reminder record storage.

    The whole collection is read and written at once; implementations
    keep no state between calls.
    """

    @abstractmethod
    async def load(self) -> list[ReminderRecord]:
        """
        Read the full persisted collection in file order.

        Returns an empty list when nothing usable is stored. Never raises.
        """
        pass

    @abstractmethod
    async def save(self, records: Sequence[ReminderRecord]) -> None:
        """
        Replace the persisted collection.

        Raises:
            StorageWriteError: If the collection could not be written.
        """
        pass


class ICsvStore(ABC):
    """Abstract interface for the uploaded CSV master list."""

    @abstractmethod
    async def save_upload(self, content: bytes) -> str:
        """Store uploaded bytes as the master list and return its public path."""
        pass

    @abstractmethod
    async def read_rows(self) -> list[dict[str, Any]]:
        """
        Parse the master list using its header row.

        Raises:
            CsvNotFoundError: If nothing has been uploaded.
            CsvParseError: If the file is malformed.
        """
        pass
