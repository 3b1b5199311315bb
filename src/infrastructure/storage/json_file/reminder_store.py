"""
JSON file implementation of reminder storage.

The whole collection lives in one pretty-printed JSON array that is
re-read on every load and atomically replaced on every save.
"""

import json
import os
from collections.abc import Sequence
from pathlib import Path

import pydantic

from src.config import get_logger
from src.core.entities.reminder import ReminderRecord
from src.core.exceptions import StorageReadError, StorageWriteError
from src.core.interfaces.storage import IReminderStore

logger = get_logger(__name__)


class JsonFileReminderStore(IReminderStore):
    """Single-file reminder storage with write-to-temp-then-rename saves."""

    def __init__(self, path: Path):
        self.path = Path(path)
        # Entries from the last load that do not validate; written back as-is
        self._unparsed: list = []

    async def load(self) -> list[ReminderRecord]:
        """Load all records; any read problem degrades to an empty list."""
        self._unparsed = []
        try:
            raw = self._read_list()
        except StorageReadError as e:
            if self.path.exists():
                logger.warning("reminders_load_failed", path=str(self.path), error=e.message)
            return []

        records: list[ReminderRecord] = []
        unparsed: list = []
        for index, item in enumerate(raw):
            try:
                records.append(ReminderRecord.model_validate(item))
            except pydantic.ValidationError as e:
                unparsed.append(item)
                logger.error(
                    "reminder_entry_unreadable",
                    path=str(self.path),
                    index=index,
                    entry=item,
                    error=str(e),
                )
        self._unparsed = unparsed
        return records

    async def save(self, records: Sequence[ReminderRecord]) -> None:
        """
        Rewrite the backing file with the given records.

        Entries that failed to validate on the last load are appended
        unchanged so a save never drops them.
        """
        payload = [record.to_json_dict() for record in records] + self._unparsed
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
                encoding="utf-8",
            )
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            logger.error("reminders_save_failed", path=str(self.path), error=str(e))
            raise StorageWriteError(str(self.path), str(e)) from e

        logger.debug("reminders_saved", path=str(self.path), count=len(payload))

    def _read_list(self) -> list:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageReadError(str(self.path), str(e)) from e

        if not text.strip():
            return []

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageReadError(str(self.path), f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise StorageReadError(str(self.path), "expected a JSON array")
        return data
