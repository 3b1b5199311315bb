"""
CSV master list storage.

Keeps the most recent upload as a single file and serves it back as
header-keyed rows for form autocomplete.
"""

import csv
import io
import os
from pathlib import Path
from typing import Any

from src.config import get_logger
from src.core.exceptions import CsvNotFoundError, CsvParseError, StorageWriteError
from src.core.interfaces.storage import ICsvStore

logger = get_logger(__name__)


class CsvMasterListStore(ICsvStore):
    """File-backed master list; each upload replaces the previous one."""

    def __init__(self, path: Path):
        self.path = Path(path)

    async def save_upload(self, content: bytes) -> str:
        """Persist the uploaded CSV and return its public path."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(content)
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageWriteError(str(self.path), str(e)) from e

        logger.info("csv_uploaded", path=str(self.path), size=len(content))
        return f"/uploads/{self.path.name}"

    async def read_rows(self) -> list[dict[str, Any]]:
        """Parse the stored CSV with its first row as header."""
        if not self.path.exists():
            raise CsvNotFoundError(str(self.path))

        try:
            text = self.path.read_bytes().decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise CsvParseError(f"not valid UTF-8: {e.reason}") from e

        return parse_csv(text)


def parse_csv(text: str) -> list[dict[str, Any]]:
    """
    Parse CSV text into dicts keyed by the header row.

    Blank lines are skipped. Rows whose field count differs from the
    header are rejected.
    """
    reader = csv.DictReader(io.StringIO(text), restkey="__extra__")
    rows: list[dict[str, Any]] = []
    try:
        for row in reader:
            if "__extra__" in row:
                raise CsvParseError("too many fields", line=reader.line_num)
            if any(value is None for value in row.values()):
                raise CsvParseError("too few fields", line=reader.line_num)
            if not any(value.strip() for value in row.values()):
                continue
            rows.append(dict(row))
    except csv.Error as e:
        raise CsvParseError(str(e), line=reader.line_num) from e
    return rows
