"""CSV file storage implementations."""

from src.infrastructure.storage.csv_file.master_list_store import (
    CsvMasterListStore,
    parse_csv,
)

_csv_store: CsvMasterListStore | None = None


def get_csv_store() -> CsvMasterListStore:
    """Get singleton master list store instance."""
    global _csv_store
    if _csv_store is None:
        from src.config import get_settings

        _csv_store = CsvMasterListStore(get_settings().storage.csv_path)
    return _csv_store


def reset_csv_store() -> None:
    """Reset singleton (for testing)."""
    global _csv_store
    _csv_store = None


__all__ = [
    "CsvMasterListStore",
    "parse_csv",
    "get_csv_store",
    "reset_csv_store",
]
