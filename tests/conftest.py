"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Iterator
from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.config import reset_settings
from src.core.entities.reminder import ReminderRecord
from tests.fakes import NOW, InMemoryReminderStore


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch) -> Iterator[None]:
    """Point file storage at a temp dir and drop cached singletons."""
    from src.api.dependencies import get_app_settings
    from src.application.services import reset_services
    from src.infrastructure.mail import reset_mailer
    from src.infrastructure.storage import reset_csv_store, reset_reminder_store
    from src.infrastructure.upstream import reset_forwarder

    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))

    def _reset() -> None:
        reset_settings()
        get_app_settings.cache_clear()
        reset_services()
        reset_reminder_store()
        reset_csv_store()
        reset_mailer()
        reset_forwarder()

    _reset()
    yield
    _reset()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def make_record():
    """Factory for reminder records with sensible defaults."""

    def _make(**overrides) -> ReminderRecord:
        fields = {
            "company_no": "12345678",
            "company_name": "Acme Ltd",
            "bookkeeper": "Jane",
            "bookkeeper_email": "jane@example.com",
            "status": "Pending",
            "period": "Q1 2025",
            "created_at": NOW - timedelta(days=7),
        }
        fields.update(overrides)
        return ReminderRecord(**fields)

    return _make


@pytest.fixture
def memory_store() -> InMemoryReminderStore:
    return InMemoryReminderStore()


@pytest.fixture
def mock_mailer() -> AsyncMock:
    """Mailer whose send always succeeds."""
    mailer = AsyncMock()
    mailer.send.return_value = None
    return mailer


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    from src.api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
