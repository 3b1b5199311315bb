"""API tests for reminders endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from src.api.dependencies import (
    get_register_reminder_use_case,
    get_send_due_reminders_use_case,
    get_service,
)
from src.api.main import app
from src.application.use_cases import RegisterReminderUseCase, SendDueRemindersUseCase
from src.core.exceptions import StorageWriteError
from src.core.services import ReminderNotifier, ReminderService
from tests.fakes import NOW, InMemoryReminderStore


@pytest.fixture
def service(memory_store: InMemoryReminderStore) -> ReminderService:
    return ReminderService(store=memory_store, clock=lambda: NOW)


@pytest.fixture
def notifier(mock_mailer: AsyncMock) -> ReminderNotifier:
    return ReminderNotifier(mailer=mock_mailer)


@pytest.fixture
async def rem_client(
    async_client: AsyncClient,
    service: ReminderService,
    notifier: ReminderNotifier,
    memory_store: InMemoryReminderStore,
):
    """Async client wired to an in-memory store and a mock mailer."""
    app.dependency_overrides[get_service] = lambda: service
    app.dependency_overrides[get_register_reminder_use_case] = lambda: RegisterReminderUseCase(
        service=service, notifier=notifier, notice_to=""
    )
    app.dependency_overrides[get_send_due_reminders_use_case] = lambda: SendDueRemindersUseCase(
        reminder_store=memory_store, notifier=notifier, clock=lambda: NOW
    )
    yield async_client


class TestUpsertReminder:
    """Tests for POST /api/reminders."""

    async def test_create_returns_entry(self, rem_client: AsyncClient, memory_store):
        response = await rem_client.post(
            "/api/reminders",
            json={
                "companyNo": "12345678",
                "companyName": "Acme Ltd",
                "bookkeeper": "Jane",
                "bookkeeperEmail": "jane@example.com",
                "status": "Pending",
                "period": "Q1 2025",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        entry = data["entry"]
        assert entry["key"] == "12345678"
        assert entry["companyName"] == "Acme Ltd"
        assert entry["bookkeeperEmail"] == "jane@example.com"
        assert entry["active"] is True
        assert entry["lastNotifiedAt"] is None
        assert len(memory_store.records) == 1

    async def test_trailing_slash_accepted(self, rem_client: AsyncClient):
        response = await rem_client.post("/api/reminders/", json={"companyNo": "1"})
        assert response.status_code == 200

    async def test_missing_identity_returns_400(self, rem_client: AsyncClient, memory_store):
        response = await rem_client.post("/api/reminders", json={"bookkeeper": "Jane"})

        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "MISSING_IDENTITY"
        assert data["message"] == "companyNo or companyName required"
        assert data["path"] == "/api/reminders"
        assert memory_store.save_count == 0

    async def test_empty_body_returns_400(self, rem_client: AsyncClient, memory_store):
        response = await rem_client.post("/api/reminders")

        assert response.status_code == 400
        assert response.json()["error_code"] == "MISSING_IDENTITY"
        assert memory_store.save_count == 0

    async def test_numeric_company_no_accepted(self, rem_client: AsyncClient):
        response = await rem_client.post("/api/reminders", json={"companyNo": 12345})

        assert response.status_code == 200
        assert response.json()["entry"]["key"] == "12345"

    async def test_update_keeps_single_record(self, rem_client: AsyncClient, memory_store):
        await rem_client.post("/api/reminders", json={"companyNo": "1", "status": "Pending"})
        response = await rem_client.post(
            "/api/reminders", json={"companyNo": "1", "status": "Completed"}
        )

        assert response.status_code == 200
        assert response.json()["entry"]["active"] is False
        assert len(memory_store.records) == 1

    async def test_storage_failure_returns_500(self, rem_client: AsyncClient, memory_store):
        memory_store.save = AsyncMock(side_effect=StorageWriteError("reminders.json", "disk full"))

        response = await rem_client.post("/api/reminders", json={"companyNo": "1"})

        assert response.status_code == 500
        assert response.json()["error_code"] == "STORAGE_WRITE_ERROR"


class TestCompleteReminders:
    """Tests for POST /api/reminders/complete."""

    async def test_complete_by_company_no(self, rem_client: AsyncClient, memory_store, make_record):
        memory_store.records = [
            make_record(company_no="1", company_name="A"),
            make_record(company_no="2", company_name="B"),
        ]

        response = await rem_client.post("/api/reminders/complete", json={"companyNo": "1"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "matched": 1}
        first, second = memory_store.records
        assert first.active is False
        assert first.status == "Completed"
        assert second.active is True

    async def test_no_match_is_success(self, rem_client: AsyncClient):
        response = await rem_client.post("/api/reminders/complete", json={"companyName": "Nobody"})

        assert response.status_code == 200
        assert response.json()["matched"] == 0

    async def test_missing_identifiers_returns_400(self, rem_client: AsyncClient):
        response = await rem_client.post("/api/reminders/complete", json={})

        assert response.status_code == 400
        assert response.json()["error_code"] == "MISSING_IDENTITY"

    async def test_empty_body_returns_400(self, rem_client: AsyncClient):
        response = await rem_client.post("/api/reminders/complete")

        assert response.status_code == 400
        assert response.json()["error_code"] == "MISSING_IDENTITY"


class TestListReminders:
    """Tests for GET /api/reminders."""

    async def test_empty_store(self, rem_client: AsyncClient):
        response = await rem_client.get("/api/reminders")

        assert response.status_code == 200
        assert response.json() == {"ok": True, "count": 0, "reminders": []}

    async def test_lists_active_and_completed(
        self, rem_client: AsyncClient, memory_store, make_record
    ):
        memory_store.records = [
            make_record(company_no="1"),
            make_record(company_no="2", status="Completed", active=False),
        ]

        response = await rem_client.get("/api/reminders/")

        data = response.json()
        assert data["count"] == 2
        assert [r["key"] for r in data["reminders"]] == ["1", "2"]
        assert data["reminders"][1]["active"] is False

    async def test_missing_file_lists_nothing(self, async_client: AsyncClient):
        """Unwired client falls through to the JSON file in a fresh data dir."""
        response = await async_client.get("/api/reminders")

        assert response.status_code == 200
        assert response.json()["count"] == 0


class TestSendNow:
    """Tests for GET /api/reminders/send-now."""

    async def test_sends_due_reminders(
        self, rem_client: AsyncClient, memory_store, make_record, mock_mailer
    ):
        memory_store.records = [
            make_record(company_no="1"),
            make_record(company_no="2", active=False, status="Completed"),
            make_record(company_no="3", bookkeeper_email="", email=""),
        ]

        response = await rem_client.get("/api/reminders/send-now")

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["message"] == "send-now executed"
        assert data["total"] == 3
        assert data["sent"] == 1
        assert data["skipped_inactive"] == 1
        assert data["skipped_no_recipient"] == 1
        mock_mailer.send.assert_awaited_once()
        assert memory_store.records[0].last_notified_at == NOW

    async def test_second_run_same_day_sends_nothing(
        self, rem_client: AsyncClient, memory_store, make_record, mock_mailer
    ):
        memory_store.records = [make_record(company_no="1")]

        await rem_client.get("/api/reminders/send-now")
        response = await rem_client.get("/api/reminders/send-now")

        data = response.json()
        assert data["sent"] == 0
        assert data["skipped_already_notified"] == 1
        assert mock_mailer.send.await_count == 1

    async def test_save_failure_returns_500(self, rem_client: AsyncClient, memory_store):
        memory_store.save = AsyncMock(side_effect=StorageWriteError("reminders.json", "read-only"))

        response = await rem_client.get("/api/reminders/send-now")

        assert response.status_code == 500
        assert response.json()["error_code"] == "STORAGE_WRITE_ERROR"
