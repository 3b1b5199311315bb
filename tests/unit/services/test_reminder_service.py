"""Unit tests for ReminderService."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from src.core.exceptions import MissingIdentityError, StorageWriteError
from src.core.services.reminder_service import ReminderService
from tests.fakes import NOW, InMemoryReminderStore


@pytest.fixture
def store() -> InMemoryReminderStore:
    return InMemoryReminderStore()


@pytest.fixture
def service(store: InMemoryReminderStore) -> ReminderService:
    return ReminderService(store=store, clock=lambda: NOW)


class TestUpsertCreate:
    """Tests for creating reminders."""

    async def test_creates_record_keyed_by_company_no(self, service, store):
        record = await service.upsert(
            {"company_no": "123", "company_name": "Acme", "bookkeeper_email": "j@x.com"}
        )

        assert record.key == "123"
        assert record.active is True
        assert record.last_notified_at is None
        assert record.created_at == NOW
        assert [r.key for r in store.records] == ["123"]

    async def test_key_from_name_and_reference(self, service):
        record = await service.upsert({"company_name": "Acme", "reference": "VAT"})
        assert record.key == "Acme::VAT"

    async def test_values_are_trimmed(self, service):
        record = await service.upsert({"company_no": "  123 ", "bookkeeper": " Jane "})
        assert record.key == "123"
        assert record.bookkeeper == "Jane"

    async def test_email_copied_to_bookkeeper_email(self, service):
        record = await service.upsert({"company_no": "1", "email": "e@x.com"})
        assert record.bookkeeper_email == "e@x.com"
        assert record.recipient == "e@x.com"

    async def test_completed_status_creates_inactive(self, service):
        record = await service.upsert({"company_no": "1", "status": "Completed"})
        assert record.active is False

    async def test_client_cannot_set_owned_fields(self, service):
        record = await service.upsert(
            {"company_no": "1", "key": "forged", "active": False, "last_notified_at": NOW}
        )
        assert record.key == "1"
        assert record.active is True
        assert record.last_notified_at is None

    @pytest.mark.parametrize(
        "fields",
        [{}, {"company_no": "", "company_name": ""}, {"company_no": "   "}, {"bookkeeper": "Jane"}],
    )
    async def test_missing_identity_rejected(self, service, store, fields):
        with pytest.raises(MissingIdentityError):
            await service.upsert(fields)
        assert store.save_count == 0


class TestUpsertUpdate:
    """Tests for updating existing reminders."""

    async def test_same_key_updates_in_place(self, service, store, make_record):
        store.records = [
            make_record(company_no="1", status="Pending"),
            make_record(company_no="2"),
        ]

        record = await service.upsert({"company_no": "1", "status": "In Progress"})

        assert record.status == "In Progress"
        assert [r.key for r in store.records] == ["1", "2"]
        assert store.records[0].status == "In Progress"

    async def test_update_keeps_created_and_notified(self, service, store, make_record):
        created = NOW - timedelta(days=30)
        notified = NOW - timedelta(days=1)
        store.records = [
            make_record(company_no="1", created_at=created, last_notified_at=notified)
        ]

        record = await service.upsert({"company_no": "1", "period": "Q2 2025"})

        assert record.created_at == created
        assert record.last_notified_at == notified
        assert record.period == "Q2 2025"

    async def test_omitted_fields_kept(self, service, store, make_record):
        store.records = [make_record(company_no="1", bookkeeper="Jane")]

        record = await service.upsert({"company_no": "1", "status": "Pending"})

        assert record.bookkeeper == "Jane"
        assert record.bookkeeper_email == "jane@example.com"

    async def test_completed_update_deactivates(self, service, store, make_record):
        store.records = [make_record(company_no="1")]

        record = await service.upsert({"company_no": "1", "status": "Completed"})

        assert record.active is False
        assert store.records[0].active is False

    async def test_reopen_reactivates(self, service, store, make_record):
        store.records = [make_record(company_no="1", status="Completed", active=False)]

        record = await service.upsert({"company_no": "1", "status": "Pending"})

        assert record.active is True

    async def test_idempotent(self, service, store):
        fields = {"company_no": "1", "bookkeeper": "Jane", "status": "Pending"}

        first = await service.upsert(fields)
        second = await service.upsert(fields)

        assert len(store.records) == 1
        assert first == second

    async def test_save_failure_propagates(self, make_record):
        store = InMemoryReminderStore()
        store.save = AsyncMock(side_effect=StorageWriteError("r.json", "disk full"))
        service = ReminderService(store=store)

        with pytest.raises(StorageWriteError):
            await service.upsert({"company_no": "1"})


class TestComplete:
    """Tests for completing reminders."""

    async def test_complete_by_company_no(self, service, store, make_record):
        store.records = [
            make_record(company_no="1", company_name="A"),
            make_record(company_no="2", company_name="B"),
        ]

        matched = await service.complete(company_no="1")

        assert matched == 1
        assert store.records[0].active is False
        assert store.records[0].status == "Completed"
        assert store.records[1].active is True
        assert store.records[1].status == "Pending"

    async def test_matches_either_identifier(self, service, store, make_record):
        store.records = [
            make_record(company_no="1", company_name="A"),
            make_record(company_no="2", company_name="B"),
            make_record(company_no="3", company_name="C"),
        ]

        matched = await service.complete(company_no="1", company_name="B")

        assert matched == 2
        assert [r.active for r in store.records] == [False, False, True]

    async def test_name_matches_every_reference(self, service, store, make_record):
        store.records = [
            make_record(company_no="", company_name="Acme", reference="VAT"),
            make_record(company_no="", company_name="Acme", reference="Payroll"),
        ]

        assert await service.complete(company_name="Acme") == 2

    async def test_empty_identifier_never_matches(self, service, store, make_record):
        store.records = [make_record(company_no="", company_name="Acme", reference="x")]

        matched = await service.complete(company_no="", company_name="Other")

        assert matched == 0
        assert store.records[0].active is True

    async def test_zero_matches_is_not_an_error(self, service, store, make_record):
        store.records = [make_record(company_no="1")]
        assert await service.complete(company_no="999") == 0

    async def test_both_missing_rejected(self, service, store):
        with pytest.raises(MissingIdentityError):
            await service.complete()
        assert store.save_count == 0


class TestListAll:
    """Tests for listing reminders."""

    async def test_returns_insertion_order(self, service, store, make_record):
        store.records = [make_record(company_no=str(i)) for i in (3, 1, 2)]

        records = await service.list_all()

        assert [r.key for r in records] == ["3", "1", "2"]

    async def test_empty(self, service):
        assert await service.list_all() == []
