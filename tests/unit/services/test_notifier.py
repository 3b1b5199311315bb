"""Unit tests for ReminderNotifier and mail formatting."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.core.entities.reminder import ReminderRecord
from src.core.exceptions import DeliveryError
from src.core.services.notifier import (
    NotificationOutcome,
    ReminderNotifier,
    format_created_notice,
    format_reminder,
)


@pytest.fixture
def record() -> ReminderRecord:
    return ReminderRecord(
        company_no="123",
        company_name="Acme Ltd",
        bookkeeper="Jane",
        bookkeeper_email="jane@example.com",
        status="Pending",
        period="Q1 2025",
        created_at=datetime(2025, 3, 1, 10, tzinfo=timezone.utc),
    )


class TestFormatting:
    """Tests for mail subject and body."""

    def test_reminder_subject_and_body(self, record):
        subject, body = format_reminder(record)

        assert subject == "Reminder: Acme Ltd still pending"
        assert body.startswith("Hi Jane,")
        assert '"Acme Ltd" is still pending' in body
        assert "Status: Pending" in body
        assert "Period: Q1 2025" in body
        assert body.endswith("- Automated Bookkeeping Reminder Bot")

    def test_reminder_defaults(self):
        record = ReminderRecord(company_no="123", email="x@example.com")

        subject, body = format_reminder(record)

        assert subject == "Reminder: 123 still pending"
        assert body.startswith("Hi Team,")
        assert "Status: N/A" in body
        assert "Period: N/A" in body

    def test_created_notice(self, record):
        subject, body = format_created_notice(record)

        assert subject == "New Reminder Created: Acme Ltd"
        assert "Company: Acme Ltd (123)" in body
        assert "Created At: 2025-03-01T10:00:00+00:00" in body


class TestReminderNotifier:
    """Tests for delivery outcomes."""

    async def test_sends_to_recipient(self, record, mock_mailer):
        notifier = ReminderNotifier(mailer=mock_mailer)

        outcome = await notifier.send_reminder(record)

        assert outcome is NotificationOutcome.SENT
        to, subject, body = mock_mailer.send.await_args.args
        assert to == "jane@example.com"
        assert subject == "Reminder: Acme Ltd still pending"

    async def test_skips_without_recipient(self, mock_mailer):
        notifier = ReminderNotifier(mailer=mock_mailer)

        outcome = await notifier.send_reminder(ReminderRecord(company_no="1"))

        assert outcome is NotificationOutcome.SKIPPED
        mock_mailer.send.assert_not_awaited()

    async def test_delivery_error_reported_as_failed(self, record):
        mailer = AsyncMock()
        mailer.send.side_effect = DeliveryError("jane@example.com", "Connection refused")
        notifier = ReminderNotifier(mailer=mailer)

        assert await notifier.send_reminder(record) is NotificationOutcome.FAILED

    async def test_created_notice_goes_to_operator(self, record, mock_mailer):
        notifier = ReminderNotifier(mailer=mock_mailer)

        outcome = await notifier.send_created_notice(record, "office@example.com")

        assert outcome is NotificationOutcome.SENT
        to, subject, _ = mock_mailer.send.await_args.args
        assert to == "office@example.com"
        assert subject.startswith("New Reminder Created")

    async def test_created_notice_without_address_skipped(self, record, mock_mailer):
        notifier = ReminderNotifier(mailer=mock_mailer)

        assert await notifier.send_created_notice(record, "") is NotificationOutcome.SKIPPED
        mock_mailer.send.assert_not_awaited()
