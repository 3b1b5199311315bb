"""Background scheduling."""

from src.infrastructure.scheduling.reminder_scheduler import JOB_ID, ReminderScheduler

__all__ = ["JOB_ID", "ReminderScheduler"]
