"""Application use cases."""

from src.application.use_cases.forward_submission import ForwardSubmissionUseCase
from src.application.use_cases.register_reminder import RegisterReminderUseCase
from src.application.use_cases.send_due_reminders import (
    SendDueRemindersUseCase,
    SweepResult,
)

__all__ = [
    "RegisterReminderUseCase",
    "SendDueRemindersUseCase",
    "SweepResult",
    "ForwardSubmissionUseCase",
]
