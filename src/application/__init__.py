"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.services import (
    get_reminder_notifier,
    get_reminder_scheduler,
    get_reminder_service,
    reset_services,
)
from src.application.use_cases import (
    ForwardSubmissionUseCase,
    RegisterReminderUseCase,
    SendDueRemindersUseCase,
    SweepResult,
)

__all__ = [
    # Services
    "get_reminder_service",
    "get_reminder_notifier",
    "get_reminder_scheduler",
    "reset_services",
    # Use cases
    "RegisterReminderUseCase",
    "SendDueRemindersUseCase",
    "SweepResult",
    "ForwardSubmissionUseCase",
]
