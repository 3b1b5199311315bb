"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.mailer import IMailer
from src.core.interfaces.storage import ICsvStore, IReminderStore
from src.core.interfaces.upstream import ISubmissionForwarder, UpstreamResponse

__all__ = [
    # Storage interfaces
    "IReminderStore",
    "ICsvStore",
    # Delivery interfaces
    "IMailer",
    # Upstream interfaces
    "ISubmissionForwarder",
    "UpstreamResponse",
]
