"""Mail delivery implementations."""

from src.infrastructure.mail.smtp_mailer import SMTPMailer

# One transport per process, reused for every send
_mailer: SMTPMailer | None = None


def get_mailer() -> SMTPMailer:
    """Get singleton SMTP mailer instance."""
    global _mailer
    if _mailer is None:
        _mailer = SMTPMailer.from_settings()
    return _mailer


def reset_mailer() -> None:
    """Reset singleton (for testing)."""
    global _mailer
    _mailer = None


__all__ = ["SMTPMailer", "get_mailer", "reset_mailer"]
