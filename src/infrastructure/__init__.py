"""Infrastructure layer implementations."""

from src.infrastructure import mail, scheduling, storage, upstream

__all__ = ["storage", "mail", "upstream", "scheduling"]
