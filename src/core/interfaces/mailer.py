"""
Abstract interface for outbound mail delivery.
"""

from abc import ABC, abstractmethod


class IMailer(ABC):
    """Plaintext mail delivery through a configured relay."""

    @abstractmethod
    async def send(self, to: str, subject: str, body: str) -> None:
        """
        Deliver one plaintext message.

        Raises:
            DeliveryError: If the relay rejects the message or is unreachable.
        """
        pass
