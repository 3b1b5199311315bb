"""
Abstract interface for the spreadsheet submission endpoint.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class UpstreamResponse:
    """Raw upstream answer, relayed to the caller unchanged."""

    status_code: int
    body: bytes
    content_type: str | None = None


class ISubmissionForwarder(ABC):
    """Forwards validated form submissions upstream."""

    @abstractmethod
    async def forward(
        self,
        payload: object,
        content_type: str | None = None,
    ) -> UpstreamResponse:
        """
        POST the payload as JSON and return whatever came back.

        Raises:
            UpstreamNotConfiguredError: If no target URL is configured.
            UpstreamForwardError: If no response was received.
        """
        pass
