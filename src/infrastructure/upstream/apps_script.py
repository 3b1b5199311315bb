"""
Google Apps Script submission forwarder.

Relays bookkeeping form submissions to the spreadsheet web app and
hands back the raw upstream answer.
"""

import json

import httpx

from src.config import get_logger
from src.core.exceptions import UpstreamForwardError, UpstreamNotConfiguredError
from src.core.interfaces.upstream import ISubmissionForwarder, UpstreamResponse

logger = get_logger(__name__)


class AppsScriptForwarder(ISubmissionForwarder):
    """HTTP client for the Apps Script ``/exec`` endpoint."""

    def __init__(
        self,
        target_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.target_url = target_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls) -> "AppsScriptForwarder":
        from src.config import get_settings

        proxy = get_settings().proxy
        return cls(target_url=proxy.target_url, timeout=proxy.timeout)

    async def forward(
        self,
        payload: object,
        content_type: str | None = None,
    ) -> UpstreamResponse:
        """POST the submission upstream; Apps Script answers via a redirect."""
        if not self.target_url:
            raise UpstreamNotConfiguredError()

        headers = {"Content-Type": content_type or "application/json"}
        body = json.dumps(payload)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.post(self.target_url, content=body, headers=headers)
        except httpx.HTTPError as e:
            logger.error("upstream_forward_failed", url=self.target_url, error=str(e))
            raise UpstreamForwardError(self.target_url, str(e) or e.__class__.__name__) from e

        logger.info(
            "upstream_forwarded",
            status=response.status_code,
            response_len=len(response.content),
        )
        return UpstreamResponse(
            status_code=response.status_code,
            body=response.content,
            content_type=response.headers.get("content-type"),
        )
