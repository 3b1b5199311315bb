"""
Forward Submission Use Case.

Relays a bookkeeping form submission to the spreadsheet endpoint.
"""

from src.config import get_logger
from src.core.interfaces.upstream import ISubmissionForwarder, UpstreamResponse

logger = get_logger(__name__)


class ForwardSubmissionUseCase:
    """
    Use case for ``POST /api/bookkeeping``.

    The payload is sent verbatim; the upstream status and body come back
    unchanged, including upstream error statuses.
    """

    def __init__(self, forwarder: ISubmissionForwarder | None = None):
        self._forwarder = forwarder

    def _get_forwarder(self) -> ISubmissionForwarder:
        if self._forwarder is None:
            from src.infrastructure.upstream import get_forwarder
            self._forwarder = get_forwarder()
        return self._forwarder

    async def execute(
        self,
        payload: object,
        content_type: str | None = None,
    ) -> UpstreamResponse:
        """
        Forward one submission.

        Raises:
            UpstreamNotConfiguredError: If no target URL is configured.
            UpstreamForwardError: If the endpoint could not be reached.
        """
        response = await self._get_forwarder().forward(payload, content_type=content_type)

        if response.status_code >= 400:
            logger.warning("submission_rejected_upstream", status=response.status_code)

        return response
