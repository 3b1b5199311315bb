"""
Bookkeeping form proxy.

Relays form submissions to the Apps Script spreadsheet endpoint so the
browser never talks to it directly.
"""

import json

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.responses import Response

from src.api.dependencies import get_forward_submission_use_case
from src.api.middleware.origin import require_allowed_origin
from src.application.dto.responses import ErrorResponse
from src.application.use_cases import ForwardSubmissionUseCase

router = APIRouter(prefix="/api", tags=["bookkeeping"])


@router.post(
    "/bookkeeping",
    dependencies=[Depends(require_allowed_origin)],
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def forward_bookkeeping(
    request: Request,
    use_case: ForwardSubmissionUseCase = Depends(get_forward_submission_use_case),
) -> Response:
    """
    Forward the JSON body to the spreadsheet endpoint.

    An empty body is sent as ``{}``. The upstream status, content type
    and body are relayed unchanged.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw.strip() else {}
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body is not valid JSON",
        )

    upstream = await use_case.execute(payload)
    return Response(
        content=upstream.body,
        status_code=upstream.status_code,
        media_type=upstream.content_type or "application/json",
    )
