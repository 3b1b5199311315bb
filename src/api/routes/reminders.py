"""
Reminder management endpoints.

Mounted under ``/api/reminders``; the bare prefix and the trailing-slash
form are both accepted since the web form posts to either.
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from src.api.dependencies import (
    get_register_reminder_use_case,
    get_send_due_reminders_use_case,
    get_service,
)
from src.application.dto.requests import CompleteReminderRequest, UpsertReminderRequest
from src.application.dto.responses import (
    ErrorResponse,
    ReminderCompleteResponse,
    ReminderListResponse,
    ReminderResponse,
    ReminderUpsertResponse,
    SweepResponse,
)
from src.application.use_cases import RegisterReminderUseCase, SendDueRemindersUseCase
from src.core.services import ReminderService

router = APIRouter(prefix="/api/reminders", tags=["reminders"])


@router.post(
    "",
    response_model=ReminderUpsertResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@router.post("/", response_model=ReminderUpsertResponse, include_in_schema=False)
async def upsert_reminder(
    request: UpsertReminderRequest | None = None,
    use_case: RegisterReminderUseCase = Depends(get_register_reminder_use_case),
) -> ReminderUpsertResponse:
    """
    Create a reminder or update the one with the same identity.

    Identity is companyNo, else companyName plus reference.
    """
    request = request or UpsertReminderRequest()
    record = await use_case.execute(request.model_dump(exclude_none=True))
    return ReminderUpsertResponse(entry=ReminderResponse.from_entity(record))


@router.post(
    "/complete",
    response_model=ReminderCompleteResponse,
    responses={400: {"model": ErrorResponse}},
)
async def complete_reminders(
    request: CompleteReminderRequest | None = None,
    service: ReminderService = Depends(get_service),
) -> ReminderCompleteResponse:
    """Mark every reminder matching companyNo or companyName as completed."""
    request = request or CompleteReminderRequest()
    matched = await service.complete(
        company_no=request.company_no,
        company_name=request.company_name,
    )
    return ReminderCompleteResponse(matched=matched)


@router.get("", response_model=ReminderListResponse)
@router.get("/", response_model=ReminderListResponse, include_in_schema=False)
async def list_reminders(
    service: ReminderService = Depends(get_service),
) -> ReminderListResponse:
    """List all stored reminders, active and completed."""
    records = await service.list_all()
    return ReminderListResponse(
        count=len(records),
        reminders=[ReminderResponse.from_entity(r) for r in records],
    )


@router.get(
    "/send-now",
    response_model=SweepResponse,
    responses={500: {"model": ErrorResponse}},
)
async def send_now(
    use_case: SendDueRemindersUseCase = Depends(get_send_due_reminders_use_case),
) -> SweepResponse:
    """Run the reminder sweep immediately instead of waiting for the timer."""
    result = await use_case.execute()
    return SweepResponse(**asdict(result))
