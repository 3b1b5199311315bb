"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_settings
from src.application.dto.responses import HealthResponse, ProviderHealthResponse
from src.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/full", response_model=HealthResponse)
async def full_health(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Component health check.

    Loads the reminders file and reports which outbound integrations
    are configured. Mail and upstream are not contacted.
    """
    from src.application.services import get_reminder_scheduler
    from src.infrastructure.storage.json_file import get_reminder_store

    try:
        store = get_reminder_store()
        start = time.time()
        records = await store.load()
        storage_status = ProviderHealthResponse(
            name=f"json:{len(records)} records",
            available=True,
            latency_ms=(time.time() - start) * 1000,
        )
    except Exception as e:
        storage_status = ProviderHealthResponse(
            name="json",
            available=False,
            error=str(e),
        )

    mail_status = ProviderHealthResponse(
        name="smtp",
        available=settings.mail.is_configured,
        error=None if settings.mail.is_configured else "SMTP_HOST not set",
    )

    scheduler_running = settings.scheduler.enabled and get_reminder_scheduler().running
    scheduler_status = ProviderHealthResponse(
        name="apscheduler",
        available=scheduler_running,
        error=None if scheduler_running else "daily sweep not running",
    )

    upstream_status = ProviderHealthResponse(
        name="apps_script",
        available=bool(settings.proxy.target_url),
        error=None if settings.proxy.target_url else "TARGET_URL not set",
    )

    return HealthResponse(
        status="healthy" if storage_status.available else "degraded",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        storage=storage_status,
        mail=mail_status,
        scheduler=scheduler_status,
        upstream=upstream_status,
    )
