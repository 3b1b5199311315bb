"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from src.api.middleware.error_handler import setup_exception_handlers
from src.api.routes import (
    bookkeeping_router,
    csv_data_router,
    health_router,
    reminders_router,
)
from src.application.dto.responses import RootResponse
from src.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Starts the daily reminder sweep on startup and stops it on shutdown.
    """
    from src.application.services import get_reminder_scheduler

    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
        reminders_file=str(settings.storage.reminders_path),
        proxy_target=settings.proxy.target_url or None,
    )

    if not settings.mail.is_configured:
        logger.warning("smtp_not_configured", hint="reminder mails will fail until SMTP_HOST is set")

    scheduler = None
    if settings.scheduler.enabled:
        scheduler = get_reminder_scheduler()
        scheduler.start()
    else:
        logger.info("reminder_scheduler_disabled")

    logger.info("application_started")

    yield

    # Shutdown
    logger.info("application_stopping")

    if scheduler is not None:
        scheduler.shutdown()

    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title="Bookkeeping Reminders API",
        description="Bookkeeping task reminders, spreadsheet proxy and master list",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS, added last so preflight is answered before anything else runs
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origin_list,
        allow_origin_regex=settings.api.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "x-upload-secret"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(reminders_router)
    app.include_router(bookkeeping_router)
    app.include_router(csv_data_router)

    @app.get("/", response_model=RootResponse)
    async def root() -> RootResponse:
        """Report the proxy target and that reminder routes are mounted."""
        return RootResponse(proxying_to=get_settings().proxy.target_url)

    # Root health endpoint (for container health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        """Simple health check at root level."""
        return {
            "status": "healthy",
            "version": get_settings().app_version,
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
