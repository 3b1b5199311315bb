"""
Daily reminder scheduler built on APScheduler.

Runs the reminder sweep once per day at a fixed wall-clock time on the
application's event loop.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from src.config import get_logger

logger = get_logger(__name__)

JOB_ID = "daily_reminder_sweep"


class ReminderScheduler:
    """
    Cron-style trigger for the reminder sweep.

    The sweep itself is injected as a coroutine function so it can be
    exercised without waiting for the timer.
    """

    def __init__(
        self,
        sweep: Callable[[], Awaitable[Any]],
        hour: int = 9,
        minute: int = 0,
        timezone: str | None = None,
    ):
        self._sweep = sweep
        self.hour = hour
        self.minute = minute
        self.timezone = timezone
        self._scheduler: AsyncIOScheduler | None = None

    @classmethod
    def from_settings(cls, sweep: Callable[[], Awaitable[Any]]) -> "ReminderScheduler":
        from src.config import get_settings

        cfg = get_settings().scheduler
        return cls(
            sweep,
            hour=cfg.send_hour,
            minute=cfg.send_minute,
            timezone=cfg.timezone,
        )

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def build_trigger(self) -> CronTrigger:
        """Daily trigger at the configured hour and minute."""
        if self.timezone:
            return CronTrigger(hour=self.hour, minute=self.minute, timezone=self.timezone)
        return CronTrigger(hour=self.hour, minute=self.minute)

    def start(self) -> None:
        """Register the daily job and start the scheduler on the running loop."""
        if self.running:
            return

        scheduler = (
            AsyncIOScheduler(timezone=self.timezone) if self.timezone else AsyncIOScheduler()
        )
        scheduler.add_job(
            self._run_scheduled,
            trigger=self.build_trigger(),
            id=JOB_ID,
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        scheduler.start()
        self._scheduler = scheduler

        job = scheduler.get_job(JOB_ID)
        logger.info(
            "reminder_scheduler_started",
            hour=self.hour,
            minute=self.minute,
            timezone=self.timezone or "local",
            next_run=str(job.next_run_time) if job else None,
        )

    def shutdown(self) -> None:
        """Stop the scheduler without waiting for a running sweep."""
        if self._scheduler is None:
            return
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        self._scheduler = None
        logger.info("reminder_scheduler_stopped")

    async def run_now(self) -> Any:
        """Run the sweep immediately and return its result; errors propagate."""
        logger.info("reminder_sweep_manual")
        return await self._sweep()

    async def _run_scheduled(self) -> None:
        logger.info("reminder_sweep_scheduled")
        try:
            await self._sweep()
        except Exception as e:
            # Keep the daily job alive; tomorrow's run retries
            logger.error("reminder_sweep_failed", error=str(e), exc_info=True)
