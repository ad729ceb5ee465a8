"""
Retention Scheduler

Runs each retention sweep on its own cron cadence with APScheduler. A failing
sweep is logged and swallowed so it never blocks the other sweeps or its own
next run.
"""

import logging
from typing import AsyncContextManager, Callable

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.retention import RetentionSweepUseCase
from src.domain.base import utcnow

logger = logging.getLogger(__name__)

UnitOfWorkFactory = Callable[[], AsyncContextManager[UnitOfWork]]


class RetentionScheduler:
    """
    Schedules:
    - expire sessions: every hour
    - archive usage logs: daily at 01:30
    - cleanup inactive devices: daily at 03:00
    """

    def __init__(self, uow_factory: UnitOfWorkFactory, config, scheduler=None):
        self.uow_factory = uow_factory
        self.config = config
        self.scheduler = scheduler or AsyncIOScheduler(timezone="UTC")

    def _sweeps(self, uow: UnitOfWork) -> RetentionSweepUseCase:
        return RetentionSweepUseCase(
            uow,
            session_retention_days=self.config.SESSION_RETENTION_DAYS,
            usage_log_retention_months=self.config.USAGE_LOG_RETENTION_MONTHS,
            device_retention_months=self.config.DEVICE_RETENTION_MONTHS,
        )

    async def expire_sessions_job(self) -> None:
        logger.info("Running expired session cleanup...")
        try:
            async with self.uow_factory() as uow:
                cleaned = await self._sweeps(uow).expire_sessions(utcnow())
            logger.info(f"Expired session cleanup done. Cleaned: {cleaned}")
        except Exception:
            logger.error("Failed to clean expired sessions", exc_info=True)

    async def archive_usage_logs_job(self) -> None:
        logger.info("Archiving old session usage logs...")
        try:
            async with self.uow_factory() as uow:
                archived = await self._sweeps(uow).archive_usage_logs(utcnow())
            logger.info(f"Archived usage logs count: {archived}")
        except Exception:
            logger.error("Error archiving usage logs", exc_info=True)

    async def cleanup_inactive_devices_job(self) -> None:
        logger.info("Cleaning up inactive devices...")
        try:
            async with self.uow_factory() as uow:
                removed = await self._sweeps(uow).cleanup_inactive_devices(utcnow())
            logger.info(f"Inactive devices removed: {removed}")
        except Exception:
            logger.error("Failed to clean inactive devices", exc_info=True)

    def start(self) -> None:
        if self.scheduler.running:
            logger.warning("Retention scheduler is already running")
            return

        self.scheduler.add_job(
            self.expire_sessions_job,
            trigger=CronTrigger(minute=0),
            id="expire_sessions",
            name="Expire closed sessions",
            replace_existing=True,
        )
        self.scheduler.add_job(
            self.archive_usage_logs_job,
            trigger=CronTrigger(hour=1, minute=30),
            id="archive_usage_logs",
            name="Archive old usage logs",
            replace_existing=True,
        )
        self.scheduler.add_job(
            self.cleanup_inactive_devices_job,
            trigger=CronTrigger(hour=3, minute=0),
            id="cleanup_inactive_devices",
            name="Cleanup inactive devices",
            replace_existing=True,
        )
        self.scheduler.start()
        logger.info("Retention scheduler started")

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Retention scheduler stopped")
