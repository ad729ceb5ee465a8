"""
Use Case: Retention Sweeps

Three independent, idempotent deletion passes invoked on a schedule:
- expire closed sessions that ended more than 30 days ago
- archive usage logs that ended more than 6 months ago
- prune devices not modified for 6 months

Sweeps receive "now" from their caller and know nothing about scheduling.
"""

import calendar
import logging
from datetime import datetime, timedelta

from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)

DEFAULT_SESSION_RETENTION_DAYS = 30
DEFAULT_USAGE_LOG_RETENTION_MONTHS = 6
DEFAULT_DEVICE_RETENTION_MONTHS = 6


def subtract_months(moment: datetime, months: int) -> datetime:
    """
    Step back whole calendar months, clamping the day to the target month.

    subtract_months(2024-08-31, 6) == 2024-02-29
    """
    month_index = moment.month - 1 - months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class RetentionSweepUseCase:
    """
    Retention sweeps over sessions, usage logs and devices.

    Business Rules:
    - Active sessions are never expired, whatever their age
    - Usage logs without usage_end_time are never archived
    - Each sweep commits on its own and returns the number of rows removed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        session_retention_days: int = DEFAULT_SESSION_RETENTION_DAYS,
        usage_log_retention_months: int = DEFAULT_USAGE_LOG_RETENTION_MONTHS,
        device_retention_months: int = DEFAULT_DEVICE_RETENTION_MONTHS,
    ):
        self.uow = uow
        self.session_retention_days = session_retention_days
        self.usage_log_retention_months = usage_log_retention_months
        self.device_retention_months = device_retention_months

    async def expire_sessions(self, now: datetime) -> int:
        cutoff = now - timedelta(days=self.session_retention_days)
        async with self.uow:
            removed = await self.uow.sessions.delete_closed_before(cutoff)
            await self.uow.commit()

        logger.info(f"Cleaned up {removed} expired sessions")
        return removed

    async def archive_usage_logs(self, now: datetime) -> int:
        cutoff = subtract_months(now, self.usage_log_retention_months)
        async with self.uow:
            removed = await self.uow.usage_logs.delete_ended_before(cutoff)
            await self.uow.commit()

        logger.info(f"Archived {removed} old usage logs")
        return removed

    async def cleanup_inactive_devices(self, now: datetime) -> int:
        cutoff = subtract_months(now, self.device_retention_months)
        async with self.uow:
            removed = await self.uow.devices.delete_not_updated_since(cutoff)
            await self.uow.commit()

        logger.info(f"Removed {removed} inactive devices")
        return removed
