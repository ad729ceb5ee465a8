from datetime import datetime
from typing import List
from uuid import UUID

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.usage_log_repository import IUsageLogRepository
from src.domain.entities import UsageLog


class UsageLogRepository(IUsageLogRepository):
    """UsageLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, usage_log: UsageLog) -> UsageLog:
        """Create a new usage entry"""
        self.session.add(usage_log)
        await self.session.flush()
        await self.session.refresh(usage_log)
        return usage_log

    async def get_by_session_id(self, session_id: UUID) -> List[UsageLog]:
        """Get usage logs of a session, newest first"""
        stmt = (
            select(UsageLog)
            .where(UsageLog.session_id == session_id)
            .order_by(UsageLog.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_ended_before(self, cutoff: datetime) -> int:
        """Delete usage logs that ended before cutoff.

        NULL usage_end_time never compares less than cutoff, so open
        entries are kept.
        """
        stmt = delete(UsageLog).where(UsageLog.usage_end_time < cutoff)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
