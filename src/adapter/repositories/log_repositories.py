from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.log_repositories import (
    IAuditLogRepository,
    ILoginLogRepository,
    ISystemLogRepository,
)
from src.domain.entities import (
    AuditLog,
    LogAction,
    LoginLog,
    LoginStatus,
    LogLevel,
    SystemLog,
)


def apply_timestamp_range(
    stmt, column, date_from: Optional[datetime], date_to: Optional[datetime]
):
    """Inclusive between when both bounds are set, open-ended otherwise"""
    if date_from is not None and date_to is not None:
        return stmt.where(column.between(date_from, date_to))
    if date_from is not None:
        return stmt.where(column >= date_from)
    if date_to is not None:
        return stmt.where(column <= date_to)
    return stmt


class _AppendOnlyRepository:
    model = None

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, log):
        """Append a log row (immutable)"""
        self.session.add(log)
        await self.session.flush()
        await self.session.refresh(log)
        return log

    async def get_by_id(self, log_id: UUID):
        stmt = select(self.model).where(self.model.id == log_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _page(self, stmt, date_from, date_to, limit: int, offset: int) -> list:
        stmt = apply_timestamp_range(stmt, self.model.timestamp, date_from, date_to)
        stmt = stmt.order_by(self.model.timestamp.desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class AuditLogRepository(_AppendOnlyRepository, IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    model = AuditLog

    async def find(
        self,
        user_id: Optional[str] = None,
        action: Optional[LogAction] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[AuditLog]:
        stmt = select(AuditLog)
        if user_id:
            stmt = stmt.where(AuditLog.user_id == user_id)
        if action:
            stmt = stmt.where(AuditLog.action == action)
        return await self._page(stmt, date_from, date_to, limit, offset)


class LoginLogRepository(_AppendOnlyRepository, ILoginLogRepository):
    """LoginLog repository implementation using SQLModel"""

    model = LoginLog

    async def find(
        self,
        user_id: Optional[str] = None,
        status: Optional[LoginStatus] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[LoginLog]:
        stmt = select(LoginLog)
        if user_id:
            stmt = stmt.where(LoginLog.user_id == user_id)
        if status:
            stmt = stmt.where(LoginLog.status == status)
        return await self._page(stmt, date_from, date_to, limit, offset)


class SystemLogRepository(_AppendOnlyRepository, ISystemLogRepository):
    """SystemLog repository implementation using SQLModel"""

    model = SystemLog

    async def find(
        self,
        level: Optional[LogLevel] = None,
        message: Optional[str] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[SystemLog]:
        stmt = select(SystemLog)
        if level:
            stmt = stmt.where(SystemLog.level == level)
        if message:
            stmt = stmt.where(SystemLog.message == message)
        return await self._page(stmt, date_from, date_to, limit, offset)
