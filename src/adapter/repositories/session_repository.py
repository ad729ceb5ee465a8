from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.orm import selectinload
from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Device, Session, UsageLog


def _apply_tenant_scope(stmt, isp_id: Optional[str]):
    """Scoped query shape for a tenant, unscoped shape when isp_id is None"""
    if isp_id is None:
        return stmt
    return stmt.where(Session.isp_id == isp_id)


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        stmt = select(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_scoped(self, session_id: UUID, isp_id: Optional[str]) -> Optional[Session]:
        """Get session by ID within the caller's tenant scope"""
        stmt = _apply_tenant_scope(select(Session).where(Session.id == session_id), isp_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def delete(self, session_obj: Session) -> None:
        """Delete a session; devices and usage logs go with it"""
        await self._delete_sessions([session_obj.id])

    async def get_active(self, isp_id: Optional[str]) -> List[Session]:
        """Get active sessions with devices and user eagerly loaded"""
        stmt = _apply_tenant_scope(
            select(Session).where(Session.is_active == True), isp_id
        )
        stmt = stmt.options(
            selectinload(Session.devices), selectinload(Session.user)
        ).order_by(Session.start_time.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_active_by_user(
        self, user_id: UUID, isp_id: Optional[str]
    ) -> List[Session]:
        """Get active sessions of a user, newest first"""
        stmt = _apply_tenant_scope(
            select(Session).where(Session.user_id == user_id, Session.is_active == True),
            isp_id,
        ).order_by(Session.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def close_all_by_user(
        self, user_id: UUID, isp_id: Optional[str], end_time: datetime
    ) -> int:
        """Close every active session of a user in one statement"""
        stmt = _apply_tenant_scope(
            update(Session).where(Session.user_id == user_id, Session.is_active == True),
            isp_id,
        ).values(is_active=False, end_time=end_time, updated_at=end_time)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_closed_before(self, cutoff: datetime) -> int:
        """Delete inactive sessions that ended before cutoff"""
        stmt = select(Session.id).where(
            Session.is_active == False,
            Session.end_time < cutoff,
        )
        result = await self.session.execute(stmt)
        session_ids = list(result.scalars().all())
        if not session_ids:
            return 0

        await self._delete_sessions(session_ids)
        return len(session_ids)

    async def _delete_sessions(self, session_ids: List[UUID]) -> None:
        # Children first so the delete also holds on backends without FK enforcement
        await self.session.execute(delete(Device).where(Device.session_id.in_(session_ids)))
        await self.session.execute(
            delete(UsageLog).where(UsageLog.session_id.in_(session_ids))
        )
        await self.session.execute(delete(Session).where(Session.id.in_(session_ids)))
        await self.session.flush()
