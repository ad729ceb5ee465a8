"""
Session Lifecycle Use Case

Creates, updates, closes and deletes connectivity sessions within a tenant.
"""

import logging
from typing import List, Optional
from uuid import UUID

from src.app.errors import session_not_found
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Session, UserRole

from .dtos import (
    ActiveSessionResponse,
    CloseAllSessionsResponse,
    CreateSessionCommand,
    SessionResponse,
    SessionStatsResponse,
    UpdateSessionCommand,
)

logger = logging.getLogger(__name__)


def tenant_scope(tenant_id: str, caller_role: Optional[str]) -> Optional[str]:
    """
    Resolve the tenant filter for a caller.

    SUPER_ADMIN gets the unscoped query shape (None); every other role is
    restricted to its own tenant. The role is trusted as given: it comes
    from the verified access token, never from request data.
    """
    if caller_role == UserRole.super_admin:
        return None
    return tenant_id


class SessionLifecycleUseCase:
    """
    Use case for managing connectivity sessions.

    Business Rules:
    - New sessions start active with start_time=now and carry the caller's tenant
    - Several simultaneous active sessions per user are allowed
    - Lookups are tenant-scoped except for SUPER_ADMIN callers
    - A lookup that finds nothing raises NotFoundError
    - Closing is repeatable; each close re-stamps end_time
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create_session(
        self, command: CreateSessionCommand, tenant_id: str
    ) -> SessionResponse:
        async with self.uow:
            session = Session(
                **command.model_dump(),
                isp_id=tenant_id,
                is_active=True,
                start_time=utcnow(),
            )
            session = await self.uow.sessions.create(session)
            await self.uow.commit()

            logger.info(f"Session created for user {command.user_id}")
            return SessionResponse.model_validate(session)

    async def update_session(
        self,
        session_id: UUID,
        patch: UpdateSessionCommand,
        tenant_id: str,
        caller_role: Optional[str] = None,
    ) -> SessionResponse:
        """
        Apply a partial update to a session.

        Every field explicitly set on the patch overwrites the stored value
        (including an explicit None); fields left unset are untouched.
        """
        async with self.uow:
            session = await self.uow.sessions.get_scoped(
                session_id, tenant_scope(tenant_id, caller_role)
            )
            if session is None:
                raise session_not_found()

            for field, value in patch.model_dump(exclude_unset=True).items():
                setattr(session, field, value)
            session.updated_at = utcnow()

            session = await self.uow.sessions.update(session)
            await self.uow.commit()
            return SessionResponse.model_validate(session)

    async def close_session(
        self, session_id: UUID, tenant_id: str, caller_role: Optional[str] = None
    ) -> SessionResponse:
        async with self.uow:
            session = await self.uow.sessions.get_scoped(
                session_id, tenant_scope(tenant_id, caller_role)
            )
            if session is None:
                raise session_not_found()

            now = utcnow()
            session.is_active = False
            session.end_time = now
            session.updated_at = now

            session = await self.uow.sessions.update(session)
            await self.uow.commit()

            logger.info(f"Session {session_id} closed")
            return SessionResponse.model_validate(session)

    async def delete_session(
        self, session_id: UUID, tenant_id: str, caller_role: Optional[str] = None
    ) -> None:
        async with self.uow:
            session = await self.uow.sessions.get_scoped(
                session_id, tenant_scope(tenant_id, caller_role)
            )
            if session is None:
                raise session_not_found()

            await self.uow.sessions.delete(session)
            await self.uow.commit()
            logger.info(f"Session {session_id} deleted")

    async def find_all_active(
        self, tenant_id: str, caller_role: Optional[str] = None
    ) -> List[ActiveSessionResponse]:
        async with self.uow:
            sessions = await self.uow.sessions.get_active(
                tenant_scope(tenant_id, caller_role)
            )
            return [ActiveSessionResponse.model_validate(s) for s in sessions]

    async def get_session_stats(
        self, session_id: UUID, tenant_id: str, caller_role: Optional[str] = None
    ) -> SessionStatsResponse:
        """
        Sum the traffic recorded against a session.

        total_bytes_in is the sum of upload_bytes and total_bytes_out the sum
        of download_bytes over the usage logs of this session only.
        """
        async with self.uow:
            session = await self.uow.sessions.get_scoped(
                session_id, tenant_scope(tenant_id, caller_role)
            )
            if session is None:
                raise session_not_found()

            logs = await self.uow.usage_logs.get_by_session_id(session_id)

            return SessionStatsResponse(
                session_id=session.id,
                user_id=session.user_id,
                total_bytes_in=sum(log.upload_bytes for log in logs),
                total_bytes_out=sum(log.download_bytes for log in logs),
                start_time=session.start_time,
                end_time=session.end_time or None,
            )

    async def find_active_by_user(
        self, user_id: UUID, tenant_id: str, caller_role: Optional[str] = None
    ) -> List[SessionResponse]:
        async with self.uow:
            sessions = await self.uow.sessions.get_active_by_user(
                user_id, tenant_scope(tenant_id, caller_role)
            )
            return [SessionResponse.model_validate(s) for s in sessions]

    async def close_all_for_user(
        self, user_id: UUID, tenant_id: str, caller_role: Optional[str] = None
    ) -> CloseAllSessionsResponse:
        async with self.uow:
            closed_count = await self.uow.sessions.close_all_by_user(
                user_id, tenant_scope(tenant_id, caller_role), utcnow()
            )
            await self.uow.commit()

            logger.info(f"Closed {closed_count} active session(s) for user {user_id}")
            return CloseAllSessionsResponse(user_id=user_id, closed_count=closed_count)
