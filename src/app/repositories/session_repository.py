from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer

    Every lookup taking ``isp_id`` filters by tenant when it is a string and
    skips the tenant filter entirely when it is None.
    """

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID without tenant scope"""
        pass

    @abstractmethod
    async def get_scoped(self, session_id: UUID, isp_id: Optional[str]) -> Optional[Session]:
        """Get session by ID, restricted to isp_id unless it is None"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Persist changes to an existing session"""
        pass

    @abstractmethod
    async def delete(self, session: Session) -> None:
        """Hard-delete a session together with its devices and usage logs"""
        pass

    @abstractmethod
    async def get_active(self, isp_id: Optional[str]) -> List[Session]:
        """Get active sessions with devices and user loaded"""
        pass

    @abstractmethod
    async def get_active_by_user(
        self, user_id: UUID, isp_id: Optional[str]
    ) -> List[Session]:
        """Get active sessions of a user, newest first"""
        pass

    @abstractmethod
    async def close_all_by_user(
        self, user_id: UUID, isp_id: Optional[str], end_time: datetime
    ) -> int:
        """Close every active session of a user. Returns count of closed sessions."""
        pass

    @abstractmethod
    async def delete_closed_before(self, cutoff: datetime) -> int:
        """Delete inactive sessions whose end_time is before cutoff. Returns count."""
        pass
