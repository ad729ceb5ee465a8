from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import (
    AuditLog,
    LogAction,
    LoginLog,
    LoginStatus,
    LogLevel,
    SystemLog,
)


class IAuditLogRepository(ABC):
    """AuditLog repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_log: AuditLog) -> AuditLog:
        """Append an audit log (immutable)"""
        pass

    @abstractmethod
    async def get_by_id(self, log_id: UUID) -> Optional[AuditLog]:
        pass

    @abstractmethod
    async def find(
        self,
        user_id: Optional[str] = None,
        action: Optional[LogAction] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[AuditLog]:
        """Filtered audit logs ordered by timestamp DESC"""
        pass


class ILoginLogRepository(ABC):
    """LoginLog repository interface - application layer"""

    @abstractmethod
    async def create(self, login_log: LoginLog) -> LoginLog:
        """Append a login log (immutable)"""
        pass

    @abstractmethod
    async def get_by_id(self, log_id: UUID) -> Optional[LoginLog]:
        pass

    @abstractmethod
    async def find(
        self,
        user_id: Optional[str] = None,
        status: Optional[LoginStatus] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[LoginLog]:
        """Filtered login logs ordered by timestamp DESC"""
        pass


class ISystemLogRepository(ABC):
    """SystemLog repository interface - application layer"""

    @abstractmethod
    async def create(self, system_log: SystemLog) -> SystemLog:
        """Append a system log (immutable)"""
        pass

    @abstractmethod
    async def get_by_id(self, log_id: UUID) -> Optional[SystemLog]:
        pass

    @abstractmethod
    async def find(
        self,
        level: Optional[LogLevel] = None,
        message: Optional[str] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[SystemLog]:
        """Filtered system logs ordered by timestamp DESC"""
        pass
