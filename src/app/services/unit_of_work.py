from abc import ABC, abstractmethod

from src.app.repositories.device_repository import IDeviceRepository
from src.app.repositories.log_repositories import (
    IAuditLogRepository,
    ILoginLogRepository,
    ISystemLogRepository,
)
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.usage_log_repository import IUsageLogRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    sessions: ISessionRepository
    devices: IDeviceRepository
    usage_logs: IUsageLogRepository
    audit_logs: IAuditLogRepository
    login_logs: ILoginLogRepository
    system_logs: ISystemLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
