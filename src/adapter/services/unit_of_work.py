from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.device_repository import DeviceRepository
from src.adapter.repositories.log_repositories import (
    AuditLogRepository,
    LoginLogRepository,
    SystemLogRepository,
)
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.usage_log_repository import UsageLogRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.sessions = SessionRepository(self.session)
        self.devices = DeviceRepository(self.session)
        self.usage_logs = UsageLogRepository(self.session)
        self.audit_logs = AuditLogRepository(self.session)
        self.login_logs = LoginLogRepository(self.session)
        self.system_logs = SystemLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
