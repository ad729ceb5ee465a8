"""
Record Log Use Case

Appends entries to the audit, login and system log tables.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditLog, LoginLog, LoginStatus, SystemLog

from .dtos import (
    CreateAuditLogCommand,
    CreateLoginLogCommand,
    CreateSystemLogCommand,
    LogEntry,
)
from .log_entry_mapper import map_audit_log, map_login_log, map_system_log


class RecordLogUseCase:
    """Use case for appending log rows; each append commits on its own."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create_audit_log(self, command: CreateAuditLogCommand) -> LogEntry:
        async with self.uow:
            log = AuditLog(
                user_id=command.user_id,
                username=command.username,
                action=command.action,
                description=command.description,
                details=command.details,
                route=command.route,
                ip_address=command.ip_address,
                user_agent=command.user_agent,
                log_metadata=command.metadata,
            )
            log = await self.uow.audit_logs.create(log)
            await self.uow.commit()
            return map_audit_log(log)

    async def create_login_log(self, command: CreateLoginLogCommand) -> LogEntry:
        status = command.status
        if status is None:
            status = LoginStatus.success if command.success else LoginStatus.failure

        async with self.uow:
            log = LoginLog(
                user_id=command.user_id,
                username=command.username,
                status=status,
                success=command.success,
                ip_address=command.ip_address,
                user_agent=command.user_agent,
                failure_reason=command.failure_reason,
            )
            log = await self.uow.login_logs.create(log)
            await self.uow.commit()
            return map_login_log(log)

    async def create_system_log(self, command: CreateSystemLogCommand) -> LogEntry:
        async with self.uow:
            log = SystemLog(
                level=command.level,
                source=command.source,
                message=command.message,
                meta=command.meta,
            )
            log = await self.uow.system_logs.create(log)
            await self.uow.commit()
            return map_system_log(log)
