"""
Query Logs Use Case

Unified, newest-first feed over audit, login and system logs.
"""

from typing import List
from uuid import UUID

from src.app.errors import log_not_found
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AuditQuery, LogEntry
from .log_entry_mapper import map_audit_log, map_login_log, map_system_log


class QueryLogsUseCase:
    """
    Use case for reading the unified audit feed.

    Business Rules:
    - Each table is filtered, ordered by timestamp DESC and paginated on its
      own; the merged page can therefore hold up to 3 x limit entries
    - Merged entries are re-sorted by timestamp DESC but not re-paginated
    - With global_pagination enabled, each table yields its first page*limit
      rows and the merged feed is sliced to exactly one page instead
    - get_log_by_id probes audit, login, then system logs
    """

    def __init__(self, uow: UnitOfWork, global_pagination: bool = False):
        self.uow = uow
        self.global_pagination = global_pagination

    async def query_logs(self, query: AuditQuery) -> List[LogEntry]:
        if self.global_pagination:
            limit, offset = query.page * query.limit, 0
        else:
            limit, offset = query.limit, (query.page - 1) * query.limit

        async with self.uow:
            audit_logs = await self.uow.audit_logs.find(
                user_id=query.user_id,
                action=query.action,
                date_from=query.date_from,
                date_to=query.date_to,
                limit=limit,
                offset=offset,
            )
            login_logs = await self.uow.login_logs.find(
                user_id=query.user_id,
                status=query.status,
                date_from=query.date_from,
                date_to=query.date_to,
                limit=limit,
                offset=offset,
            )
            system_logs = await self.uow.system_logs.find(
                level=query.level,
                message=query.message,
                date_from=query.date_from,
                date_to=query.date_to,
                limit=limit,
                offset=offset,
            )

            entries = (
                [map_audit_log(log) for log in audit_logs]
                + [map_login_log(log) for log in login_logs]
                + [map_system_log(log) for log in system_logs]
            )

        entries.sort(key=lambda entry: entry.timestamp, reverse=True)

        if self.global_pagination:
            start = (query.page - 1) * query.limit
            entries = entries[start : start + query.limit]
        return entries

    async def get_log_by_id(self, log_id: UUID) -> LogEntry:
        async with self.uow:
            audit_log = await self.uow.audit_logs.get_by_id(log_id)
            if audit_log:
                return map_audit_log(audit_log)

            login_log = await self.uow.login_logs.get_by_id(log_id)
            if login_log:
                return map_login_log(login_log)

            system_log = await self.uow.system_logs.get_by_id(log_id)
            if system_log:
                return map_system_log(system_log)

            raise log_not_found()
