"""
Audit Use Cases

Unified audit feed and log recording.
"""

from .query_logs_use_case import QueryLogsUseCase
from .record_log_use_case import RecordLogUseCase
from .dtos import (
    AuditQuery,
    CreateAuditLogCommand,
    CreateLoginLogCommand,
    CreateSystemLogCommand,
    LogEntry,
)

__all__ = [
    "QueryLogsUseCase",
    "RecordLogUseCase",
    "AuditQuery",
    "CreateAuditLogCommand",
    "CreateLoginLogCommand",
    "CreateSystemLogCommand",
    "LogEntry",
]
