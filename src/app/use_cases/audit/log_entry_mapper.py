"""
Mapping from the three log tables to the unified LogEntry shape.
"""

from src.domain.entities import AuditLog, LogAction, LoginLog, SystemLog

from .dtos import LogEntry


def map_audit_log(log: AuditLog) -> LogEntry:
    return LogEntry(
        id=log.id,
        timestamp=log.timestamp,
        action=log.action,
        user_id=log.user_id,
        username=log.username or "N/A",
        description=log.description or "Audit action",
        route=log.route,
        ip_address=log.ip_address,
        user_agent=log.user_agent,
    )


def map_login_log(log: LoginLog) -> LogEntry:
    return LogEntry(
        id=log.id,
        timestamp=log.timestamp,
        action=LogAction.login if log.success else LogAction.failure,
        user_id=log.user_id or "unknown",
        username=log.username or "unknown",
        description=f"Login attempt - {'Success' if log.success else 'Failed'}",
        ip_address=log.ip_address,
        user_agent=log.user_agent,
    )


def map_system_log(log: SystemLog) -> LogEntry:
    return LogEntry(
        id=log.id,
        timestamp=log.timestamp,
        action=LogAction.system,
        user_id="system",
        username="System",
        description=log.message,
    )
