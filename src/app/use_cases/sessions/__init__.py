"""
Session Lifecycle Use Cases

Tenant-scoped management of connectivity sessions.
"""

from .session_lifecycle_use_case import SessionLifecycleUseCase, tenant_scope
from .dtos import (
    ActiveSessionResponse,
    CloseAllSessionsResponse,
    CreateSessionCommand,
    DeviceResponse,
    SessionResponse,
    SessionStatsResponse,
    UpdateSessionCommand,
    UsageLogResponse,
    UserSummary,
)

__all__ = [
    "SessionLifecycleUseCase",
    "tenant_scope",
    "ActiveSessionResponse",
    "CloseAllSessionsResponse",
    "CreateSessionCommand",
    "DeviceResponse",
    "SessionResponse",
    "SessionStatsResponse",
    "UpdateSessionCommand",
    "UsageLogResponse",
    "UserSummary",
]
