"""
Hotspot Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    SessionStatus,
    LogAction,
    LoginStatus,
    LogLevel,
)

# Export all entities
from .user import User
from .session import Session
from .device import Device, DEFAULT_DEVICE_NAME
from .usage_log import UsageLog
from .audit_log import AuditLog
from .login_log import LoginLog
from .system_log import SystemLog

__all__ = [
    # Enums
    "UserRole",
    "SessionStatus",
    "LogAction",
    "LoginStatus",
    "LogLevel",
    # Entities
    "User",
    "Session",
    "Device",
    "DEFAULT_DEVICE_NAME",
    "UsageLog",
    "AuditLog",
    "LoginLog",
    "SystemLog",
]
