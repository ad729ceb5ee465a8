"""
Hotspot Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Platform-wide role carried in the access token"""

    super_admin = "SUPER_ADMIN"
    admin = "ADMIN"
    isp_admin = "ISP_ADMIN"
    isp_staff = "ISP_STAFF"
    client = "CLIENT"
    staff = "STAFF"
    auditor = "AUDITOR"
    support = "SUPPORT"
    technician = "TECHNICIAN"
    finance = "FINANCE"


class SessionStatus(str, Enum):
    """Connectivity session status"""

    active = "active"
    closed = "closed"
    expired = "expired"
    pending = "pending"


class LogAction(str, Enum):
    """Action recorded on an audit log or derived for the unified feed"""

    login = "login"
    logout = "logout"
    create = "create"
    update = "update"
    delete = "delete"
    access = "access"
    system = "system"
    error = "error"
    failure = "failure"


class LoginStatus(str, Enum):
    """Outcome of a login attempt"""

    success = "SUCCESS"
    failure = "FAILURE"
    locked = "LOCKED"
    logout = "LOGOUT"


class LogLevel(str, Enum):
    """Severity of a system log"""

    debug = "DEBUG"
    info = "INFO"
    warn = "WARN"
    error = "ERROR"
    fatal = "FATAL"
