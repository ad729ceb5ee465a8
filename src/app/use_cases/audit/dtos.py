"""
Audit Use Case DTOs (Data Transfer Objects)

Query filter, unified log entry and the append commands for the three
log tables.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import LogAction, LoginStatus, LogLevel


# ============================================================================
# Query DTOs
# ============================================================================


class AuditQuery(BaseModel):
    """
    Shared filter applied to all three log tables.

    Each table only honours the fields meaningful to it:
    - audit logs: user_id, action
    - login logs: user_id, status
    - system logs: level, message
    date_from/date_to and page/limit apply everywhere.
    """

    user_id: Optional[str] = None
    action: Optional[LogAction] = None
    status: Optional[LoginStatus] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    level: Optional[LogLevel] = None
    message: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class LogEntry(BaseModel):
    """Unified row of the audit feed"""

    id: UUID
    timestamp: datetime
    action: LogAction
    user_id: str
    username: str
    description: str
    route: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


# ============================================================================
# Command DTOs
# ============================================================================


class CreateAuditLogCommand(BaseModel):
    """Append a user action"""

    user_id: str
    username: str
    action: LogAction
    description: str
    details: Optional[str] = None
    route: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class CreateLoginLogCommand(BaseModel):
    """Append a login attempt; status defaults from success"""

    success: bool
    user_id: Optional[str] = None
    username: Optional[str] = None
    status: Optional[LoginStatus] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    failure_reason: Optional[str] = None


class CreateSystemLogCommand(BaseModel):
    """Append a system event"""

    source: str
    message: str
    level: LogLevel = LogLevel.info
    meta: Optional[Dict[str, Any]] = None
