"""
AuditLog Entity

Append-only record of a user action.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow

from .enums import LogAction


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - immutable record of a user action.

    Business Rules:
    - Immutable (never updated)
    - No foreign keys to the other log tables; correlated by timestamp only
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: str = Field(max_length=36, index=True)
    username: str = Field(default="", max_length=100)
    action: LogAction = Field(nullable=False)
    details: Optional[str] = None
    description: str = Field(default="")
    route: Optional[str] = Field(default=None, max_length=255)
    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None, max_length=500)
    log_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_log_timestamp", "timestamp"),
        Index("idx_audit_log_action", "action"),
    )
