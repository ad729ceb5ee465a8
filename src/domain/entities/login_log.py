"""
LoginLog Entity

Append-only record of a login attempt.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import LoginStatus


class LoginLog(SQLModel, table=True):
    """
    LoginLog entity - immutable record of a login attempt.

    Business Rules:
    - user_id/username are absent for attempts against unknown accounts
    - success drives the action shown in the unified feed
    """

    __tablename__ = "login_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[str] = Field(default=None, max_length=36, index=True)
    username: Optional[str] = Field(default=None, max_length=100)
    status: LoginStatus = Field(nullable=False)
    success: bool = Field(default=True)
    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None, max_length=500)
    failure_reason: Optional[str] = Field(default=None, max_length=255)

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_login_log_timestamp", "timestamp"),)
