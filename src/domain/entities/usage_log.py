"""
UsageLog Entity

One bandwidth-usage observation for a session.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class UsageLog(SQLModel, table=True):
    """
    UsageLog entity - bandwidth observation tied to a user and a session.

    Business Rules:
    - upload_bytes/download_bytes default to 0
    - usage_start_time defaults to creation time
    - Archived (hard-deleted) once usage_end_time is 6+ months old;
      rows without usage_end_time are never archived
    """

    __tablename__ = "usage_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(
        foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True
    )
    session_id: UUID = Field(
        foreign_key="sessions.id", ondelete="CASCADE", nullable=False, index=True
    )

    data_used: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    upload_bytes: int = Field(default=0, sa_column=Column(BigInteger, nullable=False))
    download_bytes: int = Field(default=0, sa_column=Column(BigInteger, nullable=False))

    # Timestamps
    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    usage_start_time: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime)
    )
    usage_end_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_usage_log_end_time", "usage_end_time"),)
