"""
SystemLog Entity

Append-only record of a system event.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, SQLModel

from src.domain.base import utcnow

from .enums import LogLevel


class SystemLog(SQLModel, table=True):
    """SystemLog entity - immutable record of an event raised by a module or job."""

    __tablename__ = "system_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    level: LogLevel = Field(default=LogLevel.info)
    source: str = Field(max_length=255)  # module or service name
    message: str
    meta: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    timestamp: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_system_log_timestamp", "timestamp"),
        Index("idx_system_log_level", "level"),
    )
