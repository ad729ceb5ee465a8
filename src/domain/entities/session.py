"""
Session Entity

One client's connectivity period on a hotspot.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utcnow

from .enums import SessionStatus

if TYPE_CHECKING:
    from .device import Device
    from .user import User


class Session(SQLModel, table=True):
    """
    Session entity - a connectivity period of one client.

    Business Rules:
    - is_active=True implies end_time is unset
    - Closing a session sets is_active=False and stamps end_time
    - is_active is tracked independently of status
    - isp_id scopes every read/write except for SUPER_ADMIN callers
    - Closed sessions are hard-deleted once ended 30+ days ago
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    ip_address: str = Field(max_length=45)
    isp_id: str = Field(max_length=64, index=True)
    user_agent: Optional[str] = Field(default=None, max_length=500)

    status: SessionStatus = Field(default=SessionStatus.active)
    is_active: bool = Field(default=True)
    notes: Optional[str] = None

    user_id: UUID = Field(
        foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True
    )

    device_changes: int = Field(default=0)
    ip_changes: int = Field(default=0)

    # Timestamps
    start_time: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    end_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    user: Optional["User"] = Relationship(back_populates="sessions")
    devices: list["Device"] = Relationship(
        back_populates="session", sa_relationship_kwargs={"passive_deletes": True}
    )

    __table_args__ = (
        Index("idx_session_isp_active", "isp_id", "is_active"),
        Index("idx_session_user_active", "user_id", "is_active"),
        Index("idx_session_end_time", "end_time"),
    )
