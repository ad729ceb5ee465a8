"""
Device Entity

A device observed on a session.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from src.domain.base import utcnow

if TYPE_CHECKING:
    from .session import Session

DEFAULT_DEVICE_NAME = "Unknown Device"


class Device(SQLModel, table=True):
    """
    Device entity - one observed device association within a session.

    Business Rules:
    - mac_address is unique across the whole system
    - device_name falls back to "Unknown Device"
    - Deleted together with its session
    - Pruned once unmodified for 6+ months
    """

    __tablename__ = "devices"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    mac_address: str = Field(unique=True, max_length=17)
    device_name: str = Field(default=DEFAULT_DEVICE_NAME, max_length=255)
    device_type: Optional[str] = Field(default=None, max_length=100)
    ip_address: Optional[str] = Field(default=None, max_length=45)

    session_id: UUID = Field(
        foreign_key="sessions.id", ondelete="CASCADE", nullable=False, index=True
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    session: Optional["Session"] = Relationship(back_populates="devices")

    __table_args__ = (Index("idx_device_updated_at", "updated_at"),)
