"""
Session Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the session and usage domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from src.domain.entities import SessionStatus, UserRole


# ============================================================================
# Command DTOs
# ============================================================================


class CreateSessionCommand(BaseModel):
    """Command for opening a connectivity session"""

    user_id: UUID
    ip_address: str
    user_agent: Optional[str] = None
    status: SessionStatus = SessionStatus.active
    notes: Optional[str] = None


class UpdateSessionCommand(BaseModel):
    """Partial update - only fields explicitly set are applied.

    user_agent, notes and end_time may be cleared with null; the other
    fields map to NOT NULL columns and reject it.
    """

    user_id: Optional[UUID] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    status: Optional[SessionStatus] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None
    end_time: Optional[datetime] = None
    device_changes: Optional[int] = None
    ip_changes: Optional[int] = None

    @field_validator(
        "user_id", "ip_address", "status", "is_active", "device_changes", "ip_changes"
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


# ============================================================================
# Response DTOs
# ============================================================================


class SessionResponse(BaseModel):
    """Session as returned by lifecycle operations"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    ip_address: str
    isp_id: str
    user_agent: Optional[str] = None
    status: SessionStatus
    start_time: datetime
    end_time: Optional[datetime] = None
    notes: Optional[str] = None
    is_active: bool
    user_id: UUID
    device_changes: int
    ip_changes: int
    created_at: datetime
    updated_at: datetime


class DeviceResponse(BaseModel):
    """Device sighting on a session"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    mac_address: str
    device_name: str
    device_type: Optional[str] = None
    ip_address: Optional[str] = None
    session_id: UUID
    created_at: datetime
    updated_at: datetime


class UserSummary(BaseModel):
    """Owner of a session"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    role: UserRole


class ActiveSessionResponse(SessionResponse):
    """Active session with its devices and owner"""

    devices: List[DeviceResponse] = []
    user: Optional[UserSummary] = None


class SessionStatsResponse(BaseModel):
    """Aggregate traffic of one session"""

    session_id: UUID
    user_id: UUID
    total_bytes_in: int
    total_bytes_out: int
    start_time: datetime
    end_time: Optional[datetime]


class UsageLogResponse(BaseModel):
    """Usage observation"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    session_id: UUID
    timestamp: datetime
    data_used: Decimal
    upload_bytes: int
    download_bytes: int
    usage_start_time: datetime
    usage_end_time: Optional[datetime] = None
    created_at: datetime


class CloseAllSessionsResponse(BaseModel):
    """Response for closing every active session of a user"""

    user_id: UUID
    closed_count: int
