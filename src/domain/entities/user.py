"""
User Entity

Subscriber or operator account that owns connectivity sessions.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from src.domain.base import utcnow

from .enums import UserRole

if TYPE_CHECKING:
    from .session import Session


class User(SQLModel, table=True):
    """
    User entity - minimal account record referenced by sessions and usage logs.

    Business Rules:
    - Email must be unique across all users
    - Deleting a user deletes its sessions and usage logs
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    role: UserRole = Field(default=UserRole.client)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Relationships
    sessions: list["Session"] = Relationship(back_populates="user")
