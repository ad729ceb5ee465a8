from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from uuid import UUID

from src.domain.entities import UsageLog


class IUsageLogRepository(ABC):
    """UsageLog repository interface - application layer"""

    @abstractmethod
    async def create(self, usage_log: UsageLog) -> UsageLog:
        """Create a new usage entry"""
        pass

    @abstractmethod
    async def get_by_session_id(self, session_id: UUID) -> List[UsageLog]:
        """Get usage logs of a session ordered by created_at DESC"""
        pass

    @abstractmethod
    async def delete_ended_before(self, cutoff: datetime) -> int:
        """Delete usage logs whose usage_end_time is before cutoff. Returns count."""
        pass
