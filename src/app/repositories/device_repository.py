from abc import ABC, abstractmethod
from datetime import datetime

from src.domain.entities import Device


class IDeviceRepository(ABC):
    """Device repository interface - application layer"""

    @abstractmethod
    async def create(self, device: Device) -> Device:
        """Create a new device sighting"""
        pass

    @abstractmethod
    async def delete_not_updated_since(self, cutoff: datetime) -> int:
        """Delete devices whose updated_at is before cutoff. Returns count."""
        pass
