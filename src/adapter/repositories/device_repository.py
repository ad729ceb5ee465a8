from datetime import datetime

from sqlmodel import delete
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.device_repository import IDeviceRepository
from src.domain.entities import Device


class DeviceRepository(IDeviceRepository):
    """Device repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, device: Device) -> Device:
        """Create a new device sighting"""
        self.session.add(device)
        await self.session.flush()
        await self.session.refresh(device)
        return device

    async def delete_not_updated_since(self, cutoff: datetime) -> int:
        """Delete devices not modified since cutoff"""
        stmt = delete(Device).where(Device.updated_at < cutoff)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
