"""
Usage Tracking Use Case

Records device sightings and bandwidth usage against a session.
"""

import logging
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from src.app.errors import session_not_found
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions.dtos import DeviceResponse, UsageLogResponse
from src.domain.base import utcnow
from src.domain.entities import DEFAULT_DEVICE_NAME, Device, UsageLog

logger = logging.getLogger(__name__)


class UsageTrackingUseCase:
    """
    Use case for per-session device and usage tracking.

    Business Rules:
    - The session must exist (no tenant scope at this layer)
    - Devices without a name are stored as "Unknown Device"
    - Usage entries inherit the user of their session
    - Byte counts are stored as given; validation belongs to the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def log_device(
        self,
        session_id: UUID,
        mac_address: str,
        device_name: Optional[str] = None,
        device_type: Optional[str] = None,
        ip_address: Optional[str] = None,
    ) -> DeviceResponse:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                raise session_not_found()

            device = Device(
                session_id=session.id,
                mac_address=mac_address,
                device_name=device_name or DEFAULT_DEVICE_NAME,
                device_type=device_type,
                ip_address=ip_address,
            )
            device = await self.uow.devices.create(device)
            await self.uow.commit()
            return DeviceResponse.model_validate(device)

    async def log_usage(
        self,
        session_id: UUID,
        upload_bytes: int,
        download_bytes: int,
        data_used: Decimal = Decimal("0"),
    ) -> UsageLogResponse:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                raise session_not_found()

            now = utcnow()
            usage = UsageLog(
                session_id=session.id,
                user_id=session.user_id,
                upload_bytes=upload_bytes,
                download_bytes=download_bytes,
                data_used=data_used,
                usage_start_time=now,
                timestamp=now,
            )
            usage = await self.uow.usage_logs.create(usage)
            await self.uow.commit()
            return UsageLogResponse.model_validate(usage)

    async def find_by_session_id(self, session_id: UUID) -> List[UsageLogResponse]:
        """Usage logs of a session, newest first"""
        async with self.uow:
            logs = await self.uow.usage_logs.get_by_session_id(session_id)
            return [UsageLogResponse.model_validate(log) for log in logs]
