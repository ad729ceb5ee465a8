"""
Session API Routes

Connectivity session lifecycle, device sightings and usage tracking.
Tenant and role come from the verified access token.
"""

from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.sessions import (
    ActiveSessionResponse,
    CloseAllSessionsResponse,
    CreateSessionCommand,
    DeviceResponse,
    SessionLifecycleUseCase,
    SessionResponse,
    SessionStatsResponse,
    UpdateSessionCommand,
    UsageLogResponse,
)
from src.app.use_cases.usage import UsageTrackingUseCase
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Sessions"])


class LogDeviceRequest(BaseModel):
    """Device seen on a session"""

    mac_address: str = Field(..., description="Hardware address, unique across the system")
    device_name: Optional[str] = None
    device_type: Optional[str] = None
    ip_address: Optional[str] = None


class LogUsageRequest(BaseModel):
    """Traffic observed on a session"""

    upload_bytes: int = 0
    download_bytes: int = 0
    data_used: Decimal = Decimal("0")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionResponse,
)
async def create_session(
    request: CreateSessionCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Session

    Opens an active session in the caller's tenant with start_time=now.
    """
    use_case = SessionLifecycleUseCase(uow)
    return await use_case.create_session(request, current_user["tenant_id"])


@router.get(
    "/active",
    status_code=status.HTTP_200_OK,
    response_model=List[ActiveSessionResponse],
)
async def find_all_active(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Active Sessions

    Active sessions of the caller's tenant with devices and user.
    SUPER_ADMIN sees every tenant.
    """
    use_case = SessionLifecycleUseCase(uow)
    return await use_case.find_all_active(
        current_user["tenant_id"], current_user["role"]
    )


@router.patch(
    "/{session_id}",
    status_code=status.HTTP_200_OK,
    response_model=SessionResponse,
)
async def update_session(
    session_id: UUID,
    request: UpdateSessionCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Session

    Only fields present in the body are changed.

    Raises:
        - 404 Not Found: Session not found in the caller's tenant
    """
    use_case = SessionLifecycleUseCase(uow)
    return await use_case.update_session(
        session_id, request, current_user["tenant_id"], current_user["role"]
    )


@router.post(
    "/{session_id}/close",
    status_code=status.HTTP_200_OK,
    response_model=SessionResponse,
)
async def close_session(
    session_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Close Session

    Marks the session inactive and stamps end_time. Repeatable.

    Raises:
        - 404 Not Found: Session not found in the caller's tenant
    """
    use_case = SessionLifecycleUseCase(uow)
    return await use_case.close_session(
        session_id, current_user["tenant_id"], current_user["role"]
    )


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Session

    Hard delete, removing the session's devices and usage logs too.

    Raises:
        - 404 Not Found: Session not found in the caller's tenant
    """
    use_case = SessionLifecycleUseCase(uow)
    await use_case.delete_session(
        session_id, current_user["tenant_id"], current_user["role"]
    )


@router.get(
    "/{session_id}/stats",
    status_code=status.HTTP_200_OK,
    response_model=SessionStatsResponse,
)
async def get_session_stats(
    session_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Session Statistics

    Total bytes in (upload) and out (download) over the session's usage logs.

    Raises:
        - 404 Not Found: Session not found in the caller's tenant
    """
    use_case = SessionLifecycleUseCase(uow)
    return await use_case.get_session_stats(
        session_id, current_user["tenant_id"], current_user["role"]
    )


@router.post(
    "/{session_id}/devices",
    status_code=status.HTTP_201_CREATED,
    response_model=DeviceResponse,
)
async def log_device(
    session_id: UUID,
    request: LogDeviceRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Log Device

    Raises:
        - 404 Not Found: Session not found
    """
    use_case = UsageTrackingUseCase(uow)
    return await use_case.log_device(
        session_id,
        request.mac_address,
        device_name=request.device_name,
        device_type=request.device_type,
        ip_address=request.ip_address,
    )


@router.post(
    "/{session_id}/usage",
    status_code=status.HTTP_201_CREATED,
    response_model=UsageLogResponse,
)
async def log_usage(
    session_id: UUID,
    request: LogUsageRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Log Usage

    Raises:
        - 404 Not Found: Session not found
    """
    use_case = UsageTrackingUseCase(uow)
    return await use_case.log_usage(
        session_id,
        request.upload_bytes,
        request.download_bytes,
        data_used=request.data_used,
    )


@router.get(
    "/{session_id}/usage",
    status_code=status.HTTP_200_OK,
    response_model=List[UsageLogResponse],
)
async def find_usage_by_session(
    session_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Usage logs of a session, newest first"""
    use_case = UsageTrackingUseCase(uow)
    return await use_case.find_by_session_id(session_id)


@router.get(
    "/users/{user_id}/active",
    status_code=status.HTTP_200_OK,
    response_model=List[SessionResponse],
)
async def find_active_by_user(
    user_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active sessions of one user, newest first"""
    use_case = SessionLifecycleUseCase(uow)
    return await use_case.find_active_by_user(
        user_id, current_user["tenant_id"], current_user["role"]
    )


@router.post(
    "/users/{user_id}/close-all",
    status_code=status.HTTP_200_OK,
    response_model=CloseAllSessionsResponse,
)
async def close_all_for_user(
    user_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Close All Sessions of a User

    Useful when an account is suspended or a voucher runs out.
    """
    use_case = SessionLifecycleUseCase(uow)
    return await use_case.close_all_for_user(
        user_id, current_user["tenant_id"], current_user["role"]
    )
