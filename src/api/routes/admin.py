"""
Admin API Routes

Operational endpoints authenticated with the admin API key.
"""

from enum import Enum

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.retention import RetentionSweepUseCase
from src.api.utils.admin_auth import verify_admin_api_key
from src.depends import get_unit_of_work
from src.domain.base import utcnow

router = APIRouter(prefix="/admin", tags=["Admin"])


class RetentionSweep(str, Enum):
    expire_sessions = "expire-sessions"
    archive_usage_logs = "archive-usage-logs"
    cleanup_devices = "cleanup-devices"


class RetentionSweepResponse(BaseModel):
    """Outcome of a manual retention run"""

    sweep: RetentionSweep
    removed: int


@router.post(
    "/retention/{sweep}",
    status_code=status.HTTP_200_OK,
    response_model=RetentionSweepResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def run_retention_sweep(
    sweep: RetentionSweep,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Run Retention Sweep

    Runs one sweep immediately, outside its schedule.

    Raises:
        - 401 Unauthorized: Missing or invalid X-Admin-API-Key
    """
    use_case = RetentionSweepUseCase(
        uow,
        session_retention_days=ApplicationConfig.SESSION_RETENTION_DAYS,
        usage_log_retention_months=ApplicationConfig.USAGE_LOG_RETENTION_MONTHS,
        device_retention_months=ApplicationConfig.DEVICE_RETENTION_MONTHS,
    )
    now = utcnow()

    if sweep == RetentionSweep.expire_sessions:
        removed = await use_case.expire_sessions(now)
    elif sweep == RetentionSweep.archive_usage_logs:
        removed = await use_case.archive_usage_logs(now)
    else:
        removed = await use_case.cleanup_inactive_devices(now)

    return {"sweep": sweep, "removed": removed}
