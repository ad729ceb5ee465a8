"""
Audit API Routes

Unified audit feed over audit, login and system logs, plus append endpoints.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    AuditQuery,
    CreateAuditLogCommand,
    CreateLoginLogCommand,
    CreateSystemLogCommand,
    LogEntry,
    QueryLogsUseCase,
    RecordLogUseCase,
)
from src.depends import get_current_user, get_unit_of_work, require_roles
from src.domain.entities import LogAction, LoginStatus, LogLevel, UserRole

router = APIRouter(prefix="/audit", tags=["Audit"])

audit_readers = require_roles(UserRole.super_admin, UserRole.admin, UserRole.auditor)


@router.get(
    "/logs",
    status_code=status.HTTP_200_OK,
    response_model=List[LogEntry],
)
async def get_logs(
    current_user: dict = Depends(audit_readers),
    uow: UnitOfWork = Depends(get_unit_of_work),
    user_id: Optional[str] = Query(None),
    action: Optional[LogAction] = Query(None),
    login_status: Optional[LoginStatus] = Query(None, alias="status"),
    date_from: Optional[datetime] = Query(None, alias="from"),
    date_to: Optional[datetime] = Query(None, alias="to"),
    page: int = Query(1, ge=1),
    limit: int = Query(ApplicationConfig.AUDIT_DEFAULT_LIMIT, ge=1),
    level: Optional[LogLevel] = Query(None),
    message: Optional[str] = Query(None),
):
    """
    Get Logs

    Merged audit, login and system logs, newest first. page/limit apply to
    each source table separately unless global pagination is enabled.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Role must be SUPER_ADMIN, ADMIN or AUDITOR
    """
    query = AuditQuery(
        user_id=user_id,
        action=action,
        status=login_status,
        date_from=date_from,
        date_to=date_to,
        page=page,
        limit=limit,
        level=level,
        message=message,
    )
    use_case = QueryLogsUseCase(
        uow, global_pagination=ApplicationConfig.AUDIT_GLOBAL_PAGINATION
    )
    return await use_case.query_logs(query)


@router.get(
    "/logs/{log_id}",
    status_code=status.HTTP_200_OK,
    response_model=LogEntry,
)
async def get_log_by_id(
    log_id: UUID,
    current_user: dict = Depends(audit_readers),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Log By ID

    Raises:
        - 404 Not Found: Id absent from all three log tables
    """
    use_case = QueryLogsUseCase(uow)
    return await use_case.get_log_by_id(log_id)


@router.post(
    "/audit-logs",
    status_code=status.HTTP_201_CREATED,
    response_model=LogEntry,
)
async def create_audit_log(
    request: CreateAuditLogCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = RecordLogUseCase(uow)
    return await use_case.create_audit_log(request)


@router.post(
    "/login-logs",
    status_code=status.HTTP_201_CREATED,
    response_model=LogEntry,
)
async def create_login_log(
    request: CreateLoginLogCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = RecordLogUseCase(uow)
    return await use_case.create_login_log(request)


@router.post(
    "/system-logs",
    status_code=status.HTTP_201_CREATED,
    response_model=LogEntry,
)
async def create_system_log(
    request: CreateSystemLogCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = RecordLogUseCase(uow)
    return await use_case.create_system_log(request)
