"""
Log repositories against a real database
"""

import pytest
import pytest_asyncio
from datetime import datetime, timedelta

from src.app.use_cases.audit import AuditQuery, QueryLogsUseCase
from src.domain.entities import (
    AuditLog,
    LogAction,
    LoginLog,
    LoginStatus,
    LogLevel,
    SystemLog,
)

BASE = datetime(2024, 6, 15, 12, 0, 0)


@pytest_asyncio.fixture
async def seeded_logs(db_session):
    logs = [
        AuditLog(user_id="u-1", username="alice", action=LogAction.create,
                 description="Created session", timestamp=BASE - timedelta(days=10)),
        AuditLog(user_id="u-2", username="bob", action=LogAction.delete,
                 description="Deleted session", timestamp=BASE),
        LoginLog(user_id="u-1", username="alice", status=LoginStatus.success,
                 success=True, timestamp=BASE - timedelta(days=1)),
        LoginLog(user_id="u-1", username="alice", status=LoginStatus.failure,
                 success=False, timestamp=BASE + timedelta(days=10)),
        SystemLog(level=LogLevel.error, source="retention", message="Sweep failed",
                  timestamp=BASE - timedelta(days=2)),
    ]
    db_session.add_all(logs)
    await db_session.commit()
    return logs


@pytest.mark.asyncio
async def test_date_range_is_inclusive_on_all_tables(uow, seeded_logs):
    use_case = QueryLogsUseCase(uow)
    result = await use_case.query_logs(
        AuditQuery(date_from=BASE - timedelta(days=2), date_to=BASE)
    )

    assert [entry.timestamp for entry in result] == [
        BASE,
        BASE - timedelta(days=1),
        BASE - timedelta(days=2),
    ]


@pytest.mark.asyncio
async def test_open_ended_ranges(uow, seeded_logs):
    use_case = QueryLogsUseCase(uow)

    since = await use_case.query_logs(AuditQuery(date_from=BASE))
    assert [entry.timestamp for entry in since] == [BASE + timedelta(days=10), BASE]

    until = await use_case.query_logs(AuditQuery(date_to=BASE - timedelta(days=2)))
    assert [entry.timestamp for entry in until] == [
        BASE - timedelta(days=2),
        BASE - timedelta(days=10),
    ]


@pytest.mark.asyncio
async def test_user_filter_applies_to_audit_and_login_only(uow, seeded_logs):
    use_case = QueryLogsUseCase(uow)
    result = await use_case.query_logs(AuditQuery(user_id="u-1"))

    user_ids = [entry.user_id for entry in result]
    assert "u-2" not in user_ids
    assert user_ids.count("u-1") == 3
    assert "system" in user_ids


@pytest.mark.asyncio
async def test_status_and_level_filters(uow, seeded_logs):
    use_case = QueryLogsUseCase(uow)
    result = await use_case.query_logs(
        AuditQuery(status=LoginStatus.failure, level=LogLevel.info)
    )

    actions = [entry.action for entry in result]
    assert LogAction.failure in actions
    assert LogAction.login not in actions
    assert LogAction.system not in actions


@pytest.mark.asyncio
async def test_get_log_by_id_finds_login_log(uow, seeded_logs):
    login_id = seeded_logs[2].id

    entry = await QueryLogsUseCase(uow).get_log_by_id(login_id)

    assert entry.id == login_id
    assert entry.action == LogAction.login
    assert entry.description == "Login attempt - Success"
