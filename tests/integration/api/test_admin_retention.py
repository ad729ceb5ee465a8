import pytest
from datetime import timedelta
from httpx import AsyncClient

from config import ApplicationConfig
from src.domain.base import utcnow
from src.domain.entities import Session


@pytest.mark.asyncio
async def test_run_expire_sessions(client: AsyncClient, db_session, user_id):
    db_session.add(
        Session(
            ip_address="10.0.0.5",
            isp_id="isp-1",
            user_id=user_id,
            is_active=False,
            end_time=utcnow() - timedelta(days=31),
        )
    )
    await db_session.commit()

    response = await client.post(
        "/admin/retention/expire-sessions",
        headers={"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY},
    )

    assert response.status_code == 200
    assert response.json() == {"sweep": "expire-sessions", "removed": 1}


@pytest.mark.asyncio
async def test_run_cleanup_devices_with_nothing_to_do(client: AsyncClient):
    response = await client.post(
        "/admin/retention/cleanup-devices",
        headers={"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY},
    )

    assert response.status_code == 200
    assert response.json()["removed"] == 0


@pytest.mark.asyncio
async def test_retention_requires_api_key(client: AsyncClient):
    response = await client.post("/admin/retention/archive-usage-logs")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"

    response = await client.post(
        "/admin/retention/archive-usage-logs", headers={"X-Admin-API-Key": "wrong"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_unknown_sweep_rejected(client: AsyncClient):
    response = await client.post(
        "/admin/retention/everything",
        headers={"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
