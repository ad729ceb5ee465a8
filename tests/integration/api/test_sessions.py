import pytest
from httpx import AsyncClient
from uuid import uuid4


async def create_session(client: AsyncClient, headers: dict, user_id) -> dict:
    response = await client.post(
        "/sessions",
        json={"user_id": str(user_id), "ip_address": "10.0.0.5", "notes": "lobby"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_session(client: AsyncClient, auth_headers, user_id):
    """New session is active, unended and owned by the caller's tenant"""
    data = await create_session(client, auth_headers("isp-1"), user_id)

    assert data["isp_id"] == "isp-1"
    assert data["user_id"] == str(user_id)
    assert data["is_active"] is True
    assert data["end_time"] is None
    assert data["status"] == "active"


@pytest.mark.asyncio
async def test_create_session_requires_token(client: AsyncClient, user_id):
    response = await client.post(
        "/sessions", json={"user_id": str(user_id), "ip_address": "10.0.0.5"}
    )

    assert response.status_code in (401, 403)


@pytest.mark.asyncio
async def test_invalid_token_rejected(client: AsyncClient):
    response = await client.get(
        "/sessions/active", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_session_stats(client: AsyncClient, auth_headers, user_id):
    """Bytes in sum upload bytes, bytes out sum download bytes"""
    headers = auth_headers("isp-1")
    session = await create_session(client, headers, user_id)

    for upload, download in [(100, 200), (50, 25)]:
        response = await client.post(
            f"/sessions/{session['id']}/usage",
            json={"upload_bytes": upload, "download_bytes": download},
            headers=headers,
        )
        assert response.status_code == 201
        assert response.json()["user_id"] == str(user_id)

    response = await client.get(f"/sessions/{session['id']}/stats", headers=headers)

    assert response.status_code == 200
    stats = response.json()
    assert stats["session_id"] == session["id"]
    assert stats["total_bytes_in"] == 150
    assert stats["total_bytes_out"] == 225
    assert stats["end_time"] is None

    usage = await client.get(f"/sessions/{session['id']}/usage", headers=headers)
    assert len(usage.json()) == 2


@pytest.mark.asyncio
async def test_log_device_defaults_name(client: AsyncClient, auth_headers, user_id):
    headers = auth_headers("isp-1")
    session = await create_session(client, headers, user_id)

    response = await client.post(
        f"/sessions/{session['id']}/devices",
        json={"mac_address": "AA:BB:CC:DD:EE:FF"},
        headers=headers,
    )

    assert response.status_code == 201
    assert response.json()["device_name"] == "Unknown Device"


@pytest.mark.asyncio
async def test_log_usage_unknown_session(client: AsyncClient, auth_headers):
    response = await client.post(
        f"/sessions/{uuid4()}/usage",
        json={"upload_bytes": 1, "download_bytes": 1},
        headers=auth_headers(),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"


@pytest.mark.asyncio
async def test_find_all_active_includes_devices_and_user(client: AsyncClient, auth_headers, user_id):
    headers = auth_headers("isp-1")
    session = await create_session(client, headers, user_id)
    await client.post(
        f"/sessions/{session['id']}/devices",
        json={"mac_address": "AA:BB:CC:DD:EE:01", "device_name": "Laptop"},
        headers=headers,
    )
    await create_session(client, auth_headers("isp-2"), user_id)

    response = await client.get("/sessions/active", headers=headers)

    assert response.status_code == 200
    sessions = response.json()
    assert [s["id"] for s in sessions] == [session["id"]]
    assert sessions[0]["devices"][0]["device_name"] == "Laptop"
    assert sessions[0]["user"]["email"] == "alice@example.com"


@pytest.mark.asyncio
async def test_super_admin_sees_every_tenant(client: AsyncClient, auth_headers, user_id):
    await create_session(client, auth_headers("isp-1"), user_id)
    await create_session(client, auth_headers("isp-2"), user_id)

    response = await client.get(
        "/sessions/active", headers=auth_headers("isp-3", "SUPER_ADMIN")
    )

    assert response.status_code == 200
    assert {s["isp_id"] for s in response.json()} == {"isp-1", "isp-2"}


@pytest.mark.asyncio
async def test_tenant_isolation_on_update(client: AsyncClient, auth_headers, user_id):
    """Another tenant gets 404, SUPER_ADMIN succeeds"""
    session = await create_session(client, auth_headers("isp-1"), user_id)

    response = await client.patch(
        f"/sessions/{session['id']}",
        json={"notes": "hijack"},
        headers=auth_headers("isp-2"),
    )
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"

    response = await client.patch(
        f"/sessions/{session['id']}",
        json={"notes": None},
        headers=auth_headers("isp-2", "SUPER_ADMIN"),
    )
    assert response.status_code == 200
    assert response.json()["notes"] is None
    assert response.json()["ip_address"] == "10.0.0.5"


@pytest.mark.asyncio
async def test_close_session_twice(client: AsyncClient, auth_headers, user_id):
    headers = auth_headers("isp-1")
    session = await create_session(client, headers, user_id)

    first = await client.post(f"/sessions/{session['id']}/close", headers=headers)
    second = await client.post(f"/sessions/{session['id']}/close", headers=headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["is_active"] is False
    assert second.json()["end_time"] >= first.json()["end_time"]

    active = await client.get("/sessions/active", headers=headers)
    assert active.json() == []


@pytest.mark.asyncio
async def test_delete_session(client: AsyncClient, auth_headers, user_id):
    headers = auth_headers("isp-1")
    session = await create_session(client, headers, user_id)
    await client.post(
        f"/sessions/{session['id']}/usage",
        json={"upload_bytes": 10, "download_bytes": 10},
        headers=headers,
    )

    response = await client.delete(f"/sessions/{session['id']}", headers=headers)
    assert response.status_code == 204

    response = await client.get(f"/sessions/{session['id']}/stats", headers=headers)
    assert response.status_code == 404

    usage = await client.get(f"/sessions/{session['id']}/usage", headers=headers)
    assert usage.json() == []


@pytest.mark.asyncio
async def test_active_by_user_and_close_all(client: AsyncClient, auth_headers, user_id):
    headers = auth_headers("isp-1")
    await create_session(client, headers, user_id)
    await create_session(client, headers, user_id)

    response = await client.get(f"/sessions/users/{user_id}/active", headers=headers)
    assert response.status_code == 200
    assert len(response.json()) == 2

    response = await client.post(f"/sessions/users/{user_id}/close-all", headers=headers)
    assert response.status_code == 200
    assert response.json()["closed_count"] == 2

    response = await client.get(f"/sessions/users/{user_id}/active", headers=headers)
    assert response.json() == []


@pytest.mark.asyncio
async def test_stats_ignore_other_sessions_usage(client: AsyncClient, auth_headers, user_id):
    headers = auth_headers("isp-1")
    session = await create_session(client, headers, user_id)
    other = await create_session(client, headers, user_id)

    for target, upload, download in [
        (session, 100, 200),
        (session, 50, 25),
        (other, 999, 999),
    ]:
        await client.post(
            f"/sessions/{target['id']}/usage",
            json={"upload_bytes": upload, "download_bytes": download},
            headers=headers,
        )

    response = await client.get(f"/sessions/{session['id']}/stats", headers=headers)

    assert response.json()["total_bytes_in"] == 150
    assert response.json()["total_bytes_out"] == 225


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field", ["ip_address", "user_id", "status", "is_active", "device_changes", "ip_changes"]
)
async def test_update_rejects_null_required_field(client: AsyncClient, auth_headers, user_id, field):
    headers = auth_headers("isp-1")
    session = await create_session(client, headers, user_id)

    response = await client.patch(
        f"/sessions/{session['id']}", json={field: None}, headers=headers
    )
    assert response.status_code == 422

    response = await client.post(
        f"/sessions/{session['id']}/usage",
        json={"upload_bytes": 1, "download_bytes": 2},
        headers=headers,
    )
    assert response.status_code == 201
    assert response.json()["user_id"] == str(user_id)


@pytest.mark.asyncio
async def test_other_tenant_cannot_close_delete_or_read_stats(client: AsyncClient, auth_headers, user_id):
    session = await create_session(client, auth_headers("isp-1"), user_id)
    foreign = auth_headers("isp-2", "ADMIN")

    close = await client.post(f"/sessions/{session['id']}/close", headers=foreign)
    assert close.status_code == 404
    assert close.json()["error"]["code"] == "SESSION_NOT_FOUND"

    stats = await client.get(f"/sessions/{session['id']}/stats", headers=foreign)
    assert stats.status_code == 404

    delete = await client.delete(f"/sessions/{session['id']}", headers=foreign)
    assert delete.status_code == 404

    active = await client.get("/sessions/active", headers=auth_headers("isp-1"))
    assert [s["id"] for s in active.json()] == [session["id"]]
    assert active.json()[0]["is_active"] is True
