import pytest
from httpx import AsyncClient
from uuid import uuid4


@pytest.mark.asyncio
async def test_record_and_read_unified_feed(client: AsyncClient, auth_headers):
    headers = auth_headers("isp-1", "AUDITOR")

    response = await client.post(
        "/audit/audit-logs",
        json={
            "user_id": "u-1",
            "username": "alice",
            "action": "update",
            "description": "Updated session",
            "route": "/sessions/1",
        },
        headers=headers,
    )
    assert response.status_code == 201

    response = await client.post(
        "/audit/login-logs",
        json={"success": False, "username": "mallory"},
        headers=headers,
    )
    assert response.status_code == 201
    assert response.json()["action"] == "failure"

    response = await client.post(
        "/audit/system-logs",
        json={"source": "retention", "message": "Sweep finished"},
        headers=headers,
    )
    assert response.status_code == 201

    response = await client.get("/audit/logs", headers=headers)

    assert response.status_code == 200
    entries = response.json()
    assert {entry["action"] for entry in entries} == {"update", "failure", "system"}
    timestamps = [entry["timestamp"] for entry in entries]
    assert timestamps == sorted(timestamps, reverse=True)


@pytest.mark.asyncio
async def test_get_log_by_id(client: AsyncClient, auth_headers):
    headers = auth_headers("isp-1", "ADMIN")
    created = await client.post(
        "/audit/login-logs",
        json={"success": True, "user_id": "u-1", "username": "alice"},
        headers=headers,
    )

    response = await client.get(f"/audit/logs/{created.json()['id']}", headers=headers)

    assert response.status_code == 200
    assert response.json()["action"] == "login"
    assert response.json()["description"] == "Login attempt - Success"


@pytest.mark.asyncio
async def test_get_log_by_id_not_found(client: AsyncClient, auth_headers):
    response = await client.get(f"/audit/logs/{uuid4()}", headers=auth_headers(role="SUPER_ADMIN"))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "LOG_NOT_FOUND"


@pytest.mark.asyncio
async def test_feed_requires_audit_role(client: AsyncClient, auth_headers):
    response = await client.get("/audit/logs", headers=auth_headers(role="CLIENT"))

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_feed_date_range_params(client: AsyncClient, auth_headers):
    headers = auth_headers(role="ADMIN")
    await client.post(
        "/audit/system-logs",
        json={"source": "retention", "message": "Sweep finished"},
        headers=headers,
    )

    past = await client.get(
        "/audit/logs",
        params={"from": "2000-01-01T00:00:00", "to": "2000-12-31T00:00:00"},
        headers=headers,
    )
    assert past.status_code == 200
    assert past.json() == []

    since = await client.get(
        "/audit/logs", params={"from": "2000-01-01T00:00:00"}, headers=headers
    )
    assert len(since.json()) == 1


@pytest.mark.asyncio
async def test_feed_rejects_invalid_page(client: AsyncClient, auth_headers):
    response = await client.get(
        "/audit/logs", params={"page": 0}, headers=auth_headers(role="ADMIN")
    )

    assert response.status_code == 422
