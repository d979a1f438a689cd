"""Tests for health and root endpoints."""

import pytest
from fastapi.testclient import TestClient

from mintpad.infrastructure.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "Mintpad"


def test_live(client):
    assert client.get("/live").json()["status"] == "alive"


def test_api_root(client):
    assert client.get("/api/v1").json()["name"] == "Mintpad"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "cid_test123"})

    assert response.headers["X-Correlation-ID"] == "cid_test123"


def test_correlation_id_is_generated(client):
    response = client.get("/health")

    assert response.headers["X-Correlation-ID"].startswith("cid_")


@pytest.mark.asyncio
async def test_estimate_over_async_client():
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post(
            "/api/v1/compression/estimate",
            json={"width": 600, "height": 600, "format": "png"},
        )

    assert response.status_code == 200
    assert response.json()["low_kb"] == 250
