"""Tests for the compression estimate and time conversion routes."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from mintpad.infrastructure.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


def test_estimate(client):
    response = client.post(
        "/api/v1/compression/estimate",
        json={"width": 600, "height": 600, "format": "webp", "quality": 75},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "low_kb": 66,
        "high_kb": 99,
        "format": "webp",
        "format_name": "WEBP",
        "limit_kb": 200,
        "likely_exceeds_limit": False,
    }


def test_estimate_png_exceeds_limit(client):
    response = client.post(
        "/api/v1/compression/estimate",
        json={"width": 600, "height": 600, "format": "png"},
    )

    assert response.json()["likely_exceeds_limit"] is True


def test_estimate_unknown_format(client):
    response = client.post(
        "/api/v1/compression/estimate",
        json={"width": 600, "height": 600, "format": "gif"},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_estimate_rejects_zero_width(client):
    response = client.post("/api/v1/compression/estimate", json={"width": 0, "height": 600})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_convert_to_utc(client):
    response = client.post(
        "/api/v1/time/convert",
        json={"value": "2025-01-15T09:00", "timezone": "America/New_York", "direction": "to_utc"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["value"] == "2025-01-15T14:00:00Z"


def test_convert_to_local(client):
    response = client.post(
        "/api/v1/time/convert",
        json={"value": "2025-01-15T14:00:00Z", "timezone": "America/New_York", "direction": "to_local"},
    )

    assert response.json()["value"] == "2025-01-15T09:00"


@pytest.mark.parametrize(
    "payload",
    [
        {"value": "15/01/2025", "timezone": "UTC"},
        {"value": "2025-01-15T09:00", "timezone": "Nowhere/Land"},
        {"value": "soon", "timezone": "UTC", "direction": "to_local"},
    ],
)
def test_convert_invalid(client, payload):
    response = client.post("/api/v1/time/convert", json=payload)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
