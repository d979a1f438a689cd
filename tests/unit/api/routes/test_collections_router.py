"""Tests for the collection settings route."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from mintpad.infrastructure.api.app import app

URL = "/api/v1/collections/settings"
OWNER = "bc1qowner"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def collection():
    return {
        "id": "col_1",
        "owner_wallet": OWNER,
        "collection_status": "launchpad",
        "total_supply": 100,
        "collaborators": ["bc1qeditor"],
    }


def test_owner_updates_settings(client, collection):
    response = client.post(
        URL,
        json={
            "collection": collection,
            "patch": {
                "banner_image_url": "  https://cdn.example.com/banner.png ",
                "extend_last_phase": True,
                "cap_supply": 80,
            },
        },
        headers={"X-Wallet-Address": OWNER},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["banner_image_url"] == "https://cdn.example.com/banner.png"
    assert data["extend_last_phase"] is True
    assert data["cap_supply"] == 80
    assert data["total_supply"] == 100


def test_collaborator_updates_settings(client, collection):
    response = client.post(
        URL,
        json={"collection": collection, "patch": {"description": "Genesis drop"}},
        headers={"X-Wallet-Address": "bc1qeditor"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["description"] == "Genesis drop"


def test_stranger_is_forbidden(client, collection):
    response = client.post(
        URL,
        json={"collection": collection, "patch": {"description": "mine now"}},
        headers={"X-Wallet-Address": "bc1qstranger"},
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_invalid_banner_url(client, collection):
    response = client.post(
        URL,
        json={"collection": collection, "patch": {"banner_image_url": "banner.png"}},
        headers={"X-Wallet-Address": OWNER},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_cap_above_supply(client, collection):
    response = client.post(
        URL,
        json={"collection": collection, "patch": {"cap_supply": 101}},
        headers={"X-Wallet-Address": OWNER},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert "Cap supply" in response.json()["detail"]
