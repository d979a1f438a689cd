"""Tests for the launch routes."""

import json

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from mintpad.infrastructure.api.app import app

PREFIX = "/api/v1/launch"
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
        "launch_status": "draft",
        "total_supply": 100,
        "banner_image_url": "https://cdn.example.com/banner.png",
        "creator_royalty_wallet": OWNER,
    }


@pytest.fixture
def phase():
    return {
        "id": "ph_1",
        "phase_name": "Public",
        "start_time": "2025-03-01T12:00:00Z",
        "end_time": "2025-03-02T12:00:00Z",
    }


def test_transition_requires_wallet(client, collection):
    response = client.post(
        f"{PREFIX}/transition", json={"collection": collection, "target_status": "draft"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_launch_without_phase_conflicts(client, collection):
    response = client.post(
        f"{PREFIX}/transition",
        json={"collection": collection, "target_status": "launchpad_live"},
        headers={"X-Wallet-Address": OWNER},
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json() == {
        "error": "Transition refused",
        "code": "phase_required",
        "message": "Collection must have at least one mint phase before launching",
    }


def test_launch_succeeds(client, collection, phase):
    response = client.post(
        f"{PREFIX}/transition",
        json={"collection": collection, "target_status": "launchpad_live", "phases": [phase]},
        headers={"X-Wallet-Address": OWNER},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["success"] is True
    assert data["collection"]["collection_status"] == "launchpad_live"
    assert data["collection"]["launch_status"] == "active"
    assert data["collection"]["launched_at"] is not None
    assert data["record"]["from_state"] == "launchpad"
    assert data["record"]["to_state"] == "launchpad_live"
    assert data["record"]["wallet_address"] == OWNER


def test_stranger_is_forbidden(client, collection):
    response = client.post(
        f"{PREFIX}/transition",
        json={"collection": collection, "target_status": "draft"},
        headers={"X-Wallet-Address": "bc1qstranger"},
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["code"] == "not_authorized"


def test_admin_wallet_from_settings(client, collection, monkeypatch):
    monkeypatch.setenv("MINTPAD_ADMIN_WALLETS", json.dumps(["bc1qadmin"]))

    response = client.post(
        f"{PREFIX}/transition",
        json={"collection": collection, "target_status": "draft"},
        headers={"X-Wallet-Address": "bc1qadmin"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["collection"]["collection_status"] == "draft"


def test_revert_after_launch_conflicts(client, collection):
    collection["launch_status"] = "active"

    response = client.post(
        f"{PREFIX}/transition",
        json={"collection": collection, "target_status": "draft"},
        headers={"X-Wallet-Address": OWNER},
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["code"] == "already_launched"


def test_unknown_target_status(client, collection):
    response = client.post(
        f"{PREFIX}/transition",
        json={"collection": collection, "target_status": "marketplace"},
        headers={"X-Wallet-Address": OWNER},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_sweep_sold_out(client, collection, phase):
    collection.update(
        {
            "collection_status": "launchpad_live",
            "launch_status": "active",
            "launched_at": "2025-03-01T12:00:00Z",
            "total_minted": 100,
        }
    )

    response = client.post(
        f"{PREFIX}/sweep",
        json={"collection": collection, "phases": [phase], "now": "2025-03-01T18:00:00Z"},
    )

    data = response.json()
    assert response.status_code == status.HTTP_200_OK
    assert data["closed_phase_ids"] == ["ph_1"]
    assert data["collection_completed"] is True
    assert data["collection"]["launch_status"] == "completed"
    assert data["phases"][0]["is_completed"] is True
