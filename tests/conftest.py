"""Pytest configuration for all tests."""

from datetime import datetime, timedelta, timezone

import pytest

from mintpad.core.config import get_settings
from mintpad.domain.entities import (
    AuthContext,
    Collection,
    CollectionStatus,
    LaunchStatus,
    Phase,
    Whitelist,
)
from mintpad.domain.services import InMemoryWhitelistStore

T0 = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
OWNER = "bc1qowner000000000000000000000000000000000"
MINTER = "bc1qminter00000000000000000000000000000000"
STRANGER = "bc1qstranger000000000000000000000000000000"


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Settings are cached per process; tests that patch the environment need a fresh load."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def t0() -> datetime:
    return T0


@pytest.fixture
def make_collection():
    """Factory for collections with launch-ready defaults."""

    def _make(**overrides) -> Collection:
        data = {
            "id": "col_1",
            "owner_wallet": OWNER,
            "collection_status": CollectionStatus.LAUNCHPAD,
            "launch_status": LaunchStatus.DRAFT,
            "total_supply": 100,
            "banner_image_url": "https://cdn.example.com/banner.webp",
            "creator_royalty_wallet": OWNER,
        }
        data.update(overrides)
        return Collection(**data)

    return _make


@pytest.fixture
def make_phase():
    """Factory for valid phases starting at T0 and lasting one day."""

    def _make(**overrides) -> Phase:
        data = {
            "id": "ph_1",
            "collection_id": "col_1",
            "phase_name": "Public",
            "start_time": T0,
            "end_time": T0 + timedelta(days=1),
        }
        data.update(overrides)
        return Phase(**data)

    return _make


@pytest.fixture
def live_collection(make_collection):
    return make_collection(
        collection_status=CollectionStatus.LAUNCHPAD_LIVE,
        launch_status=LaunchStatus.ACTIVE,
        launched_at=T0,
    )


@pytest.fixture
def whitelists() -> InMemoryWhitelistStore:
    return InMemoryWhitelistStore(
        [
            Whitelist(id="wl_1", collection_id="col_1", name="OG", entries=[MINTER]),
            Whitelist(id="wl_empty", collection_id="col_1", name="Empty"),
            Whitelist(id="wl_other", collection_id="col_2", name="Other", entries=[MINTER]),
        ]
    )


@pytest.fixture
def owner() -> AuthContext:
    return AuthContext(wallet_address=OWNER)


@pytest.fixture
def minter() -> AuthContext:
    return AuthContext(wallet_address=MINTER)


@pytest.fixture
def stranger() -> AuthContext:
    return AuthContext(wallet_address=STRANGER)
