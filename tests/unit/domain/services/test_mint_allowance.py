"""Unit tests for mint allowance checks."""

from datetime import datetime, timedelta, timezone

import pytest

from mintpad.domain.entities import AuthContext, CollectionStatus, LaunchStatus
from mintpad.domain.services import (
    MintGate,
    MintRejection,
    calculate_remaining,
    can_increment,
    validate_mint_quantity,
)

NOW = datetime(2025, 3, 1, 13, 0, tzinfo=timezone.utc)


class TestCalculateRemaining:
    def test_unlimited_wallet(self):
        remaining = calculate_remaining(None, 7)
        assert remaining.remaining == 10
        assert remaining.max_allowed is None
        assert remaining.max_available == 10

    def test_capped_wallet(self):
        remaining = calculate_remaining(3, 1)
        assert remaining.remaining == 2
        assert remaining.max_available == 2

    def test_never_negative(self):
        assert calculate_remaining(2, 5).remaining == 0

    def test_transaction_cap(self):
        assert calculate_remaining(10, 0, max_per_transaction=4).max_available == 4


class TestValidateQuantity:
    @pytest.mark.parametrize(
        "quantity, remaining, expected",
        [
            (0, calculate_remaining(None, 0), "Quantity must be at least 1"),
            (11, calculate_remaining(None, 0), "Maximum 10 mints per transaction"),
            (1, None, "Unable to calculate remaining mints"),
            (1, calculate_remaining(2, 2), "You have no mints remaining"),
            (3, calculate_remaining(2, 1), "You can only mint 1 more NFT (max 10 per transaction)"),
            (5, calculate_remaining(3, 0), "You can only mint 3 more NFTs (max 10 per transaction)"),
            (2, calculate_remaining(3, 0), None),
        ],
    )
    def test_messages(self, quantity, remaining, expected):
        assert validate_mint_quantity(quantity, remaining) == expected


class TestCanIncrement:
    def test_room_left(self, live_collection, make_phase):
        assert can_increment(live_collection, make_phase(phase_allocation=5, phase_minted=4))

    def test_phase_full(self, live_collection, make_phase):
        assert not can_increment(live_collection, make_phase(phase_allocation=5, phase_minted=5))

    def test_collection_full(self, make_collection, make_phase):
        collection = make_collection(total_supply=10, total_minted=10)
        assert not can_increment(collection, make_phase())


class TestMintGate:
    def test_allowed(self, live_collection, make_phase, minter):
        decision = MintGate().evaluate(live_collection, [make_phase()], minter, NOW, quantity=2)
        assert decision.allowed
        assert decision.rejection is None
        assert decision.max_quantity == 10

    def test_not_live(self, make_collection, make_phase, minter):
        decision = MintGate().evaluate(make_collection(), [make_phase()], minter, NOW)
        assert decision.rejection == MintRejection.NOT_LIVE

    def test_mint_ended(self, make_collection, make_phase, minter):
        collection = make_collection(
            collection_status=CollectionStatus.LAUNCHPAD_LIVE,
            launch_status=LaunchStatus.COMPLETED,
        )
        decision = MintGate().evaluate(collection, [make_phase()], minter, NOW)
        assert decision.rejection == MintRejection.MINT_ENDED

    def test_wallet_required(self, live_collection, make_phase):
        decision = MintGate().evaluate(
            live_collection, [make_phase()], AuthContext.anonymous(), NOW
        )
        assert decision.rejection == MintRejection.WALLET_REQUIRED

    def test_no_active_phase(self, live_collection, make_phase, minter):
        decision = MintGate().evaluate(
            live_collection, [make_phase()], minter, NOW + timedelta(days=2)
        )
        assert decision.rejection == MintRejection.NO_ACTIVE_PHASE

    def test_phase_unavailable(self, live_collection, make_phase, minter):
        phase = make_phase(is_completed=True)
        decision = MintGate().evaluate(live_collection, [phase], minter, NOW)
        assert decision.rejection == MintRejection.PHASE_UNAVAILABLE
        assert "completed" in decision.message

    def test_not_whitelisted(self, live_collection, make_phase, stranger, whitelists):
        phase = make_phase(whitelist_only=True, whitelist_id="wl_1")
        decision = MintGate(whitelists).evaluate(live_collection, [phase], stranger, NOW)
        assert decision.rejection == MintRejection.NOT_WHITELISTED

    def test_whitelisted(self, live_collection, make_phase, minter, whitelists):
        phase = make_phase(whitelist_only=True, whitelist_id="wl_1", max_per_wallet=2)
        decision = MintGate(whitelists).evaluate(
            live_collection, [phase], minter, NOW, quantity=1, wallet_minted_count=1
        )
        assert decision.allowed
        assert decision.remaining.remaining == 1

    def test_wallet_limit_reached(self, live_collection, make_phase, minter):
        phase = make_phase(max_per_wallet=2)
        decision = MintGate().evaluate(
            live_collection, [phase], minter, NOW, wallet_minted_count=2
        )
        assert decision.rejection == MintRejection.QUANTITY_INVALID
        assert decision.message == "You have no mints remaining"

    def test_phase_allocation_bounds_quantity(self, live_collection, make_phase, minter):
        phase = make_phase(phase_allocation=10, phase_minted=8)
        decision = MintGate().evaluate(live_collection, [phase], minter, NOW, quantity=3)
        assert decision.rejection == MintRejection.QUANTITY_INVALID
        assert decision.message == "Only 2 left in this phase"
        assert decision.max_quantity == 2

    def test_custom_transaction_cap(self, live_collection, make_phase, minter):
        decision = MintGate(max_per_transaction=3).evaluate(
            live_collection, [make_phase()], minter, NOW, quantity=4
        )
        assert decision.message == "Maximum 3 mints per transaction"
