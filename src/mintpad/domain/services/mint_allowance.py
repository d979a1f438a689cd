"""Mint-time allowance checks.

Combines the collection's live state, the scheduler's resolution, whitelist
membership and per-wallet limits into a single accept/reject decision for a
mint request. Minted counts are supplied by the caller; the increment itself
happens in the external mint processor, which must keep
``phase_minted < phase_allocation`` and ``total_minted < cap_supply`` true
before each increment (see ``can_increment``).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from mintpad.core.logging import get_logger
from mintpad.domain.entities.auth_context import AuthContext
from mintpad.domain.entities.collection import Collection, CollectionStatus, LaunchStatus
from mintpad.domain.entities.phase import Phase
from mintpad.domain.services.phase_scheduler import (
    PhaseResolution,
    ResolutionOutcome,
    resolve_active_phase,
)
from mintpad.domain.services.whitelist_store import WhitelistStore

logger = get_logger(__name__)

DEFAULT_MAX_PER_TRANSACTION = 10


@dataclass(frozen=True)
class RemainingMints:
    """Per-wallet mint budget in a phase.

    Attributes:
        remaining: Mints the wallet may still make, capped per transaction when unlimited.
        minted_count: Mints the wallet already made in the phase.
        max_allowed: The phase's per-wallet cap, None for no cap.
        max_available: Mints allowed in the next transaction.
    """

    remaining: int
    minted_count: int
    max_allowed: int | None
    max_available: int


def calculate_remaining(
    max_per_wallet: int | None,
    minted_count: int,
    max_per_transaction: int = DEFAULT_MAX_PER_TRANSACTION,
) -> RemainingMints:
    """Compute a wallet's remaining mints in a phase.

    Whitelists only decide eligibility; the limit always comes from the
    phase's ``max_per_wallet``.
    """
    if max_per_wallet is None:
        return RemainingMints(
            remaining=max_per_transaction,
            minted_count=minted_count,
            max_allowed=None,
            max_available=max_per_transaction,
        )

    remaining = max(0, max_per_wallet - minted_count)
    return RemainingMints(
        remaining=remaining,
        minted_count=minted_count,
        max_allowed=max_per_wallet,
        max_available=min(max_per_transaction, remaining),
    )


def validate_mint_quantity(
    quantity: int,
    remaining: RemainingMints | None,
    max_per_transaction: int = DEFAULT_MAX_PER_TRANSACTION,
) -> str | None:
    """Validate a requested mint quantity. Returns an error message or None."""
    if quantity < 1:
        return "Quantity must be at least 1"
    if quantity > max_per_transaction:
        return f"Maximum {max_per_transaction} mints per transaction"
    if remaining is None:
        return "Unable to calculate remaining mints"
    if remaining.max_available == 0:
        return "You have no mints remaining"
    if quantity > remaining.max_available:
        plural = "" if remaining.max_available == 1 else "s"
        return (
            f"You can only mint {remaining.max_available} more NFT{plural} "
            f"(max {max_per_transaction} per transaction)"
        )
    return None


def can_increment(collection: Collection, phase: Phase) -> bool:
    """Condition the external processor must hold before recording one mint."""
    if collection.total_minted >= collection.cap_supply:
        return False
    if phase.phase_allocation is not None and phase.phase_minted >= phase.phase_allocation:
        return False
    return True


class MintRejection(str, Enum):
    """Expected negative outcomes of a mint request."""

    NOT_LIVE = "not_live"
    MINT_ENDED = "mint_ended"
    NO_ACTIVE_PHASE = "no_active_phase"
    PHASE_UNAVAILABLE = "phase_unavailable"
    NOT_WHITELISTED = "not_whitelisted"
    WALLET_REQUIRED = "wallet_required"
    QUANTITY_INVALID = "quantity_invalid"


@dataclass(frozen=True)
class MintDecision:
    """Accept/reject decision for a mint request."""

    allowed: bool
    resolution: PhaseResolution | None = None
    remaining: RemainingMints | None = None
    max_quantity: int = 0
    rejection: MintRejection | None = None
    message: str | None = None


class MintGate:
    """Decides whether a wallet may mint a quantity right now."""

    def __init__(
        self,
        whitelists: WhitelistStore | None = None,
        max_per_transaction: int = DEFAULT_MAX_PER_TRANSACTION,
    ) -> None:
        self.whitelists = whitelists
        self.max_per_transaction = max_per_transaction

    def evaluate(
        self,
        collection: Collection,
        phases: list[Phase],
        auth: AuthContext,
        now: datetime,
        quantity: int = 1,
        wallet_minted_count: int = 0,
    ) -> MintDecision:
        """Evaluate a mint request.

        Args:
            collection: Collection being minted.
            phases: All phases of the collection.
            auth: The minter.
            now: Instant of the request.
            quantity: Number of items requested.
            wallet_minted_count: Mints the wallet already made in the resolved phase.

        Returns:
            MintDecision; rejected decisions carry a reason and message.
        """
        if collection.collection_status != CollectionStatus.LAUNCHPAD_LIVE:
            return self._reject(MintRejection.NOT_LIVE, "Collection is not live")
        if collection.launch_status == LaunchStatus.COMPLETED:
            return self._reject(MintRejection.MINT_ENDED, "Mint has ended")
        if not auth.is_authenticated:
            return self._reject(MintRejection.WALLET_REQUIRED, "Connect a wallet to mint")

        resolution = resolve_active_phase(
            collection, phases, self.whitelists, now, minter_address=auth.wallet_address
        )

        if resolution.outcome == ResolutionOutcome.NO_ACTIVE_PHASE:
            return self._reject(
                MintRejection.NO_ACTIVE_PHASE, "No mint phase is active", resolution
            )
        if resolution.outcome == ResolutionOutcome.PHASE_UNAVAILABLE:
            return self._reject(
                MintRejection.PHASE_UNAVAILABLE,
                f"Phase is not accepting mints ({resolution.reason.value})",
                resolution,
            )
        if resolution.outcome == ResolutionOutcome.NOT_WHITELISTED:
            return self._reject(
                MintRejection.NOT_WHITELISTED,
                "Wallet is not on the whitelist for this phase",
                resolution,
            )

        phase = resolution.phase
        remaining = calculate_remaining(
            phase.max_per_wallet, wallet_minted_count, self.max_per_transaction
        )
        max_quantity = min(remaining.max_available, resolution.remaining_allocation)

        error = validate_mint_quantity(quantity, remaining, self.max_per_transaction)
        if error is None and quantity > resolution.remaining_allocation:
            error = f"Only {resolution.remaining_allocation} left in this phase"
        if error is not None:
            return self._reject(
                MintRejection.QUANTITY_INVALID, error, resolution, remaining, max_quantity
            )

        logger.debug(
            "Mint allowed",
            collection_id=collection.id,
            phase_id=phase.id,
            wallet_address=auth.wallet_address,
            quantity=quantity,
        )
        return MintDecision(
            allowed=True,
            resolution=resolution,
            remaining=remaining,
            max_quantity=max_quantity,
        )

    @staticmethod
    def _reject(
        rejection: MintRejection,
        message: str,
        resolution: PhaseResolution | None = None,
        remaining: RemainingMints | None = None,
        max_quantity: int = 0,
    ) -> MintDecision:
        return MintDecision(
            allowed=False,
            resolution=resolution,
            remaining=remaining,
            max_quantity=max_quantity,
            rejection=rejection,
            message=message,
        )
