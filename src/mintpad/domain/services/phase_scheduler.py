"""Mint phase scheduling.

Resolves which phase a minter is evaluated against at a given instant.
Resolution is computed on demand from the phase list and the current time;
nothing here mutates phases or collections.

Resolution order:
1. Phases that have started and are not paused by an operator.
2. Of those, phases whose window is still open, plus the chronologically
   last phase when the collection extends its last phase.
3. On overlap, the most recently started phase wins (higher phase_order on
   equal start times).
4. The chosen phase is usable only if it is not completed and has
   allocation left.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from mintpad.core.logging import get_logger
from mintpad.domain.entities.collection import Collection
from mintpad.domain.entities.phase import Phase
from mintpad.domain.services.time_conversion import ensure_utc
from mintpad.domain.services.whitelist_store import WhitelistStore

logger = get_logger(__name__)

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class ResolutionOutcome(str, Enum):
    """Outcome of resolving the active phase."""

    RESOLVED = "resolved"
    NO_ACTIVE_PHASE = "no_active_phase"
    PHASE_UNAVAILABLE = "phase_unavailable"
    NOT_WHITELISTED = "not_whitelisted"


class UnavailableReason(str, Enum):
    """Why a selected phase cannot take mints."""

    COMPLETED = "completed"
    ALLOCATION_EXHAUSTED = "allocation_exhausted"


@dataclass(frozen=True)
class PhaseResolution:
    """Result of phase resolution.

    Attributes:
        outcome: What the resolution found.
        phase: The selected phase, None when no phase is active.
        remaining_allocation: Mints left in the selected phase.
        reason: Set when outcome is PHASE_UNAVAILABLE.
        extended: Whether the phase is open only because the last phase is extended.
    """

    outcome: ResolutionOutcome
    phase: Phase | None = None
    remaining_allocation: int = 0
    reason: UnavailableReason | None = None
    extended: bool = False

    @property
    def is_usable(self) -> bool:
        return self.outcome == ResolutionOutcome.RESOLVED


def _sort_key(phase: Phase) -> tuple[datetime, int]:
    start = ensure_utc(phase.start_time) if phase.start_time else _EARLIEST
    return (start, phase.phase_order)


def order_phases(phases: Iterable[Phase]) -> list[Phase]:
    """Order phases chronologically; phases without a start time come first."""
    return sorted(phases, key=_sort_key)


def last_phase(phases: Iterable[Phase]) -> Phase | None:
    """Return the chronologically last phase that has a start time."""
    scheduled = [p for p in phases if p.start_time is not None]
    if not scheduled:
        return None
    return max(scheduled, key=_sort_key)


def is_last_phase(phase: Phase, phases: Iterable[Phase]) -> bool:
    last = last_phase(phases)
    return last is not None and last.id == phase.id


def next_phase_order(phases: Iterable[Phase]) -> int:
    """Position to assign to a newly created phase."""
    orders = [p.phase_order for p in phases]
    return max(orders) + 1 if orders else 0


def remaining_allocation(phase: Phase, collection: Collection) -> int:
    """Mints still available in ``phase``.

    Without an explicit allocation the phase can take whatever is left of the
    collection's cap at this moment.
    """
    supply_left = collection.remaining_supply
    if phase.phase_allocation is None:
        return supply_left
    return min(max(0, phase.phase_allocation - phase.phase_minted), supply_left)


class PhaseScheduler:
    """Resolves the active phase of a collection at a point in time."""

    @classmethod
    def candidates(
        cls,
        collection: Collection,
        phases: list[Phase],
        now: datetime,
    ) -> list[tuple[Phase, bool]]:
        """Return eligible phases paired with whether they are open by extension."""
        now = ensure_utc(now)
        last = last_phase(phases)
        result = []

        for phase in phases:
            if phase.start_time is None or phase.is_paused:
                continue
            if ensure_utc(phase.start_time) > now:
                continue

            if phase.end_time is not None and now < ensure_utc(phase.end_time):
                result.append((phase, False))
            elif collection.extend_last_phase and last is not None and phase.id == last.id:
                result.append((phase, True))

        return result

    @classmethod
    def resolve(
        cls,
        collection: Collection,
        phases: list[Phase],
        now: datetime,
    ) -> PhaseResolution:
        """Resolve the phase a minter should be evaluated against.

        Args:
            collection: The collection being minted.
            phases: All phases of the collection.
            now: The instant to evaluate at.

        Returns:
            PhaseResolution describing the selected phase, if any.
        """
        candidates = cls.candidates(collection, phases, now)
        if not candidates:
            logger.debug("No active phase", collection_id=collection.id, phases=len(phases))
            return PhaseResolution(outcome=ResolutionOutcome.NO_ACTIVE_PHASE)

        phase, extended = max(candidates, key=lambda item: _sort_key(item[0]))

        if phase.is_completed:
            return PhaseResolution(
                outcome=ResolutionOutcome.PHASE_UNAVAILABLE,
                phase=phase,
                reason=UnavailableReason.COMPLETED,
                extended=extended,
            )

        remaining = remaining_allocation(phase, collection)
        if remaining <= 0:
            return PhaseResolution(
                outcome=ResolutionOutcome.PHASE_UNAVAILABLE,
                phase=phase,
                reason=UnavailableReason.ALLOCATION_EXHAUSTED,
                extended=extended,
            )

        return PhaseResolution(
            outcome=ResolutionOutcome.RESOLVED,
            phase=phase,
            remaining_allocation=remaining,
            extended=extended,
        )

    @classmethod
    def upcoming_phase(cls, phases: list[Phase], now: datetime) -> Phase | None:
        """Return the next phase that has not started yet."""
        now = ensure_utc(now)
        pending = [
            p
            for p in phases
            if p.start_time is not None
            and ensure_utc(p.start_time) > now
            and not p.is_completed
            and not p.is_paused
        ]
        return min(pending, key=_sort_key) if pending else None


def resolve_active_phase(
    collection: Collection,
    phases: list[Phase],
    whitelists: WhitelistStore | None,
    now: datetime,
    minter_address: str | None = None,
) -> PhaseResolution:
    """Resolve the active phase and, for a known minter, whitelist membership.

    When the resolved phase is whitelist-only and ``minter_address`` is given,
    a minter missing from the whitelist (or a phase with no whitelist at all)
    yields NOT_WHITELISTED.
    """
    resolution = PhaseScheduler.resolve(collection, phases, now)
    phase = resolution.phase

    if not resolution.is_usable or phase is None or not phase.whitelist_only:
        return resolution
    if minter_address is None:
        return resolution

    eligible = (
        phase.whitelist_id is not None
        and whitelists is not None
        and whitelists.is_eligible(phase.whitelist_id, minter_address)
    )
    if eligible:
        return resolution

    logger.info(
        "Minter not whitelisted",
        collection_id=collection.id,
        phase_id=phase.id,
        wallet_address=minter_address,
    )
    return PhaseResolution(
        outcome=ResolutionOutcome.NOT_WHITELISTED,
        phase=phase,
        remaining_allocation=resolution.remaining_allocation,
        extended=resolution.extended,
    )
