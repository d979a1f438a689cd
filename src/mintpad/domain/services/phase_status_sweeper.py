"""Periodic phase status sweep.

Intended to be run by an external scheduler every few minutes. When a
launched collection has sold out its cap, every phase still scheduled to
run is closed at ``now`` and, when any phase was closed, the mint event
is marked completed. The sweep is a pure function of its inputs;
persisting the returned entities is the caller's job.
"""

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime

from mintpad.core.logging import get_logger
from mintpad.domain.entities.collection import Collection, LaunchStatus
from mintpad.domain.entities.phase import Phase
from mintpad.domain.services.time_conversion import ensure_utc

logger = get_logger(__name__)


@dataclass(frozen=True)
class SweepResult:
    """Entities after a sweep and what changed."""

    collection: Collection
    phases: list[Phase] = field(default_factory=list)
    closed_phase_ids: list[str] = field(default_factory=list)
    collection_completed: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.closed_phase_ids) or self.collection_completed


class PhaseStatusSweeper:
    """Closes the mint of sold-out collections."""

    @classmethod
    def sweep(cls, collection: Collection, phases: list[Phase], now: datetime) -> SweepResult:
        """Close open phases and complete the launch of a sold-out collection.

        Collections that were never launched or are not sold out are returned
        unchanged.
        """
        now = ensure_utc(now)
        if collection.launched_at is None or not collection.is_on_launchpad:
            return SweepResult(collection=collection, phases=list(phases))
        if not collection.is_sold_out:
            return SweepResult(collection=collection, phases=list(phases))

        closed: list[str] = []
        updated_phases: list[Phase] = []
        for phase in phases:
            still_scheduled = (
                phase.end_time is not None
                and ensure_utc(phase.end_time) > now
                and not phase.is_completed
            )
            if still_scheduled:
                phase = dataclasses.replace(
                    phase, end_time=now, is_active=False, is_completed=True
                )
                closed.append(phase.id)
            updated_phases.append(phase)

        completed = bool(closed) and collection.launch_status != LaunchStatus.COMPLETED
        if completed:
            collection = dataclasses.replace(
                collection,
                launch_status=LaunchStatus.COMPLETED,
                mint_ended_at=collection.mint_ended_at or now,
            )

        if closed or completed:
            logger.info(
                "Sold-out collection closed",
                collection_id=collection.id,
                closed_phases=len(closed),
                collection_completed=completed,
            )

        return SweepResult(
            collection=collection,
            phases=updated_phases,
            closed_phase_ids=closed,
            collection_completed=completed,
        )
