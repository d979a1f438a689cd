"""Mint phase entity.

A phase is a time-boxed pricing/access tier within a collection's mint
event. Validation of the editable fields lives in PhaseValidator so every
problem can be reported at once; the entity only rejects counters that no
caller could have produced legitimately.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Phase:
    """Mint phase entity.

    Attributes:
        id: Unique identifier.
        collection_id: Owning collection.
        phase_name: Display name, required.
        start_time: UTC start instant, None when missing or unparseable.
        end_time: UTC end instant, optional.
        mint_price_sats: Price per mint in sats, 0 for free.
        whitelist_only: Restrict minting to the referenced whitelist.
        whitelist_id: Whitelist checked when whitelist_only is set.
        max_per_wallet: Per-wallet cap for this phase, None for no cap.
        phase_allocation: Cap on mints during this phase, None for remaining supply.
        phase_minted: Mints recorded against this phase.
        is_active: Operator flag. False pauses the phase, None or True defer to the schedule.
        is_completed: Terminal marker set manually or on sell-out.
        phase_order: Position in the collection's phase list.
    """

    id: str
    collection_id: str
    phase_name: str
    start_time: datetime | None
    end_time: datetime | None = None
    mint_price_sats: int = 0
    whitelist_only: bool = False
    whitelist_id: str | None = None
    max_per_wallet: int | None = None
    phase_allocation: int | None = None
    phase_minted: int = 0
    is_active: bool | None = None
    is_completed: bool = False
    phase_order: int = 0
    min_fee_rate: float = 1
    max_fee_rate: float = 500
    suggested_fee_rate: float = 10
    end_on_allocation: bool = True
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Phase ID is required")
        if self.phase_minted < 0:
            raise ValueError("Phase minted count cannot be negative")

    @property
    def is_paused(self) -> bool:
        """Whether an operator explicitly paused this phase."""
        return self.is_active is False
