"""Collection entity for launchpad mint events.

A collection carries two status fields: the coarse ``collection_status``
controls visibility and workflow, the fine-grained ``launch_status`` tracks
the mint event itself once the collection is on the launchpad.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class CollectionStatus(str, Enum):
    """Coarse visibility/workflow state of a collection."""

    DRAFT = "draft"
    LAUNCHPAD = "launchpad"
    LAUNCHPAD_LIVE = "launchpad_live"
    SELF_INSCRIBE = "self_inscribe"
    MARKETPLACE = "marketplace"


class LaunchStatus(str, Enum):
    """Mint-event state, meaningful once the collection is on the launchpad."""

    DRAFT = "draft"
    UPCOMING = "upcoming"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class Collection:
    """Collection entity as seen by the launch core.

    Attributes:
        id: Unique identifier.
        owner_wallet: Wallet address of the collection owner.
        collection_status: Visibility/workflow state.
        launch_status: Mint-event state, None until first set.
        total_supply: Number of tokens in the collection.
        cap_supply: Ceiling on total mints, defaults to total_supply.
        total_minted: Tokens minted so far across all phases.
        extend_last_phase: Keep the last phase open past its end time.
        banner_image_url: Banner shown on the launchpad page.
        creator_royalty_wallet: Wallet receiving mint payments.
        collaborators: Wallets with editor rights on the collection.
        launched_at: First time the collection went live.
        mint_ended_at: Time the mint was ended, manually or on sell-out.
    """

    id: str
    owner_wallet: str
    collection_status: CollectionStatus = CollectionStatus.DRAFT
    launch_status: LaunchStatus | None = None
    total_supply: int = 0
    cap_supply: int | None = None
    total_minted: int = 0
    extend_last_phase: bool = False
    banner_image_url: str | None = None
    creator_royalty_wallet: str | None = None
    mobile_image_url: str | None = None
    audio_url: str | None = None
    video_url: str | None = None
    description: str | None = None
    twitter_url: str | None = None
    discord_url: str | None = None
    telegram_url: str | None = None
    website_url: str | None = None
    collaborators: list[str] = field(default_factory=list)
    launched_at: datetime | None = None
    mint_ended_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate collection data after initialization."""
        if not self.id:
            raise ValueError("Collection ID is required")
        self.collection_status = CollectionStatus(self.collection_status)
        if self.launch_status is not None:
            self.launch_status = LaunchStatus(self.launch_status)
        if self.total_supply < 0:
            raise ValueError("Total supply cannot be negative")
        if self.total_minted < 0:
            raise ValueError("Total minted cannot be negative")
        if self.cap_supply is None:
            self.cap_supply = self.total_supply
        if self.cap_supply < 0:
            raise ValueError("Cap supply cannot be negative")
        if self.cap_supply > self.total_supply:
            raise ValueError("Cap supply cannot exceed total supply")

    @property
    def remaining_supply(self) -> int:
        """Mints left before the cap is reached."""
        return max(0, self.cap_supply - self.total_minted)

    @property
    def is_sold_out(self) -> bool:
        return self.total_minted >= self.cap_supply

    @property
    def has_launched(self) -> bool:
        """Whether the collection has ever gone live."""
        return self.launch_status not in (None, LaunchStatus.DRAFT)

    @property
    def is_on_launchpad(self) -> bool:
        return self.collection_status in (
            CollectionStatus.LAUNCHPAD,
            CollectionStatus.LAUNCHPAD_LIVE,
        )
