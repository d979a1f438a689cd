"""Pydantic schemas for collection payloads and settings patches."""

import dataclasses
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mintpad.domain.entities import Collection, CollectionStatus, LaunchStatus
from mintpad.domain.services.launch_state_machine import URL_PATTERN


class CollectionPayload(BaseModel):
    """Collection state supplied by the caller."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, description="Collection ID")
    owner_wallet: str = Field(..., min_length=1, description="Owner wallet address")
    collection_status: CollectionStatus = CollectionStatus.DRAFT
    launch_status: LaunchStatus | None = None
    total_supply: int = Field(default=0, ge=0)
    cap_supply: int | None = Field(default=None, ge=0)
    total_minted: int = Field(default=0, ge=0)
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
    collaborators: list[str] = Field(default_factory=list)
    launched_at: datetime | None = None
    mint_ended_at: datetime | None = None

    @model_validator(mode="after")
    def validate_cap_supply(self) -> "CollectionPayload":
        if self.cap_supply is not None and self.cap_supply > self.total_supply:
            raise ValueError("cap_supply cannot exceed total_supply")
        return self

    def to_entity(self) -> Collection:
        return Collection(**self.model_dump())


class CollectionResponse(CollectionPayload):
    """Collection state returned to the caller."""

    model_config = ConfigDict(extra="forbid", from_attributes=True)

    @classmethod
    def from_entity(cls, collection: Collection) -> "CollectionResponse":
        return cls.model_validate(collection)


class CollectionPatch(BaseModel):
    """Fields editable in the collection settings step.

    Only fields present in the request are applied.
    """

    model_config = ConfigDict(extra="forbid")

    description: str | None = None
    banner_image_url: str | None = None
    mobile_image_url: str | None = None
    audio_url: str | None = None
    video_url: str | None = None
    extend_last_phase: bool | None = None
    creator_royalty_wallet: str | None = None
    twitter_url: str | None = None
    discord_url: str | None = None
    telegram_url: str | None = None
    website_url: str | None = None
    cap_supply: int | None = Field(default=None, ge=0)

    @field_validator("banner_image_url", "creator_royalty_wallet", mode="before")
    @classmethod
    def strip_value(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("banner_image_url")
    @classmethod
    def validate_banner_url(cls, v: str | None) -> str | None:
        if v is not None and not URL_PATTERN.match(v):
            raise ValueError("Banner image URL must start with http:// or https://")
        return v

    def apply(self, collection: Collection) -> Collection:
        """Return ``collection`` with the patched fields set.

        An explicit ``cap_supply: null`` resets the cap to the total supply.

        Raises:
            ValueError: If the result is not a valid collection.
        """
        changes = self.model_dump(exclude_unset=True)
        if "extend_last_phase" in changes and changes["extend_last_phase"] is None:
            del changes["extend_last_phase"]
        return dataclasses.replace(collection, **changes)


class CollectionSettingsRequest(BaseModel):
    """Apply a settings patch to a collection."""

    collection: CollectionPayload
    patch: CollectionPatch
