"""Pydantic schemas for phase, whitelist and mint-check endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mintpad.domain.entities import Phase, Whitelist
from mintpad.domain.services import (
    InMemoryWhitelistStore,
    PhaseValidationError,
    PhaseValidationWarning,
    local_to_utc,
    parse_utc,
)
from mintpad.domain.services.time_conversion import get_zone
from mintpad.infrastructure.api.schemas.collection_schemas import CollectionPayload


class PhaseDraft(BaseModel):
    """Phase as submitted by the phase form or an API client.

    Times are ISO 8601 instants, or ``YYYY-MM-DDTHH:MM`` wall-clock values
    when ``timezone`` is given. Unparseable times are passed on as missing so
    that validation reports them field by field.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    phase_name: str = ""
    start_time: str | None = None
    end_time: str | None = None
    timezone: str | None = Field(
        default=None, description="IANA zone of wall-clock start/end values"
    )
    mint_price_sats: int = 0
    whitelist_only: bool = False
    whitelist_id: str | None = None
    max_per_wallet: int | None = None
    phase_allocation: int | None = None
    phase_minted: int = Field(default=0, ge=0)
    is_active: bool | None = None
    is_completed: bool = False
    phase_order: int = 0
    min_fee_rate: float = 1
    max_fee_rate: float = 500
    suggested_fee_rate: float = 10
    end_on_allocation: bool = True
    description: str | None = None

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        if v is not None:
            get_zone(v)
        return v

    def _parse_time(self, value: str | None) -> datetime | None:
        if self.timezone is None:
            return parse_utc(value)
        try:
            return local_to_utc(value, self.timezone)
        except ValueError:
            return None

    def to_entity(self, collection_id: str) -> Phase:
        return Phase(
            id=self.id,
            collection_id=collection_id,
            phase_name=self.phase_name,
            start_time=self._parse_time(self.start_time),
            end_time=self._parse_time(self.end_time),
            mint_price_sats=self.mint_price_sats,
            whitelist_only=self.whitelist_only,
            whitelist_id=self.whitelist_id,
            max_per_wallet=self.max_per_wallet,
            phase_allocation=self.phase_allocation,
            phase_minted=self.phase_minted,
            is_active=self.is_active,
            is_completed=self.is_completed,
            phase_order=self.phase_order,
            min_fee_rate=self.min_fee_rate,
            max_fee_rate=self.max_fee_rate,
            suggested_fee_rate=self.suggested_fee_rate,
            end_on_allocation=self.end_on_allocation,
            description=self.description,
        )


class PhaseResponse(BaseModel):
    """Phase as returned to the caller."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    collection_id: str
    phase_name: str
    start_time: datetime | None
    end_time: datetime | None
    mint_price_sats: int
    whitelist_only: bool
    whitelist_id: str | None
    max_per_wallet: int | None
    phase_allocation: int | None
    phase_minted: int
    is_active: bool | None
    is_completed: bool
    phase_order: int


class WhitelistPayload(BaseModel):
    """Whitelist supplied by the caller."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    collection_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str | None = None
    entries: list[str] = Field(default_factory=list)

    def to_entity(self) -> Whitelist:
        return Whitelist(**self.model_dump())


def build_whitelist_store(whitelists: list[WhitelistPayload]) -> InMemoryWhitelistStore:
    return InMemoryWhitelistStore(w.to_entity() for w in whitelists)


class ValidationIssue(BaseModel):
    """Validation error or warning detail."""

    field: str
    message: str
    code: str

    @classmethod
    def from_domain(
        cls, issue: PhaseValidationError | PhaseValidationWarning
    ) -> "ValidationIssue":
        return cls(field=issue.field, message=issue.message, code=issue.code.value)


class ValidatePhaseRequest(BaseModel):
    collection: CollectionPayload
    phase: PhaseDraft
    whitelists: list[WhitelistPayload] = Field(default_factory=list)


class ValidatePhaseResponse(BaseModel):
    valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)


class ValidateScheduleRequest(BaseModel):
    collection: CollectionPayload
    phases: list[PhaseDraft] = Field(default_factory=list)
    whitelists: list[WhitelistPayload] = Field(default_factory=list)


class ValidateScheduleResponse(BaseModel):
    valid: bool
    errors: dict[str, list[ValidationIssue]] = Field(default_factory=dict)


class ResolvePhaseRequest(BaseModel):
    collection: CollectionPayload
    phases: list[PhaseDraft] = Field(default_factory=list)
    whitelists: list[WhitelistPayload] = Field(default_factory=list)
    now: datetime | None = Field(default=None, description="Evaluation instant, defaults to server time")
    wallet_address: str | None = None


class ResolvePhaseResponse(BaseModel):
    outcome: str
    phase: PhaseResponse | None = None
    remaining_allocation: int = 0
    reason: str | None = None
    extended: bool = False
    upcoming_phase: PhaseResponse | None = None


class MintCheckRequest(BaseModel):
    collection: CollectionPayload
    phases: list[PhaseDraft] = Field(default_factory=list)
    whitelists: list[WhitelistPayload] = Field(default_factory=list)
    now: datetime | None = None
    quantity: int = 1
    wallet_minted_count: int = Field(default=0, ge=0)


class MintCheckResponse(BaseModel):
    allowed: bool
    rejection: str | None = None
    message: str | None = None
    phase: PhaseResponse | None = None
    max_quantity: int = 0
    remaining: int | None = None
    minted_count: int = 0
    max_allowed: int | None = None
