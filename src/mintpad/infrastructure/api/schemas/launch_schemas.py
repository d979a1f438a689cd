"""Pydantic schemas for launch transitions and the sold-out sweep."""

from datetime import datetime

from pydantic import BaseModel, Field

from mintpad.domain.services import LaunchState
from mintpad.infrastructure.api.schemas.collection_schemas import (
    CollectionPayload,
    CollectionResponse,
)
from mintpad.infrastructure.api.schemas.phase_schemas import PhaseDraft, PhaseResponse


class TransitionRequest(BaseModel):
    collection: CollectionPayload
    target_status: LaunchState
    phases: list[PhaseDraft] = Field(default_factory=list)


class TransitionRecordResponse(BaseModel):
    from_state: LaunchState
    to_state: LaunchState
    wallet_address: str | None
    at: datetime


class TransitionResponse(BaseModel):
    success: bool = True
    collection: CollectionResponse
    record: TransitionRecordResponse


class GuardFailureResponse(BaseModel):
    error: str = "Transition refused"
    code: str
    message: str


class SweepRequest(BaseModel):
    collection: CollectionPayload
    phases: list[PhaseDraft] = Field(default_factory=list)
    now: datetime | None = None


class SweepResponse(BaseModel):
    collection: CollectionResponse
    phases: list[PhaseResponse]
    closed_phase_ids: list[str]
    collection_completed: bool
