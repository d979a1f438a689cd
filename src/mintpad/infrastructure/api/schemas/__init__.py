"""API Schemas for request/response validation."""

from mintpad.infrastructure.api.schemas.collection_schemas import (
    CollectionPatch,
    CollectionPayload,
    CollectionResponse,
    CollectionSettingsRequest,
)
from mintpad.infrastructure.api.schemas.launch_schemas import (
    GuardFailureResponse,
    SweepRequest,
    SweepResponse,
    TransitionRecordResponse,
    TransitionRequest,
    TransitionResponse,
)
from mintpad.infrastructure.api.schemas.phase_schemas import (
    MintCheckRequest,
    MintCheckResponse,
    PhaseDraft,
    PhaseResponse,
    ResolvePhaseRequest,
    ResolvePhaseResponse,
    ValidatePhaseRequest,
    ValidatePhaseResponse,
    ValidateScheduleRequest,
    ValidateScheduleResponse,
    ValidationIssue,
    WhitelistPayload,
    build_whitelist_store,
)
from mintpad.infrastructure.api.schemas.tool_schemas import (
    CompressionEstimateRequest,
    CompressionEstimateResponse,
    TimeConvertRequest,
    TimeConvertResponse,
)

__all__ = [
    "CollectionPatch",
    "CollectionPayload",
    "CollectionResponse",
    "CollectionSettingsRequest",
    "CompressionEstimateRequest",
    "CompressionEstimateResponse",
    "GuardFailureResponse",
    "MintCheckRequest",
    "MintCheckResponse",
    "PhaseDraft",
    "PhaseResponse",
    "ResolvePhaseRequest",
    "ResolvePhaseResponse",
    "SweepRequest",
    "SweepResponse",
    "TimeConvertRequest",
    "TimeConvertResponse",
    "TransitionRecordResponse",
    "TransitionRequest",
    "TransitionResponse",
    "ValidatePhaseRequest",
    "ValidatePhaseResponse",
    "ValidateScheduleRequest",
    "ValidateScheduleResponse",
    "ValidationIssue",
    "WhitelistPayload",
    "build_whitelist_store",
]
