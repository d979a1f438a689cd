"""Phase API routes.

Stateless endpoints: each request carries the collection, phases and
whitelists it is evaluated against.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from mintpad.core.config import get_settings
from mintpad.core.logging import get_logger
from mintpad.domain.services import MintGate, PhaseScheduler, PhaseValidator, resolve_active_phase
from mintpad.infrastructure.api.dependencies import Auth
from mintpad.infrastructure.api.schemas import (
    MintCheckRequest,
    MintCheckResponse,
    PhaseResponse,
    ResolvePhaseRequest,
    ResolvePhaseResponse,
    ValidatePhaseRequest,
    ValidatePhaseResponse,
    ValidateScheduleRequest,
    ValidateScheduleResponse,
    ValidationIssue,
    build_whitelist_store,
)

logger = get_logger(__name__)

router = APIRouter()


def _phase_response(phase) -> PhaseResponse | None:
    return PhaseResponse.model_validate(phase) if phase is not None else None


@router.post(
    "/validate",
    status_code=status.HTTP_200_OK,
    response_model=ValidatePhaseResponse,
)
async def validate_phase(request: ValidatePhaseRequest) -> ValidatePhaseResponse:
    """Validate a single phase and report every error and warning."""
    collection = request.collection.to_entity()
    phase = request.phase.to_entity(collection.id)
    whitelists = build_whitelist_store(request.whitelists)

    errors = PhaseValidator.validate(phase, collection, whitelists)
    warnings = PhaseValidator.warnings(phase, whitelists)

    logger.debug(
        "Phase validated",
        collection_id=collection.id,
        phase_id=phase.id,
        errors=len(errors),
        warnings=len(warnings),
    )

    return ValidatePhaseResponse(
        valid=not errors,
        errors=[ValidationIssue.from_domain(e) for e in errors],
        warnings=[ValidationIssue.from_domain(w) for w in warnings],
    )


@router.post(
    "/validate-schedule",
    status_code=status.HTTP_200_OK,
    response_model=ValidateScheduleResponse,
)
async def validate_schedule(request: ValidateScheduleRequest) -> ValidateScheduleResponse:
    """Validate a collection's complete phase list."""
    collection = request.collection.to_entity()
    phases = [p.to_entity(collection.id) for p in request.phases]
    whitelists = build_whitelist_store(request.whitelists)

    errors = PhaseValidator.validate_schedule(phases, collection, whitelists)

    return ValidateScheduleResponse(
        valid=not errors,
        errors={
            phase_id: [ValidationIssue.from_domain(e) for e in phase_errors]
            for phase_id, phase_errors in errors.items()
        },
    )


@router.post(
    "/resolve",
    status_code=status.HTTP_200_OK,
    response_model=ResolvePhaseResponse,
)
async def resolve_phase(request: ResolvePhaseRequest) -> ResolvePhaseResponse:
    """Resolve the phase active at ``now`` (server time when omitted)."""
    collection = request.collection.to_entity()
    phases = [p.to_entity(collection.id) for p in request.phases]
    whitelists = build_whitelist_store(request.whitelists)
    now = request.now or datetime.now(timezone.utc)

    resolution = resolve_active_phase(
        collection, phases, whitelists, now, minter_address=request.wallet_address
    )

    return ResolvePhaseResponse(
        outcome=resolution.outcome.value,
        phase=_phase_response(resolution.phase),
        remaining_allocation=resolution.remaining_allocation,
        reason=resolution.reason.value if resolution.reason else None,
        extended=resolution.extended,
        upcoming_phase=_phase_response(PhaseScheduler.upcoming_phase(phases, now)),
    )


@router.post(
    "/mint-check",
    status_code=status.HTTP_200_OK,
    response_model=MintCheckResponse,
)
async def mint_check(request: MintCheckRequest, auth: Auth) -> MintCheckResponse:
    """Decide whether the calling wallet may mint ``quantity`` right now."""
    settings = get_settings()
    collection = request.collection.to_entity()
    phases = [p.to_entity(collection.id) for p in request.phases]
    gate = MintGate(
        whitelists=build_whitelist_store(request.whitelists),
        max_per_transaction=settings.max_per_transaction,
    )

    decision = gate.evaluate(
        collection,
        phases,
        auth,
        now=request.now or datetime.now(timezone.utc),
        quantity=request.quantity,
        wallet_minted_count=request.wallet_minted_count,
    )

    if not decision.allowed:
        logger.info(
            "Mint rejected",
            collection_id=collection.id,
            wallet_address=auth.wallet_address,
            rejection=decision.rejection.value,
        )

    remaining = decision.remaining
    return MintCheckResponse(
        allowed=decision.allowed,
        rejection=decision.rejection.value if decision.rejection else None,
        message=decision.message,
        phase=_phase_response(decision.resolution.phase if decision.resolution else None),
        max_quantity=decision.max_quantity,
        remaining=remaining.remaining if remaining else None,
        minted_count=remaining.minted_count if remaining else request.wallet_minted_count,
        max_allowed=remaining.max_allowed if remaining else None,
    )
