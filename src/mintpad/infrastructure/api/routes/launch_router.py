"""Launch status API routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from mintpad.core.logging import get_logger
from mintpad.domain.services import GuardFailureCode, LaunchStateMachine, PhaseStatusSweeper
from mintpad.infrastructure.api.dependencies import AuthenticatedWallet
from mintpad.infrastructure.api.schemas import (
    CollectionResponse,
    GuardFailureResponse,
    PhaseResponse,
    SweepRequest,
    SweepResponse,
    TransitionRecordResponse,
    TransitionRequest,
    TransitionResponse,
)

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/transition",
    status_code=status.HTTP_200_OK,
    response_model=TransitionResponse,
    responses={
        403: {"model": GuardFailureResponse},
        409: {"model": GuardFailureResponse},
    },
)
async def transition(request: TransitionRequest, auth: AuthenticatedWallet):
    """Move a collection between launch states.

    Refused transitions return 403 when the caller may not manage the
    collection and 409 when a guard precondition fails.
    """
    collection = request.collection.to_entity()
    phases = [p.to_entity(collection.id) for p in request.phases]

    result = LaunchStateMachine.transition(
        collection, request.target_status, auth, phases
    )

    if not result.ok:
        failure = result.failure
        status_code = (
            status.HTTP_403_FORBIDDEN
            if failure.code == GuardFailureCode.NOT_AUTHORIZED
            else status.HTTP_409_CONFLICT
        )
        return JSONResponse(
            status_code=status_code,
            content=GuardFailureResponse(
                code=failure.code.value, message=failure.message
            ).model_dump(),
        )

    record = result.record
    return TransitionResponse(
        collection=CollectionResponse.from_entity(result.collection),
        record=TransitionRecordResponse(
            from_state=record.from_state,
            to_state=record.to_state,
            wallet_address=record.wallet_address,
            at=record.at,
        ),
    )


@router.post(
    "/sweep",
    status_code=status.HTTP_200_OK,
    response_model=SweepResponse,
)
async def sweep(request: SweepRequest) -> SweepResponse:
    """Close the phases of a sold-out collection."""
    collection = request.collection.to_entity()
    phases = [p.to_entity(collection.id) for p in request.phases]

    result = PhaseStatusSweeper.sweep(
        collection, phases, request.now or datetime.now(timezone.utc)
    )

    return SweepResponse(
        collection=CollectionResponse.from_entity(result.collection),
        phases=[PhaseResponse.model_validate(p) for p in result.phases],
        closed_phase_ids=result.closed_phase_ids,
        collection_completed=result.collection_completed,
    )
