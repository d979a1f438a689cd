"""Wall-clock/UTC conversion routes for the phase form."""

from fastapi import APIRouter, HTTPException, status

from mintpad.domain.services import local_to_utc, parse_utc, to_utc_iso, utc_to_local
from mintpad.domain.services.time_conversion import get_zone
from mintpad.infrastructure.api.schemas import TimeConvertRequest, TimeConvertResponse

router = APIRouter()


@router.post(
    "/convert",
    status_code=status.HTTP_200_OK,
    response_model=TimeConvertResponse,
)
async def convert(request: TimeConvertRequest) -> TimeConvertResponse:
    """Convert between ``YYYY-MM-DDTHH:MM`` in a zone and a UTC instant."""
    try:
        get_zone(request.timezone)
        if request.direction == "to_utc":
            instant = local_to_utc(request.value, request.timezone)
            if instant is None:
                raise ValueError("A date and time is required")
            value = to_utc_iso(instant)
        else:
            if parse_utc(request.value) is None:
                raise ValueError("Value is not an ISO 8601 instant")
            value = utc_to_local(request.value, request.timezone)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return TimeConvertResponse(
        value=value, timezone=request.timezone, direction=request.direction
    )
