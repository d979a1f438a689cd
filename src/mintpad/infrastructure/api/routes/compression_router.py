"""Image compression estimate routes."""

from fastapi import APIRouter, HTTPException, status

from mintpad.core.config import get_settings
from mintpad.domain.services import CompressionSizeEstimator
from mintpad.infrastructure.api.schemas import (
    CompressionEstimateRequest,
    CompressionEstimateResponse,
)

router = APIRouter()


@router.post(
    "/estimate",
    status_code=status.HTTP_200_OK,
    response_model=CompressionEstimateResponse,
)
async def estimate(request: CompressionEstimateRequest) -> CompressionEstimateResponse:
    """Estimate the compressed size of an image before inscribing it."""
    settings = get_settings()
    try:
        result = CompressionSizeEstimator.estimate(
            request.width, request.height, request.format, request.quality
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return CompressionEstimateResponse(
        low_kb=result.low_kb,
        high_kb=result.high_kb,
        format=result.format,
        format_name=result.format.display_name,
        limit_kb=settings.inscription_size_limit_kb,
        likely_exceeds_limit=result.exceeds_limit(settings.inscription_size_limit_kb),
    )
