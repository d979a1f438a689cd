"""Pydantic schemas for the compression estimate and time conversion endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from mintpad.domain.services import ImageFormat


class CompressionEstimateRequest(BaseModel):
    width: int = Field(..., gt=0, description="Target width in pixels")
    height: int = Field(..., gt=0, description="Target height in pixels")
    format: str = Field(default="webp", description="webp, jpg/jpeg or png")
    quality: float = Field(default=80, ge=0, le=100)


class CompressionEstimateResponse(BaseModel):
    low_kb: int
    high_kb: int
    format: ImageFormat
    format_name: str
    limit_kb: int
    likely_exceeds_limit: bool


class TimeConvertRequest(BaseModel):
    value: str = Field(..., description="ISO instant (to_local) or YYYY-MM-DDTHH:MM (to_utc)")
    timezone: str = Field(..., description="IANA zone name")
    direction: Literal["to_utc", "to_local"] = "to_utc"


class TimeConvertResponse(BaseModel):
    value: str
    timezone: str
    direction: Literal["to_utc", "to_local"]
