"""Compressed image size estimation.

Predicts the output size range of an image re-encoded at the given
dimensions, format and quality. The estimate is advisory: it drives a
warning when files are likely to exceed the per-file inscription limit and
never blocks a launch.
"""

import math
from dataclasses import dataclass
from enum import Enum

# Bits per pixel at full quality
BASE_BITS_PER_PIXEL = {
    "webp": 1.4,
    "jpg": 1.75,
    "png": 4.5,
}

# Correction for historical underestimation: +10%, then +15%
ESTIMATE_UPLIFT = 1.1 * 1.15

# Bright/colorful images compress worse than typical ones
UPPER_BOUND_FACTOR = 1.5

MIN_ESTIMATE_KB = 10


class ImageFormat(str, Enum):
    """Output formats supported by the compressor."""

    WEBP = "webp"
    JPG = "jpg"
    PNG = "png"

    @classmethod
    def parse(cls, value: "str | ImageFormat") -> "ImageFormat":
        """Parse a format name, accepting 'jpeg' for JPG."""
        if isinstance(value, ImageFormat):
            return value
        normalized = value.strip().lower()
        if normalized == "jpeg":
            normalized = "jpg"
        return cls(normalized)

    @property
    def is_lossless(self) -> bool:
        return self == ImageFormat.PNG

    @property
    def display_name(self) -> str:
        return "JPEG" if self == ImageFormat.JPG else self.value.upper()


@dataclass(frozen=True)
class SizeEstimate:
    """Estimated compressed size range in KB."""

    low_kb: int
    high_kb: int
    format: ImageFormat

    def as_tuple(self) -> tuple[int, int]:
        return (self.low_kb, self.high_kb)

    def exceeds_limit(self, limit_kb: int) -> bool:
        """Whether bright/colorful images are likely to exceed ``limit_kb``."""
        return self.high_kb > limit_kb


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def quality_factor(quality: float) -> float:
    """Scale applied to lossy formats; low quality compresses disproportionately better."""
    return 0.4 + 0.6 * (quality / 100)


class CompressionSizeEstimator:
    """Estimates compressed file sizes."""

    @classmethod
    def estimate(
        cls,
        width: int,
        height: int,
        image_format: "str | ImageFormat",
        quality: float,
    ) -> SizeEstimate:
        """Estimate the compressed size range for one image.

        Args:
            width: Target width in pixels.
            height: Target height in pixels.
            image_format: webp, jpg (or jpeg) or png.
            quality: Encoder quality percent, 0-100. Ignored for PNG.

        Returns:
            SizeEstimate with the typical (low) and bright/colorful (high) sizes.

        Raises:
            ValueError: On non-positive dimensions, unknown format or quality out of range.
        """
        if width <= 0 or height <= 0:
            raise ValueError("Width and height must be positive")
        if not 0 <= quality <= 100:
            raise ValueError("Quality must be between 0 and 100")

        fmt = ImageFormat.parse(image_format)
        bits_per_pixel = BASE_BITS_PER_PIXEL[fmt.value]
        if not fmt.is_lossless:
            bits_per_pixel *= quality_factor(quality)

        base_kb = (width * height * bits_per_pixel) / 8 / 1024
        adjusted = base_kb * ESTIMATE_UPLIFT

        return SizeEstimate(
            low_kb=max(MIN_ESTIMATE_KB, _round_half_up(adjusted)),
            high_kb=max(MIN_ESTIMATE_KB, _round_half_up(adjusted * UPPER_BOUND_FACTOR)),
            format=fmt,
        )


def estimate_compressed_size(
    width: int, height: int, image_format: "str | ImageFormat", quality: float
) -> tuple[int, int]:
    """Return ``(low_kb, high_kb)`` for the given target encoding."""
    return CompressionSizeEstimator.estimate(width, height, image_format, quality).as_tuple()
