"""Downsampling and luma conversion of source images.

The source image is flattened onto an opaque background, resized with a box
filter to the working width and reduced to one intensity channel using the
Rec. 601 luma weights.
"""

import math

from PIL import Image

from epicycle.config import RasterConfig
from epicycle.domain import GrayscaleImage
from epicycle.exceptions import InvalidImageError

LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def luma(r: int, g: int, b: int) -> int:
    """Convert an RGB triple to an intensity in [0, 255].

    Args:
        r: Red channel
        g: Green channel
        b: Blue channel

    Returns:
        Rounded weighted sum ``0.299*R + 0.587*G + 0.114*B``
    """
    return min(255, max(0, round_half_up(LUMA_R * r + LUMA_G * g + LUMA_B * b)))


def working_size(width: int, height: int, config: RasterConfig) -> tuple[int, int]:
    """Compute the working resolution for a source size.

    The scale factor ``downscale_w / width`` is applied to both axes so the
    aspect ratio is preserved; neither axis drops below ``min_dimension``.

    Args:
        width: Source width in pixels
        height: Source height in pixels
        config: Raster configuration

    Returns:
        (width, height) at working resolution

    Raises:
        InvalidImageError: If either source dimension is zero
    """
    if width <= 0 or height <= 0:
        raise InvalidImageError(f"image has zero size ({width}x{height})")

    scale = config.downscale_w / width
    w = max(config.min_dimension, round_half_up(width * scale))
    h = max(config.min_dimension, round_half_up(height * scale))
    return w, h


def flatten(image: Image.Image, background: tuple[int, int, int]) -> Image.Image:
    """Composite an image onto an opaque background and return it as RGB.

    Raises:
        InvalidImageError: If Pillow cannot convert the image mode to RGB
    """
    try:
        if image.mode in ("RGBA", "LA", "PA") or (
            image.mode == "P" and "transparency" in image.info
        ):
            rgba = image.convert("RGBA")
            base = Image.new("RGBA", rgba.size, (*background, 255))
            return Image.alpha_composite(base, rgba).convert("RGB")
        return image.convert("RGB")
    except ValueError as e:
        raise InvalidImageError(f"unsupported image mode {image.mode!r}: {e}") from e


def to_grayscale(image: Image.Image, config: RasterConfig) -> GrayscaleImage:
    """Downsample an image to working width and convert it to intensities.

    Args:
        image: Decoded source image in any Pillow mode
        config: Raster configuration

    Returns:
        GrayscaleImage at working resolution

    Raises:
        InvalidImageError: If the image has zero size or an unsupported mode
    """
    w, h = working_size(image.width, image.height, config)
    rgb = flatten(image, config.background)
    resized = rgb.resize((w, h), Image.Resampling.BOX)

    data = resized.tobytes()
    pixels = bytes(luma(data[i], data[i + 1], data[i + 2]) for i in range(0, len(data), 3))
    return GrayscaleImage(width=w, height=h, pixels=pixels)
