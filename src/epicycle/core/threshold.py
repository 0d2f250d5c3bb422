"""Otsu binarization with polarity correction.

Foreground is the dark side of the threshold: silhouettes are expected as
dark shapes on a light background. When the dark side covers too much of the
image the mask is inverted once, which handles light-on-dark inputs.
"""

from dataclasses import dataclass

from epicycle.config import ThresholdConfig
from epicycle.domain import BinaryMask, GrayscaleImage
from epicycle.exceptions import InvalidImageError

# Returned when the histogram has a single occupied bin
DEFAULT_THRESHOLD = 128


@dataclass(frozen=True)
class Binarization:
    """Outcome of binarizing a grayscale image.

    Attributes:
        mask: Foreground/background mask (already polarity-corrected)
        threshold: Otsu threshold; intensities <= threshold were foreground
        inverted: Whether the mask was inverted for dominating foreground
    """

    mask: BinaryMask
    threshold: int
    inverted: bool


def otsu_threshold(histogram: list[int]) -> int:
    """Select the threshold maximizing between-class variance.

    For every candidate ``t`` the background class holds intensities <= t.
    The score is ``wB * wF * (mB - mF)**2`` using pixel counts as weights,
    which has the same maximizer as the fraction-weighted form. Ties keep the
    lowest ``t``.

    Args:
        histogram: 256-bin intensity histogram

    Returns:
        Threshold in [0, 255]

    Raises:
        InvalidImageError: If the histogram is empty
    """
    total = sum(histogram)
    if total == 0:
        raise InvalidImageError("grayscale buffer is empty")

    weighted_total = sum(t * count for t, count in enumerate(histogram))

    sum_b = 0
    w_b = 0
    best_score = -1.0
    threshold = DEFAULT_THRESHOLD

    for t in range(256):
        w_b += histogram[t]
        if w_b == 0:
            continue
        w_f = total - w_b
        if w_f == 0:
            break

        sum_b += t * histogram[t]
        m_b = sum_b / w_b
        m_f = (weighted_total - sum_b) / w_f
        score = w_b * w_f * (m_b - m_f) ** 2
        if score > best_score:
            best_score = score
            threshold = t

    return threshold


def build_mask(image: GrayscaleImage, threshold: int) -> BinaryMask:
    """Mark every pixel with intensity <= threshold as foreground."""
    cells = bytearray(1 if value <= threshold else 0 for value in image.pixels)
    return BinaryMask(width=image.width, height=image.height, cells=cells)


def correct_polarity(mask: BinaryMask, max_fraction: float) -> bool:
    """Invert the mask in place when foreground exceeds ``max_fraction``.

    Args:
        mask: Mask to check
        max_fraction: Largest acceptable foreground fraction

    Returns:
        True if the mask was inverted
    """
    if mask.count_foreground() > mask.pixel_count * max_fraction:
        mask.invert()
        return True
    return False


def binarize(image: GrayscaleImage, config: ThresholdConfig) -> Binarization:
    """Threshold an image with Otsu's method and fix the mask polarity.

    Args:
        image: Working-resolution grayscale image
        config: Threshold configuration

    Returns:
        Binarization holding the mask, the threshold and the inversion flag

    Raises:
        InvalidImageError: If the image has no pixels
    """
    threshold = otsu_threshold(image.histogram())
    mask = build_mask(image, threshold)
    inverted = correct_polarity(mask, config.mask_polarity_fraction)
    return Binarization(mask=mask, threshold=threshold, inverted=inverted)
