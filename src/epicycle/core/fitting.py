"""Fit a reconstructed curve into an output canvas."""

from epicycle.domain import BoundingBox, FitTransform, ReconstructedCurve

MIN_EXTENT = 1e-9


def fit_scale(bounds: BoundingBox, width: int, height: int, margin: float) -> float:
    """Largest uniform scale that fits the box, padded by ``margin``, in the canvas.

    Box extents are clamped to a tiny positive value so flat curves do not
    divide by zero.

    Args:
        bounds: Curve bounding box
        width: Output width in pixels
        height: Output height in pixels
        margin: Padding fraction (0.02 leaves 2% of the box as slack)

    Returns:
        Scale factor from curve units to pixels
    """
    dx = max(MIN_EXTENT, bounds.width)
    dy = max(MIN_EXTENT, bounds.height)
    padding = 1.0 + max(0.0, margin)
    return min(width / (dx * padding), height / (dy * padding))


def fit_to_canvas(
    curve: ReconstructedCurve,
    width: int,
    height: int,
    margin: float,
    center_y: float = 0.0,
) -> FitTransform:
    """Build the transform that centers and scales a curve onto a canvas.

    Args:
        curve: Reconstructed curve
        width: Output width in pixels
        height: Output height in pixels
        margin: Padding fraction
        center_y: Vertical pixel shift applied after scaling

    Returns:
        FitTransform for the curve
    """
    bounds = curve.bounding_box()
    return FitTransform(
        bounds=bounds,
        scale=fit_scale(bounds, width, height, margin),
        width=width,
        height=height,
        center_y=center_y,
    )
