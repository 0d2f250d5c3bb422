"""Uniform arc-length resampling of closed polylines."""

from bisect import bisect_left
from collections.abc import Sequence

from epicycle.domain import ClosedPolyline, Point
from epicycle.exceptions import ResampleDegenerateError

CLOSURE_EPSILON = 1e-6
MIN_SEGMENT = 1e-9


def cumulative_lengths(points: Sequence[Point]) -> list[float]:
    """Arc length from the first point to each vertex.

    Args:
        points: Polyline vertices

    Returns:
        List with ``lengths[0] == 0`` and ``lengths[-1]`` the total length
    """
    lengths = [0.0] * len(points)
    for i in range(1, len(points)):
        lengths[i] = lengths[i - 1] + points[i - 1].distance_to(points[i])
    return lengths


def resample_closed(
    polyline: ClosedPolyline | Sequence[Point],
    count: int,
    epsilon: float = CLOSURE_EPSILON,
) -> tuple[Point, ...]:
    """Resample a closed polyline to ``count`` points evenly spaced by arc length.

    The first point is appended as the closing vertex unless the last point
    already coincides with it. Target arc lengths are ``k / count * total``
    for k in [0, count), so the closing point itself is never emitted.

    Args:
        polyline: Closed boundary (implicitly or explicitly closed)
        count: Number of output points
        epsilon: Distance under which first and last points coincide

    Returns:
        Tuple of ``count`` points

    Raises:
        ResampleDegenerateError: If the polyline has zero total length
    """
    if not isinstance(polyline, ClosedPolyline):
        polyline = ClosedPolyline(points=tuple(polyline))
    if not polyline.points:
        raise ResampleDegenerateError(0)

    pts = list(polyline.points)
    if not polyline.is_explicitly_closed(epsilon):
        pts.append(pts[0])

    lengths = cumulative_lengths(pts)
    total = lengths[-1]
    if total <= 0.0:
        raise ResampleDegenerateError(len(pts))

    last = len(pts) - 1
    out: list[Point] = []
    for k in range(count):
        target = (k / count) * total
        i = bisect_left(lengths, target, 1, last)
        segment = max(MIN_SEGMENT, lengths[i] - lengths[i - 1])
        t = (target - lengths[i - 1]) / segment
        out.append(pts[i - 1].lerp(pts[i], t))

    return tuple(out)
