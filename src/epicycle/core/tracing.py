"""Moore-neighbor boundary tracing.

The walk is an explicit state machine over (current pixel, backtrack pixel).
At each step the 8-neighborhood of the current pixel is scanned clockwise,
starting one position past the backtrack pixel; the walk moves to the first
pixel carrying the target label, and the neighbor scanned just before it
becomes the new backtrack.

Image coordinates have y growing downwards, so "clockwise" below is
clockwise as seen on screen.
"""

from epicycle.config import TraceConfig
from epicycle.domain import ClosedPolyline, LabelField, Point
from epicycle.exceptions import BoundaryTooShortError, BoundaryTraceFailedError

# Moore neighborhood in clockwise order, starting from the west neighbor
NEIGHBORS: tuple[tuple[int, int], ...] = (
    (-1, 0),  # W
    (-1, -1),  # NW
    (0, -1),  # N
    (1, -1),  # NE
    (1, 0),  # E
    (1, 1),  # SE
    (0, 1),  # S
    (-1, 1),  # SW
)

_DIRECTION_INDEX: dict[tuple[int, int], int] = {
    offset: i for i, offset in enumerate(NEIGHBORS)
}


def is_boundary_pixel(field: LabelField, x: int, y: int, label: int) -> bool:
    """Check whether (x, y) belongs to ``label`` and touches anything else.

    A pixel touches "anything else" when one of its 8 neighbors carries a
    different label or lies outside the field.

    Args:
        field: Label field
        x: Column
        y: Row
        label: Target component id

    Returns:
        True if the pixel is on the component's boundary
    """
    if not field.has_label(x, y, label):
        return False
    return any(not field.has_label(x + dx, y + dy, label) for dx, dy in NEIGHBORS)


def find_start_pixel(field: LabelField, label: int) -> tuple[int, int] | None:
    """Return the first boundary pixel in row-major order, or None."""
    for y in range(field.height):
        for x in range(field.width):
            if is_boundary_pixel(field, x, y, label):
                return (x, y)
    return None


def trace_boundary(field: LabelField, label: int, config: TraceConfig) -> ClosedPolyline:
    """Trace the outer boundary of a labeled component.

    Every visited pixel is emitted as its center (x + 0.5, y + 0.5), repeats
    included. The walk closes when it re-enters the start pixel after at
    least ``min_closure_points`` points; otherwise it stops when the step
    budget runs out or the start pixel has no labeled neighbor.

    Args:
        field: Label field from component labeling
        label: Component to trace
        config: Tracing limits

    Returns:
        ClosedPolyline of pixel centers in walk order

    Raises:
        BoundaryTraceFailedError: If the component has no boundary pixel
        BoundaryTooShortError: If fewer than ``min_boundary_points`` were traced
    """
    start = find_start_pixel(field, label)
    if start is None:
        raise BoundaryTraceFailedError(
            "No boundary found. Try a clearer silhouette image."
        )

    sx, sy = start
    cx, cy = sx, sy
    # Row-major scan guarantees the west neighbor is not part of the component
    bx, by = sx - 1, sy
    points = [Point(sx + 0.5, sy + 0.5)]
    closed = False

    for _ in range(config.step_budget(field.width, field.height)):
        first = (_DIRECTION_INDEX[(bx - cx, by - cy)] + 1) % 8

        step = None
        for k in range(8):
            i = (first + k) % 8
            dx, dy = NEIGHBORS[i]
            if field.has_label(cx + dx, cy + dy, label):
                step = i
                break

        if step is None:
            break

        back_dx, back_dy = NEIGHBORS[(step + 7) % 8]
        bx, by = cx + back_dx, cy + back_dy
        cx, cy = cx + NEIGHBORS[step][0], cy + NEIGHBORS[step][1]
        points.append(Point(cx + 0.5, cy + 0.5))

        if (cx, cy) == (sx, sy) and len(points) >= config.min_closure_points:
            closed = True
            break

    if len(points) < config.min_boundary_points:
        raise BoundaryTooShortError(len(points), config.min_boundary_points)

    return ClosedPolyline(points=tuple(points), walk_closed=closed)
