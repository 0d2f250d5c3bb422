"""Unit tests for Moore-neighbor boundary tracing.

Tests cover:
- Start pixel selection
- Clockwise walk order and closure on squares
- Thin features walked on both sides
- Open walks and short boundaries
"""

import pytest

from epicycle.config import TraceConfig
from epicycle.core.labeling import label_components
from epicycle.core.tracing import find_start_pixel, is_boundary_pixel, trace_boundary
from epicycle.domain import BinaryMask, LabelField, Point
from epicycle.exceptions import BoundaryTooShortError, BoundaryTraceFailedError


def square_field(size: int, x0: int, y0: int, side: int) -> LabelField:
    """Label field of a size x size image containing one filled square."""
    cells = bytearray(size * size)
    for y in range(y0, y0 + side):
        for x in range(x0, x0 + side):
            cells[y * size + x] = 1
    mask = BinaryMask(width=size, height=size, cells=cells)
    return label_components(mask).field


def on_square_edge(p: Point, x0: int, y0: int, side: int) -> bool:
    """Check whether a pixel center lies on the edge ring of a square."""
    x, y = int(p.x - 0.5), int(p.y - 0.5)
    inside = x0 <= x < x0 + side and y0 <= y < y0 + side
    edge = x in (x0, x0 + side - 1) or y in (y0, y0 + side - 1)
    return inside and edge


class TestBoundaryPixels:
    """Tests for boundary pixel detection."""

    def test_interior_and_edge(self):
        field = square_field(50, 10, 10, 30)
        assert is_boundary_pixel(field, 10, 15, 0)
        assert is_boundary_pixel(field, 39, 39, 0)
        assert not is_boundary_pixel(field, 20, 20, 0)
        assert not is_boundary_pixel(field, 5, 5, 0)

    def test_image_edge_counts_as_outside(self):
        field = square_field(40, 0, 0, 40)
        assert is_boundary_pixel(field, 0, 20, 0)
        assert not is_boundary_pixel(field, 20, 20, 0)

    def test_start_pixel_is_top_left(self):
        field = square_field(50, 10, 10, 30)
        assert find_start_pixel(field, 0) == (10, 10)
        assert find_start_pixel(field, 3) is None


class TestTraceSquare:
    """Tests for tracing filled squares."""

    def test_closed_walk_around_square(self):
        field = square_field(50, 10, 10, 30)
        boundary = trace_boundary(field, 0, TraceConfig())

        # Every edge pixel once, plus the start pixel again on closure
        assert len(boundary) == 4 * (30 - 1) + 1
        assert boundary.walk_closed
        assert boundary.points[0] == Point(10.5, 10.5)
        assert boundary.points[-1] == boundary.points[0]
        assert all(on_square_edge(p, 10, 10, 30) for p in boundary)

    def test_walk_is_clockwise(self):
        """From the top-left corner the walk heads east along the top edge."""
        field = square_field(50, 10, 10, 30)
        boundary = trace_boundary(field, 0, TraceConfig())
        assert boundary.points[1] == Point(11.5, 10.5)
        assert boundary.points[30] == Point(39.5, 11.5)

    def test_point_count_scales_with_perimeter(self):
        small = trace_boundary(square_field(60, 5, 5, 30), 0, TraceConfig())
        large = trace_boundary(square_field(60, 5, 5, 50), 0, TraceConfig())
        assert len(small) == 117
        assert len(large) == 197

    def test_square_touching_image_edge(self):
        field = square_field(40, 0, 0, 30)
        boundary = trace_boundary(field, 0, TraceConfig())
        assert len(boundary) == 117
        assert boundary.walk_closed
        assert all(on_square_edge(p, 0, 0, 30) for p in boundary)


class TestTraceThinFeatures:
    """Tests for shapes with one-pixel-wide parts."""

    def test_spike_is_walked_twice(self):
        size = 60
        cells = bytearray(size * size)
        for y in range(20, 50):
            for x in range(10, 40):
                cells[y * size + x] = 1
        for y in range(10, 20):
            cells[y * size + 25] = 1
        field = label_components(BinaryMask(width=size, height=size, cells=cells)).field

        boundary = trace_boundary(field, 0, TraceConfig())

        assert boundary.walk_closed
        assert boundary.points[0] == Point(25.5, 10.5)
        assert boundary.points.count(Point(25.5, 15.5)) == 2
        assert len(boundary) == 135
        assert all(is_boundary_pixel(field, int(p.x), int(p.y), 0) for p in boundary)


class TestTraceFailures:
    """Tests for tracing failure modes."""

    def test_missing_label(self):
        field = square_field(50, 10, 10, 30)
        with pytest.raises(BoundaryTraceFailedError, match="No boundary found"):
            trace_boundary(field, 7, TraceConfig())

    def test_boundary_too_short(self):
        field = square_field(30, 5, 5, 10)
        with pytest.raises(BoundaryTooShortError) as exc_info:
            trace_boundary(field, 0, TraceConfig())
        assert exc_info.value.point_count == 37
        assert exc_info.value.min_points == 100
        assert isinstance(exc_info.value, BoundaryTraceFailedError)

    def test_minimum_length_is_configurable(self):
        field = square_field(30, 5, 5, 10)
        boundary = trace_boundary(field, 0, TraceConfig(min_boundary_points=10))
        assert len(boundary) == 37

    def test_isolated_pixel_is_open_walk(self):
        field = square_field(5, 2, 2, 1)
        boundary = trace_boundary(field, 0, TraceConfig(min_boundary_points=1))
        assert len(boundary) == 1
        assert not boundary.walk_closed

    def test_step_budget_exhaustion(self):
        """A walk cut off by the step budget is reported as open."""
        field = square_field(10, 1, 1, 8)
        config = TraceConfig(min_boundary_points=1, step_budget_factor=1)
        boundary = trace_boundary(field, 0, config)
        assert boundary.walk_closed

        tight = trace_boundary(
            field, 0, TraceConfig(min_boundary_points=1, min_closure_points=1000)
        )
        assert not tight.walk_closed
        assert len(tight) == 4 * 10 * 10 + 1
