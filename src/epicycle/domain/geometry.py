"""Core geometric types for contour and curve representation.

This module defines the geometric value types used throughout epicycle:
- Point: A 2D point in pixel space
- ClosedPolyline: An ordered boundary, implicitly closed
- Complex: A two-field complex number with explicit arithmetic
- BoundingBox: Axis-aligned bounds of a set of complex points
- FitTransform: Uniform scale + centering from curve space to output pixels
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D pixel space.

    Boundary points sit on pixel centers (integer + 0.5).

    Attributes:
        x: X coordinate, growing rightwards
        y: Y coordinate, growing downwards
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linearly interpolate towards ``other``.

        Args:
            other: Target point
            t: Interpolation parameter, 0 returns self and 1 returns other

        Returns:
            Interpolated point
        """
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)


@dataclass(frozen=True, slots=True)
class ClosedPolyline:
    """An ordered sequence of points whose last point connects to its first.

    Attributes:
        points: Vertices in walk order
        walk_closed: False when the tracer ran out of steps before returning
            to its starting pixel
    """

    points: tuple[Point, ...]
    walk_closed: bool = True

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_explicitly_closed(self, epsilon: float = 1e-6) -> bool:
        """Check whether the last point coincides with the first.

        Args:
            epsilon: Distance under which two points coincide

        Returns:
            True if first and last points are within ``epsilon``
        """
        if not self.points:
            return False
        return self.points[0].distance_to(self.points[-1]) <= epsilon

    def perimeter(self) -> float:
        """Total length including the closing segment."""
        n = len(self.points)
        if n < 2:
            return 0.0
        return sum(self.points[i].distance_to(self.points[(i + 1) % n]) for i in range(n))


@dataclass(frozen=True, slots=True)
class Complex:
    """A complex number stored as two real fields.

    Attributes:
        re: Real part
        im: Imaginary part
    """

    re: float = 0.0
    im: float = 0.0

    @classmethod
    def exp_i(cls, theta: float) -> "Complex":
        """Return exp(i*theta), the unit phasor at angle ``theta``."""
        return cls(math.cos(theta), math.sin(theta))

    def __add__(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other: "Complex") -> "Complex":
        return Complex(self.re - other.re, self.im - other.im)

    def __mul__(self, other: "Complex") -> "Complex":
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def scale(self, factor: float) -> "Complex":
        """Multiply both parts by a real factor."""
        return Complex(self.re * factor, self.im * factor)

    def magnitude(self) -> float:
        """Modulus |z|."""
        return math.hypot(self.re, self.im)

    def phase(self) -> float:
        """Argument of z in radians, in (-pi, pi]."""
        return math.atan2(self.im, self.re)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounds in complex-plane coordinates.

    Attributes:
        min_re: Smallest real part
        max_re: Largest real part
        min_im: Smallest imaginary part
        max_im: Largest imaginary part
    """

    min_re: float
    max_re: float
    min_im: float
    max_im: float

    @classmethod
    def from_points(cls, points: Iterable[Complex]) -> "BoundingBox":
        """Compute the bounds of a non-empty collection of points.

        Args:
            points: Complex points

        Returns:
            BoundingBox enclosing every point

        Raises:
            ValueError: If ``points`` is empty
        """
        min_re = min_im = math.inf
        max_re = max_im = -math.inf
        for z in points:
            min_re = min(min_re, z.re)
            max_re = max(max_re, z.re)
            min_im = min(min_im, z.im)
            max_im = max(max_im, z.im)
        if min_re == math.inf:
            raise ValueError("Cannot compute bounds of an empty point set")
        return cls(min_re, max_re, min_im, max_im)

    @property
    def width(self) -> float:
        return self.max_re - self.min_re

    @property
    def height(self) -> float:
        return self.max_im - self.min_im

    @property
    def center(self) -> Complex:
        """Midpoint of the box."""
        return Complex((self.min_re + self.max_re) / 2, (self.min_im + self.max_im) / 2)

    def aspect_ratio(self) -> float:
        """Width divided by height (inf for a flat box)."""
        if self.height == 0:
            return math.inf
        return self.width / self.height


@dataclass(frozen=True, slots=True)
class FitTransform:
    """Maps curve points into an output canvas.

    The curve is centered on the canvas, scaled uniformly and flipped
    vertically so that positive imaginary parts point up.

    Attributes:
        bounds: Bounding box of the curve being fitted
        scale: Uniform scale factor from curve units to pixels
        width: Output width in pixels
        height: Output height in pixels
        center_y: Extra vertical shift in pixels, applied after scaling
    """

    bounds: BoundingBox
    scale: float
    width: int
    height: int
    center_y: float = 0.0

    def to_pixel(self, z: Complex) -> tuple[float, float]:
        """Map a curve point to output pixel coordinates.

        Args:
            z: Point on the reconstructed curve

        Returns:
            (x, y) in output pixels, y growing downwards
        """
        center = self.bounds.center
        px = self.width / 2 + (z.re - center.re) * self.scale
        py = self.height / 2 - ((z.im - center.im) * self.scale + self.center_y)
        return (px, py)
