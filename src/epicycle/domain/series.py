"""Fourier series types: coefficients and reconstructed curves."""

from collections.abc import Iterator
from dataclasses import dataclass

from epicycle.domain.geometry import BoundingBox, Complex


@dataclass(frozen=True, slots=True)
class Epicycle:
    """One rotating circle of the decomposition.

    Attributes:
        frequency: Integer frequency n (turns per period, sign = direction)
        radius: |c_n|
        phase: arg(c_n) in radians
    """

    frequency: int
    radius: float
    phase: float


@dataclass(frozen=True, slots=True)
class FourierCoefficients:
    """Coefficients c_n for n in [-order, order].

    Attributes:
        order: Truncation order N
        values: 2N+1 coefficients, ``values[n + order]`` holds c_n
    """

    order: int
    values: tuple[Complex, ...]

    def __post_init__(self) -> None:
        if self.order < 1:
            raise ValueError(f"Order must be at least 1, got {self.order}")
        if len(self.values) != 2 * self.order + 1:
            raise ValueError(
                f"Order {self.order} needs {2 * self.order + 1} coefficients, "
                f"got {len(self.values)}"
            )

    def __len__(self) -> int:
        return len(self.values)

    def frequencies(self) -> range:
        """Frequencies in storage order, -order..order."""
        return range(-self.order, self.order + 1)

    def coefficient(self, n: int) -> Complex:
        """Return c_n.

        Raises:
            IndexError: If ``n`` is outside [-order, order]
        """
        if abs(n) > self.order:
            raise IndexError(f"Frequency {n} outside order {self.order}")
        return self.values[n + self.order]

    def epicycles(self) -> list[Epicycle]:
        """List the non-constant terms as epicycles, largest radius first.

        The n = 0 term is the curve's center offset, not a circle.
        """
        circles = [
            Epicycle(frequency=n, radius=c.magnitude(), phase=c.phase())
            for n, c in zip(self.frequencies(), self.values, strict=True)
            if n != 0
        ]
        circles.sort(key=lambda e: e.radius, reverse=True)
        return circles


@dataclass(frozen=True, slots=True)
class ReconstructedCurve:
    """Dense curve synthesized from a truncated series.

    Attributes:
        points: Curve samples in complex-plane coordinates (y up)
    """

    points: tuple[Complex, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Complex]:
        return iter(self.points)

    def bounding_box(self) -> BoundingBox:
        """Axis-aligned bounds of the curve."""
        return BoundingBox.from_points(self.points)
