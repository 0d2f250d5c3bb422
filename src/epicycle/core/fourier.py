"""Fourier analysis and synthesis of closed curves.

A closed curve of M uniformly spaced samples z_0..z_{M-1} is treated as one
period of a complex signal. Analysis evaluates the DFT only at the 2N+1
frequencies kept by the truncated series:

    c_n = (1/M) * sum_k z_k * exp(-i * n * 2*pi * k / M),   n = -N..N

Synthesis evaluates the truncated series at arbitrary angles:

    z(t) = sum_n c_n * exp(i * n * t)

Each term c_n * exp(i*n*t) is one epicycle: a circle of radius |c_n|
turning n times per period.
"""

import math
from collections.abc import Sequence

from epicycle.domain import (
    BoundingBox,
    Complex,
    FourierCoefficients,
    Point,
    ReconstructedCurve,
)

TWO_PI = 2.0 * math.pi


def to_complex_samples(points: Sequence[Point]) -> tuple[Complex, ...]:
    """Center pixel-space points and map them to the complex plane.

    The bounding-box midpoint becomes the origin and y is negated so that
    the imaginary axis points up.

    Args:
        points: Resampled curve in pixel coordinates

    Returns:
        Complex samples ``(x - cx) + i * -(y - cy)``
    """
    bounds = BoundingBox.from_points(Complex(p.x, p.y) for p in points)
    center = bounds.center
    return tuple(Complex(p.x - center.re, -(p.y - center.im)) for p in points)


def compute_coefficients(samples: Sequence[Complex], order: int) -> FourierCoefficients:
    """Compute c_{-order}..c_{order} of a periodic complex signal.

    This is a direct O(M * (2N+1)) sum, not an FFT.

    Args:
        samples: One period of the signal, M >= 1 points
        order: Truncation order N >= 1

    Returns:
        FourierCoefficients with 2N+1 entries
    """
    m = len(samples)
    if m == 0:
        raise ValueError("Cannot analyze an empty curve")

    values: list[Complex] = []
    for n in range(-order, order + 1):
        total = Complex()
        for k, z in enumerate(samples):
            total = total + z * Complex.exp_i(-n * TWO_PI * k / m)
        values.append(total.scale(1.0 / m))

    return FourierCoefficients(order=order, values=tuple(values))


def evaluate(coefficients: FourierCoefficients, t: float) -> Complex:
    """Evaluate the truncated series at angle ``t``."""
    total = Complex()
    for n, c in zip(coefficients.frequencies(), coefficients.values, strict=True):
        total = total + c * Complex.exp_i(n * t)
    return total


def reconstruct(coefficients: FourierCoefficients, draw_samples: int) -> ReconstructedCurve:
    """Synthesize ``draw_samples`` points along one full period.

    Angles are ``i / (D - 1) * 2*pi`` for i in [0, D), so the first and last
    points both sit at the start of the curve and the stroke closes. A single
    sample is evaluated at angle 0.

    Args:
        coefficients: Truncated series
        draw_samples: Number of output points D >= 1

    Returns:
        ReconstructedCurve of D points
    """
    if draw_samples < 1:
        raise ValueError(f"draw_samples must be at least 1, got {draw_samples}")

    step = TWO_PI / (draw_samples - 1) if draw_samples > 1 else 0.0
    return ReconstructedCurve(
        points=tuple(evaluate(coefficients, i * step) for i in range(draw_samples))
    )
