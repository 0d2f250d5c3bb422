"""Domain models for epicycle.

This module contains the value types passed between pipeline stages. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Owned by exactly one downstream stage
- Independent of Pillow and any presentation layer

Key classes:
- GrayscaleImage, BinaryMask, LabelField: Raster stages
- Point, ClosedPolyline: Pixel-space boundary geometry
- Complex, BoundingBox, FitTransform: Complex-plane curve geometry
- FourierCoefficients, ReconstructedCurve: Series analysis and synthesis
"""

from epicycle.domain.geometry import (
    BoundingBox,
    ClosedPolyline,
    Complex,
    FitTransform,
    Point,
)
from epicycle.domain.raster import (
    UNLABELED,
    BinaryMask,
    ComponentLabeling,
    GrayscaleImage,
    LabelField,
)
from epicycle.domain.series import Epicycle, FourierCoefficients, ReconstructedCurve

__all__: list[str] = [
    "UNLABELED",
    # Raster types
    "GrayscaleImage",
    "BinaryMask",
    "LabelField",
    "ComponentLabeling",
    # Geometry types
    "Point",
    "ClosedPolyline",
    "Complex",
    "BoundingBox",
    "FitTransform",
    # Series types
    "Epicycle",
    "FourierCoefficients",
    "ReconstructedCurve",
]
