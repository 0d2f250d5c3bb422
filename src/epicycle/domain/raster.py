"""Raster types produced by the image stages of the pipeline.

This module defines the per-pixel structures that flow between the raster
stages:
- GrayscaleImage: Single-channel intensities at working resolution
- BinaryMask: Foreground/background cells derived from a threshold
- LabelField: Component id per cell from connected-component labeling
- ComponentLabeling: A LabelField plus the largest component found in it

All buffers are row-major: cell (x, y) lives at index ``y * width + x``.
"""

from collections.abc import Sequence
from dataclasses import dataclass

UNLABELED = -1


@dataclass(frozen=True, slots=True)
class GrayscaleImage:
    """Immutable single-channel image.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        pixels: Row-major intensities in [0, 255], length ``width * height``
    """

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    @property
    def pixel_count(self) -> int:
        """Total number of pixels."""
        return self.width * self.height

    def histogram(self) -> list[int]:
        """Build a 256-bin intensity histogram.

        Returns:
            List where entry ``v`` counts pixels of intensity ``v``
        """
        hist = [0] * 256
        for value in self.pixels:
            hist[value] += 1
        return hist


@dataclass(slots=True)
class BinaryMask:
    """Foreground/background mask with the same dimensions as its image.

    The mask is the only structure in the pipeline that is mutated after
    creation: polarity correction inverts it in place.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        cells: Row-major cells, 1 for foreground and 0 for background
    """

    width: int
    height: int
    cells: bytearray

    def __post_init__(self) -> None:
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "BinaryMask":
        """Build a mask from a list of rows of 0/1 values.

        Args:
            rows: Equal-length rows, top to bottom

        Returns:
            BinaryMask instance
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        cells = bytearray(1 if v else 0 for row in rows for v in row)
        return cls(width=width, height=height, cells=cells)

    @property
    def pixel_count(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def is_foreground(self, x: int, y: int) -> bool:
        """Check whether (x, y) is a foreground cell."""
        return self.cells[y * self.width + x] == 1

    def count_foreground(self) -> int:
        """Count foreground cells."""
        return sum(self.cells)

    def foreground_fraction(self) -> float:
        """Fraction of cells that are foreground (0.0 for an empty mask)."""
        if self.pixel_count == 0:
            return 0.0
        return self.count_foreground() / self.pixel_count

    def invert(self) -> None:
        """Swap foreground and background in place."""
        for i, value in enumerate(self.cells):
            self.cells[i] = 0 if value else 1


@dataclass(frozen=True, slots=True)
class LabelField:
    """Component id per cell.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        labels: Row-major component ids, ``UNLABELED`` for background
    """

    width: int
    height: int
    labels: tuple[int, ...]

    def label_at(self, x: int, y: int) -> int:
        """Return the label at (x, y), or ``UNLABELED`` outside the field."""
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return UNLABELED
        return self.labels[y * self.width + x]

    def has_label(self, x: int, y: int, label: int) -> bool:
        """Check whether (x, y) is inside the field and carries ``label``."""
        return self.label_at(x, y) == label

    def area(self, label: int) -> int:
        """Count cells carrying ``label``."""
        return self.labels.count(label)


@dataclass(frozen=True, slots=True)
class ComponentLabeling:
    """Result of one full labeling pass.

    Attributes:
        field: Label per cell
        best_label: Id of the largest component, ``UNLABELED`` if none
        best_area: Pixel count of the largest component
        label_count: Number of components found
        inverted: Whether the mask was inverted before this pass
    """

    field: LabelField
    best_label: int = UNLABELED
    best_area: int = 0
    label_count: int = 0
    inverted: bool = False

    def has_component(self) -> bool:
        """Check whether any foreground component was found."""
        return self.best_label != UNLABELED
