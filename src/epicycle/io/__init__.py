"""Image I/O layer for epicycle.

This module handles the collaborators around the pipeline core using Pillow:
decoding source images and stroking reconstructed curves.

Key classes:
- ImageReader: Load and decode source images
- CurveRenderer: Draw a fitted curve as a monochrome stroke
"""

from epicycle.io.reader import ImageReader
from epicycle.io.renderer import CurveRenderer

__all__ = [
    "CurveRenderer",
    "ImageReader",
]
