"""Stroke renderer for reconstructed curves.

This module provides the CurveRenderer class, which draws a reconstructed
curve as a single monochrome stroke using Pillow.
"""

from pathlib import Path

from PIL import Image, ImageDraw

from epicycle.config import RenderConfig
from epicycle.domain import FitTransform, ReconstructedCurve


class CurveRenderer:
    """Draws reconstructed curves onto an in-memory canvas.

    Example:
        renderer = CurveRenderer(settings.render)
        image = renderer.render(result.curve, result.fit)
        renderer.save(image, Path("curve.png"))
    """

    def __init__(self, config: RenderConfig) -> None:
        """Initialize the renderer.

        Args:
            config: Colors and stroke width
        """
        self.config = config

    def render(self, curve: ReconstructedCurve, fit: FitTransform) -> Image.Image:
        """Stroke a curve onto a fresh canvas.

        Args:
            curve: Curve to draw
            fit: Transform from curve coordinates to output pixels

        Returns:
            RGB image of size (fit.width, fit.height)
        """
        canvas = Image.new("RGB", (fit.width, fit.height), self.config.background)
        points = [fit.to_pixel(z) for z in curve]

        if len(points) > 1:
            ImageDraw.Draw(canvas).line(
                points,
                fill=self.config.stroke,
                width=max(1, round(self.config.line_width)),
                joint="curve",
            )

        return canvas

    @staticmethod
    def save(image: Image.Image, output_path: Path) -> None:
        """Write a rendered image as PNG.

        Args:
            image: Rendered canvas
            output_path: Destination path
        """
        image.save(output_path, format="PNG")
