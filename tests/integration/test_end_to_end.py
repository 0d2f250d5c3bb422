"""End-to-end tests from decoded images to fitted curves."""

import math

import pytest
from PIL import Image, ImageDraw

from epicycle.config import EpicycleSettings, FourierConfig, RasterConfig, RenderConfig
from epicycle.core import extract_and_synthesize
from epicycle.domain import Complex
from epicycle.exceptions import NoForegroundFoundError
from epicycle.io import CurveRenderer


def convex_hull_area(points: list[Complex]) -> float:
    """Area of the convex hull of a point set (monotone chain)."""
    pts = sorted({(p.re, p.im) for p in points})

    def cross(o, a, b):
        return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])

    lower: list[tuple[float, float]] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper: list[tuple[float, float]] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    hull = lower[:-1] + upper[:-1]

    area = 0.0
    for i in range(len(hull)):
        x1, y1 = hull[i]
        x2, y2 = hull[(i + 1) % len(hull)]
        area += x1 * y2 - x2 * y1
    return abs(area) / 2


@pytest.fixture
def settings() -> EpicycleSettings:
    return EpicycleSettings(
        raster=RasterConfig(downscale_w=100),
        fourier=FourierConfig(order=20, samples=512, draw_samples=2048),
        render=RenderConfig(width=400, height=400),
    )


class TestSilhouettes:
    """Whole-pipeline behavior on synthetic silhouettes."""

    def test_black_disk_on_white(self, settings):
        image = Image.new("RGB", (200, 200), "white")
        ImageDraw.Draw(image).ellipse((40, 40, 160, 160), fill="black")

        result = extract_and_synthesize(image, settings)

        box = result.curve.bounding_box()
        assert box.aspect_ratio() == pytest.approx(1.0, rel=0.05)
        # Working resolution halves the drawn radius of 60
        assert convex_hull_area(list(result.curve)) == pytest.approx(math.pi * 30**2, rel=0.1)
        assert not result.diagnostics.mask_inverted

    def test_curve_is_centered_and_closed(self, settings):
        image = Image.new("RGB", (200, 200), "white")
        ImageDraw.Draw(image).rectangle((30, 60, 170, 140), fill="black")

        result = extract_and_synthesize(image, settings)

        first, last = result.curve.points[0], result.curve.points[-1]
        assert (first - last).magnitude() < 1e-6
        center = result.curve.bounding_box().center
        assert abs(center.re) < 2.0
        assert abs(center.im) < 2.0
        # Wide rectangle stays wide after the y-flip
        assert result.curve.bounding_box().aspect_ratio() > 1.4

    def test_light_shape_on_dark_background(self):
        settings = EpicycleSettings(
            raster=RasterConfig(downscale_w=100),
            fourier=FourierConfig(order=16, samples=512, draw_samples=1024),
        )
        image = Image.new("RGB", (100, 100), "black")
        ImageDraw.Draw(image).ellipse((25, 25, 75, 75), fill="white")

        result = extract_and_synthesize(image, settings)

        assert result.diagnostics.mask_inverted
        assert 44 <= result.curve.bounding_box().width <= 54

    def test_transparent_background(self, settings):
        image = Image.new("RGBA", (200, 200), (0, 0, 0, 0))
        ImageDraw.Draw(image).ellipse((40, 40, 160, 160), fill=(0, 0, 0, 255))

        result = extract_and_synthesize(image, settings)

        assert not result.diagnostics.mask_inverted
        assert result.curve.bounding_box().width == pytest.approx(60, abs=4)

    def test_blank_image_has_no_shape(self, settings):
        with pytest.raises(NoForegroundFoundError) as exc_info:
            extract_and_synthesize(Image.new("RGB", (100, 100), "white"), settings)
        assert "Could not find a clear shape" in str(exc_info.value)


class TestRenderedOutput:
    """Rendering a pipeline result onto the output canvas."""

    def test_stroke_fills_canvas_within_margin(self, settings):
        image = Image.new("RGB", (200, 200), "white")
        ImageDraw.Draw(image).ellipse((40, 40, 160, 160), fill="black")
        result = extract_and_synthesize(image, settings)

        rendered = CurveRenderer(settings.render).render(result.curve, result.fit)

        stroke = rendered.convert("L").point(lambda v: 255 if v > 128 else 0)
        left, top, right, bottom = stroke.getbbox()
        assert left <= 10
        assert right >= 390
        assert top <= 10
        assert bottom >= 390
