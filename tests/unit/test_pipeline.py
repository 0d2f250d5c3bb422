"""Unit tests for pipeline orchestration."""

from unittest.mock import MagicMock

import pytest
from PIL import Image, ImageDraw

from epicycle.config import (
    EpicycleSettings,
    FourierConfig,
    RasterConfig,
    RenderConfig,
)
from epicycle.core import EpicyclePipeline, extract_and_synthesize
from epicycle.exceptions import NoForegroundFoundError
from epicycle.utils import PipelineStats

STAGES = ["grayscale", "binarize", "label", "trace", "resample", "analyze", "synthesize", "fit"]


@pytest.fixture
def settings() -> EpicycleSettings:
    """Small settings that keep a run fast."""
    return EpicycleSettings(
        raster=RasterConfig(downscale_w=100),
        fourier=FourierConfig(order=12, samples=512, draw_samples=1024),
        render=RenderConfig(width=400, height=300),
    )


@pytest.fixture
def disk_image() -> Image.Image:
    image = Image.new("RGB", (200, 200), "white")
    ImageDraw.Draw(image).ellipse((40, 40, 160, 160), fill="black")
    return image


class TestEpicyclePipeline:
    """Tests for EpicyclePipeline.run."""

    def test_successful_run(self, settings, disk_image):
        result = EpicyclePipeline(settings, logger=MagicMock()).run(disk_image)

        assert len(result.curve) == 1024
        assert result.coefficients.order == 12
        assert len(result.coefficients) == 25
        assert result.fit.width == 400
        assert result.fit.height == 300

    def test_diagnostics(self, settings, disk_image):
        result = EpicyclePipeline(settings, logger=MagicMock()).run(disk_image)
        d = result.diagnostics

        assert d.working_size == (100, 100)
        assert not d.mask_inverted
        assert not d.component_inverted
        assert d.label_count == 1
        assert 2500 < d.best_area < 3200
        assert d.boundary_points >= 100
        assert d.walk_closed

    def test_stats_cover_every_stage(self, settings, disk_image):
        result = EpicyclePipeline(settings, logger=MagicMock()).run(disk_image)

        assert list(result.stats.stage_durations_ms) == STAGES
        assert result.stats.boundary_points == result.diagnostics.boundary_points
        assert result.stats.inversions == 0
        assert result.stats.duration_seconds >= 0.0
        assert result.stats.slowest_stage in STAGES

    def test_stages_are_logged(self, settings, disk_image):
        logger = MagicMock()
        EpicyclePipeline(settings, logger=logger).run(disk_image)

        logged = [c.kwargs["stage"] for c in logger.debug.call_args_list]
        assert logged == STAGES
        logger.error.assert_not_called()

    def test_failure_is_logged_and_raised(self, settings):
        logger = MagicMock()
        blank = Image.new("RGB", (120, 80), "white")

        with pytest.raises(NoForegroundFoundError):
            EpicyclePipeline(settings, logger=logger).run(blank)

        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["stage"] == "label"
        assert logger.error.call_args.kwargs["error_type"] == "NoForegroundFoundError"

    def test_inversion_is_counted(self, settings):
        image = Image.new("RGB", (200, 200), "black")
        ImageDraw.Draw(image).ellipse((50, 50, 150, 150), fill="white")

        result = EpicyclePipeline(settings, logger=MagicMock()).run(image)

        assert result.diagnostics.mask_inverted
        assert result.stats.inversions == 1


class TestExtractAndSynthesize:
    def test_default_settings(self, disk_image):
        result = extract_and_synthesize(disk_image)
        assert len(result.curve) == 7000
        assert result.coefficients.order == 40


class TestPipelineStats:
    def test_empty_stats(self):
        stats = PipelineStats()
        assert stats.slowest_stage is None
        assert stats.duration_seconds == 0.0

    def test_slowest_stage(self):
        stats = PipelineStats(stage_durations_ms={"trace": 4.0, "analyze": 9.5, "fit": 0.1})
        assert stats.slowest_stage == "analyze"
