"""Silhouette-to-epicycles pipeline orchestration.

This module chains the stages leaf to root:

    image -> grayscale -> mask -> components -> boundary -> resampled curve
          -> coefficients -> reconstructed curve -> canvas fit

Every stage consumes only the previous stage's output and its own
configuration. A run either completes or raises one EpicycleError; nothing is
retried and no state survives between runs.

Key components:
- EpicyclePipeline: Configured pipeline with structured stage logging
- PipelineResult: Reconstructed curve, coefficients, fit and diagnostics
- extract_and_synthesize: One-shot convenience entry point
"""

import time
from dataclasses import dataclass

import structlog
from PIL import Image

from epicycle.config import EpicycleSettings
from epicycle.core.fitting import fit_to_canvas
from epicycle.core.fourier import compute_coefficients, reconstruct, to_complex_samples
from epicycle.core.grayscale import to_grayscale
from epicycle.core.labeling import select_foreground_component
from epicycle.core.resample import resample_closed
from epicycle.core.threshold import binarize
from epicycle.core.tracing import trace_boundary
from epicycle.domain import FitTransform, FourierCoefficients, ReconstructedCurve
from epicycle.exceptions import EpicycleError
from epicycle.utils import PipelineLogger, PipelineStats


@dataclass(frozen=True)
class PipelineDiagnostics:
    """Intermediate facts about a successful run.

    Attributes:
        working_size: (width, height) of the grayscale image
        threshold: Otsu threshold
        mask_inverted: Whether binarization inverted the mask
        component_inverted: Whether component selection inverted it again
        label_count: Components found in the final labeling pass
        best_area: Pixel count of the traced component
        boundary_points: Raw traced boundary length
        walk_closed: Whether the boundary walk returned to its start
    """

    working_size: tuple[int, int]
    threshold: int
    mask_inverted: bool
    component_inverted: bool
    label_count: int
    best_area: int
    boundary_points: int
    walk_closed: bool


@dataclass(frozen=True)
class PipelineResult:
    """Output of one pipeline run.

    Attributes:
        curve: Reconstructed curve in complex-plane coordinates
        coefficients: Truncated Fourier series
        fit: Transform onto the configured output canvas
        diagnostics: Intermediate stage facts
        stats: Stage timings and counters
    """

    curve: ReconstructedCurve
    coefficients: FourierCoefficients
    fit: FitTransform
    diagnostics: PipelineDiagnostics
    stats: PipelineStats


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class EpicyclePipeline:
    """Extracts a silhouette from an image and re-draws it as a Fourier series.

    Example:
        settings = EpicycleSettings()
        pipeline = EpicyclePipeline(settings)
        result = pipeline.run(Image.open("cat.png"))
        for z in result.curve:
            x, y = result.fit.to_pixel(z)
    """

    def __init__(
        self,
        settings: EpicycleSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Epicycle settings for every stage
            logger: Structured logger (defaults to the "epicycle" logger)
        """
        self.settings = settings
        self.logger = logger if logger is not None else structlog.get_logger("epicycle")

    def run(self, image: Image.Image) -> PipelineResult:
        """Run every stage on a decoded image.

        Args:
            image: Source image in any Pillow mode

        Returns:
            PipelineResult for the image

        Raises:
            InvalidImageError: If the image has zero size
            NoForegroundFoundError: If no usable shape was found
            BoundaryTraceFailedError: If the shape's boundary could not be traced
            ResampleDegenerateError: If the boundary has zero length
        """
        log = PipelineLogger(self.logger)
        stats = log.stats
        stats.start_time = time.time()
        s = self.settings
        stage = "grayscale"

        try:
            start = time.perf_counter()
            gray = to_grayscale(image, s.raster)
            log.log_stage(
                stage,
                _elapsed_ms(start),
                source_size=image.size,
                working_size=(gray.width, gray.height),
            )

            stage = "binarize"
            start = time.perf_counter()
            binarization = binarize(gray, s.threshold)
            mask = binarization.mask
            if binarization.inverted:
                log.log_inversion(stage, 1.0 - mask.foreground_fraction())
            log.log_stage(stage, _elapsed_ms(start), threshold=binarization.threshold)

            stage = "label"
            start = time.perf_counter()
            labeling = select_foreground_component(mask, s.component)
            if labeling.inverted:
                log.log_inversion(stage, 1.0 - mask.foreground_fraction())
            log.log_stage(
                stage,
                _elapsed_ms(start),
                label_count=labeling.label_count,
                best_area=labeling.best_area,
            )

            stage = "trace"
            start = time.perf_counter()
            boundary = trace_boundary(labeling.field, labeling.best_label, s.trace)
            if not boundary.walk_closed:
                log.log_open_walk(
                    len(boundary), s.trace.step_budget(gray.width, gray.height)
                )
            log.log_boundary(len(boundary))
            log.log_stage(stage, _elapsed_ms(start), points=len(boundary))

            stage = "resample"
            start = time.perf_counter()
            contour = resample_closed(boundary, s.fourier.samples)
            log.log_stage(stage, _elapsed_ms(start), samples=len(contour))

            stage = "analyze"
            start = time.perf_counter()
            coefficients = compute_coefficients(to_complex_samples(contour), s.fourier.order)
            log.log_stage(stage, _elapsed_ms(start), order=coefficients.order)

            stage = "synthesize"
            start = time.perf_counter()
            curve = reconstruct(coefficients, s.fourier.draw_samples)
            log.log_stage(stage, _elapsed_ms(start), points=len(curve))

            stage = "fit"
            start = time.perf_counter()
            fit = fit_to_canvas(
                curve,
                s.render.width,
                s.render.height,
                s.render.margin,
                s.render.center_y,
            )
            log.log_stage(stage, _elapsed_ms(start), scale=round(fit.scale, 4))

        except EpicycleError as e:
            log.log_failure(stage, e)
            raise

        stats.end_time = time.time()

        return PipelineResult(
            curve=curve,
            coefficients=coefficients,
            fit=fit,
            diagnostics=PipelineDiagnostics(
                working_size=(gray.width, gray.height),
                threshold=binarization.threshold,
                mask_inverted=binarization.inverted,
                component_inverted=labeling.inverted,
                label_count=labeling.label_count,
                best_area=labeling.best_area,
                boundary_points=len(boundary),
                walk_closed=boundary.walk_closed,
            ),
            stats=stats,
        )


def extract_and_synthesize(
    image: Image.Image, settings: EpicycleSettings | None = None
) -> PipelineResult:
    """Run the full pipeline once with the given (or default) settings.

    Args:
        image: Source image in any Pillow mode
        settings: Epicycle settings, defaults if None

    Returns:
        PipelineResult for the image
    """
    return EpicyclePipeline(settings if settings is not None else EpicycleSettings()).run(
        image
    )
