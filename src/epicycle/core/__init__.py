"""Core processing algorithms for epicycle.

This module contains the pipeline stages:

- Grayscale conversion (box-filtered downsampling, luma)
- Binarization (Otsu threshold, polarity correction)
- Component labeling (4-connected flood fill, largest component)
- Boundary tracing (clockwise Moore-neighbor walk)
- Resampling (uniform arc length on a closed polyline)
- Fourier analysis and synthesis (truncated complex series)
- Canvas fitting (bounds and uniform scale)

All stages are:
- Pure functions of their input and configuration
- Free of shared state (safe to run concurrently)
- Fail-fast, raising typed EpicycleError subclasses

Key functions:
- to_grayscale: Downsample an image to working intensities
- binarize: Otsu threshold and mask polarity correction
- label_components: Label 4-connected foreground regions
- select_foreground_component: Pick the component to trace
- trace_boundary: Walk a component's outer boundary
- resample_closed: Uniform arc-length resampling
- compute_coefficients: Fourier coefficients c_{-N}..c_N
- reconstruct: Evaluate the truncated series densely
- fit_to_canvas: Scale and center a curve for output

Key classes:
- EpicyclePipeline: Runs every stage with structured logging
"""

from epicycle.core.fitting import fit_scale, fit_to_canvas
from epicycle.core.fourier import (
    compute_coefficients,
    evaluate,
    reconstruct,
    to_complex_samples,
)
from epicycle.core.grayscale import luma, to_grayscale, working_size
from epicycle.core.labeling import label_components, select_foreground_component
from epicycle.core.pipeline import (
    EpicyclePipeline,
    PipelineDiagnostics,
    PipelineResult,
    extract_and_synthesize,
)
from epicycle.core.resample import resample_closed
from epicycle.core.threshold import Binarization, binarize, build_mask, otsu_threshold
from epicycle.core.tracing import find_start_pixel, is_boundary_pixel, trace_boundary

__all__ = [
    "Binarization",
    # Pipeline classes
    "EpicyclePipeline",
    "PipelineDiagnostics",
    "PipelineResult",
    "binarize",
    "build_mask",
    "compute_coefficients",
    "evaluate",
    "extract_and_synthesize",
    "find_start_pixel",
    "fit_scale",
    "fit_to_canvas",
    "is_boundary_pixel",
    "label_components",
    "luma",
    "otsu_threshold",
    "reconstruct",
    "resample_closed",
    "select_foreground_component",
    "to_complex_samples",
    "to_grayscale",
    "trace_boundary",
    "working_size",
]
