"""Configuration settings for Epicycle."""

from pathlib import Path

from pydantic import BaseModel, Field


class RasterConfig(BaseModel):
    """Configuration for decoding and downsampling the source image."""

    downscale_w: int = Field(
        default=360,
        ge=32,
        description="Working width in pixels (bigger = better contour, slower)",
    )
    min_dimension: int = Field(
        default=32,
        ge=1,
        description="Minimum working width and height in pixels",
    )
    background: tuple[int, int, int] = Field(
        default=(255, 255, 255),
        description="RGB color transparent pixels are flattened onto",
    )


class ThresholdConfig(BaseModel):
    """Configuration for Otsu binarization."""

    mask_polarity_fraction: float = Field(
        default=0.75,
        gt=0.0,
        le=1.0,
        description="Invert the mask when foreground exceeds this fraction of pixels",
    )


class ComponentConfig(BaseModel):
    """Configuration for connected-component selection."""

    component_polarity_fraction: float = Field(
        default=0.75,
        gt=0.0,
        le=1.0,
        description="Invert and relabel when the largest component exceeds this fraction",
    )
    min_area: int = Field(
        default=200,
        ge=1,
        description="Minimum pixel count of a usable component",
    )


class TraceConfig(BaseModel):
    """Configuration for Moore-neighbor boundary tracing."""

    min_boundary_points: int = Field(
        default=100,
        ge=1,
        description="Minimum number of traced boundary points",
    )
    min_closure_points: int = Field(
        default=10,
        ge=2,
        description="Points that must be emitted before returning to start closes the walk",
    )
    step_budget_factor: int = Field(
        default=4,
        ge=1,
        description="Step budget as a multiple of the pixel count",
    )

    def step_budget(self, width: int, height: int) -> int:
        """Get the maximum number of tracing steps for a field size.

        Args:
            width: Label field width
            height: Label field height

        Returns:
            Step budget
        """
        return self.step_budget_factor * width * height


class FourierConfig(BaseModel):
    """Configuration for Fourier analysis and synthesis."""

    order: int = Field(
        default=40,
        ge=1,
        description="Series truncation order N (coefficients -N..N)",
    )
    samples: int = Field(
        default=2048,
        ge=512,
        description="Contour resample count used for the coefficients",
    )
    draw_samples: int = Field(
        default=7000,
        ge=1024,
        description="Points in the reconstructed curve",
    )


class RenderConfig(BaseModel):
    """Configuration for fitting and stroking the reconstructed curve."""

    width: int = Field(
        default=1920,
        ge=200,
        le=8000,
        description="Output width in pixels",
    )
    height: int = Field(
        default=1080,
        ge=200,
        le=8000,
        description="Output height in pixels",
    )
    margin: float = Field(
        default=0.02,
        ge=0.0,
        description="Padding fraction around the fitted curve",
    )
    center_y: float = Field(
        default=0.0,
        description="Vertical pixel shift applied after scaling",
    )
    line_width: float = Field(
        default=1.2,
        gt=0.0,
        description="Stroke width in pixels",
    )
    background: str = Field(
        default="#050505",
        description="Canvas color",
    )
    stroke: str = Field(
        default="#ffffff",
        description="Curve color",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class EpicycleSettings(BaseModel):
    """Main application settings."""

    raster: RasterConfig = Field(default_factory=RasterConfig)
    threshold: ThresholdConfig = Field(default_factory=ThresholdConfig)
    component: ComponentConfig = Field(default_factory=ComponentConfig)
    trace: TraceConfig = Field(default_factory=TraceConfig)
    fourier: FourierConfig = Field(default_factory=FourierConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> EpicycleSettings:
    """Get default application settings."""
    return EpicycleSettings()
