"""Configuration management for epicycle.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RasterConfig: Working-resolution and grayscale settings
- ThresholdConfig: Binarization polarity settings
- ComponentConfig: Component selection settings
- TraceConfig: Boundary tracing limits
- FourierConfig: Series order and sample counts
- RenderConfig: Output canvas and stroke settings
- LoggingConfig: Logging settings
- EpicycleSettings: Main application settings
"""

from epicycle.config.settings import (
    ComponentConfig,
    EpicycleSettings,
    FourierConfig,
    LoggingConfig,
    RasterConfig,
    RenderConfig,
    ThresholdConfig,
    TraceConfig,
    get_default_settings,
)

__all__ = [
    "ComponentConfig",
    "EpicycleSettings",
    "FourierConfig",
    "LoggingConfig",
    "RasterConfig",
    "RenderConfig",
    "ThresholdConfig",
    "TraceConfig",
    "get_default_settings",
]
