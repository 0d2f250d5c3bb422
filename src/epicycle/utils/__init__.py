"""Utility functions for epicycle.

This module provides utility functions including:

- Logging setup and configuration
- Per-run stage logging and statistics
"""

from epicycle.utils.logging import (
    PipelineLogger,
    PipelineStats,
    configure_logging,
)

__all__ = [
    "PipelineLogger",
    "PipelineStats",
    "configure_logging",
]
