"""Logging utilities for Epicycle."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class PipelineStats:
    """Statistics from one pipeline run."""

    stage_durations_ms: dict[str, float] = field(default_factory=dict)
    inversions: int = 0
    boundary_points: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate total run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def slowest_stage(self) -> str | None:
        """Name of the stage that took longest, if any ran."""
        if not self.stage_durations_ms:
            return None
        return max(self.stage_durations_ms, key=self.stage_durations_ms.__getitem__)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and, optionally, a file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("epicycle")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class PipelineLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PipelineStats()

    def log_stage(self, stage: str, duration_ms: float, **details: object) -> None:
        """Log a completed pipeline stage."""
        self._logger.debug(
            "Stage complete",
            stage=stage,
            duration_ms=round(duration_ms, 2),
            **details,
        )
        self._stats.stage_durations_ms[stage] = duration_ms

    def log_inversion(self, stage: str, foreground_fraction: float) -> None:
        """Log a polarity-correcting mask inversion."""
        self._logger.info(
            "Mask inverted",
            stage=stage,
            foreground_fraction=round(foreground_fraction, 3),
        )
        self._stats.inversions += 1

    def log_open_walk(self, points: int, step_budget: int) -> None:
        """Log a boundary walk that ran out of steps before closing."""
        self._logger.warning(
            "Boundary walk did not close",
            points=points,
            step_budget=step_budget,
        )

    def log_boundary(self, points: int) -> None:
        """Record the traced boundary length."""
        self._stats.boundary_points = points

    def log_failure(self, stage: str, error: Exception) -> None:
        """Log a fatal pipeline error."""
        self._logger.error(
            "Pipeline failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> PipelineStats:
        """Get current pipeline statistics."""
        return self._stats
