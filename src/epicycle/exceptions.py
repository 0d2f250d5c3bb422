"""Exception hierarchy for Epicycle."""


class EpicycleError(Exception):
    """Base exception for all Epicycle errors."""

    pass


class InvalidImageError(EpicycleError):
    """Source image has zero width/height or could not be decoded."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        self.reason = reason
        self.source = source
        if source:
            super().__init__(f"Invalid image '{source}': {reason}")
        else:
            super().__init__(f"Invalid image: {reason}")


class NoForegroundFoundError(EpicycleError):
    """No connected component reached the minimum viable area."""

    def __init__(self, best_area: int, min_area: int) -> None:
        self.best_area = best_area
        self.min_area = min_area
        super().__init__(
            "Could not find a clear shape in the image. "
            "Use a higher-contrast silhouette."
        )


class BoundaryTraceFailedError(EpicycleError):
    """Boundary of the selected component could not be traced."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class BoundaryTooShortError(BoundaryTraceFailedError):
    """Traced boundary has fewer points than the minimum viable length."""

    def __init__(self, point_count: int, min_points: int) -> None:
        self.point_count = point_count
        self.min_points = min_points
        super().__init__(
            "Boundary tracing produced too few points. "
            "Use a clearer silhouette / higher contrast image."
        )


class ResampleDegenerateError(EpicycleError):
    """Polyline has zero total arc length and cannot be resampled."""

    def __init__(self, point_count: int) -> None:
        self.point_count = point_count
        super().__init__(
            f"Cannot resample a zero-length polyline ({point_count} points)"
        )
