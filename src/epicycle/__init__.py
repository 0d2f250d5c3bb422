"""Epicycle - Re-draw image silhouettes as truncated Fourier series.

Epicycle extracts the outline of the largest dark shape in a raster image,
re-expresses it as a sum of rotating circles (complex Fourier coefficients of
order -N..N) and reconstructs a smooth curve at any resolution.

Example:
    $ epicycle silhouette.png --order 40 --output curve.png

This traces silhouette.png, keeps 81 epicycles and strokes the reconstructed
curve into curve.png.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
