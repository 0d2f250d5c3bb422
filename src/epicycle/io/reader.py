"""Image reader for loading source silhouettes.

This module provides the ImageReader class for decoding image files into
Pillow images the pipeline can consume.
"""

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from epicycle.exceptions import InvalidImageError


class ImageReader:
    """Loads raster images from disk.

    Example:
        reader = ImageReader(Path("silhouette.png"))
        reader.load()
        print(reader.size)
        result = extract_and_synthesize(reader.image)
    """

    def __init__(self, image_path: Path) -> None:
        """Initialize the image reader.

        Args:
            image_path: Path to any image format Pillow can decode
        """
        self._image_path = image_path
        self._image: Image.Image | None = None

    def load(self) -> None:
        """Decode the image file into memory.

        Raises:
            FileNotFoundError: If the image file does not exist
            InvalidImageError: If the file cannot be decoded or has zero size
        """
        if not self._image_path.exists():
            raise FileNotFoundError(f"Image file not found: {self._image_path}")

        try:
            with Image.open(self._image_path) as img:
                img.load()
                image = img.copy()
        except (UnidentifiedImageError, OSError) as e:
            raise InvalidImageError(str(e), source=str(self._image_path)) from e

        if image.width == 0 or image.height == 0:
            raise InvalidImageError(
                f"image has zero size ({image.width}x{image.height})",
                source=str(self._image_path),
            )

        self._image = image

    @property
    def image(self) -> Image.Image:
        """Return the decoded image.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        if self._image is None:
            raise RuntimeError("Image not loaded. Call load() first.")
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height) of the decoded image.

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self.image.size

    @property
    def mode(self) -> str:
        """Return the Pillow mode of the decoded image (e.g. "RGBA").

        Raises:
            RuntimeError: If the image has not been loaded yet
        """
        return self.image.mode

    def close(self) -> None:
        """Release the decoded image."""
        if self._image is not None:
            self._image.close()
            self._image = None
