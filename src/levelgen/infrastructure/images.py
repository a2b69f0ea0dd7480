"""Image sources for layout compilation.

Both implementations follow the bottom-left origin convention: ``y = 0``
is the bottom row of the picture as it is normally viewed, and channel
values are 8-bit values divided by 255.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

Pixel = tuple[float, float, float, float]


class ImageLoadError(Exception):
    """Raised when an image file is missing or cannot be decoded.

    Attributes:
        path: The image path that failed to load.
    """

    def __init__(self, message: str, path: Path) -> None:
        self.path = path
        super().__init__(message)


class PixelGrid:
    """In-memory image built from explicit RGBA pixels.

    Args:
        width: Number of columns.
        height: Number of rows.
        pixels: ``height`` rows of ``width`` RGBA tuples, bottom row first.

    Use ``from_rows`` to write rows top to bottom the way they look.
    """

    def __init__(self, width: int, height: int, pixels: Sequence[Sequence[Pixel]]) -> None:
        if width < 0 or height < 0:
            raise ValueError("Image dimensions must not be negative")
        if len(pixels) != height:
            raise ValueError(f"Expected {height} rows, got {len(pixels)}")
        for y, row in enumerate(pixels):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} pixels, expected {width}")
        self._width = width
        self._height = height
        self._pixels = [tuple(tuple(float(c) for c in px) for px in row) for row in pixels]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Pixel]]) -> "PixelGrid":
        """Build a grid from rows listed top to bottom."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        return cls(width, height, list(reversed(rows)))

    @classmethod
    def filled(cls, width: int, height: int, pixel: Pixel) -> "PixelGrid":
        """Build a grid where every pixel has the same value."""
        return cls(width, height, [[pixel] * width for _ in range(height)])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def sample(self, x: int, y: int) -> Pixel:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return self._pixels[y][x]  # type: ignore[return-value]


class RasterImage:
    """Raster file decoded with Pillow into a normalized numpy array.

    The file is converted to RGBA without resampling. Rows are flipped so
    the bottom row of the file is ``y = 0``.
    """

    def __init__(self, pixels: np.ndarray, path: Path | None = None) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an (h, w, 4) array, got shape {pixels.shape}")
        self._pixels = pixels
        self.path = path

    @classmethod
    def open(cls, path: Path) -> "RasterImage":
        """Load an image file.

        Raises:
            ImageLoadError: If the file is missing or cannot be decoded.
        """
        path = Path(path)
        try:
            with Image.open(path) as img:
                rgba = np.asarray(img.convert("RGBA"), dtype=np.float64)
        except FileNotFoundError:
            raise ImageLoadError(f"Image file not found: {path}", path)
        except UnidentifiedImageError:
            raise ImageLoadError(f"Not a readable image: {path}", path)
        except OSError as e:
            raise ImageLoadError(f"Error reading image {path}: {e}", path)

        logger.debug(f"Loaded {path} ({rgba.shape[1]}x{rgba.shape[0]})")
        return cls(np.flipud(rgba / 255.0), path=path)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def sample(self, x: int, y: int) -> Pixel:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        r, g, b, a = self._pixels[y, x]
        return (float(r), float(g), float(b), float(a))


def load_image(path: Path) -> RasterImage:
    """Load a raster image file (PNG or anything Pillow reads)."""
    return RasterImage.open(path)
