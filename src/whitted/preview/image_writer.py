"""Pixel buffer and PNG export for rendered images.

The buffer is a Taichi vector field indexed ``[x, y]`` (column, row) that
stores unclamped colors on the 0-255 scale. Clamping to displayable 8-bit
values happens only when the image is read out with :meth:`ImageWriter.get_image`
or saved with :meth:`ImageWriter.write_to_image`.

Taichi must be initialized (``ti.init``) before an ImageWriter is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> writer = ImageWriter("gradient", 256, 16)
    >>> for x in range(256):
    ...     for y in range(16):
    ...         writer.write_pixel(x, y, Color(x, 0.0, 255 - x))
    >>> writer.write_to_image()
    PosixPath('images/gradient.png')
"""

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
import taichi as ti
from PIL import Image as PILImage

from whitted.core.color import Color
from whitted.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Directory images are written to unless another is given
DEFAULT_OUTPUT_DIR = "images"


@ti.kernel
def _fill(pixels: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for x, y in pixels:
        pixels[x, y] = ti.Vector([r, g, b])


@ti.kernel
def _draw_grid(pixels: ti.template(), interval: ti.i32, r: ti.f32, g: ti.f32, b: ti.f32):
    for x, y in pixels:
        if x % interval == 0 or y % interval == 0:
            pixels[x, y] = ti.Vector([r, g, b])


class ImageWriter:
    """An ``nx`` by ``ny`` pixel buffer that can be saved as a PNG.

    Attributes:
        name: Image name; the file is saved as ``<name>.png``.
        nx: Number of pixel columns.
        ny: Number of pixel rows.
        output_dir: Directory the image is written to.
    """

    def __init__(
        self,
        name: str,
        nx: int,
        ny: int,
        output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    ) -> None:
        if nx <= 0 or ny <= 0:
            raise ConfigurationError(f"Image resolution must be positive, got {nx}x{ny}")
        self.name = name
        self.nx = nx
        self.ny = ny
        self.output_dir = Path(output_dir)
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(nx, ny))

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.nx and 0 <= y < self.ny):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.nx}x{self.ny} image")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Store a color at column ``x``, row ``y`` without clamping it.

        Raises:
            IndexError: If the pixel is outside the image.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = [color.r, color.g, color.b]

    def read_pixel(self, x: int, y: int) -> Color:
        """Return the color stored at column ``x``, row ``y``."""
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def fill(self, color: Color) -> None:
        """Set every pixel to one color."""
        _fill(self._pixels, color.r, color.g, color.b)

    def draw_grid(self, interval: int, color: Color) -> None:
        """Overwrite every ``interval``-th row and column with a color.

        Raises:
            ConfigurationError: If ``interval`` is not positive.
        """
        if interval <= 0:
            raise ConfigurationError(f"Grid interval must be positive, got {interval}")
        _draw_grid(self._pixels, interval, color.r, color.g, color.b)

    def get_image(self) -> npt.NDArray[np.uint8]:
        """Return the image as 8-bit RGB clamped to [0, 255].

        Returns:
            Array of shape (ny, nx, 3), row 0 at the top.
        """
        pixels = self._pixels.to_numpy()
        clamped = np.clip(pixels, 0.0, 255.0).astype(np.uint8)
        return np.ascontiguousarray(clamped.transpose(1, 0, 2))

    @property
    def path(self) -> Path:
        """Path the image is saved to."""
        return self.output_dir / f"{self.name}.png"

    def write_to_image(self) -> Path:
        """Save the image as a PNG, creating the output directory if needed.

        Returns:
            The path of the written file.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.path
        PILImage.fromarray(self.get_image()).save(path)
        logger.info("Wrote %s", path)
        return path

    def __repr__(self) -> str:
        return f"ImageWriter(name={self.name!r}, nx={self.nx}, ny={self.ny})"
