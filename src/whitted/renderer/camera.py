"""Pinhole camera with a view plane and the per-pixel render loop.

A camera sits at ``location`` looking along ``v_to`` with ``v_up`` as the
up direction (the two must be orthogonal); ``v_right = v_to x v_up``
completes the basis. The view plane is ``width`` by ``height`` scene units
at ``distance`` along ``v_to`` and is divided into the image writer's
``nx`` by ``ny`` pixel grid.

Cameras are built through :class:`Camera.Builder`, which validates every
field once in :meth:`Camera.Builder.build` and returns an immutable camera.

Example:
    >>> camera = (
    ...     Camera.builder()
    ...     .set_location(Point(0.0, 0.0, 0.0))
    ...     .set_direction(Vector(0.0, 0.0, -1.0), Vector(0.0, 1.0, 0.0))
    ...     .set_vp_size(3.0, 3.0)
    ...     .set_vp_distance(1.0)
    ...     .set_image_writer(ImageWriter("demo", 3, 3))
    ...     .set_ray_tracer(SimpleRayTracer(scene))
    ...     .build()
    ... )
    >>> camera.render_image().write_to_image()
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from whitted.core.color import Color
from whitted.core.errors import ConfigurationError
from whitted.core.ray import Ray
from whitted.core.util import is_zero
from whitted.core.vector import Point, Vector

if TYPE_CHECKING:
    from whitted.preview.image_writer import ImageWriter
    from whitted.renderer.ray_tracer import RayTracerBase

logger = logging.getLogger(__name__)

# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]

# Returns True when the render should stop after the current row
StopCallback = Callable[[], bool]


@dataclass(frozen=True)
class Camera:
    """An immutable, fully configured camera.

    Attributes:
        location: Eye position.
        v_to: Unit view direction.
        v_up: Unit up direction.
        v_right: Unit right direction, ``v_to x v_up``.
        height: View plane height in scene units.
        width: View plane width in scene units.
        distance: Distance from the eye to the view plane.
        image_writer: Pixel buffer the render loop writes to.
        ray_tracer: Tracer that colors every constructed ray.
        anti_aliasing: Sub-pixel grid size; ``grid**2`` rays per pixel.
    """

    location: Point
    v_to: Vector
    v_up: Vector
    v_right: Vector
    height: float
    width: float
    distance: float
    image_writer: ImageWriter
    ray_tracer: RayTracerBase
    anti_aliasing: int = 1

    class Builder:
        """Collects camera settings and validates them in :meth:`build`.

        Each setter checks its own arguments and returns the builder, so
        settings can be chained. Missing settings are only reported by
        :meth:`build`.
        """

        def __init__(self) -> None:
            self._fields: dict[str, Any] = {"anti_aliasing": 1}

        def set_location(self, location: Point) -> Camera.Builder:
            self._fields["location"] = location
            return self

        def set_direction(self, v_to: Vector, v_up: Vector) -> Camera.Builder:
            """Set the view and up directions.

            Raises:
                ConfigurationError: If the two directions are not orthogonal.
            """
            if not is_zero(v_to.dot(v_up)):
                raise ConfigurationError("vTo and vUp are not orthogonal")
            self._fields["v_to"] = v_to.normalize()
            self._fields["v_up"] = v_up.normalize()
            return self

        def set_vp_size(self, height: float, width: float) -> Camera.Builder:
            """Set the view plane size.

            Raises:
                ConfigurationError: If either dimension is not positive.
            """
            if height <= 0.0:
                raise ConfigurationError("View plane height has to be positive")
            if width <= 0.0:
                raise ConfigurationError("View plane width has to be positive")
            self._fields["height"] = float(height)
            self._fields["width"] = float(width)
            return self

        def set_vp_distance(self, distance: float) -> Camera.Builder:
            if distance <= 0.0:
                raise ConfigurationError("View plane distance has to be positive")
            self._fields["distance"] = float(distance)
            return self

        def set_image_writer(self, image_writer: ImageWriter) -> Camera.Builder:
            self._fields["image_writer"] = image_writer
            return self

        def set_ray_tracer(self, ray_tracer: RayTracerBase) -> Camera.Builder:
            self._fields["ray_tracer"] = ray_tracer
            return self

        def set_anti_aliasing(self, grid: int) -> Camera.Builder:
            """Trace a ``grid`` by ``grid`` block of rays per pixel."""
            if grid < 1:
                raise ConfigurationError(f"Anti-aliasing grid must be >= 1, got {grid}")
            self._fields["anti_aliasing"] = int(grid)
            return self

        def build(self) -> Camera:
            """Validate the collected settings and return a camera.

            Raises:
                ConfigurationError: Naming every missing setting.
            """
            required = (
                "location",
                "v_to",
                "v_up",
                "height",
                "width",
                "distance",
                "image_writer",
                "ray_tracer",
            )
            missing = [name for name in required if self._fields.get(name) is None]
            if missing:
                raise ConfigurationError(
                    f"Missing rendering data in camera: {', '.join(missing)}"
                )
            v_right = self._fields["v_to"].cross(self._fields["v_up"]).normalize()
            camera = Camera(v_right=v_right, **self._fields)
            logger.debug(
                "Built camera at %s, view plane %gx%g at distance %g",
                camera.location,
                camera.width,
                camera.height,
                camera.distance,
            )
            return camera

    @staticmethod
    def builder() -> Camera.Builder:
        """Start building a camera."""
        return Camera.Builder()

    def _pixel_point(self, nx: int, ny: int, x: float, y: float) -> Point:
        """Point of the view plane at fractional pixel coordinates ``(x, y)``."""
        yi = -(y - (ny - 1) / 2.0) * self.height / ny
        xj = (x - (nx - 1) / 2.0) * self.width / nx
        pij = self.location.translate(self.v_to, self.distance)
        if not is_zero(xj):
            pij = pij.translate(self.v_right, xj)
        if not is_zero(yi):
            pij = pij.translate(self.v_up, yi)
        return pij

    def construct_ray(self, nx: int, ny: int, j: int, i: int) -> Ray:
        """Construct the ray through the center of a pixel.

        Args:
            nx: Number of pixel columns.
            ny: Number of pixel rows.
            j: Pixel column, 0 at the left.
            i: Pixel row, 0 at the top.

        Returns:
            The ray from the camera location through the pixel center.
        """
        return Ray(self.location, self._pixel_point(nx, ny, j, i) - self.location)

    def construct_rays(self, nx: int, ny: int, j: int, i: int) -> list[Ray]:
        """Construct the anti-aliasing rays of a pixel.

        The pixel is split into an ``anti_aliasing`` by ``anti_aliasing``
        grid and one ray goes through the center of every cell. A grid of
        one gives just the pixel-center ray.
        """
        grid = self.anti_aliasing
        if grid == 1:
            return [self.construct_ray(nx, ny, j, i)]
        rays = []
        for row in range(grid):
            for col in range(grid):
                x = j - 0.5 + (col + 0.5) / grid
                y = i - 0.5 + (row + 0.5) / grid
                rays.append(Ray(self.location, self._pixel_point(nx, ny, x, y) - self.location))
        return rays

    def _cast_ray(self, nx: int, ny: int, j: int, i: int) -> None:
        rays = self.construct_rays(nx, ny, j, i)
        color = Color.BLACK.add(*(self.ray_tracer.trace_ray(ray) for ray in rays))
        self.image_writer.write_pixel(j, i, color.reduce(len(rays)))

    def render_image(
        self,
        progress: ProgressCallback | None = None,
        should_stop: StopCallback | None = None,
    ) -> Camera:
        """Trace every pixel and write the colors to the image writer.

        Rows are rendered top to bottom. Cancellation is cooperative:
        ``should_stop`` is polled between rows.

        Args:
            progress: Optional callback receiving ``(rows_done, total_rows)``
                after each row.
            should_stop: Optional callback; when it returns True the render
                stops before the next row.

        Returns:
            The camera, for chaining with :meth:`write_to_image`.
        """
        nx = self.image_writer.nx
        ny = self.image_writer.ny
        logger.info(
            "Rendering %dx%d image %r (%d rays per pixel)",
            nx,
            ny,
            self.image_writer.name,
            self.anti_aliasing**2,
        )
        start = time.perf_counter()
        for i in range(ny):
            if should_stop is not None and should_stop():
                logger.info("Render stopped after %d of %d rows", i, ny)
                return self
            for j in range(nx):
                self._cast_ray(nx, ny, j, i)
            if progress is not None:
                progress(i + 1, ny)
        logger.info("Rendered %r in %.2fs", self.image_writer.name, time.perf_counter() - start)
        return self

    def print_grid(self, interval: int, color: Color) -> Camera:
        """Draw grid lines every ``interval`` pixels over the image."""
        self.image_writer.draw_grid(interval, color)
        return self

    def write_to_image(self) -> Path:
        """Save the image writer's buffer and return the file path."""
        return self.image_writer.write_to_image()
