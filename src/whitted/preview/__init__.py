"""Image output.

Components:
    image_writer: Taichi-backed pixel buffer with clamped PNG export
"""

from .image_writer import DEFAULT_OUTPUT_DIR, ImageWriter

__all__ = ["DEFAULT_OUTPUT_DIR", "ImageWriter"]
