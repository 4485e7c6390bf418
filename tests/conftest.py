"""
Pytest configuration and fixtures for pixelwrap tests
"""

import numpy as np
import pytest

from config import get_settings
from core.image.pixel_buffer import PixelBuffer


class FakeSurface:
    """
    Minimal drawing surface backed by an RGBA NumPy image.

    Reads outside the surface come back as transparent black.
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 4), dtype=np.uint8)
        self.reads = []

    def get_pixels(self, x, y, width, height):
        self.reads.append((x, y, width, height))
        out = np.zeros((height, width, 4), dtype=np.uint8)
        x2 = min(x + width, self.width)
        y2 = min(y + height, self.height)
        if x2 > x and y2 > y:
            out[: y2 - y, : x2 - x] = self.pixels[y:y2, x:x2]
        return out.reshape(-1)


def make_buffer(width, height, color=0x000000, alpha=255, checked=True):
    """Create a buffer filled with one RGB24 color."""
    image = np.zeros((height, width, 4), dtype=np.uint8)
    image[:, :] = [(color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF, alpha]
    return PixelBuffer(image.reshape(-1), width, height, checked=checked)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear cached settings so environment overrides do not leak between tests"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def uniform_buffer():
    """3x3 buffer filled with 0x336699, fully opaque"""
    return make_buffer(3, 3, color=0x336699)


@pytest.fixture
def small_buffer():
    """2x2 black buffer, fully opaque"""
    return make_buffer(2, 2)


@pytest.fixture
def surface():
    """6x4 surface with a distinct color in every pixel"""
    surface = FakeSurface(6, 4)
    for y in range(4):
        for x in range(6):
            surface.pixels[y, x] = [x * 10, y * 10, x + y, 255]
    return surface


@pytest.fixture
def buffer_factory():
    """Factory for solid-color buffers: buffer_factory(width, height, color=..., alpha=...)"""
    return make_buffer


@pytest.fixture
def surface_factory():
    """Factory for blank surfaces: surface_factory(width, height)"""
    return FakeSurface
