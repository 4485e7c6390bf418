"""
Pixel buffer utilities.

This package provides:
- colors: RGB24/ARGB32 packing and channel difference helpers (pure functions)
- sources: the source variants a pixel buffer can be built from
- pixel_buffer: the PixelBuffer class
- gradient: ring gradient search (pure functions over a PixelBuffer)

All utilities are re-exported from this module for convenient access.
"""

# Color functions
from core.image.colors import (
    absolute_diff,
    pack_argb,
    pack_rgb,
    signed_diff,
    unpack_argb,
    unpack_rgb,
)

# Gradient search functions
from core.image.gradient import find_gradient, max_gradient, min_gradient

# Pixel buffer
from core.image.pixel_buffer import PixelBuffer

# Source variants
from core.image.sources import (
    ArraySource,
    BufferSource,
    ImageSource,
    PixelSource,
    Surface,
    SurfaceSource,
)

__all__ = [
    # Color functions
    "absolute_diff",
    "pack_argb",
    "pack_rgb",
    "signed_diff",
    "unpack_argb",
    "unpack_rgb",
    # Gradient search functions
    "find_gradient",
    "max_gradient",
    "min_gradient",
    # Pixel buffer
    "PixelBuffer",
    # Source variants
    "ArraySource",
    "BufferSource",
    "ImageSource",
    "PixelSource",
    "Surface",
    "SurfaceSource",
]
