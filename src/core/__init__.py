"""
Core modules for pixelwrap
"""

from .exceptions import (
    ConfigurationError,
    PixelBufferException,
    PixelIndexError,
    UnsupportedSourceError,
)
from .image import PixelBuffer

__all__ = [
    "PixelBuffer",
    "PixelBufferException",
    "ConfigurationError",
    "UnsupportedSourceError",
    "PixelIndexError",
]
