"""
Construction sources for pixel buffers.

A pixel buffer is built from exactly one of a closed set of source variants.
The caller picks the variant; each carries only the fields its path needs:
- BufferSource: an existing buffer (anything with data, width, height)
- ArraySource: a raw RGBA channel array plus size information
- ImageSource: an already decoded image as a NumPy array
- SurfaceSource: a drawing surface that can hand out pixels for a rectangle
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Sequence, Union, runtime_checkable

import numpy as np
from pydantic import ValidationError

from common.base import Rect
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

RectLike = Union[Rect, Dict[str, Any]]


@runtime_checkable
class Surface(Protocol):
    """A drawing surface that can extract RGBA pixels for a sub-rectangle."""

    width: int
    height: int

    def get_pixels(self, x: int, y: int, width: int, height: int) -> np.ndarray:
        """Return RGBA pixels, flat or shaped (height, width, 4)."""
        ...


def as_rect(rect: Optional[RectLike]) -> Optional[Rect]:
    """
    Normalize a Rect or dictionary to a Rect (None passes through).

    Raises:
        ConfigurationError: If the dictionary holds negative or non-numeric values
    """
    if rect is None or isinstance(rect, Rect):
        return rect

    try:
        return Rect.from_dict(rect)
    except (ValidationError, ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Invalid rect {rect!r}: {e}")
        raise ConfigurationError("Invalid size information", details={"rect": rect}) from e


@dataclass(frozen=True)
class BufferSource:
    """Existing pixel data that already knows its own size."""

    buffer: Any
    rect: Optional[RectLike] = None


@dataclass(frozen=True)
class ArraySource:
    """Raw RGBA channel array. Needs a rect with at least width or height."""

    data: Union[np.ndarray, bytearray, bytes, Sequence[int]]
    rect: Optional[RectLike] = None


@dataclass(frozen=True)
class ImageSource:
    """Decoded image: (h, w) gray, (h, w, 3) RGB or (h, w, 4) RGBA."""

    image: np.ndarray
    rect: Optional[RectLike] = None


@dataclass(frozen=True)
class SurfaceSource:
    """Drawing surface read over rect, or over its full extent when rect is None."""

    surface: Surface
    rect: Optional[RectLike] = None


PixelSource = Union[BufferSource, ArraySource, ImageSource, SurfaceSource]
