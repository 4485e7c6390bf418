"""
Pixel buffer - coordinate-addressed access to flat RGBA channel data.

Wraps a one-dimensional uint8 NumPy array (R, G, B, A per pixel, row-major,
top-left origin) together with its width and height, and provides:
- Packed color reads/writes (RGB24 and ARGB32)
- Single channel reads/writes
- Channel difference metrics against a reference color
- Ring gradient search (see core.image.gradient)

Accessors are bounds-checked unless the buffer is created with checked=False,
in which case coordinates go straight into the index arithmetic.
"""

import logging
import weakref
from typing import Any, Dict, Optional

import cv2
import numpy as np

from common.base import GradientResult, Rect
from common.constants import PixelConstants
from common.enums import Channel
from config import get_settings
from core.exceptions import ConfigurationError, PixelIndexError, UnsupportedSourceError
from core.image import colors, gradient
from core.image.sources import (
    ArraySource,
    BufferSource,
    ImageSource,
    PixelSource,
    RectLike,
    Surface,
    SurfaceSource,
    as_rect,
)

logger = logging.getLogger(__name__)

CHANNELS = PixelConstants.CHANNELS


def _as_channel_array(data: Any) -> np.ndarray:
    """
    Get a flat uint8 view of channel data.

    Writable buffers (NumPy arrays, bytearray, memoryview) are shared, not copied.
    Immutable sequences are copied into a new array.
    """
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8:
            raise UnsupportedSourceError(
                data, reason=f"Channel data must be uint8, got {data.dtype}"
            )
        return data.reshape(-1)

    if isinstance(data, (bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)

    if isinstance(data, bytes):
        return np.frombuffer(data, dtype=np.uint8).copy()

    if isinstance(data, (list, tuple)):
        return np.array(data, dtype=np.uint8)

    raise UnsupportedSourceError(data, reason="Unknown channel data")


def _to_rgba(image: np.ndarray) -> np.ndarray:
    """Expand a decoded gray, RGB or RGBA image into a new RGBA image."""
    if image.dtype != np.uint8:
        raise UnsupportedSourceError(image, reason=f"Image must be uint8, got {image.dtype}")

    if image.ndim == 2 or (image.ndim == 3 and image.shape[2] == 1):
        return cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)

    if image.ndim == 3 and image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_RGB2RGBA)

    if image.ndim == 3 and image.shape[2] == 4:
        return image.copy()

    raise UnsupportedSourceError(image, reason=f"Unsupported image shape {image.shape}")


def _derive_dimension(pixel_count: int, given: int) -> int:
    """Derive the missing dimension of a raw array from the one that was given."""
    if pixel_count % given != 0:
        raise ConfigurationError(
            f"{pixel_count} pixels cannot be split into rows of {given}",
            details={"pixels": pixel_count, "given": given},
        )
    return pixel_count // given


class PixelBuffer:
    """
    RGBA pixel data with coordinate-indexed channel and color access.

    The shape is fixed at construction; channel values are mutated in place.
    The data array may be shared with the object it was built from.
    """

    def __init__(
        self,
        data: Any,
        width: int,
        height: int,
        rect: Optional[RectLike] = None,
        source: Any = None,
        checked: Optional[bool] = None,
    ):
        """
        Wrap existing channel data.

        Args:
            data: RGBA channel data (NumPy uint8 array, bytearray, bytes or int sequence)
            width: Width in pixels
            height: Height in pixels
            rect: Rectangle of the original surface this data was read from
            source: Originating object, held by weak reference only
            checked: Bounds-check accessors (defaults to settings.pixels.bounds_check)

        Raises:
            ConfigurationError: If the dimensions do not match the data length
            UnsupportedSourceError: If data is not a recognized channel container
        """
        width = int(width)
        height = int(height)
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Dimensions must be positive, got {width}x{height}",
                details={"width": width, "height": height},
            )

        channels = _as_channel_array(data)
        expected = width * height * CHANNELS
        if channels.size != expected:
            raise ConfigurationError(
                f"Data length {channels.size} does not match {width}x{height}x{CHANNELS}",
                details={"length": int(channels.size), "expected": expected},
            )

        self._data = channels
        self._width = width
        self._height = height
        self._rect = as_rect(rect)
        self._source_ref = None
        self.source = source
        self._checked = get_settings().pixels.bounds_check if checked is None else bool(checked)

    # ------------------------------------------------------------------ #
    # Construction from sources
    # ------------------------------------------------------------------ #

    @classmethod
    def from_source(cls, source: PixelSource, checked: Optional[bool] = None) -> "PixelBuffer":
        """
        Build a buffer from one of the source variants.

        Raises:
            ConfigurationError: If the source lacks usable size information
            UnsupportedSourceError: If source is not a recognized variant
        """
        if isinstance(source, BufferSource):
            return cls._build_from_buffer(source, checked)
        if isinstance(source, ArraySource):
            return cls._build_from_array(source, checked)
        if isinstance(source, ImageSource):
            return cls._build_from_image(source, checked)
        if isinstance(source, SurfaceSource):
            return cls._build_from_surface(source, checked)

        logger.warning(f"Cannot build pixel buffer from {type(source).__name__}")
        raise UnsupportedSourceError(source)

    @classmethod
    def from_buffer(
        cls, buffer: Any, rect: Optional[RectLike] = None, checked: Optional[bool] = None
    ) -> "PixelBuffer":
        """Share the data of an existing buffer (anything with data, width, height)."""
        return cls.from_source(BufferSource(buffer, rect), checked)

    @classmethod
    def from_array(
        cls, data: Any, rect: Optional[RectLike] = None, checked: Optional[bool] = None
    ) -> "PixelBuffer":
        """Wrap a raw RGBA channel array; rect must give width and/or height."""
        return cls.from_source(ArraySource(data, rect), checked)

    @classmethod
    def from_image(
        cls, image: np.ndarray, rect: Optional[RectLike] = None, checked: Optional[bool] = None
    ) -> "PixelBuffer":
        """Copy a decoded image (optionally a sub-rectangle of it) into a new buffer."""
        return cls.from_source(ImageSource(image, rect), checked)

    @classmethod
    def from_surface(
        cls, surface: Surface, rect: Optional[RectLike] = None, checked: Optional[bool] = None
    ) -> "PixelBuffer":
        """Read pixels from a drawing surface, over rect or the whole surface."""
        return cls.from_source(SurfaceSource(surface, rect), checked)

    @classmethod
    def _build_from_buffer(cls, source: BufferSource, checked: Optional[bool]) -> "PixelBuffer":
        buffer = source.buffer
        if not all(hasattr(buffer, attr) for attr in ("data", "width", "height")):
            logger.warning(f"Buffer source {type(buffer).__name__} lacks data/width/height")
            raise UnsupportedSourceError(buffer, reason="Buffer source lacks data/width/height")

        if checked is None and isinstance(buffer, PixelBuffer):
            checked = buffer.checked

        return cls(
            buffer.data,
            buffer.width,
            buffer.height,
            rect=source.rect,
            source=buffer,
            checked=checked,
        )

    @classmethod
    def _build_from_array(cls, source: ArraySource, checked: Optional[bool]) -> "PixelBuffer":
        rect = as_rect(source.rect)
        if rect is None or not rect.has_size:
            logger.warning("Raw channel array given without width or height")
            raise ConfigurationError("Size information required")

        data = _as_channel_array(source.data)
        if data.size % CHANNELS != 0:
            raise ConfigurationError(
                f"Data length {data.size} is not a multiple of {CHANNELS}",
                details={"length": int(data.size)},
            )
        pixel_count = data.size // CHANNELS

        if rect.width is not None and rect.height is not None:
            width, height = rect.width, rect.height
        elif rect.width is not None:
            width = rect.width
            height = _derive_dimension(pixel_count, width)
        else:
            height = rect.height
            width = _derive_dimension(pixel_count, height)

        logger.debug(f"Wrapping raw channel array as {width}x{height}")
        return cls(data, width, height, source=source.data, checked=checked)

    @classmethod
    def _build_from_image(cls, source: ImageSource, checked: Optional[bool]) -> "PixelBuffer":
        image = source.image
        if not isinstance(image, np.ndarray):
            logger.warning(f"Image source is {type(image).__name__}, expected NumPy array")
            raise UnsupportedSourceError(image, reason="Image source must be a NumPy array")

        rgba = _to_rgba(image)
        rect = as_rect(source.rect)

        if rect is not None:
            img_height, img_width = rgba.shape[:2]
            clipped = rect.clip(img_width, img_height)
            if clipped is None:
                raise ConfigurationError(
                    f"Rect lies outside the {img_width}x{img_height} image",
                    details={"rect": rect.to_dict()},
                )
            rgba = rgba[clipped.y : clipped.y2, clipped.x : clipped.x2]
            rect = clipped

        rgba = np.ascontiguousarray(rgba)
        height, width = rgba.shape[:2]

        logger.debug(f"Copied {width}x{height} pixels from decoded image")
        return cls(rgba, width, height, rect=rect, source=image, checked=checked)

    @classmethod
    def _build_from_surface(cls, source: SurfaceSource, checked: Optional[bool]) -> "PixelBuffer":
        surface = source.surface
        if not isinstance(surface, Surface):
            logger.warning(f"Surface source {type(surface).__name__} lacks get_pixels")
            raise UnsupportedSourceError(surface, reason="Surface lacks width/height/get_pixels")

        rect = as_rect(source.rect)
        region = (rect or Rect()).resolve(surface.width, surface.height)
        pixels = surface.get_pixels(region.x, region.y, region.width, region.height)

        logger.debug(
            f"Read {region.width}x{region.height} pixels from surface at ({region.x}, {region.y})"
        )
        return cls(pixels, region.width, region.height, rect=rect, source=surface, checked=checked)

    # ------------------------------------------------------------------ #
    # Metadata
    # ------------------------------------------------------------------ #

    @property
    def data(self) -> np.ndarray:
        """Flat uint8 RGBA channel data."""
        return self._data

    @property
    def image(self) -> np.ndarray:
        """(height, width, 4) view of the channel data."""
        return self._data.reshape(self._height, self._width, CHANNELS)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def checked(self) -> bool:
        """True if accessors validate coordinates."""
        return self._checked

    @property
    def rect(self) -> Optional[Rect]:
        """Rectangle of the original source, or None if none was given."""
        return self._rect

    @rect.setter
    def rect(self, value: Optional[RectLike]) -> None:
        self._rect = as_rect(value)

    @property
    def source(self) -> Any:
        """Originating object, or None once it has been released."""
        return None if self._source_ref is None else self._source_ref()

    @source.setter
    def source(self, value: Any) -> None:
        if value is None:
            self._source_ref = None
            return
        try:
            self._source_ref = weakref.ref(value)
        except TypeError:
            # bytearray, bytes, list and friends cannot be weakly referenced
            logger.debug(f"Not keeping reference to {type(value).__name__} source")
            self._source_ref = None

    def copy(self) -> "PixelBuffer":
        """Get an independent buffer with copied data and the same metadata."""
        return PixelBuffer(
            self._data.copy(),
            self._width,
            self._height,
            rect=self._rect,
            source=self.source,
            checked=self._checked,
        )

    # ------------------------------------------------------------------ #
    # Indexing
    # ------------------------------------------------------------------ #

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) lies inside the buffer."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _index(self, x: int, y: int) -> int:
        if self._checked and not (0 <= x < self._width and 0 <= y < self._height):
            raise PixelIndexError(x, y, self._width, self._height)
        return CHANNELS * (y * self._width + x)

    # ------------------------------------------------------------------ #
    # Channel groups and packed colors
    # ------------------------------------------------------------------ #

    def get_channels(self, x: int, y: int) -> Dict[str, int]:
        """Get the R, G, B channels at (x, y). Alpha is ignored."""
        ind = self._index(x, y)
        d = self._data
        return {"r": int(d[ind]), "g": int(d[ind + 1]), "b": int(d[ind + 2])}

    def get_channels_with_alpha(self, x: int, y: int) -> Dict[str, int]:
        """Get the R, G, B, A channels at (x, y)."""
        ind = self._index(x, y)
        d = self._data
        return {"r": int(d[ind]), "g": int(d[ind + 1]), "b": int(d[ind + 2]), "a": int(d[ind + 3])}

    def get_color(self, x: int, y: int) -> int:
        """Get the RGB24 color at (x, y)."""
        ind = self._index(x, y)
        d = self._data
        return colors.pack_rgb(d[ind], d[ind + 1], d[ind + 2])

    def get_color_a(self, x: int, y: int) -> int:
        """Get the ARGB32 color at (x, y)."""
        ind = self._index(x, y)
        d = self._data
        return colors.pack_argb(d[ind], d[ind + 1], d[ind + 2], d[ind + 3])

    def set_color(self, x: int, y: int, color: int) -> None:
        """Set the RGB24 color at (x, y). The alpha byte is left untouched."""
        ind = self._index(x, y)
        self._data[ind : ind + 3] = colors.unpack_rgb(color)

    def set_color_a(self, x: int, y: int, color: int) -> None:
        """Set the ARGB32 color at (x, y), alpha included."""
        ind = self._index(x, y)
        self._data[ind : ind + 4] = colors.unpack_argb(color)

    # ------------------------------------------------------------------ #
    # Single channels
    # ------------------------------------------------------------------ #

    def get_channel(self, x: int, y: int, channel: Channel) -> int:
        return int(self._data[self._index(x, y) + channel])

    def set_channel(self, x: int, y: int, channel: Channel, value: int) -> None:
        # No clamping: value must already be within 0-255
        self._data[self._index(x, y) + channel] = value

    def get_red(self, x: int, y: int) -> int:
        return self.get_channel(x, y, Channel.RED)

    def get_green(self, x: int, y: int) -> int:
        return self.get_channel(x, y, Channel.GREEN)

    def get_blue(self, x: int, y: int) -> int:
        return self.get_channel(x, y, Channel.BLUE)

    def get_alpha(self, x: int, y: int) -> int:
        return self.get_channel(x, y, Channel.ALPHA)

    def set_red(self, x: int, y: int, value: int) -> None:
        self.set_channel(x, y, Channel.RED, value)

    def set_green(self, x: int, y: int, value: int) -> None:
        self.set_channel(x, y, Channel.GREEN, value)

    def set_blue(self, x: int, y: int, value: int) -> None:
        self.set_channel(x, y, Channel.BLUE, value)

    def set_alpha(self, x: int, y: int, value: int) -> None:
        self.set_channel(x, y, Channel.ALPHA, value)

    # ------------------------------------------------------------------ #
    # Color differences
    # ------------------------------------------------------------------ #

    def signed_channel_diff(self, x: int, y: int, color: int) -> int:
        """
        Sum of the channel differences between the pixel and an RGB24 color.

        The color channels are subtracted from the pixel channels, so a positive
        result means the pixel is brighter than the color. Alpha is ignored.
        """
        ind = self._index(x, y)
        d = self._data
        return colors.signed_diff(d[ind], d[ind + 1], d[ind + 2], color)

    def absolute_channel_diff(self, x: int, y: int, color: int) -> int:
        """Sum of the absolute channel differences between the pixel and an RGB24 color."""
        ind = self._index(x, y)
        d = self._data
        return colors.absolute_diff(d[ind], d[ind + 1], d[ind + 2], color)

    # ------------------------------------------------------------------ #
    # Gradient search
    # ------------------------------------------------------------------ #

    def min_grad(
        self,
        x: int,
        y: int,
        color: Optional[int] = None,
        radius: Optional[int] = None,
        sample_count: Optional[int] = None,
    ) -> GradientResult:
        """Direction of least color change from (x, y). See gradient.min_gradient."""
        return gradient.min_gradient(self, x, y, color, radius, sample_count)

    def max_grad(
        self,
        x: int,
        y: int,
        color: Optional[int] = None,
        radius: Optional[int] = None,
        sample_count: Optional[int] = None,
    ) -> GradientResult:
        """Direction of most color change from (x, y). See gradient.max_gradient."""
        return gradient.max_gradient(self, x, y, color, radius, sample_count)

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self._width}, height={self._height}, checked={self._checked})"
