"""
Packed color utilities.

Converts between separate R, G, B, A channel values and the two packed
integer forms used by pixel buffers:
- RGB24:  0xRRGGBB (alpha ignored)
- ARGB32: 0xAARRGGBB

Unpacking shifts and masks each byte; nothing is clamped or rounded.
"""

from typing import Tuple

from common.constants import PixelConstants

_MASK = PixelConstants.BYTE_MASK


def unpack_rgb(color: int) -> Tuple[int, int, int]:
    """
    Split an RGB24 color into channels.

    Args:
        color: Packed 0xRRGGBB value (higher bits are ignored)

    Returns:
        Tuple of (r, g, b)
    """
    return (_MASK & (color >> 16), _MASK & (color >> 8), _MASK & color)


def unpack_argb(color: int) -> Tuple[int, int, int, int]:
    """
    Split an ARGB32 color into channels.

    Args:
        color: Packed 0xAARRGGBB value

    Returns:
        Tuple of (r, g, b, a)
    """
    return (_MASK & (color >> 16), _MASK & (color >> 8), _MASK & color, _MASK & (color >> 24))


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack channels into an RGB24 color."""
    return (int(r) << 16) + (int(g) << 8) + int(b)


def pack_argb(r: int, g: int, b: int, a: int) -> int:
    """Pack channels into an ARGB32 color."""
    return (int(a) << 24) + (int(r) << 16) + (int(g) << 8) + int(b)


def signed_diff(r: int, g: int, b: int, color: int) -> int:
    """Sum of (channel - color channel) over R, G, B."""
    cr, cg, cb = unpack_rgb(color)
    return (int(r) - cr) + (int(g) - cg) + (int(b) - cb)


def absolute_diff(r: int, g: int, b: int, color: int) -> int:
    """Sum of |channel - color channel| over R, G, B."""
    cr, cg, cb = unpack_rgb(color)
    return abs(int(r) - cr) + abs(int(g) - cg) + abs(int(b) - cb)
