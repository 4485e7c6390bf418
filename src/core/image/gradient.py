"""
Ring gradient search over a pixel buffer.

Samples a fixed number of points on a circle around a pixel and reports the
direction (cos, sin of the sample angle) toward the color that differs least
or most from a reference color. The reference is the center pixel's own color
unless one is given explicitly.

Sample angles run downward from 2*pi in equal steps. Each candidate point is
rounded to the nearest pixel and skipped if it falls outside the buffer. The
first sample that reaches the extremal divergence wins; later ties do not
replace it. When every candidate is skipped the result has no direction.
"""

import logging
import math
import sys
from typing import TYPE_CHECKING, Optional, Union

from common.base import GradientResult
from common.constants import PixelConstants
from common.enums import GradientMode
from config import get_settings
from core.image.colors import absolute_diff
from core.utils.enum_converter import parse_enum

if TYPE_CHECKING:
    from core.image.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def find_gradient(
    buffer: "PixelBuffer",
    x: int,
    y: int,
    mode: Union[GradientMode, str] = GradientMode.MIN,
    color: Optional[int] = None,
    radius: Optional[int] = None,
    sample_count: Optional[int] = None,
) -> GradientResult:
    """
    Find the direction of extremal color divergence around (x, y).

    Args:
        buffer: Pixel buffer to read from (never written)
        x: Center X coordinate
        y: Center Y coordinate
        mode: GradientMode.MIN for least change, GradientMode.MAX for most change
        color: RGB24 reference color (defaults to the color at (x, y))
        radius: Ring radius in pixels (defaults to settings.pixels.default_radius)
        sample_count: Number of ring samples (defaults to settings.pixels.default_sample_count)

    Returns:
        GradientResult with dx, dy and divergence, all None if no sample was in bounds

    Raises:
        ValueError: If mode is not a GradientMode, radius is negative or
            sample_count is less than 1
    """
    mode = parse_enum(mode, GradientMode, GradientMode.MIN, normalize=True)

    settings = get_settings().pixels
    if radius is None:
        radius = settings.default_radius
    if sample_count is None:
        sample_count = settings.default_sample_count

    if radius < 0:
        raise ValueError(f"Radius must be non-negative, got {radius}")
    if sample_count < 1:
        raise ValueError(f"Sample count must be at least 1, got {sample_count}")

    if color is None:
        color = buffer.get_color(x, y)

    data = buffer.data
    width = buffer.width
    height = buffer.height
    find_max = mode == GradientMode.MAX

    best = -1 if find_max else sys.maxsize
    best_dx = best_dy = None

    dtheta = 2 * math.pi / sample_count
    for i in range(sample_count):
        theta = 2 * math.pi - i * dtheta
        dx = math.cos(theta)
        dy = math.sin(theta)

        tx = int(round(x + radius * dx))
        ty = int(round(y + radius * dy))
        if tx < 0 or tx >= width or ty < 0 or ty >= height:
            continue

        ind = PixelConstants.CHANNELS * (ty * width + tx)
        divergence = absolute_diff(data[ind], data[ind + 1], data[ind + 2], color)

        if (find_max and divergence > best) or (not find_max and divergence < best):
            best = divergence
            best_dx = dx
            best_dy = dy

    if best_dx is None:
        logger.debug(f"No ring sample at radius {radius} around ({x}, {y}) is inside the buffer")
        return GradientResult()

    return GradientResult(dx=best_dx, dy=best_dy, divergence=best)


def min_gradient(
    buffer: "PixelBuffer",
    x: int,
    y: int,
    color: Optional[int] = None,
    radius: Optional[int] = None,
    sample_count: Optional[int] = None,
) -> GradientResult:
    """Direction of least color change from (x, y), or from color if given."""
    return find_gradient(buffer, x, y, GradientMode.MIN, color, radius, sample_count)


def max_gradient(
    buffer: "PixelBuffer",
    x: int,
    y: int,
    color: Optional[int] = None,
    radius: Optional[int] = None,
    sample_count: Optional[int] = None,
) -> GradientResult:
    """Direction of most color change from (x, y), or from color if given."""
    return find_gradient(buffer, x, y, GradientMode.MAX, color, radius, sample_count)
