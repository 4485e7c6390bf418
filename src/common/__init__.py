"""
Common package - fundamental types without external project dependencies.

This package contains basic types that are used throughout the system:
- Enums (Channel, GradientMode)
- Constants (PixelConstants, GradientConstants, SystemConstants)
- Base models (Rect, GradientResult)

IMPORTANT: This package must NOT import from any other project packages
(core, config) to avoid circular dependencies.
"""

# Export base models
from common.base import GradientResult, Rect

# Export all constants
from common.constants import GradientConstants, PixelConstants, SystemConstants

# Export all enums
from common.enums import Channel, GradientMode

__all__ = [
    # Enums
    "Channel",
    "GradientMode",
    # Constants
    "GradientConstants",
    "PixelConstants",
    "SystemConstants",
    # Base models
    "GradientResult",
    "Rect",
]
