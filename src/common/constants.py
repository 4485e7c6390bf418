"""
Constants for the pixel buffer system.
Centralizes all magic numbers and configuration constants.
"""


# Pixel layout constants
class PixelConstants:
    """Constants related to RGBA pixel storage."""

    # Bytes per pixel (R, G, B, A)
    CHANNELS = 4

    # Packed color byte mask
    BYTE_MASK = 0xFF


# Gradient search constants
class GradientConstants:
    """Constants related to ring gradient search."""

    DEFAULT_RADIUS = 4
    MIN_RADIUS = 0
    MAX_RADIUS = 1024

    DEFAULT_SAMPLE_COUNT = 12
    MIN_SAMPLE_COUNT = 1
    MAX_SAMPLE_COUNT = 360


# System Constants
class SystemConstants:
    """System-wide constants."""

    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
