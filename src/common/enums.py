"""
Centralized enums for the pixel buffer system.

This module contains all enumeration types used throughout the system,
providing a single source of truth for enum definitions.
"""

from enum import Enum


# Pixel channel enums
class Channel(int, Enum):
    """Color channels, valued by their byte offset within a pixel."""

    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


# Gradient search enums
class GradientMode(str, Enum):
    """Which extremum a gradient search looks for."""

    MIN = "min"
    MAX = "max"
