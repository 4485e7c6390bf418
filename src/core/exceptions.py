"""
Custom exceptions for pixelwrap.
Provides consistent error reporting across construction and pixel access.
"""

from typing import Dict, Optional


class PixelBufferException(Exception):
    """Base exception for pixelwrap."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(PixelBufferException):
    """Exception raised when a buffer cannot be sized from the given parameters."""

    def __init__(self, reason: str, details: Optional[Dict] = None):
        super().__init__(message=f"Invalid buffer configuration: {reason}", details=details)
        self.reason = reason


class UnsupportedSourceError(PixelBufferException, TypeError):
    """Exception raised when a buffer is built from an unknown kind of source."""

    def __init__(self, source: object, reason: str = "Unknown image source"):
        super().__init__(
            message=f"{reason}: {type(source).__name__}",
            details={"source_type": type(source).__name__},
        )


class PixelIndexError(PixelBufferException, IndexError):
    """Exception raised when a checked accessor gets coordinates outside the buffer."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(
            message=f"Pixel ({x}, {y}) out of bounds for {width}x{height} buffer",
            details={"x": x, "y": y, "width": width, "height": height},
        )
