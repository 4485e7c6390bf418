"""
Utility modules for core functionality.

Modules:
- enum_converter: Enum parsing and conversion
"""

from .enum_converter import parse_enum

__all__ = [
    "parse_enum",
]
