"""
Enum conversion utilities.

Accepts either enum members or their string values. Unknown values are
rejected rather than mapped to a default.
"""

from enum import Enum
from typing import Any, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def parse_enum(
    value: Any, enum_class: Type[E], default: Optional[E] = None, normalize: bool = False
) -> E:
    """
    Parse value to a member of enum_class.

    Args:
        value: Enum member, its value, or None
        enum_class: Enum class to parse to
        default: Member returned when value is None
        normalize: Whether to lowercase strings before parsing
            (for case-insensitive matching)

    Returns:
        Parsed enum member

    Raises:
        ValueError: If value is not a member of enum_class, or is None without a default

    Example:
        >>> parse_enum("MAX", GradientMode, normalize=True)
        <GradientMode.MAX: 'max'>
    """
    if isinstance(value, enum_class):
        return value

    if value is None:
        if default is None:
            raise ValueError(f"A {enum_class.__name__} value is required")
        return default

    if normalize and isinstance(value, str):
        value = value.lower()

    try:
        return enum_class(value)
    except ValueError:
        valid = ", ".join(repr(member.value) for member in enum_class)
        raise ValueError(
            f"Invalid {enum_class.__name__} {value!r}, expected one of {valid}"
        ) from None
