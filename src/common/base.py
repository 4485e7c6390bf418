"""
Base data models - fundamental types without dependencies.

This module contains basic Pydantic models used throughout the system:
- Rect: sub-rectangle of a larger surface, with optional size
- GradientResult: direction found by a ring gradient search

IMPORTANT: This module must NOT import from core or config
to avoid circular dependencies.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """
    Rectangle descriptor for a region of a pixel surface.

    Width and height are optional: a raw channel array only needs one of them,
    and a surface read falls back to the surface size for whichever is missing.
    """

    x: int = Field(default=0, ge=0, description="X coordinate")
    y: int = Field(default=0, ge=0, description="Y coordinate")
    width: Optional[int] = Field(default=None, gt=0, description="Width")
    height: Optional[int] = Field(default=None, gt=0, description="Height")

    def to_dict(self) -> Dict[str, Optional[int]]:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rect":
        """Create Rect from dictionary. Missing or falsy sizes stay unset."""
        width = data.get("width")
        height = data.get("height")
        return cls(
            x=int(data.get("x") or 0),
            y=int(data.get("y") or 0),
            width=int(width) if width else None,
            height=int(height) if height else None,
        )

    @property
    def has_size(self) -> bool:
        """True if at least one of width or height is known."""
        return self.width is not None or self.height is not None

    @property
    def x2(self) -> Optional[int]:
        """Get right edge coordinate, if width is known."""
        return None if self.width is None else self.x + self.width

    @property
    def y2(self) -> Optional[int]:
        """Get bottom edge coordinate, if height is known."""
        return None if self.height is None else self.y + self.height

    def resolve(self, surface_width: int, surface_height: int) -> "Rect":
        """
        Fill in missing dimensions from the size of a surface.

        Args:
            surface_width: Width of the surface the rect refers to
            surface_height: Height of the surface the rect refers to

        Returns:
            New Rect with both width and height set
        """
        return Rect(
            x=self.x,
            y=self.y,
            width=self.width or surface_width,
            height=self.height or surface_height,
        )

    def clip(self, surface_width: int, surface_height: int) -> Optional["Rect"]:
        """
        Clip rect to surface bounds.

        Returns:
            Clipped Rect, or None if nothing of it lies on the surface
        """
        resolved = self.resolve(surface_width, surface_height)
        x = min(resolved.x, surface_width)
        y = min(resolved.y, surface_height)
        x2 = min(resolved.x + resolved.width, surface_width)
        y2 = min(resolved.y + resolved.height, surface_height)

        if x2 <= x or y2 <= y:
            return None

        return Rect(x=x, y=y, width=x2 - x, height=y2 - y)


class GradientResult(BaseModel):
    """
    Direction of extremal color divergence around a pixel.

    All fields are None when no ring sample fell inside the buffer.
    """

    dx: Optional[float] = None
    dy: Optional[float] = None
    divergence: Optional[int] = None

    @property
    def found(self) -> bool:
        """True if a direction was found."""
        return self.dx is not None and self.dy is not None

    def as_tuple(self) -> Optional[Tuple[float, float]]:
        """Get (dx, dy), or None if no direction was found."""
        if not self.found:
            return None
        return (self.dx, self.dy)
