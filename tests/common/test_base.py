"""
Tests for common.base models.
"""

import pytest
from pydantic import ValidationError

from common.base import GradientResult, Rect


class TestRect:
    """Tests for the Rect model."""

    def test_defaults(self):
        """Test origin defaults to (0, 0) with no size."""
        rect = Rect()

        assert (rect.x, rect.y) == (0, 0)
        assert rect.width is None
        assert rect.height is None
        assert not rect.has_size

    def test_validation(self):
        """Test negative origin and non-positive size are rejected."""
        with pytest.raises(ValidationError):
            Rect(x=-1)

        with pytest.raises(ValidationError):
            Rect(width=0)

    def test_from_dict_treats_falsy_sizes_as_missing(self):
        """Test zero or None sizes become unset."""
        rect = Rect.from_dict({"x": 2, "width": 0, "height": None})

        assert rect.x == 2
        assert rect.width is None
        assert rect.height is None

    def test_to_dict(self):
        """Test dictionary round trip."""
        data = {"x": 1, "y": 2, "width": 3, "height": 4}

        assert Rect.from_dict(data).to_dict() == data

    def test_edges(self):
        """Test right and bottom edges need a size."""
        assert Rect(x=2, y=3, width=4, height=5).x2 == 6
        assert Rect(x=2, y=3, width=4, height=5).y2 == 8
        assert Rect(x=2).x2 is None

    def test_resolve(self):
        """Test missing sizes come from the surface."""
        assert Rect(x=1, width=2).resolve(10, 20) == Rect(x=1, width=2, height=20)

    def test_clip(self):
        """Test clipping to surface bounds."""
        assert Rect(x=8, y=8, width=5, height=5).clip(10, 10) == Rect(
            x=8, y=8, width=2, height=2
        )
        assert Rect(x=10, y=0, width=5, height=5).clip(10, 10) is None


class TestGradientResult:
    """Tests for the GradientResult model."""

    def test_empty_result(self):
        """Test a default result has no direction."""
        result = GradientResult()

        assert not result.found
        assert result.as_tuple() is None

    def test_found_result(self):
        """Test a result with dx and dy is found."""
        result = GradientResult(dx=0.0, dy=-1.0, divergence=0)

        assert result.found
        assert result.as_tuple() == (0.0, -1.0)
