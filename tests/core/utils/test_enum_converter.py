"""
Tests for core.utils.enum_converter module.
"""

import pytest

from common.enums import Channel, GradientMode
from core.utils.enum_converter import parse_enum


class TestParseEnum:
    """Tests for parse_enum function."""

    def test_enum_passthrough(self):
        """Test enum members are returned unchanged."""
        assert parse_enum(GradientMode.MAX, GradientMode) is GradientMode.MAX

    def test_string_value(self):
        """Test exact string values parse."""
        assert parse_enum("min", GradientMode) is GradientMode.MIN

    def test_int_value(self):
        """Test non-string values parse by value."""
        assert parse_enum(2, Channel) is Channel.BLUE

    def test_normalize(self):
        """Test normalize enables case-insensitive parsing."""
        assert parse_enum("MAX", GradientMode, normalize=True) is GradientMode.MAX

        with pytest.raises(ValueError):
            parse_enum("MAX", GradientMode)

    def test_none_uses_default(self):
        """Test None gives the default when one is set."""
        assert parse_enum(None, GradientMode, GradientMode.MIN) is GradientMode.MIN

    def test_none_without_default(self):
        """Test None is rejected when there is no default."""
        with pytest.raises(ValueError, match="GradientMode"):
            parse_enum(None, GradientMode)

    @pytest.mark.parametrize("value", ["maximum", "sideways", "", 3.5])
    def test_unknown_value_rejected(self, value):
        """Test unknown values raise instead of falling back to the default."""
        with pytest.raises(ValueError, match="expected one of 'min', 'max'"):
            parse_enum(value, GradientMode, GradientMode.MIN, normalize=True)
