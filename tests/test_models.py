"""
Model Tests

Tests for the shared primitive types.

Run with: pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError

from models import Color, Point2D, Resolution


class TestColor:

    def test_from_hex(self):
        assert Color.from_hex('#4ECDC4').as_rgb_tuple == (78, 205, 196)

    def test_from_hex_with_alpha(self):
        assert Color.from_hex('#FF6B6B80').as_tuple == (255, 107, 107, 128)

    def test_from_hex_without_hash(self):
        assert Color.from_hex('98d8c8').as_rgb_tuple == (152, 216, 200)

    @pytest.mark.parametrize("value", ['#FFF', '#GGGGGG', 'red', ''])
    def test_from_hex_rejects(self, value):
        with pytest.raises(ValueError):
            Color.from_hex(value)

    def test_component_range(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)


class TestResolution:

    def test_aspect_ratio(self):
        assert Resolution(width=800, height=600).aspect_ratio == pytest.approx(4 / 3)

    def test_must_be_positive(self):
        with pytest.raises(ValidationError):
            Resolution(width=0, height=600)

    def test_frozen(self):
        field = Resolution(width=800, height=600)
        with pytest.raises(ValidationError):
            field.width = 10


class TestPoint2D:

    def test_str(self):
        assert str(Point2D(x=1, y=2.5)) == "Point2D(x=1.00, y=2.50)"
