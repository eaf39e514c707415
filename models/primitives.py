"""
Shared primitive data types for the game framework.

This module provides basic geometric and color types used throughout
the codebase: pointer positions, playfield dimensions, and palette colors.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and coordinates.

    Coordinates can be positive, negative, or zero. Pointer positions
    reported by input sources are screen coordinates and may fall
    outside the playfield when the cursor leaves the window.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.x
        100.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Input sources speak in vectors, geometry speaks in points
Vector2D = Point2D


class Resolution(BaseModel):
    """Playfield or window resolution.

    The playfield geometry bounds all clamping and collision math and
    must be known before any entity is created.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> field = Resolution(width=800, height=600)
        >>> field.aspect_ratio
        1.3333333333333333
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque

    Examples:
        >>> red = Color(r=255, g=0, b=0, a=255)
        >>> Color.from_hex('#4ECDC4').as_rgb_tuple
        (78, 205, 196)
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """Parse a '#RRGGBB' or '#RRGGBBAA' string.

        Args:
            value: Hex color string, leading '#' optional

        Returns:
            Parsed Color

        Raises:
            ValueError: If the string is not 6 or 8 hex digits
        """
        digits = value.strip().lstrip('#')
        if len(digits) not in (6, 8):
            raise ValueError(f'Hex color must have 6 or 8 digits, got {value!r}')
        try:
            parts = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f'Invalid hex color {value!r}') from None
        return cls(r=parts[0], g=parts[1], b=parts[2], a=parts[3] if len(parts) == 4 else 255)

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility.

        Returns:
            Tuple of (r, g, b, a) values
        """
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha).

        Returns:
            Tuple of (r, g, b) values
        """
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"
