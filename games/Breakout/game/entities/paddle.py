"""Paddle entity driven by keyboard velocity or pointer position.

Keyboard input sets a horizontal velocity that the motion integrator
applies each tick; pointer input places the paddle directly. Either way
the paddle never leaves the playfield.
"""

from dataclasses import dataclass
from typing import Tuple

from models import Resolution

from ...config import PaddleConfig


@dataclass
class Paddle:
    """Mutable paddle state. (x, y) is the top-left corner."""

    x: float
    y: float
    width: float
    height: float
    speed: float
    dx: float = 0.0

    @classmethod
    def create(cls, config: PaddleConfig, field: Resolution) -> 'Paddle':
        """Create a stationary paddle centered near the bottom of the field.

        Args:
            config: Paddle configuration
            field: Playfield geometry
        """
        return cls(
            x=field.width / 2 - config.width / 2,
            y=field.height - config.bottom_margin,
            width=config.width,
            height=config.height,
            speed=config.speed,
        )

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self.x + self.width / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def clamp(self, field_width: float) -> None:
        """Keep the paddle inside [0, field_width - width]."""
        if self.x < 0:
            self.x = 0.0
        if self.x + self.width > field_width:
            self.x = field_width - self.width

    def move_to(self, pointer_x: float, field_width: float) -> None:
        """Center the paddle on a pointer X position, then clamp.

        Args:
            pointer_x: Pointer X in field coordinates
            field_width: Playfield width
        """
        self.x = pointer_x - self.width / 2
        self.clamp(field_width)

    def recenter(self, field_width: float) -> None:
        """Return to the center of the field and stop."""
        self.x = field_width / 2 - self.width / 2
        self.dx = 0.0
