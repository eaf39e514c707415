"""Ball entity with per-tick velocity.

The ball travels a fixed (dx, dy) each tick. Its nominal speed scales
the paddle rebound; the actual velocity magnitude only grows through
the paddle speed-up.
"""

from dataclasses import dataclass
import math
import random
from typing import Optional, Tuple

from models import Resolution

from ...config import BallConfig


@dataclass
class Ball:
    """Mutable ball state. (x, y) is the center."""

    x: float
    y: float
    radius: float
    speed: float
    dx: float = 0.0
    dy: float = 0.0

    @classmethod
    def create(
        cls,
        config: BallConfig,
        field: Resolution,
        rng: Optional[random.Random] = None,
    ) -> 'Ball':
        """Create a ball at the field center, launched upward.

        Args:
            config: Ball configuration
            field: Playfield geometry
            rng: Random source for the horizontal direction
        """
        ball = cls(x=0.0, y=0.0, radius=config.radius, speed=config.speed)
        ball.reset(field, rng)
        return ball

    @property
    def velocity_magnitude(self) -> float:
        """Get current speed (length of the velocity vector)."""
        return math.sqrt(self.dx * self.dx + self.dy * self.dy)

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        return (self.left, self.top, self.right, self.bottom)

    def reset(self, field: Resolution, rng: Optional[random.Random] = None) -> None:
        """Recenter the ball with the launch velocity.

        The horizontal direction is random; the ball always starts
        moving up at the nominal speed on each axis.

        Args:
            field: Playfield geometry
            rng: Random source (module-level random if None)
        """
        chooser = rng if rng is not None else random
        self.x = field.width / 2
        self.y = field.height / 2
        self.dx = self.speed * (1 if chooser.random() > 0.5 else -1)
        self.dy = -self.speed

    def bounce_horizontal(self) -> None:
        """Bounce off vertical surface (reverse X velocity)."""
        self.dx = -self.dx

    def bounce_vertical(self) -> None:
        """Bounce off horizontal surface (reverse Y velocity)."""
        self.dy = -self.dy
