"""Geometric skin - flat shapes with light gradient and glow accents."""

from typing import TYPE_CHECKING, Dict, Optional, Tuple

import pygame

from models import Color
from .base import BreakoutSkin

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class GeometricSkin(BreakoutSkin):
    """Renders game using simple geometric shapes.

    - Paddle: White rectangle shading to light gray at the bottom
    - Ball: White circle with a translucent glow ring
    - Bricks: Row-colored rectangles with a dark border
    - HUD: Score top left, lives top right
    - Messages: Centered text with a restart prompt
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes with gradient paddle and glowing ball"

    PADDLE_TOP_COLOR = (255, 255, 255)
    PADDLE_BOTTOM_COLOR = (221, 221, 221)

    BALL_COLOR = (255, 255, 255)
    BALL_GLOW_ALPHA = 60
    BALL_GLOW_RATIO = 1.6

    BRICK_BORDER_COLOR = (51, 51, 51)
    BRICK_BORDER_WIDTH = 2

    HUD_COLOR = (255, 255, 255)
    MESSAGE_COLORS = {
        'win': (120, 230, 140),
        'lose': (255, 107, 107),
    }
    RESTART_PROMPT = "Press R to restart"

    def __init__(self):
        """Initialize geometric skin."""
        super().__init__()
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None
        self._color_cache: Dict[str, Tuple[int, int, int]] = {}

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 32)
            self._big_font = pygame.font.Font(None, 56)

    def brick_color(self, brick: 'Brick') -> Tuple[int, int, int]:
        """Resolve a brick's hex color tag to RGB."""
        if brick.color not in self._color_cache:
            self._color_cache[brick.color] = Color.from_hex(brick.color).as_rgb_tuple
        return self._color_cache[brick.color]

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render paddle with a vertical gradient."""
        x, y, w, h = paddle.rect
        rows = max(1, int(h))
        top, bottom = self.PADDLE_TOP_COLOR, self.PADDLE_BOTTOM_COLOR
        for i in range(rows):
            t = i / max(1, rows - 1)
            color = tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))
            pygame.draw.line(screen, color, (int(x), int(y) + i), (int(x + w) - 1, int(y) + i))

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render ball as a white circle over a soft glow."""
        glow_radius = int(ball.radius * self.BALL_GLOW_RATIO)
        glow = pygame.Surface((glow_radius * 2, glow_radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(
            glow,
            (*self.BALL_COLOR, self.BALL_GLOW_ALPHA),
            (glow_radius, glow_radius),
            glow_radius,
        )
        screen.blit(glow, (int(ball.x) - glow_radius, int(ball.y) - glow_radius))

        pygame.draw.circle(screen, self.BALL_COLOR, (int(ball.x), int(ball.y)), int(ball.radius))

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render brick as a colored rectangle with a border."""
        if not brick.visible:
            return

        rect = brick.rect
        pygame.draw.rect(screen, self.brick_color(brick), rect)
        pygame.draw.rect(screen, self.BRICK_BORDER_COLOR, rect, self.BRICK_BORDER_WIDTH)

    def render_hud(self, screen: pygame.Surface) -> None:
        """Render HUD with score and lives."""
        self._ensure_font()

        score_text = self._font.render(f"Score: {self.score}", True, self.HUD_COLOR)
        screen.blit(score_text, (10, 10))

        lives_text = self._font.render(f"Lives: {self.lives}", True, self.HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(lives_text, lives_rect)

    def render_message(self, screen: pygame.Surface) -> None:
        """Render the win/lose overlay and restart prompt."""
        if self.message is None:
            return
        self._ensure_font()

        center_x = screen.get_width() // 2
        center_y = screen.get_height() // 2
        color = self.MESSAGE_COLORS.get(self.message_category, self.HUD_COLOR)

        text = self._big_font.render(self.message, True, color)
        screen.blit(text, text.get_rect(center=(center_x, center_y)))

        prompt = self._font.render(self.RESTART_PROMPT, True, self.HUD_COLOR)
        screen.blit(prompt, prompt.get_rect(center=(center_x, center_y + 50)))
