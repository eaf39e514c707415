"""Motion integration for Breakout.

Motion is per tick: positions advance by the stored velocity with no
delta-time scaling, drag, or gravity.
"""

from ..entities.ball import Ball
from ..entities.paddle import Paddle


def advance_paddle(paddle: Paddle, field_width: float) -> None:
    """Move the paddle by its velocity and clamp it inside the field.

    Args:
        paddle: Paddle to move
        field_width: Playfield width
    """
    paddle.x += paddle.dx
    paddle.clamp(field_width)


def advance_ball(ball: Ball) -> None:
    """Translate the ball by its velocity."""
    ball.x += ball.dx
    ball.y += ball.dy
