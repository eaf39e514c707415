"""Collision detection and response for Breakout.

Handles ball-wall, ball-paddle, and ball-brick collisions. The checks
run in a fixed order once per playing tick:

1. left/right walls   - reverse dx
2. top wall           - reverse dy
3. paddle             - steer by hit position, always rebound upward
4. bottom             - lose a life
5. bricks             - reverse dy, destroy, score (every overlapping brick)
6. win                - score equals the full-board total

Walls reflect without correcting position, so the ball may overlap a
boundary for up to one tick of travel.
"""

import math
from typing import TYPE_CHECKING, List

from playfield.logging import get_logger

from ...config import SPEEDUP_CAP, SPEEDUP_FACTOR
from ..state_machine import BreakoutState

if TYPE_CHECKING:
    from ..context import SimulationContext
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick

log = get_logger('breakout.collision')


def check_side_walls(ball: 'Ball', field_width: float) -> bool:
    """Reflect off the left or right wall.

    Returns:
        True if dx was reversed
    """
    if ball.right > field_width or ball.left < 0:
        ball.bounce_horizontal()
        return True
    return False


def check_top_wall(ball: 'Ball') -> bool:
    """Reflect off the ceiling.

    Returns:
        True if dy was reversed
    """
    if ball.top < 0:
        ball.bounce_vertical()
        return True
    return False


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball collides with paddle.

    The ball's bottom edge must be past the paddle's top edge and its
    center strictly within the paddle's horizontal span.
    """
    return (
        ball.bottom > paddle.top
        and paddle.left < ball.x < paddle.right
    )


def hit_position(ball: 'Ball', paddle: 'Paddle') -> float:
    """Normalized offset of the ball from the paddle center, about [-1, 1]."""
    return (ball.x - paddle.center_x) / (paddle.width / 2)


def bounce_off_paddle(ball: 'Ball', paddle: 'Paddle') -> None:
    """Steer the ball by where it struck the paddle.

    dx becomes hit position times the nominal speed and dy always points
    up, whatever the incoming direction. If the resulting speed is below
    SPEEDUP_CAP both components are scaled by SPEEDUP_FACTOR once.
    """
    ball.dx = hit_position(ball, paddle) * ball.speed
    ball.dy = -abs(ball.dy)

    current_speed = math.sqrt(ball.dx * ball.dx + ball.dy * ball.dy)
    if current_speed < SPEEDUP_CAP:
        ball.dx *= SPEEDUP_FACTOR
        ball.dy *= SPEEDUP_FACTOR


def check_bottom(ball: 'Ball', field_height: float) -> bool:
    """Check if the ball's bottom edge has passed the field bottom."""
    return ball.bottom > field_height


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if ball overlaps a visible brick.

    Uses the ball's bounding box against the brick rectangle with
    strict inequalities, so touching edges do not count.
    """
    if not brick.visible:
        return False

    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    brick_left, brick_top, brick_right, brick_bottom = brick.get_bounds()

    return (
        ball_right > brick_left
        and ball_left < brick_right
        and ball_bottom > brick_top
        and ball_top < brick_bottom
    )


def handle_brick_collisions(ctx: 'SimulationContext') -> List['Brick']:
    """Destroy every visible brick the ball overlaps.

    Each hit reverses dy, so an even number of simultaneous hits leaves
    the vertical direction unchanged.

    Returns:
        Bricks destroyed this tick
    """
    destroyed = []
    for brick in ctx.bricks:
        if not check_brick_collision(ctx.ball, brick):
            continue
        ctx.ball.bounce_vertical()
        ctx.destroy_brick(brick)
        destroyed.append(brick)
    if len(destroyed) > 1:
        log.debug("%d bricks hit in one tick", len(destroyed))
    return destroyed


def resolve_collisions(ctx: 'SimulationContext') -> None:
    """Run every collision check for one playing tick, in order."""
    ball = ctx.ball
    paddle = ctx.paddle

    check_side_walls(ball, ctx.field.width)
    check_top_wall(ball)

    if check_paddle_collision(ball, paddle):
        bounce_off_paddle(ball, paddle)
        ctx.sink.play_paddle_hit_sound()
        log.debug("Paddle rebound dx=%.2f dy=%.2f", ball.dx, ball.dy)

    if check_bottom(ball, ctx.field.height):
        ctx.lose_life()

    handle_brick_collisions(ctx)

    # Only a tick still in play can win; a ball reset defers the check
    if ctx.state == BreakoutState.PLAYING:
        ctx.check_win()
