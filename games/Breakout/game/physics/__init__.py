"""Breakout motion integration and collision resolution."""

from .motion import advance_paddle, advance_ball
from .collision import (
    check_side_walls,
    check_top_wall,
    check_paddle_collision,
    bounce_off_paddle,
    hit_position,
    check_bottom,
    check_brick_collision,
    handle_brick_collisions,
    resolve_collisions,
)

__all__ = [
    'advance_paddle',
    'advance_ball',
    'check_side_walls',
    'check_top_wall',
    'check_paddle_collision',
    'bounce_off_paddle',
    'hit_position',
    'check_bottom',
    'check_brick_collision',
    'handle_brick_collisions',
    'resolve_collisions',
]
