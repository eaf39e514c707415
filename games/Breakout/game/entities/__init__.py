"""Breakout game entities."""

from .paddle import Paddle
from .ball import Ball
from .brick import Brick, BrickGrid, row_color

__all__ = [
    'Paddle',
    'Ball',
    'Brick', 'BrickGrid', 'row_color',
]
