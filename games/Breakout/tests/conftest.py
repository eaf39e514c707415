"""Shared fixtures for Breakout tests."""

import random
from typing import List, Optional, Tuple

import pytest

from games.Breakout.config import BreakoutSettings
from games.Breakout.game.context import SimulationContext
from games.Breakout.game.skins.base import DisplaySink
from games.Breakout.game.state_machine import BreakoutState


class RecordingSink(DisplaySink):
    """Display sink that remembers every notification."""

    def __init__(self):
        self.scores: List[int] = []
        self.lives: List[int] = []
        self.messages: List[Tuple[str, str]] = []
        self.hidden = 0
        self.paddle_hits = 0
        self.brick_breaks = 0
        self.lives_lost = 0

    def update_score(self, score: int) -> None:
        self.scores.append(score)

    def update_lives(self, lives: int) -> None:
        self.lives.append(lives)

    def show_message(self, text: str, category: str) -> None:
        self.messages.append((text, category))

    def hide_message(self) -> None:
        self.hidden += 1

    def play_paddle_hit_sound(self) -> None:
        self.paddle_hits += 1

    def play_brick_break_sound(self) -> None:
        self.brick_breaks += 1

    def play_life_lost_sound(self) -> None:
        self.lives_lost += 1

    @property
    def last_message(self) -> Optional[Tuple[str, str]]:
        return self.messages[-1] if self.messages else None


@pytest.fixture
def settings():
    """Default settings with a fixed seed."""
    return BreakoutSettings(seed=1234)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def ctx(settings, sink):
    """Fresh context in the ready state."""
    return SimulationContext(settings, sink=sink, rng=random.Random(1234))


@pytest.fixture
def playing_ctx(ctx):
    """Context already moved to the playing state."""
    ctx.machine.transition(BreakoutState.PLAYING)
    return ctx


def place_ball(ctx, x, y, dx=0.0, dy=0.0):
    """Put the ball at (x, y) with velocity (dx, dy)."""
    ctx.ball.x = x
    ctx.ball.y = y
    ctx.ball.dx = dx
    ctx.ball.dy = dy
    return ctx.ball
