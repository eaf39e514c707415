"""Base classes for Breakout display sinks and skins.

Skins handle ALL presentation - the simulation only manages state and
reports changes through the DisplaySink hooks.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import pygame

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class DisplaySink:
    """Receives score, lives and end-state notifications.

    Every hook is a no-op here; the simulation never reads anything back.
    """

    def update_score(self, score: int) -> None:
        """Score changed."""
        pass

    def update_lives(self, lives: int) -> None:
        """Lives changed."""
        pass

    def show_message(self, text: str, category: str) -> None:
        """Show an end-state message and the restart control.

        Args:
            text: Message to display
            category: 'win' or 'lose'
        """
        pass

    def hide_message(self) -> None:
        """Hide the end-state message and the restart control."""
        pass

    def play_paddle_hit_sound(self) -> None:
        """Play sound when ball hits paddle."""
        pass

    def play_brick_break_sound(self) -> None:
        """Play sound when brick is destroyed."""
        pass

    def play_life_lost_sound(self) -> None:
        """Play sound when ball falls below the field."""
        pass


class BreakoutSkin(DisplaySink, ABC):
    """Base class for game skins (visuals + display state).

    Skins render read-only views of the entities each tick and keep
    whatever they need from the DisplaySink hooks for the HUD.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def __init__(self):
        self.score = 0
        self.lives = 0
        self.message: Optional[str] = None
        self.message_category: Optional[str] = None

    @property
    def restart_visible(self) -> bool:
        """Whether the restart control is currently shown."""
        return self.message is not None

    def update_score(self, score: int) -> None:
        self.score = score

    def update_lives(self, lives: int) -> None:
        self.lives = lives

    def show_message(self, text: str, category: str) -> None:
        self.message = text
        self.message_category = category

    def hide_message(self) -> None:
        self.message = None
        self.message_category = None

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render a visible brick.

        Args:
            brick: Brick to render
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, screen: pygame.Surface) -> None:
        """Render the heads-up display from the last reported score and lives."""
        pass

    def render_message(self, screen: pygame.Surface) -> None:
        """Render the end-state overlay, if a message is showing."""
        pass
