"""Breakout - Classic paddle-and-bricks game for the playfield framework.

Features:
- Keyboard paddle (arrows / A-D) or pointer-following paddle
- Space starts, pauses and resumes; R restarts at any time
- Hit-position steering and capped rebound speed-up
"""

import random
from typing import Any, Callable, Dict, List, Optional

import pygame

from playfield.games import BaseGame, GameState
from playfield.games.input import InputEvent
from playfield.logging import get_logger

from .config import BACKGROUND_COLOR, BreakoutSettings
from .game.context import SimulationContext
from .game.frame_driver import FrameDriver
from .game.skins import BreakoutSkin, GeometricSkin
from .game.state_machine import BreakoutState

log = get_logger('breakout')

_STATE_MAP = {
    BreakoutState.READY: GameState.READY,
    BreakoutState.PLAYING: GameState.PLAYING,
    BreakoutState.PAUSED: GameState.PAUSED,
    BreakoutState.WIN: GameState.WON,
    BreakoutState.LOSE: GameState.GAME_OVER,
}


class BreakoutMode(BaseGame):
    """Breakout game mode.

    The mode owns a FrameDriver, which owns the SimulationContext.
    update() runs one simulation tick; render() draws the current state.
    """

    # Game metadata
    NAME = "Breakout"
    DESCRIPTION = "Deflect the ball, clear the bricks, keep your lives."
    VERSION = "1.0.0"
    AUTHOR = "Breakout Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin'
        },
        {
            'name': '--lives',
            'type': int,
            'default': None,
            'help': 'Starting lives (default 3)'
        },
        {
            'name': '--config',
            'type': str,
            'default': None,
            'help': 'YAML settings file'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Seed for the ball launch direction'
        },
    ]

    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        settings: Optional[BreakoutSettings] = None,
        skin: str = 'geometric',
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """Initialize Breakout game.

        Args:
            settings: Validated game settings (defaults if None)
            skin: Visual skin to use
            rng: Random source for ball launch direction
            **kwargs: Base game args
        """
        super().__init__(**kwargs)
        self._settings = settings or BreakoutSettings()

        skin_class = self.SKINS.get(skin)
        if skin_class is None:
            log.warning("Unknown skin '%s', using geometric", skin)
            skin_class = GeometricSkin
        self._skin: BreakoutSkin = skin_class()

        context = SimulationContext(self._settings, sink=self._skin, rng=rng)
        self._driver = FrameDriver(context)

        log.info(
            "Breakout ready: %dx%d field, %dx%d bricks, %d lives",
            context.field.width, context.field.height,
            context.bricks.rows, context.bricks.cols, context.lives,
        )

    @property
    def context(self) -> SimulationContext:
        """Simulation state (owned by the frame driver)."""
        return self._driver.context

    @property
    def driver(self) -> FrameDriver:
        return self._driver

    @property
    def skin(self) -> BreakoutSkin:
        return self._skin

    def _get_internal_state(self) -> GameState:
        """Map Breakout state to the standard GameState."""
        return _STATE_MAP[self.context.state]

    def get_score(self) -> int:
        """Get current score."""
        return self.context.score

    def handle_input(self, events: List[InputEvent]) -> None:
        """Apply input events to the simulation.

        Args:
            events: List of input events
        """
        for event in events:
            self.context.apply_input(event)

    def update(self, dt: float) -> None:
        """Run one simulation tick.

        Motion is per tick, so dt is not used.

        Args:
            dt: Delta time in seconds
        """
        self._driver.tick()

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        ctx = self.context
        screen.fill(BACKGROUND_COLOR)

        for brick in ctx.bricks:
            if brick.visible:
                self._skin.render_brick(brick, screen)

        self._skin.render_paddle(ctx.paddle, screen)
        if ctx.state != BreakoutState.LOSE:
            self._skin.render_ball(ctx.ball, screen)

        self._skin.render_hud(screen)
        self._skin.render_message(screen)

    def run(
        self,
        screen: pygame.Surface,
        schedule: Callable[[], object],
        poll: Callable[[], Optional[List[InputEvent]]],
        max_frames: Optional[int] = None,
    ) -> int:
        """Drive the game until poll() reports quit.

        Args:
            screen: Surface rendered on every tick
            schedule: Waits for the next frame (flip + clock tick)
            poll: Returns pending input events, or None to quit
            max_frames: Optional tick limit

        Returns:
            Number of ticks run
        """
        def keep_running() -> bool:
            events = poll()
            if events is None:
                return False
            self.handle_input(events)
            return True

        self._driver.set_render(lambda ctx: self.render(screen))
        try:
            return self._driver.run(schedule, keep_running, max_frames)
        finally:
            self._driver.set_render(None)

    def reset(self) -> None:
        """Reset game to initial state."""
        super().reset()
        self.context.restart()

    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Offer restart once the game has ended."""
        if self.context.state.is_terminal:
            return [{'id': 'restart', 'label': 'Play Again', 'style': 'primary'}]
        return []

    def execute_action(self, action_id: str) -> bool:
        """Handle the restart action."""
        if action_id == 'restart':
            self.reset()
            return True
        return False
