"""Simulation context: the single owner of all Breakout game state.

The FrameDriver owns one SimulationContext and passes it to the motion
integrator and collision resolver each tick. Score, lives, and the
end-state message only change through the methods here, which also
notify the display sink.
"""

import random
from typing import Optional

from models import EventType, InputAction, Resolution
from playfield.games.input import InputEvent
from playfield.logging import get_logger

from ..config import BreakoutSettings, LOSE_MESSAGE, WIN_MESSAGE
from .entities import Ball, Brick, BrickGrid, Paddle
from .skins.base import DisplaySink
from .state_machine import BreakoutState, GameStateMachine

log = get_logger('breakout.context')


class SimulationContext:
    """Paddle, ball, bricks, score, lives, and state for one game."""

    def __init__(
        self,
        settings: Optional[BreakoutSettings] = None,
        sink: Optional[DisplaySink] = None,
        rng: Optional[random.Random] = None,
    ):
        """Create every entity from settings.

        Args:
            settings: Game settings (defaults if None)
            sink: Display sink for score/lives/message notifications
            rng: Random source for ball launch direction
        """
        self.settings = settings or BreakoutSettings()
        self.field: Resolution = self.settings.resolution
        self.sink = sink or DisplaySink()
        self.rng = rng or random.Random(self.settings.seed)

        self.paddle = Paddle.create(self.settings.paddle_config(), self.field)
        self.ball = Ball.create(self.settings.ball_config(), self.field, self.rng)
        self.bricks = BrickGrid(self.settings.brick_config(), self.settings.palette)
        self.machine = GameStateMachine()

        self.score = 0
        self.lives = self.settings.lives
        self.message: Optional[str] = None
        self.message_category: Optional[str] = None

        self.sink.update_score(self.score)
        self.sink.update_lives(self.lives)

    @property
    def state(self) -> BreakoutState:
        """Get current state."""
        return self.machine.state

    @property
    def win_score(self) -> int:
        """Score reached exactly when every brick is destroyed."""
        return self.bricks.total_points(self.settings.brick_points)

    # -------------------------------------------------------------------------
    # Scoring and lives
    # -------------------------------------------------------------------------

    def destroy_brick(self, brick: Brick) -> bool:
        """Hide a brick and award its points.

        Returns:
            False if the brick was already gone (no score change)
        """
        if not brick.visible:
            return False
        brick.visible = False
        self.score += self.settings.brick_points
        self.sink.update_score(self.score)
        self.sink.play_brick_break_sound()
        log.debug("Brick %s destroyed, score %d", brick.grid_position, self.score)
        return True

    def lose_life(self) -> None:
        """Ball dropped: lose a life, then reset the ball or end the game."""
        self.lives -= 1
        self.sink.update_lives(self.lives)
        self.sink.play_life_lost_sound()

        if self.lives == 0:
            log.info("Last life lost with score %d", self.score)
            self.machine.transition(BreakoutState.LOSE)
            self._show_message(LOSE_MESSAGE, 'lose')
        else:
            log.info("Life lost, %d remaining", self.lives)
            self.ball.reset(self.field, self.rng)
            self.machine.transition(BreakoutState.READY)

    def check_win(self) -> bool:
        """Enter the win state if the score equals the full-board total.

        Returns:
            True if the game was won on this call
        """
        if self.score != self.win_score:
            return False
        log.info("Board cleared with score %d", self.score)
        self.machine.transition(BreakoutState.WIN)
        self._show_message(WIN_MESSAGE, 'win')
        return True

    def _show_message(self, text: str, category: str) -> None:
        self.message = text
        self.message_category = category
        self.sink.show_message(text, category)

    # -------------------------------------------------------------------------
    # Restart
    # -------------------------------------------------------------------------

    def restart(self) -> None:
        """Reset every entity, score, lives, and message; state to ready."""
        log.info("Restart from %s", self.state.value)
        self.machine.reset()
        self.score = 0
        self.lives = self.settings.lives

        self.paddle.recenter(self.field.width)
        self.ball.reset(self.field, self.rng)
        self.bricks.reset()

        self.sink.update_score(self.score)
        self.sink.update_lives(self.lives)

        self.message = None
        self.message_category = None
        self.sink.hide_message()

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def apply_input(self, event: InputEvent) -> None:
        """Apply one input event between ticks.

        Unrecognized combinations are ignored.
        """
        if event.event_type == EventType.POINTER_MOVE:
            self.paddle.move_to(event.position.x, self.field.width)
        elif event.event_type == EventType.KEY_DOWN:
            if event.action == InputAction.MOVE_LEFT:
                self.paddle.dx = -self.paddle.speed
            elif event.action == InputAction.MOVE_RIGHT:
                self.paddle.dx = self.paddle.speed
            elif event.action == InputAction.TOGGLE_PAUSE:
                self.machine.toggle_pause()
            elif event.action == InputAction.RESTART:
                self.restart()
        elif event.event_type == EventType.KEY_UP:
            if event.action in (InputAction.MOVE_LEFT, InputAction.MOVE_RIGHT):
                self.paddle.dx = 0.0
