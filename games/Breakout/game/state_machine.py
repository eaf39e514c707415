"""Breakout game state machine.

States and the legal moves between them:

    ready   -> playing   (player starts)
    playing -> paused    (player pauses)
    paused  -> playing   (player resumes)
    playing -> ready     (life lost, lives remain)
    playing -> lose      (last life lost)
    playing -> win       (board cleared)

Restart is the one global exit: reset() returns to ready from any state.
"""

from enum import Enum
from typing import Dict, FrozenSet

from playfield.logging import get_logger

log = get_logger('breakout.state')


class BreakoutState(Enum):
    """Internal Breakout states."""

    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    WIN = "win"
    LOSE = "lose"

    @property
    def is_terminal(self) -> bool:
        """Win and lose can only be left through a restart."""
        return self in (BreakoutState.WIN, BreakoutState.LOSE)


TRANSITIONS: Dict[BreakoutState, FrozenSet[BreakoutState]] = {
    BreakoutState.READY: frozenset({BreakoutState.PLAYING}),
    BreakoutState.PLAYING: frozenset({
        BreakoutState.PAUSED,
        BreakoutState.READY,
        BreakoutState.WIN,
        BreakoutState.LOSE,
    }),
    BreakoutState.PAUSED: frozenset({BreakoutState.PLAYING}),
    BreakoutState.WIN: frozenset(),
    BreakoutState.LOSE: frozenset(),
}


class InvalidTransitionError(ValueError):
    """Raised when a state change is not in the transition table."""

    def __init__(self, source: BreakoutState, target: BreakoutState):
        self.source = source
        self.target = target
        super().__init__(f"Illegal transition {source.value} -> {target.value}")


class GameStateMachine:
    """Holds the current BreakoutState and validates every change."""

    def __init__(self, initial: BreakoutState = BreakoutState.READY):
        self._state = initial

    @property
    def state(self) -> BreakoutState:
        """Get current state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == BreakoutState.PLAYING

    @property
    def is_terminal(self) -> bool:
        return self._state.is_terminal

    def can_transition(self, target: BreakoutState) -> bool:
        """Check whether `target` is reachable from the current state."""
        return target in TRANSITIONS[self._state]

    def transition(self, target: BreakoutState) -> BreakoutState:
        """Move to `target`.

        Returns:
            The previous state

        Raises:
            InvalidTransitionError: If the move is not legal
        """
        if not self.can_transition(target):
            raise InvalidTransitionError(self._state, target)
        previous = self._state
        self._state = target
        log.info("%s -> %s", previous.value, target.value)
        return previous

    def toggle_pause(self) -> bool:
        """Apply the single start/pause/resume control.

        ready -> playing, playing -> paused, paused -> playing.
        Terminal states ignore it.

        Returns:
            True if the state changed
        """
        if self._state in (BreakoutState.READY, BreakoutState.PAUSED):
            self.transition(BreakoutState.PLAYING)
            return True
        if self._state == BreakoutState.PLAYING:
            self.transition(BreakoutState.PAUSED)
            return True
        log.debug("Pause toggle ignored in %s", self._state.value)
        return False

    def reset(self) -> None:
        """Return to ready from any state (restart)."""
        if self._state != BreakoutState.READY:
            log.info("%s -> ready (restart)", self._state.value)
        self._state = BreakoutState.READY
