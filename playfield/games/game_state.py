"""Common GameState enum for all playfield games.

All games report one of these standard states through their `state`
property so launchers can react without knowing game internals.

Games can have additional internal states, but must map them to these
standard states via `_get_internal_state()`.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states used by the playfield framework.

    States:
        READY: Waiting for the player to start or resume
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused (manual pause)
        GAME_OVER: Game ended in loss/failure
        WON: Game ended in success/victory

    Usage in game_mode.py:
        from playfield.games.game_state import GameState

        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                if self._internal_state == "died":
                    return GameState.GAME_OVER
                return GameState.PLAYING
    """
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        """True for states that only a reset can leave."""
        return self in (GameState.GAME_OVER, GameState.WON)
