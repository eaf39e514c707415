"""
Enumerations for player input.

Input sources translate device events (keys, pointer motion) into these
device-independent values so game logic never sees pygame key codes.
"""

from enum import Enum


class EventType(str, Enum):
    """Kinds of input events.

    Attributes:
        KEY_DOWN: A control was pressed
        KEY_UP: A control was released
        POINTER_MOVE: The pointer moved to a new position
    """
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    POINTER_MOVE = "pointer_move"


class InputAction(str, Enum):
    """Game actions a control can be bound to.

    Attributes:
        MOVE_LEFT: Drive the paddle left while held
        MOVE_RIGHT: Drive the paddle right while held
        TOGGLE_PAUSE: Start, pause, or resume play
        RESTART: Reset the whole game
    """
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"
