"""
Input Event - Represents a single input action.

This is a shared module used by all games.
Uses a frozen dataclass for immutability.
"""
from dataclasses import dataclass
from typing import Optional

from models import Vector2D, EventType, InputAction


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    Key events carry the game action the pressed control is bound to;
    pointer events carry the pointer position. All input sources must
    convert their device events to this common format.

    Attributes:
        event_type: KEY_DOWN, KEY_UP or POINTER_MOVE
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        action: Bound game action (key events only)
        position: Pointer position in screen coordinates (pointer events only)
    """
    event_type: EventType
    timestamp: float
    action: Optional[InputAction] = None
    position: Optional[Vector2D] = None

    def __post_init__(self):
        """Validate timestamp and per-type payload."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')
        if self.event_type == EventType.POINTER_MOVE and self.position is None:
            raise ValueError('Pointer events require a position')
        if self.event_type in (EventType.KEY_DOWN, EventType.KEY_UP) and self.action is None:
            raise ValueError(f'{self.event_type.value} events require an action')

    @classmethod
    def key_down(cls, action: InputAction, timestamp: float) -> 'InputEvent':
        """Build a KEY_DOWN event for a bound action."""
        return cls(event_type=EventType.KEY_DOWN, timestamp=timestamp, action=action)

    @classmethod
    def key_up(cls, action: InputAction, timestamp: float) -> 'InputEvent':
        """Build a KEY_UP event for a bound action."""
        return cls(event_type=EventType.KEY_UP, timestamp=timestamp, action=action)

    @classmethod
    def pointer(cls, x: float, y: float, timestamp: float) -> 'InputEvent':
        """Build a POINTER_MOVE event at (x, y)."""
        return cls(
            event_type=EventType.POINTER_MOVE,
            timestamp=timestamp,
            position=Vector2D(x=float(x), y=float(y)),
        )

    def __str__(self) -> str:
        """String representation for debugging."""
        if self.position is not None:
            return (f"InputEvent({self.event_type.value}, "
                    f"pos=({self.position.x:.2f}, {self.position.y:.2f}), t={self.timestamp:.3f})")
        return f"InputEvent({self.event_type.value}, {self.action.value}, t={self.timestamp:.3f})"
