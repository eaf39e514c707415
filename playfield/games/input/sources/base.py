"""
Input Source - Abstract interface for all input devices.
"""
from abc import ABC, abstractmethod
from typing import List

from playfield.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base for anything that produces InputEvents.

    Sources are polled once per frame by the host loop: update() drains
    the device, poll_events() hands the converted events to the game.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Pull pending device events into the source's queue."""
        pass

    def clear(self) -> None:
        """Discard any queued events."""
        pass
