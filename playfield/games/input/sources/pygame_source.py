"""
Pygame Input Source - Keyboard and mouse input.

Converts pygame key presses/releases and mouse motion into InputEvents.
Events the source does not consume are re-posted to the pygame event
queue for the main loop (quit, escape, window events).
"""
import time
from typing import Dict, List, Optional

import pygame

from models import InputAction
from playfield.games.input.input_event import InputEvent
from playfield.games.input.sources.base import InputSource


DEFAULT_KEY_BINDINGS: Dict[int, InputAction] = {
    pygame.K_LEFT: InputAction.MOVE_LEFT,
    pygame.K_a: InputAction.MOVE_LEFT,
    pygame.K_RIGHT: InputAction.MOVE_RIGHT,
    pygame.K_d: InputAction.MOVE_RIGHT,
    pygame.K_SPACE: InputAction.TOGGLE_PAUSE,
    pygame.K_r: InputAction.RESTART,
}


class PygameInputSource(InputSource):
    """Keyboard + mouse input source.

    Unbound keys are not converted; they go back on the pygame queue
    like any other unconsumed event.
    """

    def __init__(self, key_bindings: Optional[Dict[int, InputAction]] = None):
        """Initialize the source.

        Args:
            key_bindings: pygame key code -> action (defaults to arrows/AD, space, R)
        """
        self._bindings = dict(key_bindings or DEFAULT_KEY_BINDINGS)
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def convert(self, event: pygame.event.Event) -> Optional[InputEvent]:
        """Convert one pygame event, or None if it is not game input."""
        now = time.monotonic()
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            action = self._bindings.get(event.key)
            if action is None:
                return None
            if event.type == pygame.KEYDOWN:
                return InputEvent.key_down(action, now)
            return InputEvent.key_up(action, now)
        if event.type == pygame.MOUSEMOTION:
            pos_x, pos_y = event.pos
            return InputEvent.pointer(pos_x, pos_y, now)
        return None

    def update(self, dt: float) -> None:
        """Process pygame events and collect game input."""
        unconsumed = []
        for event in pygame.event.get():
            converted = self.convert(event)
            if converted is None:
                unconsumed.append(event)
            else:
                self._event_queue.append(converted)
        # Re-post after draining so they are not read back in this loop
        for event in unconsumed:
            pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
