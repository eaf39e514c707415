"""
Input abstraction layer for playfield games.

Provides unified input handling: device sources translate their raw
events into InputEvent objects that game logic consumes.
"""

from playfield.games.input.input_event import InputEvent

__all__ = ['InputEvent']
