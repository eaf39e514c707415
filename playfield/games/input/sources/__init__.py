"""
Input source implementations.
"""

from playfield.games.input.sources.base import InputSource
from playfield.games.input.sources.pygame_source import PygameInputSource, DEFAULT_KEY_BINDINGS

__all__ = ['InputSource', 'PygameInputSource', 'DEFAULT_KEY_BINDINGS']
