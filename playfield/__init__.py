"""
Playfield - a small framework for frame-driven pygame arcade games.

Provides:
- logging: Per-module loggers configured in code or from the environment
- games: BaseGame interface, standard GameState, and input abstraction
"""
