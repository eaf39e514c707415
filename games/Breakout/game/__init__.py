"""Breakout simulation: entities, physics, state machine, frame driver."""
