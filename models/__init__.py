"""
Unified models library for the Breakout project.

This package provides the data models shared across the system:
- Primitives: Basic geometric and color types (Point2D, Vector2D, Color, Resolution)
- Input: Device-independent input enums (EventType, InputAction)

Usage:
    >>> from models import Vector2D, Resolution
    >>> from models.input import InputAction
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Resolution,
    Color,
)

# ============================================================================
# Input enums
# ============================================================================
from .input import (
    EventType,
    InputAction,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Resolution',
    'Color',
    'EventType',
    'InputAction',
]
