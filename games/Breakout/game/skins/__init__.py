"""Breakout skins."""

from .base import BreakoutSkin, DisplaySink
from .geometric import GeometricSkin

__all__ = ['BreakoutSkin', 'DisplaySink', 'GeometricSkin']
