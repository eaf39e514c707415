"""Breakout - paddle, ball, and a wall of bricks."""
