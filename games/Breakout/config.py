"""Configuration for Breakout game.

Contains playfield dimensions, entity geometry, scoring rules, the brick
palette, and the validated settings model that can be loaded from YAML.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from models import Color, Resolution
from playfield.logging import get_logger

log = get_logger('breakout.config')

# Playfield dimensions (default, can be overridden)
SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600
FPS: int = 60

# Scoring and lives
BRICK_POINTS: int = 10
STARTING_LIVES: int = 3

# Paddle rebound speed-up: applied once per rebound while below the cap
SPEEDUP_FACTOR: float = 1.05
SPEEDUP_CAP: float = 8.0

# Brick colors, assigned per row as palette[row % len(palette)]
BRICK_PALETTE: Tuple[str, ...] = (
    '#FF6B6B',
    '#4ECDC4',
    '#45B7D1',
    '#FFA07A',
    '#98D8C8',
)

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (17, 17, 27)

# End-state messages, keyed by category
WIN_MESSAGE: str = "Congratulations! You cleared the board!"
LOSE_MESSAGE: str = "Game Over!"


@dataclass
class PaddleConfig:
    """Paddle geometry and keyboard speed."""

    width: float = 100.0
    height: float = 15.0
    speed: float = 8.0            # Pixels per tick while a move key is held
    bottom_margin: float = 30.0   # Distance from paddle top to field bottom


@dataclass
class BallConfig:
    """Ball geometry and launch speed."""

    radius: float = 8.0
    speed: float = 4.0            # Per-axis launch speed, pixels per tick


@dataclass
class BrickGridConfig:
    """Brick grid layout."""

    rows: int = 5
    cols: int = 9
    width: float = 75.0
    height: float = 20.0
    padding: float = 10.0
    offset_x: float = 45.0
    offset_y: float = 60.0


class SettingsError(Exception):
    """Raised when a settings file cannot be read or parsed."""


class BreakoutSettings(BaseModel):
    """Validated game settings.

    Every field has a default matching the classic layout, so an empty
    YAML file (or no file at all) yields the standard game.

    Example YAML:
        width: 800
        height: 600
        lives: 5
        paddle:
          width: 120
        bricks:
          rows: 6
        palette: ['#FF6B6B', '#4ECDC4']
    """

    model_config = ConfigDict(extra='forbid')

    width: int = Field(default=SCREEN_WIDTH, gt=0)
    height: int = Field(default=SCREEN_HEIGHT, gt=0)
    fps: int = Field(default=FPS, gt=0)
    lives: int = Field(default=STARTING_LIVES, ge=1)
    brick_points: int = Field(default=BRICK_POINTS, gt=0)
    seed: Optional[int] = None

    paddle_width: float = Field(default=PaddleConfig.width, gt=0)
    paddle_height: float = Field(default=PaddleConfig.height, gt=0)
    paddle_speed: float = Field(default=PaddleConfig.speed, gt=0)
    paddle_bottom_margin: float = Field(default=PaddleConfig.bottom_margin, ge=0)

    ball_radius: float = Field(default=BallConfig.radius, gt=0)
    ball_speed: float = Field(default=BallConfig.speed, gt=0)

    brick_rows: int = Field(default=BrickGridConfig.rows, gt=0)
    brick_cols: int = Field(default=BrickGridConfig.cols, gt=0)
    brick_width: float = Field(default=BrickGridConfig.width, gt=0)
    brick_height: float = Field(default=BrickGridConfig.height, gt=0)
    brick_padding: float = Field(default=BrickGridConfig.padding, ge=0)
    brick_offset_x: float = Field(default=BrickGridConfig.offset_x, ge=0)
    brick_offset_y: float = Field(default=BrickGridConfig.offset_y, ge=0)

    palette: List[str] = Field(default_factory=lambda: list(BRICK_PALETTE), min_length=1)

    @field_validator('palette')
    @classmethod
    def validate_palette(cls, v: List[str]) -> List[str]:
        """Every palette entry must parse as a hex color."""
        for entry in v:
            Color.from_hex(entry)
        return v

    @model_validator(mode='after')
    def validate_layout(self) -> 'BreakoutSettings':
        """Paddle and ball must fit inside the field."""
        if self.paddle_width > self.width:
            raise ValueError(
                f'paddle width {self.paddle_width} exceeds field width {self.width}'
            )
        if self.paddle_bottom_margin > self.height:
            raise ValueError(
                f'paddle bottom margin {self.paddle_bottom_margin} exceeds field height {self.height}'
            )
        if 2 * self.ball_radius >= min(self.width, self.height):
            raise ValueError(
                f'ball diameter {2 * self.ball_radius} does not fit a {self.width}x{self.height} field'
            )
        return self

    @property
    def resolution(self) -> Resolution:
        """Playfield geometry."""
        return Resolution(width=self.width, height=self.height)

    def paddle_config(self) -> PaddleConfig:
        return PaddleConfig(
            width=self.paddle_width,
            height=self.paddle_height,
            speed=self.paddle_speed,
            bottom_margin=self.paddle_bottom_margin,
        )

    def ball_config(self) -> BallConfig:
        return BallConfig(radius=self.ball_radius, speed=self.ball_speed)

    def brick_config(self) -> BrickGridConfig:
        return BrickGridConfig(
            rows=self.brick_rows,
            cols=self.brick_cols,
            width=self.brick_width,
            height=self.brick_height,
            padding=self.brick_padding,
            offset_x=self.brick_offset_x,
            offset_y=self.brick_offset_y,
        )


# Nested YAML sections map onto flat settings fields
_SECTIONS = ('paddle', 'ball', 'bricks')
_SECTION_PREFIX = {'paddle': 'paddle_', 'ball': 'ball_', 'bricks': 'brick_'}


def _flatten(data: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten `paddle:`/`ball:`/`bricks:` sections into prefixed keys."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _SECTIONS:
            if not isinstance(value, dict):
                raise SettingsError(f"Section '{key}' must be a mapping, got {type(value).__name__}")
            prefix = _SECTION_PREFIX[key]
            for sub_key, sub_value in value.items():
                flat[f"{prefix}{sub_key}"] = sub_value
        else:
            flat[key] = value
    return flat


def load_settings(
    path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> BreakoutSettings:
    """Load settings from an optional YAML file plus overrides.

    Args:
        path: YAML settings file, or None for defaults
        **overrides: Field values that win over the file (None values ignored)

    Returns:
        Validated BreakoutSettings

    Raises:
        SettingsError: If the file is missing or is not valid YAML mapping
        pydantic.ValidationError: If a value is out of range
    """
    data: Dict[str, Any] = {}

    if path is not None:
        path = Path(path)
        log.info("Loading settings from %s", path)
        try:
            with open(path, 'r') as f:
                raw = yaml.safe_load(f)
        except FileNotFoundError:
            log.error("Settings file not found at %s", path)
            raise SettingsError(f"Settings file not found: {path}") from None
        except yaml.YAMLError as e:
            log.error("Error parsing YAML from %s", path)
            raise SettingsError(f"Invalid YAML in {path}: {e}") from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        data = _flatten(raw)

    data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = BreakoutSettings(**data)
    except ValidationError:
        log.error("Invalid settings%s", f" in {path}" if path else "")
        raise

    log.debug("Settings: %s", settings.model_dump())
    return settings
