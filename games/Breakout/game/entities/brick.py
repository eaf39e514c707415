"""Brick entity and the fixed brick grid.

The grid is laid out once from BrickGridConfig and never resized. After
creation the only thing that changes is each brick's visibility.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from ...config import BrickGridConfig


def row_color(row: int, palette: Sequence[str]) -> str:
    """Color tag for a grid row, cycling through the palette."""
    return palette[row % len(palette)]


@dataclass
class Brick:
    """A single brick. (x, y) is the top-left corner."""

    x: float
    y: float
    width: float
    height: float
    color: str
    row: int = 0
    col: int = 0
    visible: bool = True

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return (self.row, self.col)

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get bounds (left, top, right, bottom)."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class BrickGrid:
    """Rows x cols grid of bricks with deterministic layout.

    Brick (row, col) sits at
    (col * (width + padding) + offset_x, row * (height + padding) + offset_y).
    """

    def __init__(self, config: BrickGridConfig, palette: Sequence[str]):
        """Lay out every brick, all visible.

        Args:
            config: Grid layout
            palette: Color tags, assigned per row cyclically
        """
        self._config = config
        self._rows: List[List[Brick]] = []
        for row in range(config.rows):
            color = row_color(row, palette)
            self._rows.append([
                Brick(
                    x=col * (config.width + config.padding) + config.offset_x,
                    y=row * (config.height + config.padding) + config.offset_y,
                    width=config.width,
                    height=config.height,
                    color=color,
                    row=row,
                    col=col,
                )
                for col in range(config.cols)
            ])

    @property
    def rows(self) -> int:
        return self._config.rows

    @property
    def cols(self) -> int:
        return self._config.cols

    @property
    def size(self) -> int:
        """Total number of bricks in the grid."""
        return self._config.rows * self._config.cols

    @property
    def remaining(self) -> int:
        """Number of bricks still visible."""
        return sum(1 for brick in self if brick.visible)

    def __iter__(self) -> Iterator[Brick]:
        """Iterate bricks row by row, left to right."""
        for row in self._rows:
            yield from row

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, position: Tuple[int, int]) -> Brick:
        row, col = position
        return self._rows[row][col]

    def visible_bricks(self) -> List[Brick]:
        """Bricks that can still be hit, in grid order."""
        return [brick for brick in self if brick.visible]

    def total_points(self, points_per_brick: int) -> int:
        """Score awarded for clearing the whole grid."""
        return self.size * points_per_brick

    def reset(self) -> None:
        """Make every brick visible again."""
        for brick in self:
            brick.visible = True
