# maze.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np


class Direction(Enum):
    """Axis directions. NONE is only a "nothing left to try" signal."""
    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


# clockwise neighbour of every real direction
_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}
_COUNTER_CLOCKWISE = {v: k for k, v in _CLOCKWISE.items()}


def rotate(direction: Direction, clockwise: bool = False) -> Direction:
    """Quarter turn. Counter-clockwise by default (i.e. a left turn)."""
    if direction is Direction.NONE:
        return Direction.NONE
    table = _CLOCKWISE if clockwise else _COUNTER_CLOCKWISE
    return table[direction]


def invert(direction: Direction) -> Direction:
    return rotate(rotate(direction))


@dataclass(frozen=True)
class Coordinate:
    """Cell position, x = column, y = row counted from the bottom."""
    x: int
    y: int

    @property
    def up(self) -> "Coordinate":
        return Coordinate(self.x, self.y + 1)

    @property
    def down(self) -> "Coordinate":
        return Coordinate(self.x, self.y - 1)

    @property
    def right(self) -> "Coordinate":
        return Coordinate(self.x + 1, self.y)

    @property
    def left(self) -> "Coordinate":
        return Coordinate(self.x - 1, self.y)

    def neighbor(self, direction: Direction) -> "Coordinate":
        if direction is Direction.UP:
            return self.up
        if direction is Direction.RIGHT:
            return self.right
        if direction is Direction.DOWN:
            return self.down
        if direction is Direction.LEFT:
            return self.left
        raise ValueError(f"No neighbor in direction {direction}")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Grid:
    """
    Read-only passability map.

    The matrix is indexed as ``matrix[x][y]`` (width first), True meaning
    the cell can be entered. The array is copied and locked on construction,
    so one Grid can be shared by any number of walkers.

    Bounds are not checked here: callers are expected to stay inside
    ``0 <= x < width`` and ``0 <= y < height``.
    """

    def __init__(self, matrix: Sequence[Sequence[bool]] | np.ndarray) -> None:
        try:
            cells = np.array(matrix, dtype=bool)
        except ValueError as e:
            raise ValueError(f"Grid matrix must be rectangular: {e}") from e

        if cells.ndim != 2:
            raise ValueError(f"Grid matrix must be 2-D, got {cells.ndim} dimension(s)")
        if cells.shape[0] == 0 or cells.shape[1] == 0:
            raise ValueError(f"Grid must be at least 1x1, got {cells.shape[0]}x{cells.shape[1]}")

        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[str], wall: str = "#") -> "Grid":
        """
        Build a grid from text rows, top row first, e.g.::

            Grid.from_rows([
                "#.#",
                "#.#",
                "###",
            ])

        Any character other than ``wall`` is passable.
        """
        if not rows:
            raise ValueError("Grid needs at least one row")
        height = len(rows)
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("All grid rows must have the same length")

        cells = np.zeros((width, height), dtype=bool)
        for row_idx, line in enumerate(rows):
            y = height - row_idx - 1
            for x, ch in enumerate(line):
                cells[x, y] = ch != wall
        return cls(cells)

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    def width(self) -> int:
        return int(self._cells.shape[0])

    def height(self) -> int:
        return int(self._cells.shape[1])

    def passable(self, x: int, y: int) -> bool:
        return bool(self._cells[x, y])

    def contains(self, p: Coordinate) -> bool:
        return 0 <= p.x < self.width() and 0 <= p.y < self.height()

    def on_boundary(self, p: Coordinate) -> bool:
        return (
            p.x == 0
            or p.x == self.width() - 1
            or p.y == 0
            or p.y == self.height() - 1
        )

    def __repr__(self) -> str:
        return f"Grid({self.width()}x{self.height()}, open={int(self._cells.sum())})"
