"""Snake head state and movement logic."""

from __future__ import annotations

import enum

from countdown_snake.grid import STRIDE


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def offset(self) -> int:
        """Flat index delta for one step in this direction."""
        dr, dc = self.value
        return dr * STRIDE + dc

    def is_opposite(self, other: Direction) -> bool:
        return _OPPOSITES[self] is other


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """The snake's head position, heading and length.

    The body itself lives in the grid as decaying countdown values, so the
    snake only tracks where its head is.
    """

    def __init__(
        self,
        position: int,
        direction: Direction = Direction.DOWN,
        length: int = 2,
    ) -> None:
        self.position = position
        self.direction = direction
        self.length = length

    def make_move(self) -> None:
        """Step the head one cell in the current direction."""
        self.position += self.direction.offset

    def change_direction(self, new_direction: Direction) -> None:
        """Change direction, ignoring 180° reversals."""
        if not self.direction.is_opposite(new_direction):
            self.direction = new_direction

    def increase_length(self) -> None:
        self.length += 1

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "position": self.position,
            "direction": self.direction.name,
            "length": self.length,
        }
