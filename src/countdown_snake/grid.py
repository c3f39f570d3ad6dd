"""Flat countdown grid for the snake game."""

from __future__ import annotations

import enum

import numpy as np

# Playable side length and the bordered row stride.
SIDE = 10
STRIDE = SIDE + 2
CELL_COUNT = STRIDE * STRIDE

WALL = int(np.iinfo(np.int64).max)
ITEM = int(np.iinfo(np.int64).min)


class CellType(enum.Enum):
    """Classification of a cell for display purposes."""

    WALL = "wall"
    EMPTY = "empty"
    ITEM = "item"
    BODY = "body"


def index_of(row: int, col: int) -> int:
    """Convert a bordered (row, col) coordinate into a flat index."""
    return row * STRIDE + col


def coords_of(position: int) -> tuple[int, int]:
    """Convert a flat index into a bordered (row, col) coordinate."""
    return divmod(position, STRIDE)


class Grid:
    """NumPy-backed bordered grid storing per-cell countdown values.

    A positive value marks a body segment and counts the turns left before
    the cell frees up. ``WALL`` fills the border ring and ``ITEM`` marks the
    cell holding the item. Zero and other negative values are empty.
    """

    def __init__(self) -> None:
        self.cells = np.zeros(CELL_COUNT, dtype=np.int64)
        square = self.cells.reshape(STRIDE, STRIDE)
        square[0, :] = WALL
        square[1:-1, 0] = WALL
        square[1:-1, -1] = WALL
        square[-1, :] = WALL
        self._border = self.cells == WALL

    def decay(self) -> None:
        """Age every cell by one turn, saturating at ``ITEM``."""
        np.subtract(self.cells, 1, out=self.cells, where=self.cells > ITEM)

    def get(self, position: int) -> int:
        """Return the raw value stored at *position*."""
        return int(self.cells[position])

    def set(self, position: int, value: int) -> None:
        """Write *value* at *position*."""
        self.cells[position] = value

    def is_traversable(self, position: int) -> bool:
        """Check whether the head may move onto *position*."""
        return bool(self.cells[position] <= 0)

    def is_item(self, position: int) -> bool:
        return bool(self.cells[position] == ITEM)

    def is_wall(self, position: int) -> bool:
        return bool(self._border[position])

    def classify(self, position: int) -> CellType:
        """Return the display classification of *position*."""
        if self._border[position]:
            return CellType.WALL
        value = self.cells[position]
        if value == ITEM:
            return CellType.ITEM
        if value > 0:
            return CellType.BODY
        return CellType.EMPTY

    def traversable_cells(self) -> np.ndarray:
        """Return the flat indices of every traversable cell."""
        return np.flatnonzero(self.cells <= 0)

    def wall_count(self) -> int:
        return int(np.count_nonzero(self._border))

    def body_count(self) -> int:
        """Count occupied interior cells."""
        return int(np.count_nonzero((self.cells > 0) & ~self._border))

    def item_count(self) -> int:
        return int(np.count_nonzero(self.cells == ITEM))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "side": SIDE,
            "stride": STRIDE,
            "cells": self.cells.tolist(),
        }
