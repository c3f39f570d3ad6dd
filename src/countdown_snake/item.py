"""Item spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from countdown_snake.grid import ITEM

if TYPE_CHECKING:
    from countdown_snake.grid import Grid

logger = logging.getLogger(__name__)


class ItemSpawner:
    """Places the item on a uniformly chosen traversable cell.

    Candidates are recomputed on every call because decay changes the set
    of free cells each turn.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> int | None:
        """Place one item and return its position.

        Returns ``None`` when every cell is occupied.
        """
        candidates = self.grid.traversable_cells()
        if candidates.size == 0:
            logger.debug("No traversable cells left for an item.")
            return None

        position = int(self.rng.choice(candidates))
        self.grid.set(position, ITEM)
        logger.debug("Item spawned at %d.", position)
        return position
