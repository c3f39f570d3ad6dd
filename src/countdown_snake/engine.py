"""Turn-based game engine composing grid, snake, and item logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from countdown_snake.grid import STRIDE, CellType, Grid, index_of
from countdown_snake.item import ItemSpawner
from countdown_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

SCORE_PER_ITEM = 10

_START_POSITION = index_of(STRIDE // 2, STRIDE // 2)


@dataclass(frozen=True)
class Collision:
    """The head ran into a wall or the snake's own body."""

    terminal = True


@dataclass(frozen=True)
class Won:
    """The item was eaten and no free cell remains to respawn it."""

    terminal = True


@dataclass(frozen=True)
class Ongoing:
    """The game continues; *item_consumed* tells whether the snake grew."""

    item_consumed: bool = False
    terminal = False


TickOutcome = Collision | Won | Ongoing


class GameEngine:
    """Single-snake, turn-based game engine.

    The engine owns the grid, snake, and item spawner. Each call to
    :meth:`tick` advances the game by one turn and returns the outcome.
    The snake's trailing body is never stored explicitly: the head cell is
    written with the current length and every cell decays by one per turn,
    so exactly ``length`` cells stay occupied.
    """

    def __init__(self, highscore: int = 0, seed: int | None = None) -> None:
        self.grid = Grid()
        self.rng = np.random.default_rng(seed)
        self.snake = Snake(_START_POSITION, Direction.DOWN, length=2)
        # Neck behind the head so the occupied cells already equal the length.
        neck = self.snake.position - self.snake.direction.offset
        self.grid.set(neck, self.snake.length - 1)
        self.grid.set(self.snake.position, self.snake.length)

        self.item_spawner = ItemSpawner(self.grid, rng=self.rng)
        self.item_spawner.spawn()

        self.score = 0
        self.highscore = highscore
        self.ticks = 0
        self._final: Collision | Won | None = None

    @classmethod
    def with_highscore(
        cls, highscore: int, seed: int | None = None,
    ) -> GameEngine:
        """Start a fresh game carrying over a previous high score."""
        return cls(highscore=highscore, seed=seed)

    def next_game(self, seed: int | None = None) -> GameEngine:
        """Return a new game that inherits this game's high score."""
        return GameEngine.with_highscore(self.get_highscore(), seed=seed)

    @property
    def game_over(self) -> bool:
        return self._final is not None

    @property
    def length(self) -> int:
        return self.snake.length

    @property
    def position(self) -> int:
        return self.snake.position

    def change_direction(self, direction: Direction) -> None:
        self.snake.change_direction(direction)

    def get_direction(self) -> Direction:
        return self.snake.direction

    def get_highscore(self) -> int:
        return max(self.highscore, self.score)

    def tick(self) -> TickOutcome:
        """Advance the game by one turn.

        Eating skips the decay for that turn, which is what makes the snake
        grow. Traversability is checked after the decay so a tail segment
        leaving this turn no longer blocks the head.
        """
        if self._final is not None:
            return self._final

        self.snake.make_move()
        pos = self.snake.position
        was_item = self.grid.is_item(pos)
        if not was_item:
            self.grid.decay()
        self.ticks += 1

        if not self.grid.is_traversable(pos):
            self._final = Collision()
            logger.info(
                "Snake collided at tick %d with score %d.",
                self.ticks, self.score,
            )
            return self._final

        if was_item:
            self.snake.increase_length()
            self.grid.set(pos, self.snake.length)
            self.score += SCORE_PER_ITEM
            if self.item_spawner.spawn() is None:
                self._final = Won()
                logger.info(
                    "Grid filled at tick %d with score %d.",
                    self.ticks, self.score,
                )
                return self._final
            return Ongoing(item_consumed=True)

        self.grid.set(pos, self.snake.length)
        return Ongoing(item_consumed=False)

    def cell(self, row: int, col: int) -> CellType:
        """Classify the cell at a bordered (row, col) coordinate."""
        return self.grid.classify(index_of(row, col))

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.ticks,
            "score": self.score,
            "highscore": self.get_highscore(),
            "game_over": self.game_over,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
        }
