"""Headless driver that plays chained games with a random policy."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from countdown_snake.config import SimulationConfig
from countdown_snake.engine import Collision, GameEngine, Ongoing, Won
from countdown_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class SimulationResult:
    """Aggregate results from a simulation run."""

    games: int
    wins: int
    losses: int
    truncated: int
    total_ticks: int
    items_eaten: int
    highscore: int
    wall_time_seconds: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.games} games "
            f"({self.wins} won, {self.losses} lost, "
            f"{self.truncated} truncated), {self.total_ticks} ticks, "
            f"{self.items_eaten} items eaten in "
            f"{self.wall_time_seconds:.2f}s | highscore {self.highscore}"
        )


def run_simulation(config: SimulationConfig) -> SimulationResult:
    """Play ``config.games`` games back to back.

    The high score is carried from one game to the next. A game stops on
    collision, on a win, or after ``config.max_ticks`` ticks.
    """
    rng = np.random.default_rng(config.seed)
    engine = GameEngine.with_highscore(
        config.initial_highscore, seed=int(rng.integers(2**31)),
    )

    wins = losses = truncated = 0
    total_ticks = 0
    items_eaten = 0
    start = time.perf_counter()

    for game in range(config.games):
        if game > 0:
            engine = engine.next_game(seed=int(rng.integers(2**31)))

        outcome = None
        for _ in range(config.max_ticks):
            if rng.random() < config.turn_probability:
                engine.change_direction(
                    _DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))],
                )
            outcome = engine.tick()
            if isinstance(outcome, Ongoing) and outcome.item_consumed:
                items_eaten += 1
            if outcome.terminal:
                break

        total_ticks += engine.ticks
        if isinstance(outcome, Won):
            items_eaten += 1
            wins += 1
        elif isinstance(outcome, Collision):
            losses += 1
        else:
            truncated += 1

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        games=config.games,
        wins=wins,
        losses=losses,
        truncated=truncated,
        total_ticks=total_ticks,
        items_eaten=items_eaten,
        highscore=engine.get_highscore(),
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
