"""Countdown Snake core game engine."""

from countdown_snake.engine import Collision, GameEngine, Ongoing, TickOutcome, Won
from countdown_snake.grid import CellType, Grid
from countdown_snake.snake import Direction, Snake

__all__ = [
    "CellType",
    "Collision",
    "Direction",
    "GameEngine",
    "Grid",
    "Ongoing",
    "Snake",
    "TickOutcome",
    "Won",
]
