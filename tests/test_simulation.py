"""Tests for the headless simulation driver."""

from countdown_snake.config import SimulationConfig
from countdown_snake.engine import SCORE_PER_ITEM
from countdown_snake.simulation import run_simulation


class TestRunSimulation:
    def test_every_game_accounted_for(self):
        result = run_simulation(SimulationConfig(games=5, max_ticks=100, seed=1))
        assert result.games == 5
        assert result.wins + result.losses + result.truncated == 5
        assert 0 < result.total_ticks <= 500
        assert result.highscore % SCORE_PER_ITEM == 0

    def test_highscore_carried_in(self):
        result = run_simulation(
            SimulationConfig(games=2, max_ticks=20, seed=2, initial_highscore=1_000),
        )
        assert result.highscore >= 1_000

    def test_truncation(self):
        result = run_simulation(
            SimulationConfig(games=1, max_ticks=1, seed=0, turn_probability=0.0),
        )
        # One step down from the centre never hits a wall.
        assert result.truncated == 1
        assert result.total_ticks == 1

    def test_deterministic_with_seed(self):
        cfg = SimulationConfig(games=4, max_ticks=200, seed=123)
        a = run_simulation(cfg)
        b = run_simulation(cfg)
        a.wall_time_seconds = b.wall_time_seconds = 0.0
        assert a == b

    def test_summary(self):
        result = run_simulation(SimulationConfig(games=1, max_ticks=10, seed=5))
        assert result.summary().startswith("Simulation: 1 games")
