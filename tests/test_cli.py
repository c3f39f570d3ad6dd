"""Tests for the command line launcher."""

from countdown_snake.cli import main
from countdown_snake.config import SimulationConfig


class TestCli:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "simulate" in capsys.readouterr().out

    def test_simulate(self, capsys):
        code = main(["simulate", "--games", "2", "--max-ticks", "20", "--seed", "3"])
        assert code == 0
        assert "Simulation: 2 games" in capsys.readouterr().out

    def test_save_and_reuse_config(self, tmp_path, capsys):
        path = tmp_path / "sim.json"
        main([
            "simulate", "--games", "1", "--max-ticks", "5",
            "--highscore", "70", "--save-config", str(path),
        ])
        saved = SimulationConfig.load(path)
        assert saved.games == 1
        assert saved.initial_highscore == 70

        capsys.readouterr()
        assert main(["simulate", "--config", str(path), "--games", "2"]) == 0
        out = capsys.readouterr().out
        assert "Simulation: 2 games" in out
        assert "highscore" in out
