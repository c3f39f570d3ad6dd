"""CLI launcher for headless Countdown Snake simulations."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countdown-snake",
        description="Countdown Snake headless simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    sim_p = sub.add_parser(
        "simulate", help="Play chained games with a random policy.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; other flags override it.",
    )
    sim_p.add_argument("--games", type=int, default=None)
    sim_p.add_argument("--max-ticks", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--turn-probability", type=float, default=None)
    sim_p.add_argument(
        "--highscore", type=int, default=None,
        help="High score carried into the first game.",
    )
    sim_p.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path.",
    )

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from countdown_snake.config import SimulationConfig
    from countdown_snake.simulation import run_simulation

    config = (
        SimulationConfig.load(args.config)
        if args.config else SimulationConfig()
    )

    flag_map = {
        "games": "games",
        "max_ticks": "max_ticks",
        "seed": "seed",
        "turn_probability": "turn_probability",
        "highscore": "initial_highscore",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name) is not None
    }
    if overrides:
        config = replace(config, **overrides)

    if args.save_config:
        config.save(args.save_config)

    result = run_simulation(config)
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``countdown-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
