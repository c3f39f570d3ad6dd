"""Configuration for headless simulation runs."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Settings for a chain of random-policy games.

    Supports JSON serialization for reproducibility.
    """

    games: int = 10
    max_ticks: int = 1_000
    seed: int | None = None
    turn_probability: float = 0.3
    initial_highscore: int = 0

    def __post_init__(self) -> None:
        if self.games < 1:
            raise ValueError("games must be at least 1.")
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be at least 1.")
        if not 0.0 <= self.turn_probability <= 1.0:
            raise ValueError("turn_probability must be between 0 and 1.")
        if self.initial_highscore < 0:
            raise ValueError("initial_highscore must not be negative.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
