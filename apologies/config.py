from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import msgspec

from apologies.multiverse import MAX_UNIVERSES
from apologies.types import Color

DEFAULT_COLORS: Tuple[Color, ...] = ("red", "blue", "green", "yellow")
DEFAULT_SIZE = 8


@dataclass(frozen=True)
class SimulationConfig:
    size: int = DEFAULT_SIZE
    colors: Tuple[Color, ...] = DEFAULT_COLORS
    universes: int = 1
    seed: Optional[int] = None
    max_turns: Optional[int] = None
    # driver pacing: the tick delay halves every speedup interval
    base_tick_delay_ms: float = 300.0
    speedup_interval_ms: float = 5000.0

    @classmethod
    def from_toml(cls, path: str | Path) -> SimulationConfig:
        """Load and validate a configuration from a TOML file path."""
        with Path(path).open("rb") as f:
            config = msgspec.toml.decode(f.read(), type=cls)
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ``ValueError`` for settings the engine is not defined for."""
        if self.size < 2:
            raise ValueError(f"size must be at least 2, got {self.size}")
        if len(self.colors) == 0:
            raise ValueError("colors must not be empty")
        if len(set(self.colors)) != len(self.colors):
            raise ValueError(f"colors must be distinct, got {list(self.colors)}")
        if not 1 <= self.universes <= MAX_UNIVERSES:
            raise ValueError(
                f"universes must be in [1, {MAX_UNIVERSES}], got {self.universes}"
            )
        if self.max_turns is not None and self.max_turns < 0:
            raise ValueError(f"max_turns must be non-negative, got {self.max_turns}")
        if self.speedup_interval_ms <= 0:
            raise ValueError("speedup_interval_ms must be positive")

    def tick_delay(self, elapsed_ms: float) -> float:
        """Delay between ticks after ``elapsed_ms`` of running time."""
        speedups = int(elapsed_ms // self.speedup_interval_ms)
        return self.base_tick_delay_ms / (2**speedups)
