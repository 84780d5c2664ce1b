"""Multi-universe driver.

A *universe* is one independent :class:`SimulationState`. Drivers hold any
number of them and advance each unfinished universe once per tick. Universes
share nothing mutable (only the read-only path vector of boards of the same
size), so ticking is a plain map of :func:`apologies.step.simulate_turn`.

Example:

>>> from apologies.multiverse import create_universes, run_universes, winner_tally
>>> universes = run_universes(create_universes(4, 8, ["red", "blue"], seed=7))
>>> sum(winner_tally(universes).values())
4
"""

import logging
from collections import Counter
from typing import List, Optional, Sequence

from apologies.rng import derive_seed
from apologies.state import SimulationState
from apologies.step import new_simulation, simulate_turn
from apologies.types import Color, RandIntFn

logger = logging.getLogger(__name__)

UNIVERSE_OPTIONS = (1, 4, 16, 64, 256)
MAX_UNIVERSES = 256


def create_universes(
    count: int,
    size: int,
    colors: Sequence[Color],
    seed: Optional[int] = None,
    rng: Optional[RandIntFn] = None,
) -> List[SimulationState]:
    """Create ``count`` independent fresh universes.

    With a base ``seed`` every universe gets its own derived seed, making the
    whole batch reproducible while keeping universes distinct.

    Raises:
        ValueError: If ``count`` is not positive.
    """
    if count < 1:
        raise ValueError(f"Universe count must be positive, got {count}")
    return [
        new_simulation(
            size,
            colors,
            rng=rng,
            seed=derive_seed(seed, idx) if seed is not None else None,
        )
        for idx in range(count)
    ]


def tick_universes(
    universes: Sequence[SimulationState], rng: Optional[RandIntFn] = None
) -> List[SimulationState]:
    """Advance every unfinished universe by exactly one turn."""
    return [u if u.is_finished else simulate_turn(u, rng) for u in universes]


def all_finished(universes: Sequence[SimulationState]) -> bool:
    return all(u.is_finished for u in universes)


def run_universes(
    universes: Sequence[SimulationState],
    rng: Optional[RandIntFn] = None,
    max_ticks: Optional[int] = None,
) -> List[SimulationState]:
    """Tick until every universe is finished or ``max_ticks`` ticks ran."""
    current = list(universes)
    ticks = 0
    while not all_finished(current):
        if max_ticks is not None and ticks >= max_ticks:
            logger.warning(
                "Stopping after %d ticks with %d unfinished universes",
                ticks,
                sum(1 for u in current if not u.is_finished),
            )
            break
        current = tick_universes(current, rng)
        ticks += 1
    return current


def winners(universes: Sequence[SimulationState]) -> List[Optional[Color]]:
    return [u.board.winner for u in universes]


def winner_tally(universes: Sequence[SimulationState]) -> Counter[Color]:
    """Count wins per color over finished universes."""
    return Counter(u.board.winner for u in universes if u.board.winner is not None)


def count_wins(universes: Sequence[SimulationState], color: Color) -> int:
    """Number of universes the given color won (the prediction score)."""
    return sum(1 for u in universes if u.board.winner == color)
