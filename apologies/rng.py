"""Random integer sources.

Every roll in the engine goes through a ``RandIntFn``: a callable that takes
``n`` and returns a uniform integer in ``[0, n)``. The reducer picks its
source in this order:

1. an explicitly injected function,
2. a per-turn ``random.Random`` seeded from ``(state.seed, state.turn)``,
3. the module-level ``random.randrange``.

Seeded states are therefore fully deterministic without any hidden generator
state, and scripted sources allow replaying an exact roll sequence.
"""

import random
from typing import Iterable, Iterator, Optional

from apologies.types import RandIntFn

ROLL_SIDES = 4
"""Rolls are uniform over ``{0, 1, 2, 3}``."""


def default_randint(n: int) -> int:
    return random.randrange(n)


def seeded_randint(seed: Optional[int]) -> RandIntFn:
    """Return ``randrange`` of a fresh ``random.Random`` seeded with ``seed``."""
    return random.Random(seed).randrange


def turn_randint(seed: int, turn: int) -> RandIntFn:
    """Deterministic source for one turn of a seeded simulation."""
    return random.Random(hash((seed, turn))).randrange


def derive_seed(seed: int, index: int) -> int:
    """Derive an independent seed, e.g. one per universe."""
    return hash((seed, index)) & 0xFFFFFFFF


def scripted_randint(values: Iterable[int]) -> RandIntFn:
    """Replay a fixed sequence of draws.

    Raises:
        ValueError: When the script is exhausted or a value falls outside
            ``[0, n)`` for the requested ``n``.
    """
    script: Iterator[int] = iter(values)

    def randint(n: int) -> int:
        try:
            value = next(script)
        except StopIteration:
            raise ValueError("Scripted roll sequence exhausted") from None
        if not 0 <= value < n:
            raise ValueError(f"Scripted value {value} outside [0, {n})")
        return value

    return randint
