"""Roll system.

Draws the active pawn's roll and records it as ``rng_value`` so drivers can
display the last roll.
"""

import logging
from dataclasses import replace

from apologies.rng import ROLL_SIDES
from apologies.state import SimulationState
from apologies.types import RandIntFn

logger = logging.getLogger(__name__)


def roll_system(state: SimulationState, randint: RandIntFn) -> SimulationState:
    """Return ``state`` with a fresh roll in ``[0, ROLL_SIDES)``."""
    rng_value = randint(ROLL_SIDES)
    logger.debug(
        "Turn %d: %s rolls %d", state.turn, state.current_pawn.color, rng_value
    )
    return replace(state, rng_value=rng_value)
