"""Pawn movement system.

Advances the active pawn ``rng_value`` cells along the cyclic path and counts
a lap whenever the move passes over (or lands on) the pawn's home index.
Leaving home does not count, so a fresh pawn needs a full loop before its
first lap is recorded.
"""

import logging
from dataclasses import replace

from apologies.state import SimulationState
from apologies.types import PawnID
from apologies.utils.path import crosses_home, path_index

logger = logging.getLogger(__name__)


def destination_index(state: SimulationState, pawn_id: PawnID) -> int:
    """Path index the pawn reaches with the state's current roll."""
    path = state.board.path
    idx = path_index(path, state.board.pawns[pawn_id].position)
    return (idx + state.rng_value) % len(path)


def movement_system(
    state: SimulationState, pawn_id: PawnID, new_idx: int
) -> SimulationState:
    """Move a pawn to ``path[new_idx]`` and update its lap counter.

    Args:
        state (SimulationState): Current state.
        pawn_id (PawnID): Pawn to move.
        new_idx (int): Destination index on the path.

    Returns:
        SimulationState: State with the pawn replaced by its moved copy.
    """
    board = state.board
    pawn = board.pawns[pawn_id]
    prev_idx = path_index(board.path, pawn.position)
    home_idx = path_index(board.path, pawn.home)

    laps = pawn.laps
    if crosses_home(prev_idx, new_idx, home_idx):
        laps += 1
        logger.debug("Lap %d completed by %s", laps, pawn.color)

    new_pos = board.path[new_idx]
    if new_pos != pawn.position:
        logger.debug("Move %s %s -> %s", pawn.color, pawn.position, new_pos)

    moved = replace(pawn, position=new_pos, laps=laps)
    return replace(state, board=replace(board, pawns=board.pawns.set(pawn_id, moved)))
