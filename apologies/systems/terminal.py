"""Terminal and turn bookkeeping systems.

``win_system`` sets ``board.winner`` and ``is_finished`` exactly once, when the
pawn that just moved is back home after at least one lap. ``turn_system``
hands the turn to the next pawn.
"""

import logging
from dataclasses import replace

from apologies.state import SimulationState
from apologies.types import PawnID
from apologies.utils.terminal import has_won, is_terminal_state

logger = logging.getLogger(__name__)


def win_system(state: SimulationState, pawn_id: PawnID) -> SimulationState:
    """Declare ``pawn_id`` the winner if it is home after a lap (idempotent)."""
    if is_terminal_state(state):
        return state

    pawn = state.board.pawns[pawn_id]
    if not has_won(pawn):
        return state

    logger.info("Winner %s after %d turns", pawn.color, state.turn + 1)
    return replace(
        state,
        board=replace(state.board, winner=pawn.color),
        is_finished=True,
    )


def turn_system(state: SimulationState) -> SimulationState:
    """Advance ``current_player`` round-robin and bump the turn counter."""
    return replace(
        state,
        current_player=(state.current_player + 1) % len(state.board.pawns),
        turn=state.turn + 1,
    )
