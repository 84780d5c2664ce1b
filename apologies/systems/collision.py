"""Collision system.

When the active pawn lands on a cell held by another pawn, that pawn is sent
back along the path to the nearest free corner behind it (any corner, not
only its own home). If every corner between it and the start of the path is
taken, it goes straight to its own home. The active pawn always completes its
move onto the contested cell.

Occupancy is evaluated before the active pawn moves, so its origin cell still
counts as taken while searching.
"""

import logging
from dataclasses import replace

from apologies.components import Pawn
from apologies.state import Board, SimulationState
from apologies.types import Coordinate, PawnID
from apologies.utils.occupancy import is_occupied, pawn_at
from apologies.utils.path import path_index

logger = logging.getLogger(__name__)


def find_displacement(board: Board, pawn: Pawn) -> Coordinate:
    """Return the cell a knocked pawn is sent to.

    Scans backwards from the pawn's path index down to index 0 for the first
    corner that no pawn occupies; falls back to the pawn's home.
    """
    corners = board.corners
    for idx in range(path_index(board.path, pawn.position), -1, -1):
        coord = board.path[idx]
        if (coord == pawn.home or coord in corners) and not is_occupied(
            board.pawns, coord
        ):
            return coord
    return pawn.home


def collision_system(
    state: SimulationState, pawn_id: PawnID, new_pos: Coordinate
) -> SimulationState:
    """Displace any other pawn standing on ``new_pos``.

    Returns:
        SimulationState: Same state if the cell is free (or only held by the
            moving pawn itself), otherwise a state with the other pawn moved.
    """
    board = state.board
    other = pawn_at(board.pawns, new_pos, exclude=pawn_id)
    if other is None:
        return state

    target = find_displacement(board, other)
    logger.debug(
        "Collision: %s knocks %s from %s to %s",
        board.pawns[pawn_id].color,
        other.color,
        other.position,
        target,
    )
    displaced = replace(other, position=target)
    return replace(
        state, board=replace(board, pawns=board.pawns.set(other.id, displaced))
    )
