"""Occupancy queries over the pawn vector.

Boards hold at most a handful of pawns, so a linear scan is all that is
needed here.
"""

from typing import Iterable, Optional

from apologies.components import Pawn
from apologies.types import Coordinate


def is_occupied(pawns: Iterable[Pawn], coord: Coordinate) -> bool:
    """Return True if any pawn stands on ``coord``."""
    return any(pawn.position == coord for pawn in pawns)


def pawn_at(
    pawns: Iterable[Pawn], coord: Coordinate, exclude: Optional[int] = None
) -> Optional[Pawn]:
    """Return the first pawn on ``coord`` whose id is not ``exclude``."""
    for pawn in pawns:
        if pawn.id != exclude and pawn.position == coord:
            return pawn
    return None
