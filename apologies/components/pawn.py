"""Pawn component.

One pawn per color. ``home`` is the corner the pawn starts on and never
changes; ``position`` and ``laps`` are replaced on every move or collision.
"""

from dataclasses import dataclass

from apologies.types import Color, Coordinate, PawnID


@dataclass(frozen=True)
class Pawn:
    """Colored pawn racing around the perimeter.

    Attributes:
        color: Color identifier, also the winner marker.
        position: Current cell on the path.
        home: Corner assigned at board creation.
        id: Index into ``Board.pawns``; doubles as the turn-order key.
        laps: Number of times the pawn passed over its home index.
    """

    color: Color
    position: Coordinate
    home: Coordinate
    id: PawnID
    laps: int = 0
