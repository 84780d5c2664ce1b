"""Core immutable ``Board`` and ``SimulationState`` dataclasses.

A ``SimulationState`` is the whole snapshot of one game ("universe") at a
single turn. Systems are pure functions that take the previous state and
return a *new* one; nothing is mutated in place, so any number of universes
can be held and advanced independently.

Design notes:

* ``Board.pawns`` and ``Board.path`` are persistent vectors
  (``pyrsistent.PVector``). Replacing a pawn copies only the spine of the
  vector, and the ``path`` vector is generated once per board and shared by
  every successor state.
* ``winner`` / ``is_finished`` are set together exactly once. The reducer
  short-circuits on finished states.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from apologies.components import Pawn
from apologies.types import Color, Coordinate
from apologies.utils.path import board_corners


@dataclass(frozen=True)
class Board:
    """Square race track and the pawns on it.

    Attributes:
        size (int): Board dimension (board is ``size`` x ``size``).
        pawns (PVector[Pawn]): One pawn per color, in turn order.
        winner (Color | None): Color of the winning pawn, once decided.
        path (PVector[Coordinate]): Clockwise perimeter loop starting at
            ``(0, 0)``; length ``4 * (size - 1)``.
    """

    size: int
    pawns: PVector[Pawn] = pvector()
    winner: Optional[Color] = None
    path: PVector[Coordinate] = pvector()

    @property
    def corners(self) -> Tuple[Coordinate, ...]:
        """The four corner cells in home-assignment order."""
        return board_corners(self.size)


@dataclass(frozen=True)
class SimulationState:
    """Immutable snapshot of one simulated game.

    Attributes:
        board (Board): Board snapshot for this turn.
        turn (int): Number of turns applied so far.
        is_finished (bool): True once a winner was declared. Terminal.
        current_player (int): Index into ``board.pawns`` of the pawn to move next.
        rng_value (int): Last roll, in ``[0, 3]``.
        seed (int | None): Base seed. When set, rolls are derived from
            ``(seed, turn)`` so the transition stays a pure function of the state.
    """

    board: Board
    turn: int = 0
    is_finished: bool = False
    current_player: int = 0
    rng_value: int = 0

    seed: Optional[int] = None

    @property
    def current_pawn(self) -> Pawn:
        return self.board.pawns[self.current_player]

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Field name to value for every field that is not
            ``None``, plus the board's winner and pawn positions.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None or field == "board":
                continue
            description = description.set(field, value)
        description = description.set(
            "positions", pmap({pawn.color: pawn.position for pawn in self.board.pawns})
        )
        if self.board.winner is not None:
            description = description.set("winner", self.board.winner)
        return description
