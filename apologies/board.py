"""Board and path construction.

Builds the immutable perimeter path of an ``N`` x ``N`` board and the initial
pawn placement. The path starts at ``(0, 0)`` and runs clockwise: top row
left to right, right column downwards, bottom row right to left, then the left
column upwards, stopping short of ``(0, 0)`` which closes the loop.

Example:

>>> from apologies.board import create_board
>>> board = create_board(8, ["red", "blue"])
>>> len(board.path)
28
"""

from typing import List, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from apologies.components import Pawn
from apologies.state import Board
from apologies.types import Color, Coordinate
from apologies.utils.path import board_corners


def generate_path(size: int) -> PVector[Coordinate]:
    """Return the clockwise perimeter loop of a ``size`` x ``size`` board.

    Args:
        size (int): Board dimension, at least 2.

    Returns:
        PVector[Coordinate]: ``4 * (size - 1)`` distinct cells, each corner once.

    Raises:
        ValueError: If ``size < 2`` (no perimeter loop exists).
    """
    if size < 2:
        raise ValueError(f"Board size must be at least 2, got {size}")
    path: List[Coordinate] = []
    for x in range(size):
        path.append((x, 0))
    for y in range(1, size):
        path.append((size - 1, y))
    for x in range(size - 2, -1, -1):
        path.append((x, size - 1))
    for y in range(size - 2, 0, -1):
        path.append((0, y))
    return pvector(path)


def create_board(size: int, colors: Sequence[Color]) -> Board:
    """Create a board with one pawn per color on its home corner.

    Homes are handed out in corner order (top-left, top-right, bottom-right,
    bottom-left). With more than four colors the corners are reused, so two
    pawns may share a home.

    Raises:
        ValueError: If ``colors`` is empty or ``size < 2``.
    """
    if len(colors) == 0:
        raise ValueError("At least one color is required")
    path = generate_path(size)
    corners = board_corners(size)
    pawns = [
        Pawn(
            color=color,
            position=corners[idx % len(corners)],
            home=corners[idx % len(corners)],
            id=idx,
        )
        for idx, color in enumerate(colors)
    ]
    return Board(size=size, pawns=pvector(pawns), winner=None, path=path)
