"""Path index arithmetic.

Helpers for locating cells on the cyclic perimeter path and for deciding
whether a forward move wrapped past a given index. All functions are pure.

Performance: ``path_index`` uses a cached reverse index of the immutable
``path`` vector, so repeated lookups across turns of the same board are O(1).
"""

import logging
from functools import lru_cache
from typing import Mapping, Sequence, Tuple

from apologies.types import Coordinate

logger = logging.getLogger(__name__)


def board_corners(size: int) -> Tuple[Coordinate, ...]:
    """Return the four corners of a ``size`` x ``size`` board.

    Order is top-left, top-right, bottom-right, bottom-left, which is also the
    order homes are handed out to colors.
    """
    last = size - 1
    return ((0, 0), (last, 0), (last, last), (0, last))


def is_corner(size: int, coord: Coordinate) -> bool:
    return coord in board_corners(size)


@lru_cache(maxsize=256)
def _path_lookup(path: Sequence[Coordinate]) -> Mapping[Coordinate, int]:
    """Build a reverse index from coordinate to path index.

    The argument is a persistent vector, which is hashable, so every board
    shares a single cached index for its lifetime.
    """
    return {coord: idx for idx, coord in enumerate(path)}


def path_index(path: Sequence[Coordinate], coord: Coordinate) -> int:
    """Return the index of ``coord`` on ``path``.

    Falls back to ``0`` when the coordinate is not on the path. This does not
    happen for boards built by :func:`apologies.board.create_board`; the
    fallback keeps the turn transition total for hand-built states.
    """
    idx = _path_lookup(path).get(tuple(coord))
    if idx is None:
        logger.warning("Coordinate %s is not on the path, using index 0", coord)
        return 0
    return idx


def crosses_home(prev_idx: int, new_idx: int, home_idx: int) -> bool:
    """Return True if moving forward from ``prev_idx`` to ``new_idx`` passes ``home_idx``.

    The arc is ``(prev_idx, new_idx]``: leaving home does not count, landing on
    home does. A zero-length move never crosses.
    """
    if prev_idx < 0 or new_idx < 0 or home_idx < 0:
        return False
    if prev_idx == new_idx:
        return False
    if prev_idx < new_idx:
        return prev_idx < home_idx <= new_idx
    # wrapped past the end of the path
    return home_idx > prev_idx or home_idx <= new_idx
