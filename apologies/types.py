"""Common type aliases.

``RandIntFn`` is the central extension point for randomness: any callable
returning a uniform integer in ``[0, n)`` may be injected into the reducer
(``random.randrange``, a seeded ``random.Random().randrange`` or a scripted
sequence for replay).
"""

from typing import Callable, Tuple

Coordinate = Tuple[int, ...]
"""Cell on the perimeter path, ``(x, y)`` for a 2D board."""

Color = str
PawnID = int

RandIntFn = Callable[[int], int]
