"""apologies.components
=======================

Value objects placed on the board. Currently only :class:`Pawn`; components
are immutable dataclasses and are replaced, never mutated, by systems::

    from apologies.components import Pawn
"""

from .pawn import Pawn

__all__ = ["Pawn"]
