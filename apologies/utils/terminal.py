"""Terminal condition helper predicates."""

from apologies.components import Pawn
from apologies.state import SimulationState


def is_terminal_state(state: SimulationState) -> bool:
    """Return True if a winner was already declared."""
    return state.is_finished or state.board.winner is not None


def has_won(pawn: Pawn) -> bool:
    """Pawn is back on its home corner after at least one lap."""
    return pawn.laps >= 1 and pawn.position == pawn.home
