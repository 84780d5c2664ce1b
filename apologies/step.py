"""Turn reducer and simulation drivers.

This module wires the systems together into a single turn transition. The
exported :func:`simulate_turn` is the only gameplay progression entry point
and is pure: it returns a *new* :class:`apologies.state.SimulationState` and
never touches its input.

Ordering rationale:

1. ``roll_system`` records the roll for the active pawn.
2. ``collision_system`` runs *before* the move so the occupancy scan still
   sees the active pawn on its origin cell.
3. ``movement_system`` moves the active pawn and counts laps.
4. ``win_system`` checks the pawn that just moved.
5. ``turn_system`` hands over to the next pawn and bumps ``turn``.
"""

import logging
from typing import Optional, Sequence

from apologies.board import create_board
from apologies.rng import default_randint, seeded_randint, turn_randint
from apologies.state import SimulationState
from apologies.systems.collision import collision_system
from apologies.systems.movement import destination_index, movement_system
from apologies.systems.roll import roll_system
from apologies.systems.terminal import turn_system, win_system
from apologies.types import Color, RandIntFn
from apologies.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)


def simulate_turn(
    state: SimulationState, rng: Optional[RandIntFn] = None
) -> SimulationState:
    """Apply one turn for ``state.current_player``.

    Args:
        state (SimulationState): Previous immutable state.
        rng (RandIntFn | None): Roll source. If ``None`` a seeded state derives
            its roll from ``(seed, turn)``; an unseeded one uses ``random``.

    Returns:
        SimulationState: Successor state. A finished state is returned
            unchanged (the very same object).
    """
    if is_terminal_state(state):
        return state

    randint = _resolve_randint(state, rng)
    pawn_id = state.current_player

    state = roll_system(state, randint)
    new_idx = destination_index(state, pawn_id)
    state = collision_system(state, pawn_id, state.board.path[new_idx])
    state = movement_system(state, pawn_id, new_idx)
    state = win_system(state, pawn_id)
    return turn_system(state)


def new_simulation(
    size: int,
    colors: Sequence[Color],
    rng: Optional[RandIntFn] = None,
    seed: Optional[int] = None,
) -> SimulationState:
    """Create a fresh simulation with a randomly chosen starting pawn.

    Args:
        size (int): Board dimension (>= 2).
        colors (Sequence[Color]): Pawn colors in turn order.
        rng (RandIntFn | None): Source used to pick the start player.
        seed (int | None): Stored on the state; also picks the start player
            when no ``rng`` is given.
    """
    board = create_board(size, colors)
    if rng is None:
        rng = seeded_randint(seed) if seed is not None else default_randint
    return SimulationState(
        board=board,
        turn=0,
        is_finished=False,
        current_player=rng(len(colors)),
        rng_value=0,
        seed=seed,
    )


def run_simulation(
    size: int,
    colors: Sequence[Color],
    rng: Optional[RandIntFn] = None,
    seed: Optional[int] = None,
    max_turns: Optional[int] = None,
) -> SimulationState:
    """Play a fresh game until a pawn wins.

    The loop is unbounded unless ``max_turns`` is given; in that case the last
    state is returned even if it is not finished.
    """
    state = new_simulation(size, colors, rng=rng, seed=seed)
    while not state.is_finished:
        if max_turns is not None and state.turn >= max_turns:
            logger.warning("Stopping unfinished simulation after %d turns", state.turn)
            break
        state = simulate_turn(state, rng)
    return state


def _resolve_randint(
    state: SimulationState, rng: Optional[RandIntFn]
) -> RandIntFn:
    if rng is not None:
        return rng
    if state.seed is not None:
        return turn_randint(state.seed, state.turn)
    return default_randint
