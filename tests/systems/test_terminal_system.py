from dataclasses import replace

import pytest

from apologies.systems.roll import roll_system
from apologies.systems.terminal import turn_system, win_system
from apologies.rng import scripted_randint
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "index, laps, expected_winner",
    [
        (0, 1, "red"),  # home after a lap
        (0, 0, None),  # home without a lap (start of game)
        (3, 2, None),  # lapped but not home
    ],
)
def test_win_system(index: int, laps: int, expected_winner: str | None) -> None:
    state = make_state(positions={0: index}, laps={0: laps})
    new_state = win_system(state, 0)
    assert new_state.board.winner == expected_winner
    assert new_state.is_finished is (expected_winner is not None)


def test_win_system_is_idempotent_on_finished_state() -> None:
    state = make_state(positions={0: 0}, laps={0: 1})
    finished = win_system(state, 0)
    assert win_system(finished, 0) is finished


def test_win_system_only_checks_given_pawn() -> None:
    state = make_state(positions={1: 7}, laps={1: 1})
    assert win_system(state, 0).board.winner is None
    assert win_system(state, 1).board.winner == "blue"


def test_turn_system_round_robin() -> None:
    state = make_state(colors=["a", "b", "c"], current_player=2, turn=5)
    new_state = turn_system(state)
    assert new_state.current_player == 0
    assert new_state.turn == 6


def test_roll_system_records_value() -> None:
    state = make_state()
    new_state = roll_system(state, scripted_randint([2]))
    assert new_state.rng_value == 2
    assert replace(new_state, rng_value=0) == state
