from apologies.systems.collision import collision_system, find_displacement
from tests.test_utils import COLORS, make_state, position_of


def test_no_collision_returns_same_state() -> None:
    state = make_state(positions={0: 2, 1: 9})
    assert collision_system(state, 0, state.board.path[4]) is state


def test_moving_pawn_does_not_collide_with_itself() -> None:
    state = make_state(positions={0: 3})
    assert collision_system(state, 0, state.board.path[3]) is state


def test_displaced_to_nearest_free_corner_behind() -> None:
    # blue sits mid top row; the only corner behind it is (0, 0)
    state = make_state(positions={0: 2, 1: 4})
    new_state = collision_system(state, 0, state.board.path[4])
    assert position_of(new_state, 1) == (0, 0)
    # the mover itself is untouched by this system
    assert position_of(new_state, 0) == position_of(state, 0)


def test_displacement_may_use_another_colors_corner() -> None:
    # green has left its corner (7, 7); blue is knocked back onto it
    state = make_state(colors=COLORS, positions={0: 15, 1: 17, 2: 20})
    new_state = collision_system(state, 0, state.board.path[17])
    assert position_of(new_state, 1) == (7, 7)


def test_occupied_corner_is_skipped() -> None:
    state = make_state(colors=COLORS, positions={0: 10, 1: 12, 2: 7, 3: 15})
    new_state = collision_system(state, 0, state.board.path[12])
    assert position_of(new_state, 1) == (0, 0)


def test_displaced_to_home_when_no_free_corner_behind() -> None:
    state = make_state(colors=COLORS, positions={0: 10, 1: 12, 2: 7, 3: 0})
    new_state = collision_system(state, 0, state.board.path[12])
    blue = new_state.board.pawns[1]
    assert blue.position == blue.home == (7, 0)


def test_pawn_on_own_corner_is_pushed_further_back() -> None:
    state = make_state(positions={0: 5})
    # blue is on its home (7, 0); it is occupied by blue itself, so the scan
    # continues down to (0, 0)
    new_state = collision_system(state, 0, (7, 0))
    assert position_of(new_state, 1) == (0, 0)


def test_find_displacement_scans_from_pawn_index() -> None:
    state = make_state(positions={0: 20, 1: 18})
    # (7, 7) at index 14 is the first free corner behind blue
    target = find_displacement(state.board, state.board.pawns[1])
    assert target == (7, 7)


def test_collision_keeps_laps() -> None:
    state = make_state(positions={0: 2, 1: 4}, laps={1: 1})
    new_state = collision_system(state, 0, state.board.path[4])
    assert new_state.board.pawns[1].laps == 1
