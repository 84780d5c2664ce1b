import pytest

from apologies.board import create_board, generate_path
from apologies.utils.path import board_corners


@pytest.mark.parametrize("size", [2, 3, 4, 8, 13])
def test_path_length_and_uniqueness(size: int) -> None:
    path = generate_path(size)
    assert len(path) == 4 * (size - 1)
    assert len(set(path)) == len(path)
    for corner in board_corners(size):
        assert path.count(corner) == 1


def test_path_is_clockwise_from_origin() -> None:
    path = generate_path(4)
    assert list(path) == [
        (0, 0), (1, 0), (2, 0), (3, 0),
        (3, 1), (3, 2), (3, 3),
        (2, 3), (1, 3), (0, 3),
        (0, 2), (0, 1),
    ]


def test_path_cells_are_adjacent_and_loop_closes() -> None:
    path = generate_path(8)
    for a, b in zip(path, list(path[1:]) + [path[0]]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


@pytest.mark.parametrize("size", [1, 0, -3])
def test_path_rejects_small_boards(size: int) -> None:
    with pytest.raises(ValueError):
        generate_path(size)


def test_create_board_four_colors() -> None:
    board = create_board(8, ["red", "blue", "green", "yellow"])
    assert [p.position for p in board.pawns] == [(0, 0), (7, 0), (7, 7), (0, 7)]
    assert [p.home for p in board.pawns] == [(0, 0), (7, 0), (7, 7), (0, 7)]
    assert [p.id for p in board.pawns] == [0, 1, 2, 3]
    assert all(p.laps == 0 for p in board.pawns)
    assert board.winner is None
    assert board.path == generate_path(8)


def test_create_board_aliases_corners_beyond_four() -> None:
    board = create_board(5, ["a", "b", "c", "d", "e", "f"])
    assert board.pawns[4].home == board.pawns[0].home == (0, 0)
    assert board.pawns[5].home == board.pawns[1].home == (4, 0)


def test_create_board_single_color() -> None:
    board = create_board(3, ["red"])
    assert len(board.pawns) == 1
    assert board.pawns[0].position == (0, 0)


def test_create_board_rejects_empty_colors() -> None:
    with pytest.raises(ValueError):
        create_board(8, [])


def test_board_corners_property_matches_helper() -> None:
    board = create_board(6, ["red"])
    assert board.corners == ((0, 0), (5, 0), (5, 5), (0, 5))
