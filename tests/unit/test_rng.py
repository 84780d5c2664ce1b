import pytest

from apologies.rng import derive_seed, scripted_randint, seeded_randint, turn_randint


def test_scripted_randint_replays_values() -> None:
    randint = scripted_randint([0, 3, 1])
    assert [randint(4), randint(4), randint(4)] == [0, 3, 1]


def test_scripted_randint_exhausted() -> None:
    randint = scripted_randint([2])
    randint(4)
    with pytest.raises(ValueError):
        randint(4)


def test_scripted_randint_out_of_range() -> None:
    randint = scripted_randint([4])
    with pytest.raises(ValueError):
        randint(4)


def test_seeded_randint_is_reproducible() -> None:
    a = seeded_randint(42)
    b = seeded_randint(42)
    assert [a(4) for _ in range(20)] == [b(4) for _ in range(20)]


def test_turn_randint_depends_only_on_seed_and_turn() -> None:
    draws = [turn_randint(7, turn)(4) for turn in range(30)]
    assert draws == [turn_randint(7, turn)(4) for turn in range(30)]
    assert all(0 <= d < 4 for d in draws)


def test_derive_seed_distinct_per_index() -> None:
    seeds = {derive_seed(1, idx) for idx in range(64)}
    assert len(seeds) == 64
