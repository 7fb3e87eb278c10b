import pytest

from tombcrawl.rng import DungeonRandom


def test_same_seed_same_sequence():
    a, b = DungeonRandom(41), DungeonRandom(41)
    seq_a = [a.randint(0, 100) for _ in range(20)] + [a.coin() for _ in range(5)]
    seq_b = [b.randint(0, 100) for _ in range(20)] + [b.coin() for _ in range(5)]
    assert seq_a == seq_b


def test_randint_is_inclusive_randrange_is_not():
    r = DungeonRandom(7)
    ints = {r.randint(1, 3) for _ in range(500)}
    assert ints == {1, 2, 3}
    ranged = {r.randrange(1, 3) for _ in range(500)}
    assert ranged == {1, 2}


def test_empty_randrange_raises():
    with pytest.raises(ValueError):
        DungeonRandom(1).randrange(5, 5)


def test_coin_and_random_types():
    r = DungeonRandom(3)
    assert isinstance(r.coin(), bool)
    x = r.random()
    assert 0.0 <= x < 1.0
