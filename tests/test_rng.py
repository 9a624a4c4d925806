# tests/test_rng.py
import pytest

from planetgen.core.rng import RandomStream, derive_seed, splitmix64


def test_same_seed_same_sequence():
    a = RandomStream(1234)
    b = RandomStream(1234)
    assert [a.uniform() for _ in range(50)] == [b.uniform() for _ in range(50)]


def test_different_seeds_diverge():
    a = RandomStream(1)
    b = RandomStream(2)
    assert [a.uniform() for _ in range(5)] != [b.uniform() for _ in range(5)]


def test_negative_seed_rejected():
    with pytest.raises(ValueError):
        RandomStream(-1)


def test_every_derived_draw_consumes_one_position():
    rng = RandomStream(7)
    rng.range(0.0, 1.0)
    rng.log_range(1.0, 10.0)
    rng.squared()
    rng.int_range(1, 6)
    rng.chance(0.5)
    rng.choice(["a", "b"])
    rng.weighted_choice([("x", 1.0), ("y", 2.0)])
    assert rng.position == 7


def test_positioned_matches_skipping():
    walked = RandomStream(99)
    for _ in range(13):
        walked.uniform()
    jumped = RandomStream.positioned(99, 13)
    assert jumped.position == 13
    assert jumped.uniform() == walked.uniform()


def test_skip_negative_rejected():
    with pytest.raises(ValueError):
        RandomStream(0).skip(-1)


def test_log_range_bounds():
    rng = RandomStream(5)
    for _ in range(500):
        x = rng.log_range(1.0e10, 1.0e18)
        assert 1.0e10 <= x <= 1.0e18
    with pytest.raises(ValueError):
        rng.log_range(0.0, 1.0)


def test_int_range_is_inclusive():
    rng = RandomStream(11)
    seen = {rng.int_range(1, 3) for _ in range(300)}
    assert seen == {1, 2, 3}


def test_weighted_choice_skips_zero_weight():
    rng = RandomStream(3)
    picks = {rng.weighted_choice([("never", 0.0), ("always", 1.0)]) for _ in range(200)}
    assert picks == {"always"}


def test_choice_from_empty_rejected():
    with pytest.raises(ValueError):
        RandomStream(0).choice([])


def test_derive_seed_is_stable_and_offset_sensitive():
    assert derive_seed(42, 0) == derive_seed(42, 0)
    assert derive_seed(42, 0) != derive_seed(42, 1)
    assert derive_seed(42, 0) != derive_seed(43, 0)
    assert 0 <= derive_seed(42, 5) < 2**64


def test_splitmix64_known_value():
    # first output of splitmix64 seeded with 0
    assert splitmix64(0) == 0xE220A8397B1DCDAF
