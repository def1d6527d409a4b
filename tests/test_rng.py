import pytest

from lightsout.rng import M, PMRandom, SeededRandom, state_from_seed

def test_pm_known_values():
    # minimal standard: 1 -> 16807 -> 16807^2
    r = PMRandom(1)
    assert r.next32() == 16807
    assert r.next32() == 282475249

def test_state_from_seed_never_zero():
    assert state_from_seed(0) == 1
    assert state_from_seed(M - 1) == 1
    assert state_from_seed(0xFFFFFFFF) == 4
    # only the low 32 bits count
    assert state_from_seed(0x1_0000_0007) == state_from_seed(7)

def test_set_seed_replays_sequence():
    r = SeededRandom(2504604244)
    first = [r.rnd_range(0, 8) for _ in range(40)]
    r.set_seed(r.get_seed())
    assert [r.rnd_range(0, 8) for _ in range(40)] == first

def test_new_seed_uses_entropy_and_masks_to_32_bits():
    seeds = iter([0x1_2345_6789, 42])
    r = SeededRandom(entropy=lambda: next(seeds))
    r.new_seed()
    assert r.get_seed() == 0x2345_6789
    r.new_seed()
    assert r.get_seed() == 42
    assert r.rnd_range(0, 99) == SeededRandom(42).rnd_range(0, 99)

def test_rnd_range_inclusive_bounds():
    r = SeededRandom(10)
    seen = {r.rnd_range(3, 5) for _ in range(200)}
    assert seen == {3, 4, 5}
    assert r.rnd_range(7, 7) == 7

def test_rnd_range_empty_range():
    with pytest.raises(ValueError):
        SeededRandom(1).rnd_range(5, 4)
