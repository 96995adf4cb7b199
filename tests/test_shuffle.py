"""Fisher-Yates shuffle tests."""

from collections import Counter

from simple_rng import DEFAULT_SEED, next_uint, seed_from_combined, shuffle


def test_shuffle_golden_permutation():
    state, result = shuffle(DEFAULT_SEED, [1, 2, 3])
    assert result == [2, 3, 1]
    assert state.as_tuple() == (320872198, 307853267)


def test_shuffle_consumes_length_minus_one_steps():
    items = list(range(12))
    state, _ = shuffle(DEFAULT_SEED, items)

    expected = DEFAULT_SEED
    for _ in range(len(items) - 1):
        expected, _ = next_uint(expected)
    assert state == expected


def test_trivial_inputs_are_untouched():
    assert shuffle(DEFAULT_SEED, []) == (DEFAULT_SEED, [])
    assert shuffle(DEFAULT_SEED, ["only"]) == (DEFAULT_SEED, ["only"])


def test_shuffle_is_a_permutation():
    items = ["a", "b", "b", "c", None, 3, 3, 3]
    state = seed_from_combined(0xA2B94D10)
    for _ in range(200):
        state, result = shuffle(state, items)
        assert Counter(result) == Counter(items)
        assert len(result) == len(items)


def test_shuffle_does_not_mutate_input():
    items = [1, 2, 3, 4, 5]
    shuffle(DEFAULT_SEED, items)
    assert items == [1, 2, 3, 4, 5]


def test_shuffle_accepts_any_sequence():
    _, from_tuple = shuffle(DEFAULT_SEED, (1, 2, 3))
    _, from_string = shuffle(DEFAULT_SEED, "abc")
    assert from_tuple == [2, 3, 1]
    assert from_string == ["b", "c", "a"]


def test_every_permutation_of_three_is_reachable():
    seen = set()
    state = DEFAULT_SEED
    for _ in range(500):
        state, result = shuffle(state, [1, 2, 3])
        seen.add(tuple(result))
    assert len(seen) == 6
