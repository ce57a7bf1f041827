from fractions import Fraction

import pytest

from algobox.greedy import (
    Activity,
    KnapsackResult,
    fractional_knapsack,
    huffman_codes,
    schedule_activities,
    select_activities,
)

STARTS = [1, 3, 0, 5, 8, 5]
FINISHES = [2, 4, 6, 7, 9, 9]


def test_select_activities_driver_example():
    assert select_activities(STARTS, FINISHES) == [0, 1, 3, 4]


def test_select_activities_chosen_do_not_overlap():
    chosen = select_activities(STARTS, FINISHES)
    for earlier, later in zip(chosen, chosen[1:]):
        assert STARTS[later] >= FINISHES[earlier]


def test_select_activities_empty():
    assert select_activities([], []) == []


def test_select_activities_always_takes_first():
    assert select_activities([7], [9]) == [0]


def test_select_activities_length_mismatch():
    with pytest.raises(ValueError):
        select_activities([1, 2], [3])


def test_schedule_activities_matches_sorted_selection():
    activities = [Activity(i + 1, s, f) for i, (s, f) in enumerate(zip(STARTS, FINISHES))]
    shuffled = list(reversed(activities))
    chosen = schedule_activities(shuffled)
    expected = [activities[i] for i in select_activities(STARTS, FINISHES)]
    assert [(a.start, a.finish) for a in chosen] == [(a.start, a.finish) for a in expected]


def test_schedule_activities_compatible_and_sorted():
    activities = [Activity(1, 5, 9), Activity(2, 1, 2), Activity(3, 0, 6), Activity(4, 3, 4)]
    chosen = schedule_activities(activities)
    assert [a.finish for a in chosen] == sorted(a.finish for a in chosen)
    for earlier, later in zip(chosen, chosen[1:]):
        assert later.start >= earlier.finish
    assert chosen[0].index == 2


def test_fractional_knapsack_driver_example():
    result = fractional_knapsack(60, [50, 5, 1000], [5000, 500000, 5000])
    assert [step.item for step in result.steps] == [1, 0, 2]
    assert result.total == pytest.approx(505025)
    assert 0 < result.steps[-1].fraction < 1
    assert result.steps[-1].remaining == 0


def test_fractional_knapsack_weight_never_exceeds_capacity():
    capacity = 60
    result = fractional_knapsack(capacity, [50, 5, 1000], [5000, 500000, 5000])
    used = sum(step.weight * step.fraction for step in result.steps)
    assert used == pytest.approx(capacity)


def test_fractional_knapsack_everything_fits():
    weights, values = [2, 3, 4], [10, 30, 8]
    result = fractional_knapsack(100, weights, values)
    assert sorted(step.item for step in result.steps) == [0, 1, 2]
    assert all(step.fraction == 1.0 for step in result.steps)
    assert result.total == pytest.approx(sum(values))


def test_fractional_knapsack_zero_capacity():
    assert fractional_knapsack(0, [1, 2], [3, 4]) == KnapsackResult((), 0.0)


def test_fractional_knapsack_rejects_non_positive_weight():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [0, 2], [3, 4])


def test_fractional_knapsack_length_mismatch():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [1, 2], [3])


def test_huffman_codes_prefix_free_and_complete():
    symbols = list("abcdef")
    freqs = [5, 9, 12, 13, 16, 45]
    codes = huffman_codes(symbols, freqs)
    assert set(codes) == set(symbols)
    values = list(codes.values())
    for a in values:
        for b in values:
            if a is not b:
                assert not b.startswith(a)
    assert sum(Fraction(1, 2 ** len(code)) for code in values) == 1


def test_huffman_codes_frequent_symbols_are_not_longer():
    symbols = list("abcdef")
    freqs = [5, 9, 12, 13, 16, 45]
    codes = huffman_codes(symbols, freqs)
    pairs = sorted(zip(freqs, symbols))
    for (f1, s1), (f2, s2) in zip(pairs, pairs[1:]):
        assert len(codes[s2]) <= len(codes[s1])


def test_huffman_codes_two_symbols():
    codes = huffman_codes(["x", "y"], [1, 2])
    assert set(codes.values()) == {"0", "1"}


def test_huffman_codes_single_symbol():
    assert huffman_codes(["a"], [7]) == {"a": ""}


def test_huffman_codes_errors():
    with pytest.raises(ValueError):
        huffman_codes([], [])
    with pytest.raises(ValueError):
        huffman_codes(["a", "b"], [1])
    with pytest.raises(ValueError):
        huffman_codes(["a", "a"], [1, 2])