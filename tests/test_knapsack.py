from itertools import product

import pytest

from churnpipe.knapsack import knapsack_dp


def test_classic_instance():
    best, taken = knapsack_dp([10, 20, 30], [60, 100, 120], 50)
    assert best == 220
    assert taken == [1, 2]


def test_empty():
    assert knapsack_dp([], [], 10) == (0, [])


def test_nothing_fits():
    assert knapsack_dp([5, 6], [10, 20], 4) == (0, [])


@pytest.mark.parametrize(
    "weights,values,capacity",
    [
        ([3, 4, 5, 9, 4], [3, 4, 4, 10, 4], 11),
        ([1, 1, 1], [5, 5, 5], 2),
        ([7, 2, 3, 8, 1, 4], [9, 3, 4, 11, 1, 5], 10),
        ([0, 2], [4, 3], 1),
    ],
)
def test_selection_is_feasible_and_optimal(weights, values, capacity):
    best, taken = knapsack_dp(weights, values, capacity)
    assert taken == sorted(set(taken))
    assert sum(weights[i] for i in taken) <= capacity
    assert sum(values[i] for i in taken) == best
    for mask in product([0, 1], repeat=len(weights)):
        if sum(w for w, m in zip(weights, mask) if m) <= capacity:
            assert sum(v for v, m in zip(values, mask) if m) <= best


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack_dp([1, 2], [3], 5)


def test_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_dp([1], [1], -1)


def test_negative_weight():
    with pytest.raises(ValueError):
        knapsack_dp([-1], [1], 3)