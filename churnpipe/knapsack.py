"""0-1 knapsack by dynamic programming."""

from __future__ import annotations

from typing import Sequence


def knapsack_dp(weights: Sequence[int], values: Sequence[int], capacity: int) -> tuple[int, list[int]]:
    """Return the best total value within ``capacity`` and the ascending indices of the items taken."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        prev = table[-1]
        table.append(
            [
                max(prev[w], prev[w - weight] + value) if weight <= w else prev[w]
                for w in range(capacity + 1)
            ]
        )

    taken: list[int] = []
    w = capacity
    for i in reversed(range(len(weights))):
        if table[i + 1][w] != table[i][w]:
            taken.append(i)
            w -= weights[i]
    taken.reverse()
    return table[-1][capacity], taken