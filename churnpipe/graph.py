"""Grouping of monthly charges and the complete graph built on the group averages."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, NamedTuple, Sequence


class Edge(NamedTuple):
    u: int
    v: int
    cost: int


@dataclass
class Graph:
    n: int
    edges: list[Edge] = field(default_factory=list)


def _round_half_away(value: float) -> float:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def compute_group_monthly_avg(solicitudes: Sequence[Any], group_count: int = 20) -> list[float]:
    """Average monthly charges of records dealt round-robin into ``group_count`` groups.

    Averages are rounded to two decimals, halves away from zero; empty groups are 0.0.
    """
    if group_count <= 0:
        raise ValueError("group_count must be positive")
    sums = [0.0] * group_count
    counts = [0] * group_count
    for index, record in enumerate(solicitudes):
        group = index % group_count
        sums[group] += record.monthly_charges
        counts[group] += 1
    return [
        _round_half_away(total / count * 100.0) / 100.0 if count else 0.0
        for total, count in zip(sums, counts)
    ]


def build_deterministic_graph(group_monthly_avg: Sequence[float]) -> Graph:
    """Complete graph over the groups; each edge costs the floor of its two averages' sum."""
    edges = [
        Edge(u, v, math.floor(group_monthly_avg[u] + group_monthly_avg[v]))
        for u, v in combinations(range(len(group_monthly_avg)), 2)
    ]
    return Graph(n=len(group_monthly_avg), edges=edges)