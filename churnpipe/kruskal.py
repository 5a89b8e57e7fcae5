"""Minimum spanning tree by Kruskal's algorithm."""

from __future__ import annotations

from typing import Iterable

from .graph import Edge


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, x: int) -> int:
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return False if they were already joined."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            self._parent[a] = b
        elif self._rank[b] < self._rank[a]:
            self._parent[b] = a
        else:
            self._parent[b] = a
            self._rank[a] += 1
        return True


def kruskal_mst(n: int, edges: Iterable[tuple[int, int, int]]) -> tuple[list[Edge], int]:
    """Return the minimum spanning forest's edges over nodes ``0..n-1`` and its total cost."""
    chosen: list[Edge] = []
    total = 0
    dsu = DisjointSet(n)
    for u, v, cost in sorted(edges, key=lambda edge: edge[2]):
        if dsu.unite(u, v):
            chosen.append(Edge(u, v, cost))
            total += cost
            if len(chosen) == n - 1:
                break
    return chosen, total