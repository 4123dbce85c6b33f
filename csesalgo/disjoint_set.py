"""Union-find and the connectivity problems built on it."""

from __future__ import annotations

from collections.abc import Iterable

from csesalgo.errors import ImpossibleError


class DisjointSet:
    """Union by size with path compression over nodes 1..n."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("node count must not be negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self.components = n
        self.max_size = 1

    def __len__(self) -> int:
        return len(self._parent) - 1

    def _check(self, node: int) -> None:
        if not 1 <= node <= len(self):
            raise IndexError(f"node {node} out of range")

    def find(self, node: int) -> int:
        """Return the representative of ``node``'s set."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            following = self._parent[node]
            self._parent[node] = root
            node = following
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return whether they were separate."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]
        self.components -= 1
        self.max_size = max(self.max_size, self._size[root_u])
        return True


def connect_components(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return new roads that join all cities into one component."""
    ds = DisjointSet(n)
    for a, b in roads:
        ds.union(a, b)
    roots = [node for node in range(1, n + 1) if ds.find(node) == node]
    return list(zip(roots, roots[1:]))


def road_construction(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return ``(components, largest component size)`` after each road is built."""
    ds = DisjointSet(n)
    result = []
    for a, b in roads:
        ds.union(a, b)
        result.append((ds.components, ds.max_size))
    return result


def road_reparation(n: int, roads: Iterable[tuple[int, int, int]]) -> int:
    """Return the minimal cost of repairs that connect all cities.

    Raises ImpossibleError when the cities cannot all be connected.
    """
    ds = DisjointSet(n)
    total = 0
    for u, v, cost in sorted(roads, key=lambda road: (road[2], road[0], road[1])):
        if ds.union(u, v):
            total += cost
    if ds.components != 1:
        raise ImpossibleError("cities cannot all be connected")
    return total