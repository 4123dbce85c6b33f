"""Queries and measurements on trees with nodes 1..n rooted at node 1."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise IndexError(f"node {node} out of range")


def _tree_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_node(a, n)
        _check_node(b, n)
        adj[a].append(b)
        adj[b].append(a)
    return adj


def _explore(
    adj: Sequence[Sequence[int]], root: int
) -> tuple[list[int | None], list[int | None], list[int]]:
    """Breadth-first search from ``root``: depths, parents and visiting order."""
    depth: list[int | None] = [None] * len(adj)
    parent: list[int | None] = [None] * len(adj)
    depth[root] = 0
    order = [root]
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if depth[neighbour] is None:
                depth[neighbour] = depth[node] + 1
                parent[neighbour] = node
                order.append(neighbour)
                queue.append(neighbour)
    if len(order) != len(adj) - 1:
        raise ValueError("edges do not form a connected tree")
    return depth, parent, order


def _lifting_table(parent: list[int | None], levels: int) -> list[list[int | None]]:
    """Return ``up`` where ``up[j][v]`` is the ancestor ``2**j`` levels above ``v``."""
    up = [list(parent)]
    for _ in range(1, levels):
        previous = up[-1]
        up.append([None if p is None else previous[p] for p in previous])
    return up


class AncestorTable:
    """Binary-lifting table over a hierarchy given by each employee's direct boss.

    ``bosses[i]`` is the boss of employee ``i + 2``; employee 1 has no boss.
    """

    def __init__(self, bosses: Iterable[int]) -> None:
        bosses = list(bosses)
        self._n = len(bosses) + 1
        parent: list[int | None] = [None, None]
        for boss in bosses:
            _check_node(boss, self._n)
            parent.append(boss)
        self._levels = max(1, self._n.bit_length())
        self._up = _lifting_table(parent, self._levels)

    def __len__(self) -> int:
        return self._n

    def ancestor(self, node: int, k: int) -> int | None:
        """Return the boss ``k`` levels above ``node``, or ``None`` if there is none."""
        _check_node(node, self._n)
        if k < 0:
            raise ValueError("level must not be negative")
        level = 0
        current: int | None = node
        while k:
            if level >= self._levels:
                return None
            if k & 1:
                current = self._up[level][current]
                if current is None:
                    return None
            k >>= 1
            level += 1
        return current


class LcaTree:
    """A tree rooted at node 1 answering lowest-common-ancestor and distance queries."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        adj = _tree_adjacency(n, edges)
        depth, parent, _ = _explore(adj, 1)
        self._n = n
        self.depth = depth
        self._levels = max(1, n.bit_length())
        self._up = _lifting_table(parent, self._levels)

    @classmethod
    def from_bosses(cls, bosses: Iterable[int]) -> LcaTree:
        """Build the tree from each employee's direct boss, starting with employee 2."""
        bosses = list(bosses)
        edges = [(employee, boss) for employee, boss in enumerate(bosses, start=2)]
        return cls(len(bosses) + 1, edges)

    def __len__(self) -> int:
        return self._n

    def lca(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of ``a`` and ``b``."""
        _check_node(a, self._n)
        _check_node(b, self._n)
        if self.depth[a] < self.depth[b]:
            a, b = b, a
        diff = self.depth[a] - self.depth[b]
        for level in range(self._levels):
            if diff >> level & 1:
                a = self._up[level][a]
        if a == b:
            return a
        for level in reversed(range(self._levels)):
            up = self._up[level]
            if up[a] != up[b]:
                a, b = up[a], up[b]
        return self._up[0][a]

    def distance(self, a: int, b: int) -> int:
        """Return the number of edges on the path between ``a`` and ``b``."""
        ancestor = self.lca(a, b)
        return self.depth[a] + self.depth[b] - 2 * self.depth[ancestor]


def find_centroid(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the smallest-numbered node whose removal leaves parts of at most ``n // 2``."""
    adj = _tree_adjacency(n, edges)
    _, parent, order = _explore(adj, 1)
    size = [1] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    for node in range(1, n + 1):
        largest = n - size[node]
        for neighbour in adj[node]:
            if parent[neighbour] == node:
                largest = max(largest, size[neighbour])
        if largest <= n // 2:
            return node
    raise AssertionError("every tree has a centroid")


def subordinates(bosses: Iterable[int]) -> list[int]:
    """Return the number of subordinates of each employee 1..n.

    ``bosses[i]`` is the direct boss of employee ``i + 2``.
    """
    bosses = list(bosses)
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        _check_node(boss, n)
        children[boss].append(employee)
    _, parent, order = _explore(children, 1)
    counts = [0] * (n + 1)
    for employee in reversed(order[1:]):
        counts[parent[employee]] += counts[employee] + 1
    return counts[1:]


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path in the tree."""
    adj = _tree_adjacency(n, edges)
    depth, _, _ = _explore(adj, 1)
    far = max(range(1, n + 1), key=lambda node: depth[node])
    depth, _, _ = _explore(adj, far)
    return max(depth[1:])


def tree_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return, for each node, the distance to the node farthest from it."""
    adj = _tree_adjacency(n, edges)
    from_root, _, _ = _explore(adj, 1)
    end_a = max(range(1, n + 1), key=lambda node: from_root[node])
    from_a, _, _ = _explore(adj, end_a)
    end_b = max(range(1, n + 1), key=lambda node: from_a[node])
    from_b, _, _ = _explore(adj, end_b)
    return [max(from_a[node], from_b[node]) for node in range(1, n + 1)]