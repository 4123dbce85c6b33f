"""Traversal, ordering and shortest-path problems on graphs with nodes 1..n."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable

from csesalgo.errors import ImpossibleError


def _adjacency(
    n: int, edges: Iterable[tuple[int, int]], *, directed: bool
) -> list[list[int]]:
    if n < 0:
        raise ValueError("node count must not be negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        for node in (a, b):
            if not 1 <= node <= n:
                raise IndexError(f"node {node} out of range")
        adj[a].append(b)
        if not directed:
            adj[b].append(a)
    return adj


def _mark_reachable(adj: list[list[int]], root: int, visited: list[bool]) -> None:
    visited[root] = True
    stack = [root]
    while stack:
        node = stack.pop()
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append(neighbour)


def _postorder(adj: list[list[int]], n: int) -> list[int]:
    """Return nodes in the order a depth-first search finishes them."""
    visited = [False] * (n + 1)
    order: list[int] = []
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def building_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return new roads linking the first city of each component to every other one."""
    adj = _adjacency(n, roads, directed=False)
    visited = [False] * (n + 1)
    leaders = []
    for node in range(1, n + 1):
        if not visited[node]:
            leaders.append(node)
            _mark_reachable(adj, node, visited)
    if not leaders:
        return []
    first = leaders[0]
    return [(first, other) for other in leaders[1:]]


def building_teams(n: int, friendships: Iterable[tuple[int, int]]) -> list[int]:
    """Return a team (1 or 2) for each pupil so that no friends share a team.

    Raises ImpossibleError when no such division exists.
    """
    adj = _adjacency(n, friendships, directed=False)
    colour: list[int | None] = [None] * (n + 1)
    for root in range(1, n + 1):
        if colour[root] is not None:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in adj[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    raise ImpossibleError("pupils cannot be divided into two teams")
    return [c + 1 for c in colour[1:]]


def course_schedule(n: int, requirements: Iterable[tuple[int, int]]) -> list[int]:
    """Return an order of courses in which each requirement comes first.

    Raises ImpossibleError when the requirements contain a cycle.
    """
    adj = _adjacency(n, requirements, directed=True)
    visited = [False] * (n + 1)
    on_path = [False] * (n + 1)
    finished: list[int] = []
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
                if on_path[neighbour]:
                    raise ImpossibleError("requirements form a cycle")
            else:
                stack.pop()
                on_path[node] = False
                finished.append(node)
    return finished[::-1]


def flight_routes_check(n: int, flights: Iterable[tuple[int, int]]) -> tuple[int, int] | None:
    """Return ``None`` if every city reaches every other, else a pair ``(a, b)``
    such that there is no route from ``a`` to ``b``."""
    if n < 1:
        raise ValueError("at least one city is required")
    flights = list(flights)
    adj = _adjacency(n, flights, directed=True)
    order = _postorder(adj, n)
    transposed = _adjacency(n, ((b, a) for a, b in flights), directed=True)

    start = order[-1]
    visited = [False] * (n + 1)
    components = 0
    last_leader = start
    for node in reversed(order):
        if not visited[node]:
            components += 1
            last_leader = node
            _mark_reachable(transposed, node, visited)
    if components == 1:
        return None
    return last_leader, start


def message_route(n: int, links: Iterable[tuple[int, int]]) -> list[int]:
    """Return a shortest chain of computers from 1 to ``n``.

    Raises ImpossibleError when ``n`` cannot be reached.
    """
    if n < 1:
        raise ValueError("at least one computer is required")
    adj = _adjacency(n, links, directed=False)
    parent: list[int | None] = [None] * (n + 1)
    visited = [False] * (n + 1)
    visited[1] = True
    queue = deque([1])
    while queue:
        node = queue.popleft()
        if node == n:
            break
        for neighbour in adj[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                parent[neighbour] = node
                queue.append(neighbour)
    if not visited[n]:
        raise ImpossibleError("no route to the last computer")
    path = [n]
    while path[-1] != 1:
        path.append(parent[path[-1]])
    return path[::-1]


def round_trip(n: int, flights: Iterable[tuple[int, int]]) -> list[int]:
    """Return a directed cycle as a list of cities whose first and last are equal.

    Raises ImpossibleError when the flights contain no cycle.
    """
    adj = _adjacency(n, flights, directed=True)
    visited = [False] * (n + 1)
    on_path = [False] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
                if on_path[neighbour]:
                    path = [entry for entry, _ in stack]
                    return path[path.index(neighbour):] + [neighbour]
            else:
                stack.pop()
                on_path[node] = False
    raise ImpossibleError("no round trip exists")


def shortest_routes(n: int, flights: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Return the shortest distance from city 1 to each city; ``None`` if unreachable."""
    if n < 1:
        raise ValueError("at least one city is required")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in flights:
        for node in (u, v):
            if not 1 <= node <= n:
                raise IndexError(f"node {node} out of range")
        adj[u].append((v, weight))
    dist: list[int | None] = [None] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        current, node = heapq.heappop(heap)
        if current != dist[node]:
            continue
        for neighbour, weight in adj[node]:
            candidate = current + weight
            if dist[neighbour] is None or candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist[1:]