"""Flood fill and breadth-first search on character grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from csesalgo.errors import ImpossibleError

WALL = "#"

# Step order used by each search; it decides which of several shortest paths is returned.
_LABYRINTH_STEPS = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))
_MONSTER_STEPS = (("D", 1, 0), ("R", 0, 1), ("U", -1, 0), ("L", 0, -1))
_BACK = {"D": (-1, 0), "U": (1, 0), "R": (0, -1), "L": (0, 1)}


def _rows(grid: Sequence[str]) -> list[str]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _find(rows: list[str], mark: str) -> tuple[int, int] | None:
    for r, row in enumerate(rows):
        c = row.find(mark)
        if c >= 0:
            return r, c
    return None


def _trace(moves: dict[tuple[int, int], str], start: tuple[int, int], end: tuple[int, int]) -> str:
    path = []
    r, c = end
    while (r, c) != start:
        step = moves[r, c]
        path.append(step)
        dr, dc = _BACK[step]
        r, c = r + dr, c + dc
    return "".join(reversed(path))


def count_rooms(grid: Sequence[str]) -> int:
    """Return the number of connected areas of floor in ``grid``."""
    rows = _rows(grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    seen = [[ch == WALL for ch in row] for row in rows]
    rooms = 0
    for r in range(height):
        for c in range(width):
            if seen[r][c]:
                continue
            rooms += 1
            seen[r][c] = True
            stack = [(r, c)]
            while stack:
                y, x = stack.pop()
                for ny, nx in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
                    if 0 <= ny < height and 0 <= nx < width and not seen[ny][nx]:
                        seen[ny][nx] = True
                        stack.append((ny, nx))
    return rooms


def labyrinth(grid: Sequence[str]) -> str:
    """Return a shortest path from ``A`` to ``B`` as a string of ``UDLR`` moves.

    Raises ImpossibleError when ``B`` cannot be reached.
    """
    rows = _rows(grid)
    start = _find(rows, "A")
    end = _find(rows, "B")
    if start is None or end is None:
        raise ValueError("grid must contain both A and B")
    height, width = len(rows), len(rows[0])
    moves: dict[tuple[int, int], str] = {}
    visited = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        if (r, c) == end:
            break
        for step, dr, dc in _LABYRINTH_STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and (nr, nc) not in visited \
                    and rows[nr][nc] != WALL:
                visited.add((nr, nc))
                moves[nr, nc] = step
                queue.append((nr, nc))
    if end not in visited:
        raise ImpossibleError("B cannot be reached from A")
    return _trace(moves, start, end)


def monsters(grid: Sequence[str]) -> str:
    """Return moves that take ``A`` safely to the edge of the grid, away from every ``M``.

    Raises ImpossibleError when no safe escape exists.
    """
    rows = _rows(grid)
    start = _find(rows, "A")
    if start is None:
        raise ValueError("grid must contain A")
    height, width = len(rows), len(rows[0])

    def open_neighbours(r: int, c: int, steps):
        for step, dr, dc in steps:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and rows[nr][nc] != WALL:
                yield step, nr, nc

    monster_time: dict[tuple[int, int], int] = {
        (r, c): 0 for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "M"
    }
    queue = deque(monster_time)
    while queue:
        r, c = queue.popleft()
        for _, nr, nc in open_neighbours(r, c, _MONSTER_STEPS):
            if (nr, nc) not in monster_time:
                monster_time[nr, nc] = monster_time[r, c] + 1
                queue.append((nr, nc))

    player_time = {start: 0}
    moves: dict[tuple[int, int], str] = {}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        if r in (0, height - 1) or c in (0, width - 1):
            return _trace(moves, start, (r, c))
        arrival = player_time[r, c] + 1
        for step, nr, nc in open_neighbours(r, c, _MONSTER_STEPS):
            threat = monster_time.get((nr, nc))
            if threat is not None and arrival >= threat:
                continue
            if (nr, nc) not in player_time:
                player_time[nr, nc] = arrival
                moves[nr, nc] = step
                queue.append((nr, nc))
    raise ImpossibleError("no safe way out")