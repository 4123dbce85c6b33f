"""Counting collection rounds over a permutation under swaps."""

from __future__ import annotations

from collections.abc import Iterable


class CollectingNumbers:
    """A permutation of 1..n with the number of rounds needed to collect it in order."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        n = len(values)
        if sorted(values) != list(range(1, n + 1)):
            raise ValueError("values must be a permutation of 1..n")
        self._values = [0, *values]
        self._pos = [0] * (n + 2)
        self._pos[n + 1] = n + 1
        for index, value in enumerate(values, start=1):
            self._pos[value] = index
        self.rounds = 1 + sum(
            self._pos[v] < self._pos[v - 1] for v in range(2, n + 1)
        )

    def __len__(self) -> int:
        return len(self._values) - 1

    def swap(self, i: int, j: int) -> int:
        """Swap the values at 1-based positions ``i`` and ``j``; return the new round count."""
        n = len(self)
        if not (1 <= i <= n and 1 <= j <= n):
            raise IndexError("position out of range")
        if i > j:
            i, j = j, i
        x, y = self._values[i], self._values[j]
        pos = self._pos

        def between(value: int) -> bool:
            return i < pos[value] < j

        if between(x + 1):
            self.rounds += 1
        if between(x - 1):
            self.rounds -= 1
        if between(y + 1):
            self.rounds -= 1
        if between(y - 1):
            self.rounds += 1
        if x == y + 1:
            self.rounds -= 1
        if x == y - 1:
            self.rounds += 1

        self._values[i], self._values[j] = y, x
        pos[x], pos[y] = j, i
        return self.rounds


def collecting_rounds(values: Iterable[int], swaps: Iterable[tuple[int, int]]) -> list[int]:
    """Return the round count after each swap in ``swaps``."""
    state = CollectingNumbers(values)
    return [state.swap(i, j) for i, j in swaps]