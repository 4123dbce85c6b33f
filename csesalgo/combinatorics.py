"""Counting, enumeration and simple greedy problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

MOD = 1_000_000_007


def apple_division(weights: Iterable[int]) -> int:
    """Return the minimal difference between the weights of two groups."""
    weights = list(weights)
    total = sum(weights)
    subset_sums = {0}
    for weight in weights:
        subset_sums |= {s + weight for s in subset_sums}
    return min(abs(total - 2 * s) for s in subset_sums)


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo 10**9+7."""
    if n < 0:
        raise ValueError("length must not be negative")
    return pow(2, n, MOD)


def _ordered_permutations(chars: list[str]) -> Iterator[str]:
    """Yield the distinct permutations of ``chars`` in lexicographic order."""
    chars = sorted(chars)
    while True:
        yield "".join(chars)
        pivot = len(chars) - 2
        while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
            pivot -= 1
        if pivot < 0:
            return
        successor = len(chars) - 1
        while chars[successor] <= chars[pivot]:
            successor -= 1
        chars[pivot], chars[successor] = chars[successor], chars[pivot]
        chars[pivot + 1:] = reversed(chars[pivot + 1:])


def creating_strings(text: str) -> list[str]:
    """Return every distinct arrangement of ``text``'s characters, sorted."""
    if not text:
        raise ValueError("text must not be empty")
    counts = Counter(text)
    ordered = [ch for ch in sorted(counts) for _ in range(counts[ch])]
    return list(_ordered_permutations(ordered))


def gray_code(n: int) -> list[str]:
    """Return the reflected Gray code of ``n`` bits as bit strings."""
    if n < 0:
        raise ValueError("bit count must not be negative")
    return [format(i ^ (i >> 1), f"0{n}b") if n else "" for i in range(1 << n)]


def _hanoi_moves(n: int, source: int, target: int, spare: int) -> Iterator[tuple[int, int]]:
    if n == 1:
        yield source, target
        return
    yield from _hanoi_moves(n - 1, source, spare, target)
    yield source, target
    yield from _hanoi_moves(n - 1, spare, target, source)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` discs from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("at least one disc is required")
    return list(_hanoi_moves(n, 1, 3, 2))


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    if n < 0:
        raise ValueError("n must not be negative")
    count = 0
    factor = 5
    while quotient := n // factor:
        count += quotient
        factor *= 5
    return count


def missing_coin_sum(coins: Iterable[int]) -> int:
    """Return the smallest sum that no subset of ``coins`` adds up to."""
    reachable = 1
    for coin in sorted(coins):
        if coin > reachable:
            break
        reachable += coin
    return reachable


def stick_lengths(sticks: Iterable[int]) -> int:
    """Return the minimal total cost to make all sticks equally long."""
    ordered = sorted(sticks)
    if not ordered:
        raise ValueError("at least one stick is required")
    middle = ordered[len(ordered) // 2]
    return sum(abs(middle - length) for length in ordered)