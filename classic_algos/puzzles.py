"""Small numeric and string puzzles."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def is_power_of_four(n: int) -> bool:
    """Return whether ``n`` is 4 raised to a non-negative integer power."""
    if n <= 0:
        return False
    while n != 1:
        if n % 4:
            return False
        n //= 4
    return True


def swap_bits(x: int, p1: int, p2: int, n: int) -> int:
    """Swap the ``n`` bits of a 32-bit word starting at ``p1`` with those at ``p2``."""
    if not 0 <= x <= _WORD_MASK:
        raise ValueError("x must be an unsigned 32-bit integer")
    if min(p1, p2, n) < 0:
        raise ValueError("positions and width must not be negative")
    if max(p1, p2) + n > _WORD_BITS:
        raise ValueError("bit ranges must lie within 32 bits")
    mask = (1 << n) - 1
    first = (x >> p1) & mask
    second = (x >> p2) & mask
    difference = first ^ second
    return (x ^ ((difference << p1) | (difference << p2))) & _WORD_MASK


def count_squares(a: int, b: int) -> int:
    """Count the perfect squares in the closed range [a, b]."""
    if a < 0:
        raise ValueError("range must not start below zero")
    if a > b:
        raise ValueError("range start must not exceed its end")
    below = math.isqrt(a - 1) if a > 0 else -1
    return math.isqrt(b) - below


def segment_union_length(segments: Iterable[tuple[int, int]]) -> int:
    """Return the total length covered by the union of closed segments."""
    points: list[tuple[int, bool]] = []
    for start, end in segments:
        if start > end:
            raise ValueError(f"segment ({start}, {end}) ends before it starts")
        points.append((start, False))
        points.append((end, True))
    points.sort()

    total = 0
    open_segments = 0
    previous = 0
    for value, is_end in points:
        if open_segments:
            total += value - previous
        open_segments += -1 if is_end else 1
        previous = value
    return total


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def anagram_deletions(first: str, second: str) -> int:
    """Return how many characters must be deleted to make the strings anagrams."""
    first_counts = Counter(first)
    second_counts = Counter(second)
    return sum((first_counts - second_counts).values()) + sum(
        (second_counts - first_counts).values()
    )