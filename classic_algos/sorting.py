"""Comparison and distribution sorts over sequences of integers.

Every sort returns a new list and leaves its input untouched, except
``partition``, which rearranges a mutable sequence in place.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence

DEFAULT_INTERVAL = 10
DEFAULT_BUCKET_COUNT = 6


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving each element left past every larger element before it."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by exchanging every out-of-order pair across all position pairs."""
    result = list(values)
    size = len(result)
    for i in range(size):
        for j in range(size):
            if result[i] < result[j]:
                result[i], result[j] = result[j], result[i]
    return result


def _digit_pass(values: list[int], exp: int) -> list[int]:
    """Stable distribution of values by the decimal digit at ``exp``."""
    digits: list[list[int]] = [[] for _ in range(10)]
    for value in values:
        digits[(value // exp) % 10].append(value)
    return [value for digit in digits for value in digit]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort, base 10, for non-negative integers."""
    result = list(values)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        result = _digit_pass(result, exp)
        exp *= 10
    return result


def fill_buckets(
    values: Iterable[int],
    interval: int = DEFAULT_INTERVAL,
    bucket_count: int = DEFAULT_BUCKET_COUNT,
) -> list[list[int]]:
    """Distribute values into buckets of width ``interval``.

    Each value is placed at the front of its bucket, so a bucket lists its
    values in reverse order of arrival.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in values:
        index = value // interval
        if not 0 <= index < bucket_count:
            raise ValueError(
                f"value {value} falls outside the {bucket_count} buckets "
                f"of width {interval}"
            )
        buckets[index].insert(0, value)
    return buckets


def bucket_sort(
    values: Iterable[int],
    interval: int = DEFAULT_INTERVAL,
    bucket_count: int = DEFAULT_BUCKET_COUNT,
) -> list[int]:
    """Sort by filling buckets, sorting each one and concatenating them."""
    return [
        value
        for bucket in fill_buckets(values, interval, bucket_count)
        for value in insertion_sort(bucket)
    ]


def _sift_down(heap: list[int], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within ``heap[:size]``."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    result = list(values)
    size = len(result)
    for root in reversed(range(size // 2)):
        _sift_down(result, size, root)
    for end in reversed(range(size)):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def merge(left: Iterable[int], right: Iterable[int]) -> list[int]:
    """Merge two sorted sequences; on ties the element from ``left`` comes first."""
    first = list(left)
    second = list(right)
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Stable top-down merge sort."""
    result = list(values)
    if len(result) <= 1:
        return result
    middle = (len(result) + 1) // 2
    return merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last element, in place.

    Elements smaller than the pivot end up before it, the rest after it.
    Returns the pivot's final index.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"invalid partition range [{low}, {high}]")
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quicksort using last-element pivots."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(result, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return result