"""Singly linked list that grows at its head."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class LinkedList:
    """A list whose new elements are pushed onto the front."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def push(self, data: int) -> None:
        """Put ``data`` at the head of the list."""
        self._items.appendleft(data)

    def nth_from_last(self, n: int) -> int:
        """Return the ``n``-th element counting from the end, starting at 1."""
        if not 1 <= n <= len(self._items):
            raise IndexError(
                f"position {n} from the end is outside a list of {len(self._items)}"
            )
        return self._items[-n]