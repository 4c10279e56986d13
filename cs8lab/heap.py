"""A binary max-heap that orders its items with ``<`` alone."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """Max-heap backed by a list; the largest item sits at the top.

    Only the ``<`` operator is used to compare items, so any type that
    defines ``__lt__`` can be stored.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in items:
            self.push(item)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self._items)

    def push(self, item: T) -> None:
        """Add ``item`` and restore the heap order."""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the top item."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        removed = items.pop()
        self._sift_down(0)
        return removed

    def top(self) -> T:
        """Return the largest item without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def empty(self) -> bool:
        """True when the heap holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not items[parent] < items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        count = len(items)
        while True:
            left = 2 * index + 1
            if left >= count:
                return
            right = left + 1
            child = right if right < count and items[left] < items[right] else left
            if not items[index] < items[child]:
                return
            items[index], items[child] = items[child], items[index]
            index = child