"""A growable, indexable, homogeneous sequence with explicit capacity.

:class:`OrderedCollection` is generic over its element type, so a static type
checker rejects ``OrderedCollection[int]().add("hello")`` before the program
runs. No runtime type checks are performed.

Capacity is tracked separately from the element count to show how a dynamic
array grows: an empty collection reserves nothing, the first growth reserves
``DEFAULT_CAPACITY`` slots and every later growth doubles the reservation.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .exceptions import CapacityError, CollectionIndexError

T = TypeVar("T")

DEFAULT_CAPACITY = 4

Comparison = Callable[[T, T], int]
Predicate = Callable[[T], bool]


def default_comparison(x: Any, y: Any) -> int:
    """Three-way comparison using the elements' natural ordering."""
    return (x > y) - (x < y)


class OrderedCollection(Generic[T]):
    """Insertion-ordered sequence of ``T`` with list-style operations."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = []
        self._capacity = 0
        if items is not None:
            self.add_range(items)

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        if value < len(self._items):
            raise CapacityError(value, len(self._items))
        self._capacity = value

    def _ensure_capacity(self, required: int) -> None:
        if required <= self._capacity:
            return
        grown = DEFAULT_CAPACITY if self._capacity == 0 else self._capacity * 2
        self._capacity = max(grown, required)

    def trim_excess(self) -> None:
        """Shrink the reservation to the current element count."""
        self._capacity = len(self._items)

    def add(self, item: T) -> None:
        self._ensure_capacity(len(self._items) + 1)
        self._items.append(item)

    def add_range(self, items: Iterable[T]) -> None:
        """Append every element of ``items``, growing at most once."""
        incoming = list(items)
        self._ensure_capacity(len(self._items) + len(incoming))
        self._items.extend(incoming)

    def insert(self, index: int, item: T) -> None:
        """Insert ``item`` before ``index``; ``index == count`` appends."""
        if not 0 <= index <= len(self._items):
            raise CollectionIndexError(index, len(self._items))
        self._ensure_capacity(len(self._items) + 1)
        self._items.insert(index, item)

    def remove(self, item: T) -> bool:
        """Remove the first occurrence of ``item``; False when absent."""
        index = self.index_of(item)
        if index < 0:
            return False
        del self._items[index]
        return True

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        del self._items[index]

    def remove_all(self, predicate: Predicate[T]) -> int:
        """Remove every element matching ``predicate`` in a single pass.

        Returns the number of removed elements.
        """
        kept = [item for item in self._items if not predicate(item)]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def clear(self) -> None:
        # Capacity is unchanged.
        self._items.clear()

    def sort(self, comparison: Comparison[T] | None = None) -> None:
        """Sort in place, ascending or by a three-way ``comparison``."""
        compare = comparison or default_comparison
        self._items.sort(key=functools.cmp_to_key(compare))

    def reverse(self) -> None:
        self._items.reverse()

    def contains(self, item: T) -> bool:
        return item in self._items

    def index_of(self, item: T) -> int:
        """Return the index of the first ``item``, or -1 when absent."""
        for index, candidate in enumerate(self._items):
            if candidate == item:
                return index
        return -1

    def binary_search(self, item: T, comparison: Comparison[T] | None = None) -> int:
        """Search sorted content for ``item``.

        Returns the index of a matching element. When nothing matches, the
        result is negative: the bitwise complement of the index at which
        ``item`` would have to be inserted to keep the content sorted.
        The result is undefined if the content is not sorted under
        ``comparison``.
        """
        compare = comparison or default_comparison
        lo, hi = 0, len(self._items) - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            order = compare(self._items[mid], item)
            if order == 0:
                return mid
            if order < 0:
                lo = mid + 1
            else:
                hi = mid - 1
        return ~lo

    def to_list(self) -> list[T]:
        return list(self._items)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise CollectionIndexError(index, len(self._items))

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._items[index] = item

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedCollection):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedCollection({self._items!r})"
