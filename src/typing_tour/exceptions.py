"""Exception hierarchy for the typing tour data types.

All package-specific exceptions inherit from :class:`TypingTourError` so that
callers can catch a single base class. Each concrete error also derives from
the matching built-in exception, so code written against plain Python
containers keeps working.
"""


class TypingTourError(Exception):
    """Base exception for all typing tour operations."""


class CollectionIndexError(TypingTourError, IndexError):
    """Raised when an index falls outside an ordered collection.

    ``insert`` accepts ``0..count`` inclusive; every other positional
    operation accepts ``0..count - 1``.
    """

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Index {index} is out of range for a collection of {count} items.")
        self.index = index
        self.count = count


class CapacityError(TypingTourError, ValueError):
    """Raised when a collection capacity would drop below its element count."""

    def __init__(self, capacity: int, count: int) -> None:
        super().__init__(f"Capacity {capacity} is smaller than the element count {count}.")
        self.capacity = capacity
        self.count = count
