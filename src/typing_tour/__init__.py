"""Annotated tour of value semantics, string immutability, and ordered collections.

The package ships the small data types the tour demonstrates and a runner
that prints every demonstration to standard output.
"""

from __future__ import annotations

from .collection import OrderedCollection
from .exceptions import CapacityError, CollectionIndexError, TypingTourError
from .records import ValueRecord
from .text import InternPool, TextBuffer, concat, join

__all__ = [
    "CapacityError",
    "CollectionIndexError",
    "InternPool",
    "OrderedCollection",
    "TextBuffer",
    "TypingTourError",
    "ValueRecord",
    "concat",
    "join",
]

__version__ = "0.1.0"
