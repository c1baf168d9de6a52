"""Value-holder record used by the value-type demonstrations."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass
class ValueRecord:
    """A mutable holder for a single integer field.

    The record itself is shared by reference like any Python object, but the
    ``age`` it holds is an immutable ``int``: assigning a new age to one
    record never changes the age held by another.

    Attributes:
        age: The stored integer value.
    """

    age: int = 0

    def copy(self) -> "ValueRecord":
        """Return an independent record holding the same age."""
        return dataclasses.replace(self)
