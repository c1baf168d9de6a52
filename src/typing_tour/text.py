"""Text helpers: a mutable accumulation buffer and an explicit intern pool.

Python strings are immutable, so every ``+`` or ``str.replace`` produces a new
object. :class:`TextBuffer` collects fragments and joins them once, which
keeps repeated appends linear. :class:`InternPool` models literal interning
as a plain registry keyed by content, because the interpreter's own string
caching is an implementation detail that differs between runtimes.
"""

from __future__ import annotations

from typing import Iterator


def concat(*values: object) -> str:
    """Concatenate the string forms of ``values`` with no separator."""
    return "".join(str(value) for value in values)


def join(separator: str, *values: object) -> str:
    """Join the string forms of ``values`` with ``separator``."""
    return separator.join(str(value) for value in values)


class TextBuffer:
    """Accumulate text fragments and materialize them on demand."""

    def __init__(self, initial: str = "") -> None:
        self._chunks: list[str] = []
        self._length = 0
        if initial:
            self.append(initial)

    def append(self, value: object) -> "TextBuffer":
        text = str(value)
        self._chunks.append(text)
        self._length += len(text)
        return self

    def append_line(self, value: object = "") -> "TextBuffer":
        return self.append(value).append("\n")

    def clear(self) -> "TextBuffer":
        self._chunks.clear()
        self._length = 0
        return self

    def to_string(self) -> str:
        # Collapse into one chunk; later reads reuse it.
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TextBuffer({self.to_string()!r})"


class InternPool:
    """A canonicalization registry mapping equal text to one shared instance.

    ``literal`` stands in for literals the compiler can resolve ahead of time:
    the parts are folded into one value and that value becomes canonical.
    Strings built at runtime stay distinct objects until they are passed
    through :meth:`intern`.

    Entries are never evicted; the pool lives as long as its owner.
    """

    def __init__(self) -> None:
        self._canonical: dict[str, str] = {}

    def literal(self, *parts: str) -> str:
        """Fold ``parts`` into one literal and return its canonical instance."""
        return self.intern("".join(parts))

    def intern(self, value: str) -> str:
        """Return the canonical instance for ``value``, registering it if new."""
        return self._canonical.setdefault(value, value)

    def is_interned(self, value: str) -> bool:
        """Return True when ``value`` is the canonical instance itself."""
        return self._canonical.get(value) is value

    def __contains__(self, value: object) -> bool:
        return value in self._canonical

    def __len__(self) -> int:
        return len(self._canonical)

    def __iter__(self) -> Iterator[str]:
        return iter(self._canonical.values())
