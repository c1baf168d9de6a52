"""String immutability, concatenation costs, and interning.

Every operation that looks like it edits a string returns a new object; the
original binding keeps its value. Identity checks (``is``) make the new
objects visible. Interning goes through :class:`~typing_tour.text.InternPool`
so the outcome does not depend on the interpreter's own string caching.
"""

from __future__ import annotations

from typing_tour.text import InternPool, TextBuffer, concat, join

ACCUMULATION_COUNT = 1000


def accumulate_naive(count: int = ACCUMULATION_COUNT) -> str:
    """Build ``"012...count-1"`` with ``+=``; each step allocates a new string."""
    text = ""
    for i in range(count):
        text += str(i)
    return text


def accumulate_buffered(count: int = ACCUMULATION_COUNT) -> str:
    """Build the same string through a :class:`TextBuffer`."""
    buffer = TextBuffer()
    for i in range(count):
        buffer.append(i)
    return buffer.to_string()


def demo_1_str_basics() -> None:
    """A ``str`` binding, its length, and its type."""
    name = "John"
    s = "Hello"
    print(f"1. str: Hello, {name}!", len(s), type(s).__name__, sep=" | ")


def demo_2_immutability() -> None:
    """``upper`` and ``replace`` return new strings; the source is unchanged."""
    s = "Hello"
    upper = s.upper()
    _ = s + " World"  # s is untouched.
    ss = "abc"
    replaced = ss.replace("a", "F")
    print(
        "2. immutable:",
        upper,
        s,
        concat(s, " world"),
        replaced,
        ss,
        f"upper is s: {upper is s}",
        sep=" | ",
    )


def demo_3_concatenation() -> None:
    """Concatenation, interpolation, and in-place ``+=`` all produce new objects."""
    full_name = "John" + " " + "Doe"
    message = concat("Hello", " ", "World")
    first_name, last_name = "John", "Doe"
    sentence = f"{first_name} {last_name}"

    text = "test"
    before = text
    text += " "
    text += "Text"
    print(
        "3. concat:",
        full_name,
        message,
        sentence,
        text,
        f"rebound: {text is not before}",
        sep=" | ",
    )


def demo_4_buffer() -> None:
    """A mutable buffer collects fragments and joins them once."""
    sb = TextBuffer()
    sb.append("Hello").append(" World")
    print("4. buffer:", sb.to_string(), len(sb), sep=" | ")


def demo_5_accumulation() -> None:
    """Naive ``+=`` is quadratic, a buffer is linear; the text is identical."""
    naive = accumulate_naive()
    buffered = accumulate_buffered()
    print("5. accumulate (+=):", naive)
    print("5. accumulate (buffer):", buffered)
    print("5. accumulate identical:", naive == buffered, len(naive), sep=" | ")


def demo_6_concat_join() -> None:
    """Concatenate without a separator, or join with one."""
    print("6. concat/join:", concat("A", "B", "C"), join(",", "A", "B", "C"), sep=" | ")


def demo_7_interning() -> None:
    """Equal literals share one canonical instance; runtime text must be interned.

    ``literal("hel", "lo")`` plays the part of a literal the compiler folds
    ahead of time. ``part + "lo"`` is computed at runtime and stays a
    separate object until ``intern`` maps it onto the canonical one.
    """
    pool = InternPool()

    a1 = pool.literal("hello")
    b1 = pool.literal("hello")
    print("7. interning literals:", a1 is b1)

    a2 = pool.literal("hel", "lo")
    print("7. interning folded literal:", a2 is b1)

    part = "hel"
    a3 = part + "lo"
    print(
        "7. interning runtime concat:",
        a3 is b1,
        f"equal: {a3 == b1}",
        f"canonical: {pool.is_interned(a3)}",
        sep=" | ",
    )

    a4 = pool.intern(a3)
    print("7. interning explicit intern:", a4 is b1, f"pool size: {len(pool)}", sep=" | ")


def run_all() -> None:
    """Execute every string demonstration."""
    demo_1_str_basics()
    demo_2_immutability()
    demo_3_concatenation()
    demo_4_buffer()
    demo_5_accumulation()
    demo_6_concat_join()
    demo_7_interning()


if __name__ == "__main__":
    run_all()
