"""Value semantics: integers are copied, records hold their own values."""

from __future__ import annotations

from typing_tour.records import ValueRecord


def demo_1_int_basics() -> None:
    """An ``int`` binding is just a name for an immutable integer object."""
    age = 30
    print(f"1. int: Hello, you are {age} years old. ({type(age).__name__})")


def demo_2_copy_independence() -> None:
    """Rebinding a copy never changes the original.

    ``b = a`` makes both names refer to the same immutable ``5``; ``b = 10``
    rebinds ``b`` only, because integers cannot be changed in place.
    """
    a = 5
    b = a
    b = 10
    print(f"2. copy: a: {a}, b: {b}")


def demo_3_pass_to_function() -> None:
    """A function that rebinds its parameter leaves the caller's value alone."""

    def bump(value: int) -> int:
        value += 1
        return value

    original = 41
    bumped = bump(original)
    print(f"3. pass-by-value: original: {original}, returned: {bumped}")


def demo_4_record_fields() -> None:
    """Each record holds its own integer; setting one does not touch the other."""
    p1 = ValueRecord()
    p1.age = 30
    p2 = ValueRecord()
    p2.age = 40
    print(f"4. record fields: p1.age: {p1.age}, p2.age: {p2.age}")


def demo_5_record_copy() -> None:
    """A copied record mutates independently of its source."""
    source = ValueRecord(age=30)
    clone = source.copy()
    clone.age = 31
    alias = source  # same object, not a copy.
    print(
        "5. record copy:",
        f"source.age: {source.age}",
        f"clone.age: {clone.age}",
        f"alias is source: {alias is source}",
        sep=" | ",
    )


def run_all() -> None:
    """Execute every value-type demonstration."""
    demo_1_int_basics()
    demo_2_copy_independence()
    demo_3_pass_to_function()
    demo_4_record_fields()
    demo_5_record_copy()


if __name__ == "__main__":
    run_all()
