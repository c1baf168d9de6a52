"""Ordered collection API: growth, removal, ordering, and searching."""

from __future__ import annotations

from typing_tour.collection import OrderedCollection
from typing_tour.records import ValueRecord


def build_numbers() -> OrderedCollection[int]:
    """Run the add/insert/remove/clear sequence and return the survivor list."""
    numbers: OrderedCollection[int] = OrderedCollection()
    numbers.add(1)
    numbers.add(2)
    numbers.add(3)
    numbers.add_range([4, 5, 6])
    numbers.insert(0, 0)
    numbers.remove(2)
    numbers.remove_at(0)
    numbers.clear()
    numbers.add(1)
    return numbers


def demo_1_mutation_sequence() -> None:
    """Each step of the mutation sequence, with count and capacity."""
    numbers: OrderedCollection[int] = OrderedCollection()
    print("1. empty:", numbers.to_list(), f"capacity: {numbers.capacity}", sep=" | ")
    numbers.add(1)
    numbers.add(2)
    numbers.add(3)
    numbers.add_range([4, 5, 6])
    numbers.insert(0, 0)
    print("1. filled:", numbers.to_list(), f"capacity: {numbers.capacity}", sep=" | ")
    numbers.remove(2)
    numbers.remove_at(0)
    print("1. removed:", numbers.to_list())
    numbers.clear()
    numbers.add(1)
    print("1. refilled:", numbers.to_list(), f"capacity: {numbers.capacity}", sep=" | ")


def demo_2_membership_and_ordering() -> None:
    """Membership, default sort, reverse, and sort by explicit comparison."""
    numbers = build_numbers()
    exists = numbers.contains(1)
    numbers.sort()
    numbers.reverse()
    numbers.sort(lambda x, y: (x > y) - (x < y))
    # numbers.add("hello") is rejected by the type checker, not at runtime.
    print(
        "2. ordering:",
        f"contains(1): {exists}",
        f"capacity: {numbers.capacity}",
        f"count: {numbers.count}",
        sep=" | ",
    )
    for number in numbers:
        print("2. item:", number)


def demo_3_text_collection() -> None:
    """The same API over text elements."""
    names: OrderedCollection[str] = OrderedCollection()
    names.add("Alice")
    names.add("Bob")
    names.add("Charlie")
    print("3. names:", names.count)
    for name in names:
        print("3. name:", name)


def demo_4_record_collection() -> None:
    """A collection of records, initialised from an iterable."""
    people = OrderedCollection([ValueRecord(age=30), ValueRecord(age=40), ValueRecord(age=50)])
    for person in people:
        print("4. age:", person.age)


def demo_5_remove_all() -> None:
    """Bulk conditional removal instead of removing inside a loop."""
    numbers = OrderedCollection([1, 2, 3, 4, 5])
    removed = numbers.remove_all(lambda x: x > 3)
    print("5. remove_all(x > 3):", numbers.to_list(), f"removed: {removed}", sep=" | ")


def demo_6_binary_search() -> None:
    """Binary search over sorted content; misses return a negative sentinel."""
    numbers = OrderedCollection([3, 1, 2])
    numbers.sort()
    found = numbers.binary_search(3)
    missing = numbers.binary_search(9)
    print(
        "6. binary_search:",
        numbers.to_list(),
        f"3 -> {found}",
        f"9 -> {missing} (insert at {~missing})",
        sep=" | ",
    )


def run_all() -> None:
    """Execute every ordered-collection demonstration."""
    demo_1_mutation_sequence()
    demo_2_membership_and_ordering()
    demo_3_text_collection()
    demo_4_record_collection()
    demo_5_remove_all()
    demo_6_binary_search()


if __name__ == "__main__":
    run_all()
