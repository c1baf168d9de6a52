from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from typing_tour import CapacityError, CollectionIndexError, OrderedCollection, TypingTourError


class MutationSequenceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.numbers: OrderedCollection[int] = OrderedCollection()
        self.numbers.add(1)
        self.numbers.add(2)
        self.numbers.add(3)
        self.numbers.add_range([4, 5, 6])
        self.numbers.insert(0, 0)

    def test_build_sequence(self) -> None:
        self.assertEqual(self.numbers.to_list(), [0, 1, 2, 3, 4, 5, 6])
        self.assertEqual(self.numbers.count, 7)

    def test_remove_by_value_then_index(self) -> None:
        self.assertTrue(self.numbers.remove(2))
        self.numbers.remove_at(0)
        self.assertEqual(self.numbers.to_list(), [1, 3, 4, 5, 6])

    def test_clear_then_add(self) -> None:
        self.numbers.clear()
        self.numbers.add(1)
        self.assertEqual(self.numbers.to_list(), [1])
        self.assertTrue(self.numbers.contains(1))
        self.assertIn(1, self.numbers)

    def test_capacity_after_growth(self) -> None:
        self.assertEqual(self.numbers.capacity, 8)
        self.numbers.clear()
        self.numbers.add(1)
        self.numbers.sort()
        self.numbers.reverse()
        self.numbers.sort(lambda x, y: (x > y) - (x < y))
        self.assertEqual(self.numbers.capacity, 8)
        self.assertEqual(self.numbers.count, 1)


class CapacityTests(unittest.TestCase):
    def test_empty_collection_reserves_nothing(self) -> None:
        self.assertEqual(OrderedCollection().capacity, 0)

    def test_growth_starts_at_four_then_doubles(self) -> None:
        numbers: OrderedCollection[int] = OrderedCollection()
        seen = []
        for i in range(9):
            numbers.add(i)
            seen.append(numbers.capacity)
        self.assertEqual(seen, [4, 4, 4, 4, 8, 8, 8, 8, 16])

    def test_bulk_add_jumps_to_required_size(self) -> None:
        numbers = OrderedCollection(range(10))
        self.assertEqual(numbers.capacity, 10)

    def test_capacity_never_below_count(self) -> None:
        numbers = OrderedCollection([1, 2, 3])
        with self.assertRaises(CapacityError):
            numbers.capacity = 2
        with self.assertRaises(ValueError):
            numbers.capacity = -1
        numbers.capacity = 32
        self.assertEqual(numbers.capacity, 32)
        numbers.trim_excess()
        self.assertEqual(numbers.capacity, 3)


class RemovalTests(unittest.TestCase):
    def test_remove_missing_value_returns_false(self) -> None:
        numbers = OrderedCollection([1, 2, 3])
        self.assertFalse(numbers.remove(9))
        self.assertEqual(numbers.to_list(), [1, 2, 3])

    def test_remove_only_first_occurrence(self) -> None:
        numbers = OrderedCollection([2, 1, 2])
        numbers.remove(2)
        self.assertEqual(numbers.to_list(), [1, 2])

    def test_remove_all_matching(self) -> None:
        numbers = OrderedCollection([1, 2, 3, 4, 5])
        removed = numbers.remove_all(lambda x: x > 3)
        self.assertEqual(removed, 2)
        self.assertEqual(numbers.to_list(), [1, 2, 3])

    def test_index_errors(self) -> None:
        numbers = OrderedCollection([1, 2, 3])
        with self.assertRaises(CollectionIndexError) as caught:
            numbers.remove_at(3)
        self.assertEqual(caught.exception.index, 3)
        self.assertEqual(caught.exception.count, 3)
        with self.assertRaises(IndexError):
            numbers.insert(5, 0)
        with self.assertRaises(TypingTourError):
            numbers[-1]

    def test_insert_at_count_appends(self) -> None:
        numbers = OrderedCollection([1, 2])
        numbers.insert(2, 3)
        self.assertEqual(numbers.to_list(), [1, 2, 3])


class OrderingTests(unittest.TestCase):
    def test_sort_reverse_and_custom_comparison(self) -> None:
        names = OrderedCollection(["Charlie", "alice", "Bob"])
        names.sort()
        self.assertEqual(names.to_list(), ["Bob", "Charlie", "alice"])
        names.reverse()
        self.assertEqual(names.to_list(), ["alice", "Charlie", "Bob"])
        names.sort(lambda x, y: len(x) - len(y))
        self.assertEqual(names.to_list(), ["Bob", "alice", "Charlie"])

    def test_binary_search_found(self) -> None:
        self.assertEqual(OrderedCollection([1, 2, 3]).binary_search(3), 2)

    def test_binary_search_missing_returns_complement_of_insertion_point(self) -> None:
        numbers = OrderedCollection([1, 2, 3])
        self.assertEqual(numbers.binary_search(9), -4)
        self.assertEqual(numbers.binary_search(0), -1)
        self.assertEqual(~OrderedCollection([1, 3]).binary_search(2), 1)

    def test_binary_search_empty(self) -> None:
        self.assertLess(OrderedCollection().binary_search(1), 0)

    def test_insertion_order_kept(self) -> None:
        numbers = OrderedCollection([3, 1, 2])
        self.assertEqual(list(numbers), [3, 1, 2])
        self.assertEqual(numbers[0], 3)
        self.assertEqual(numbers.index_of(2), 2)
        self.assertEqual(numbers.index_of(7), -1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
