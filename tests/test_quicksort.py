#!/usr/bin/env python3
"""
Tests for the in-place comparator quicksort.
"""

import random
import unittest

from kvstream import TypeMismatchError
from kvstream.algorithms import quicksort, partition, ascending, descending


class TestQuicksort(unittest.TestCase):
    """Test quicksort and partition."""

    def test_basic(self):
        data = [5, 3, 1, 4, 2]
        result = quicksort(data, ascending)
        self.assertIs(result, data)
        self.assertEqual(data, [1, 2, 3, 4, 5])

    def test_trivial_sequences(self):
        self.assertEqual(quicksort([], ascending), [])
        self.assertEqual(quicksort([7], ascending), [7])

    def test_duplicates_preserved(self):
        self.assertEqual(quicksort([2, 2, 1], ascending), [1, 2, 2])

    def test_descending_comparator(self):
        self.assertEqual(quicksort([1, 3, 2], descending), [3, 2, 1])

    def test_random_input(self):
        data = [random.randint(-100, 100) for _ in range(500)]
        expected = sorted(data)
        self.assertEqual(quicksort(data, lambda a, b: a - b), expected)

    def test_already_sorted_large_input(self):
        """Worst-case input does not exhaust the recursion limit."""
        data = list(range(1500))
        self.assertEqual(quicksort(list(data), ascending), data)
        self.assertEqual(quicksort(list(reversed(data)), ascending), data)

    def test_sub_range(self):
        data = [9, 4, 3, 2, 1, 0]
        quicksort(data, ascending, 1, 4)
        self.assertEqual(data, [9, 1, 2, 3, 4, 0])

    def test_partition_places_pivot(self):
        data = [3, 8, 1, 9, 5]
        index = partition(data, ascending, 0, 4)
        self.assertEqual(index, 2)
        self.assertEqual(data[index], 5)
        self.assertTrue(all(x <= 5 for x in data[:index]))
        self.assertTrue(all(x > 5 for x in data[index + 1:]))

    def test_comparator_must_return_number(self):
        with self.assertRaises(TypeMismatchError):
            quicksort([2, 1], lambda a, b: a < b)

    def test_comparator_must_be_callable(self):
        with self.assertRaises(TypeMismatchError):
            quicksort([2, 1], "ascending")

    def test_objects_by_field(self):
        people = [{"name": "cy", "age": 40}, {"name": "al", "age": 20}, {"name": "bo", "age": 30}]
        quicksort(people, lambda a, b: a["age"] - b["age"])
        self.assertEqual([p["name"] for p in people], ["al", "bo", "cy"])


if __name__ == "__main__":
    unittest.main()
