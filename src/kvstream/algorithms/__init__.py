"""Sorting and grouping algorithms used by terminal stream operations."""

from kvstream.algorithms.quicksort import quicksort, partition, ascending, descending
from kvstream.algorithms.grouping import group_pairs, group_count, group_sum, append_value

__all__ = [
    "quicksort",
    "partition",
    "ascending",
    "descending",
    "group_pairs",
    "group_count",
    "group_sum",
    "append_value",
]
