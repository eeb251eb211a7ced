"""
In-place comparator quicksort.

Two-way Lomuto partitioning around the rightmost element. Average cost
is O(n log n); already-sorted input degrades to O(n^2) comparisons since
the pivot is never randomized. Equal elements may be reordered.
"""

from typing import Any, Callable, MutableSequence, Optional

from kvstream.exceptions import ErrorKind, raise_error
from kvstream.validation import ValueKind, assert_kind, describe

Comparator = Callable[[Any, Any], Any]


def _compare(comparator: Comparator, a: Any, b: Any):
    result = comparator(a, b)
    if not ValueKind.NUMBER.match(result):
        raise_error(ErrorKind.TYPE_MISMATCH,
                    f"Comparator returned {describe(result)}, Expected: number")
    return result


def partition(seq: MutableSequence, comparator: Comparator, lo: int, hi: int) -> int:
    """
    Partition ``seq[lo..hi]`` (inclusive) around ``seq[hi]``.

    Elements comparing ``<= 0`` against the pivot end up left of it.

    Returns:
        Final index of the pivot
    """
    pivot = seq[hi]
    wall = lo - 1

    for i in range(lo, hi):
        if _compare(comparator, seq[i], pivot) <= 0:
            wall += 1
            seq[wall], seq[i] = seq[i], seq[wall]

    wall += 1
    seq[wall], seq[hi] = seq[hi], seq[wall]
    return wall


def _quicksort(seq: MutableSequence, comparator: Comparator, lo: int, hi: int) -> None:
    # Recurse into the smaller side, loop on the larger: depth stays O(log n)
    while lo < hi:
        pivot = partition(seq, comparator, lo, hi)
        if pivot - lo < hi - pivot:
            _quicksort(seq, comparator, lo, pivot - 1)
            lo = pivot + 1
        else:
            _quicksort(seq, comparator, pivot + 1, hi)
            hi = pivot - 1


def quicksort(seq: MutableSequence, comparator: Comparator,
              lo: int = 0, hi: Optional[int] = None) -> MutableSequence:
    """
    Sort ``seq[lo..hi]`` in place using a three-way comparator.

    Args:
        seq: Sequence to sort
        comparator: ``comparator(a, b)`` negative, zero or positive for
            a < b, a == b, a > b
        lo: First index of the range
        hi: Last index of the range (inclusive), defaults to the end

    Returns:
        ``seq`` itself
    """
    assert_kind(comparator, ValueKind.CALLABLE, "comparator")
    if hi is None:
        hi = len(seq) - 1
    _quicksort(seq, comparator, lo, hi)
    return seq


def ascending(a: Any, b: Any) -> int:
    """Natural-order comparator."""
    return (a > b) - (a < b)


def descending(a: Any, b: Any) -> int:
    """Reverse natural-order comparator."""
    return (a < b) - (a > b)
