"""
Group-by reduction over key/value pairs.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, TypeVar

from kvstream.collections import ReadOnlyMapping, put_compute
from kvstream.config import config
from kvstream.validation import ValueKind, assert_kind, require_non_none

K = TypeVar('K')
A = TypeVar('A')


def append_value(key: Any, value: Any, accumulator: List[Any]) -> List[Any]:
    """Default combine step: append the value to a list accumulator."""
    accumulator.append(value)
    return accumulator


def group_pairs(
    pairs: Iterable[Tuple[Any, Any]],
    classifier: Callable[[Any, Any], K],
    accumulator_factory: Callable[[], A] = list,
    combine: Callable[[Any, Any, A], A] = append_value,
    read_only: Optional[bool] = None
) -> Dict[K, A]:
    """
    Reduce pairs into one accumulator per group.

    Args:
        pairs: Pairs to group, consumed fully
        classifier: ``classifier(key, value)`` returns the group key
        accumulator_factory: Creates an empty accumulator for a new group
        combine: ``combine(key, value, accumulator)`` returns the updated
            accumulator
        read_only: Wrap the result in a ReadOnlyMapping; None uses
            ``config.read_only_results``

    Returns:
        Dictionary mapping group keys to accumulators
    """
    assert_kind(classifier, ValueKind.CALLABLE, "classifier")
    assert_kind(accumulator_factory, ValueKind.CALLABLE, "accumulator_factory")
    assert_kind(combine, ValueKind.CALLABLE, "combine")

    groups: Dict[K, A] = {}
    for key, value in pairs:
        group = require_non_none(classifier(key, value), "Group key")
        accumulator = put_compute(groups, group, lambda _: accumulator_factory())
        groups[group] = require_non_none(combine(key, value, accumulator), "Accumulator")

    if config.resolve_read_only(read_only):
        return ReadOnlyMapping(groups)
    return groups


# Convenience reductions

def group_count(pairs: Iterable[Tuple[Any, Any]],
                classifier: Callable[[Any, Any], K]) -> Dict[K, int]:
    """Count pairs by group."""
    return group_pairs(pairs, classifier, lambda: 0, lambda k, v, acc: acc + 1)


def group_sum(pairs: Iterable[Tuple[Any, Any]],
              classifier: Callable[[Any, Any], K]) -> Dict[K, float]:
    """Sum values by group."""
    return group_pairs(pairs, classifier, lambda: 0, lambda k, v, acc: acc + v)
