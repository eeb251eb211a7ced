"""
Function-style stream API.

Each function takes its source first. A source is anything
``Stream.of`` accepts: a mapping, a Stream, an iterator of pairs or a
zero-argument pull function. Names follow the stream vocabulary, so
``filter``, ``map`` and ``sorted`` shadow the builtins inside this module.

Example:
    from kvstream import api as kv

    totals = kv.grouping(
        kv.filter(orders, lambda k, v: v["paid"] is True),
        lambda k, v: v["customer"],
    )
"""

from typing import Any, Callable, Dict, List, Optional

from kvstream.algorithms import append_value
from kvstream.streams import Stream

Source = Any


def stream(source: Source) -> Stream:
    """Adapt a source into a Stream."""
    return Stream.of(source)


def filter(source: Source, predicate: Callable[[Any, Any], bool]) -> Stream:
    return Stream.of(source).filter(predicate)


def map(source: Source, mapper: Callable[[Any, Any], tuple]) -> Stream:
    return Stream.of(source).map(mapper)


def peek(source: Source, observer: Callable[[Any, Any], Any]) -> Stream:
    return Stream.of(source).peek(observer)


def merge(left: Source, right: Source,
          combiner: Callable[[Any, Any, Any, Any], tuple]) -> Stream:
    return Stream.of(left).merge(right, combiner)


def flat_map(source: Source, expander: Callable[[Any, Any], Source]) -> Stream:
    return Stream.of(source).flat_map(expander)


def unique(source: Source, keyer: Optional[Callable[[Any, Any], Any]] = None,
           weak: Optional[bool] = None) -> Stream:
    return Stream.of(source).unique(keyer, weak)


def num_stream(start, stop, step=None) -> Stream:
    """Inclusive arithmetic progression of ``(v, v)`` pairs."""
    return Stream.range(start, stop, step)


def collect(source: Source, read_only: Optional[bool] = None) -> Dict[Any, Any]:
    return Stream.of(source).collect(read_only)


def for_each(source: Source, callback: Callable[[Any, Any], Any]) -> None:
    Stream.of(source).for_each(callback)


def grouping(source: Source,
             classifier: Callable[[Any, Any], Any],
             accumulator_factory: Callable[[], Any] = list,
             combine: Callable[[Any, Any, Any], Any] = append_value,
             read_only: Optional[bool] = None) -> Dict[Any, Any]:
    return Stream.of(source).grouping(classifier, accumulator_factory, combine, read_only)


def sorted(source: Source, comparator: Callable[[Any, Any], Any]) -> List[Any]:
    return Stream.of(source).sorted(comparator)
