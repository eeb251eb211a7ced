"""
Lazy, single-pass key/value streams.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Callable, Dict, List, Optional, Tuple

from kvstream.algorithms import group_pairs, append_value, quicksort
from kvstream.collections import ReadOnlyMapping
from kvstream.config import config
from kvstream.exceptions import ErrorKind, raise_error
from kvstream.profiler import profile_terminal
from kvstream.streams.operators import (
    StreamOperator, MappingSource, GeneratorSource, FilterOperator, MapOperator,
    PeekOperator, MergeOperator, FlatMapOperator, UniqueOperator, NumRangeOperator,
)
from kvstream.validation import ValueKind, assert_kind, describe

logger = logging.getLogger(__name__)

Pair = Tuple[Any, Any]


class Stream(Iterator):
    """
    A lazy, single-pass cursor over ``(key, value)`` pairs.

    Combinators wrap this stream and return a new one without pulling
    anything; terminal operations drain it. Streams are not restartable:
    once ended, ``pull()`` keeps returning None.
    """

    def __init__(self, cursor: StreamOperator):
        """
        Initialize stream.

        Args:
            cursor: Operator producing the pairs
        """
        if not isinstance(cursor, StreamOperator):
            raise_error(ErrorKind.TYPE_MISMATCH,
                        f"Received {describe(cursor)}, Expected: stream operator")
        self._cursor = cursor

    def pull(self) -> Optional[Pair]:
        """Next pair, or None at end-of-stream."""
        return self._cursor.pull()

    def __next__(self) -> Pair:
        pair = self._cursor.pull()
        if pair is None:
            raise StopIteration
        return pair

    def __iter__(self) -> 'Stream':
        return self

    @property
    def ended(self) -> bool:
        return self._cursor.ended

    def __repr__(self) -> str:
        return f"Stream({type(self._cursor).__name__})"

    # Intermediate operators

    def filter(self, predicate: Callable[[Any, Any], bool]) -> 'Stream':
        """Keep pairs for which ``predicate(key, value)`` is exactly True."""
        return Stream(FilterOperator(self, predicate))

    def map(self, mapper: Callable[[Any, Any], Pair]) -> 'Stream':
        """Replace each pair with ``mapper(key, value)``."""
        return Stream(MapOperator(self, mapper))

    def peek(self, observer: Callable[[Any, Any], Any]) -> 'Stream':
        """Call ``observer(key, value)`` on each pair as it passes."""
        return Stream(PeekOperator(self, observer))

    def merge(self, other: Any, combiner: Callable[[Any, Any, Any, Any], Pair]) -> 'Stream':
        """Combine pairs of this stream and ``other`` with ``combiner(k1, v1, k2, v2)``."""
        return Stream(MergeOperator(self, Stream.of(other), combiner))

    def flat_map(self, expander: Callable[[Any, Any], Any]) -> 'Stream':
        """Replace each pair with the pairs of the stream ``expander(key, value)`` builds."""
        return Stream(FlatMapOperator(self, expander, Stream.of))

    def unique(self, keyer: Optional[Callable[[Any, Any], Any]] = None,
               weak: Optional[bool] = None) -> 'Stream':
        """Drop pairs whose token, ``keyer(key, value)`` or the value, was already seen."""
        return Stream(UniqueOperator(self, keyer, weak))

    # Terminal operators

    def _drain(self):
        for pair in self:
            if config.trace_pulls:
                logger.debug("Pulled %r", pair)
            yield pair

    @profile_terminal
    def collect(self, read_only: Optional[bool] = None) -> Dict[Any, Any]:
        """Collect all pairs into a dictionary; later keys overwrite earlier ones."""
        result = {}
        for key, value in self._drain():
            result[key] = value

        if config.resolve_read_only(read_only):
            return ReadOnlyMapping(result)
        return result

    @profile_terminal
    def for_each(self, callback: Callable[[Any, Any], Any]) -> None:
        """Call ``callback(key, value)`` for every pair."""
        assert_kind(callback, ValueKind.CALLABLE, "callback")
        for key, value in self._drain():
            callback(key, value)

    @profile_terminal
    def grouping(self,
                 classifier: Callable[[Any, Any], Any],
                 accumulator_factory: Callable[[], Any] = list,
                 combine: Callable[[Any, Any, Any], Any] = append_value,
                 read_only: Optional[bool] = None) -> Dict[Any, Any]:
        """Group pairs by ``classifier(key, value)``, reducing each group."""
        return group_pairs(self._drain(), classifier, accumulator_factory, combine, read_only)

    @profile_terminal
    def sorted(self, comparator: Callable[[Any, Any], Any]) -> List[Any]:
        """Values in pull order, sorted in place by ``comparator(a, b)``."""
        assert_kind(comparator, ValueKind.CALLABLE, "comparator")
        values = [value for _, value in self._drain()]
        return quicksort(values, comparator)

    def count(self) -> int:
        """Count pairs."""
        return sum(1 for _ in self._drain())

    def first(self) -> Optional[Pair]:
        """First pair, pulling at most once."""
        return self.pull()

    # Factory methods

    @classmethod
    def of(cls, source: Any) -> 'Stream':
        """
        Adapt a source into a stream.

        Args:
            source: A mapping, a Stream (returned as-is), a stream operator,
                an iterator of pairs or a zero-argument pull function
        """
        if isinstance(source, Stream):
            return source
        if isinstance(source, StreamOperator):
            return cls(source)
        if isinstance(source, Mapping):
            return cls(MappingSource(source))
        if isinstance(source, Iterator) or callable(source):
            return cls(GeneratorSource(source))
        raise_error(ErrorKind.TYPE_MISMATCH,
                    f"Received {describe(source)}, Expected: mapping or generator")

    @classmethod
    def range(cls, start, stop, step=None) -> 'Stream':
        """Inclusive number stream of ``(v, v)`` pairs from ``start`` to ``stop``."""
        return cls(NumRangeOperator(start, stop, step))

    @classmethod
    def empty(cls) -> 'Stream':
        """Stream with no pairs."""
        return cls(MappingSource({}))
