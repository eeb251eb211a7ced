"""
Pull operators: element sources and the combinators layered over them.

Every operator answers ``pull()`` with the next ``(key, value)`` pair or
None once it has ended. Operators pull their upstream only as often as
needed to produce the next pair, never ahead of demand.
"""

import logging
import weakref
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from kvstream.config import config
from kvstream.exceptions import ErrorKind, raise_error
from kvstream.validation import ValueKind, assert_kind, describe, require_non_none, require_pair

logger = logging.getLogger(__name__)

Pair = Tuple[Any, Any]


class StreamOperator(ABC):
    """Base class for pull operators."""

    _ended = False

    def pull(self) -> Optional[Pair]:
        """Next pair, or None forever after the operator has ended."""
        if self._ended:
            return None
        pair = self.advance()
        if pair is None:
            self._ended = True
        return pair

    @property
    def ended(self) -> bool:
        return self._ended

    @abstractmethod
    def advance(self) -> Optional[Pair]:
        """Produce the next pair, or None at end."""
        pass


class MappingSource(StreamOperator):
    """Walk the items of a mapping in its native iteration order."""

    def __init__(self, mapping: Mapping):
        self.mapping = assert_kind(mapping, ValueKind.MAPPING, "mapping")
        self._items: Optional[Iterator] = None

    def advance(self) -> Optional[Pair]:
        if self._items is None:
            self._items = iter(self.mapping.items())
        return next(self._items, None)


class GeneratorSource(StreamOperator):
    """
    Pull from a caller-supplied generator.

    The generator is either a zero-argument function returning a pair or
    None, or an iterator of pairs. A pair with a None key ends the stream.
    """

    def __init__(self, generator: Any):
        if isinstance(generator, Iterator):
            iterator = generator
            self._next = lambda: next(iterator, None)
        elif callable(generator):
            self._next = generator
        else:
            raise_error(ErrorKind.TYPE_MISMATCH,
                        f"Received {describe(generator)}, Expected: mapping or generator")
        self.generator = generator

    def advance(self) -> Optional[Pair]:
        pair = self._next()
        if pair is None:
            return None
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise_error(ErrorKind.TYPE_MISMATCH,
                        f"Generator produced {describe(pair)}, Expected: (key, value) pair")
        if pair[0] is None:
            return None
        return pair


class FilterOperator(StreamOperator):
    """Keep pairs for which the predicate returns exactly True."""

    def __init__(self, upstream, predicate: Callable[[Any, Any], bool]):
        self.upstream = upstream
        self.predicate = assert_kind(predicate, ValueKind.CALLABLE, "predicate")

    def advance(self) -> Optional[Pair]:
        while True:
            pair = self.upstream.pull()
            if pair is None or self.predicate(*pair) is True:
                return pair


class MapOperator(StreamOperator):
    """Translate each pair into a new pair."""

    def __init__(self, upstream, mapper: Callable[[Any, Any], Pair]):
        self.upstream = upstream
        self.mapper = assert_kind(mapper, ValueKind.CALLABLE, "mapper")

    def advance(self) -> Optional[Pair]:
        pair = self.upstream.pull()
        if pair is None:
            return None
        return require_pair(self.mapper(*pair), "map result")


class PeekOperator(StreamOperator):
    """Show each pair to an observer and forward it unchanged."""

    def __init__(self, upstream, observer: Callable[[Any, Any], Any]):
        self.upstream = upstream
        self.observer = assert_kind(observer, ValueKind.CALLABLE, "observer")

    def advance(self) -> Optional[Pair]:
        pair = self.upstream.pull()
        if pair is not None:
            self.observer(*pair)
        return pair


class MergeMode(Enum):
    """Which sides of a merge are still producing pairs."""
    BOTH = "both"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"
    ENDED = "ended"


class MergeOperator(StreamOperator):
    """
    Pull two streams in lockstep and combine their pairs.

    Once one side ends only the other is pulled, and the ended side is
    presented to the combiner as ``(None, None)``. The merged stream is as
    long as the longer input.
    """

    def __init__(self, left, right, combiner: Callable[[Any, Any, Any, Any], Pair]):
        self.left = left
        self.right = right
        self.combiner = assert_kind(combiner, ValueKind.CALLABLE, "combiner")
        self.mode = MergeMode.BOTH
        self._left_pair: Pair = (None, None)
        self._right_pair: Pair = (None, None)

    def _switch(self, mode: MergeMode) -> None:
        logger.debug("Merge switching from %s to %s", self.mode.name, mode.name)
        self.mode = mode

    def advance(self) -> Optional[Pair]:
        if self.mode is MergeMode.BOTH:
            left = self.left.pull()
            right = self.right.pull()
            if left is None and right is None:
                self._switch(MergeMode.ENDED)
            elif right is None:
                self._switch(MergeMode.LEFT_ONLY)
            elif left is None:
                self._switch(MergeMode.RIGHT_ONLY)
            self._left_pair = left or (None, None)
            self._right_pair = right or (None, None)

        elif self.mode is MergeMode.LEFT_ONLY:
            left = self.left.pull()
            if left is None:
                self._switch(MergeMode.ENDED)
            self._left_pair = left or (None, None)

        elif self.mode is MergeMode.RIGHT_ONLY:
            right = self.right.pull()
            if right is None:
                self._switch(MergeMode.ENDED)
            self._right_pair = right or (None, None)

        if self.mode is MergeMode.ENDED:
            return None

        return require_pair(self.combiner(*self._left_pair, *self._right_pair),
                            "merge result")


class FlatMapOperator(StreamOperator):
    """
    Expand each pair into an inner stream and forward its pairs in order.

    An inner stream is drained fully before the next outer pair is pulled.
    Empty inner streams contribute nothing.
    """

    def __init__(self, outer, expander: Callable[[Any, Any], Any],
                 adapt: Callable[[Any], Any]):
        self.outer = outer
        self.expander = assert_kind(expander, ValueKind.CALLABLE, "expander")
        self._adapt = adapt
        self._inner = None

    def advance(self) -> Optional[Pair]:
        while True:
            if self._inner is not None:
                pair = self._inner.pull()
                if pair is not None:
                    return pair

            outer = self.outer.pull()
            if outer is None:
                self._inner = None
                return None
            self._inner = self._adapt(self.expander(*outer))


class TokenSet:
    """
    Set of uniqueness tokens.

    With ``weak`` enabled, tokens that support weak references are only
    held while something else keeps them alive.
    """

    def __init__(self, weak: bool = False):
        self.weak = weak
        self._strong: set = set()
        self._weak: weakref.WeakSet = weakref.WeakSet()

    def __contains__(self, token: Any) -> bool:
        if token in self._strong:
            return True
        return self.weak and token in self._weak

    def __len__(self) -> int:
        return len(self._strong) + len(self._weak)

    def add(self, token: Any) -> None:
        if self.weak:
            try:
                self._weak.add(token)
                return
            except TypeError:
                pass  # not weak-referenceable
        self._strong.add(token)


def _value_token(key: Any, value: Any) -> Any:
    return value


class UniqueOperator(StreamOperator):
    """Drop pairs whose uniqueness token has already been seen."""

    def __init__(self, upstream, keyer: Optional[Callable[[Any, Any], Any]] = None,
                 weak: Optional[bool] = None):
        self.upstream = upstream
        self.keyer = _value_token if keyer is None else assert_kind(
            keyer, ValueKind.CALLABLE, "keyer")
        self.seen = TokenSet(config.weak_unique_tokens if weak is None else weak)

    def advance(self) -> Optional[Pair]:
        while True:
            pair = self.upstream.pull()
            if pair is None:
                return None

            token = require_non_none(self.keyer(*pair), "Uniqueness token")
            try:
                hash(token)
            except TypeError:
                raise_error(ErrorKind.TYPE_MISMATCH,
                            f"Uniqueness token {describe(token)} is not hashable")
            if token not in self.seen:
                self.seen.add(token)
                return pair


class NumRangeOperator(StreamOperator):
    """
    Inclusive arithmetic progression yielding ``(v, v)`` pairs.

    The n-th value is ``start + n * step``. Without a step, the direction
    follows ``start < stop``.
    """

    def __init__(self, start, stop, step=None):
        assert_kind(start, ValueKind.NUMBER, "start")
        assert_kind(stop, ValueKind.NUMBER, "stop")
        if step is None:
            step = 1 if start < stop else -1
        elif assert_kind(step, ValueKind.NUMBER, "step") == 0:
            raise_error(ErrorKind.ILLEGAL_ARGUMENT, "Number stream step must be non-zero")

        if (start > stop and step > 0) or (start < stop and step < 0):
            raise_error(ErrorKind.ILLEGAL_ARGUMENT,
                        f"Number stream does not terminate: start={start}, "
                        f"stop={stop}, step={step}")

        self.start = start
        self.stop = stop
        self.step = step
        self._index = 0
        logger.debug("Number stream %s..%s step %s", start, stop, step)

    def advance(self) -> Optional[Pair]:
        value = self.start + self._index * self.step
        if (value > self.stop) if self.step > 0 else (value < self.stop):
            return None
        self._index += 1
        return value, value
