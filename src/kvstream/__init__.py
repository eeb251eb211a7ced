"""
kvstream: lazy key/value stream combinators.

Streams pull ``(key, value)`` pairs on demand from a mapping or a
generator, through filter/map/merge/flat-map/peek/unique combinators, into
terminal operations such as collect, grouping and sorted.
"""

from kvstream.config import StreamConfig
from kvstream.exceptions import (
    ErrorKind,
    StreamError,
    UnsupportedOperationError,
    TypeMismatchError,
    NilPointerError,
    IllegalArgumentError,
    IllegalStateError,
    raise_error,
)
from kvstream.collections import ReadOnlyMapping, put_default, put_compute, make_set
from kvstream.algorithms import quicksort, group_pairs
from kvstream.streams import Stream
from kvstream import api

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "StreamConfig",
    "ErrorKind",
    "StreamError",
    "UnsupportedOperationError",
    "TypeMismatchError",
    "NilPointerError",
    "IllegalArgumentError",
    "IllegalStateError",
    "raise_error",
    "ReadOnlyMapping",
    "put_default",
    "put_compute",
    "make_set",
    "quicksort",
    "group_pairs",
    "Stream",
    "api",
]
