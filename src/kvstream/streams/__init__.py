"""Lazy key/value streams and their pull operators."""

from kvstream.streams.stream import Stream
from kvstream.streams.operators import (
    StreamOperator,
    MappingSource,
    GeneratorSource,
    FilterOperator,
    MapOperator,
    PeekOperator,
    MergeMode,
    MergeOperator,
    FlatMapOperator,
    TokenSet,
    UniqueOperator,
    NumRangeOperator,
)

__all__ = [
    "Stream",
    "StreamOperator",
    "MappingSource",
    "GeneratorSource",
    "FilterOperator",
    "MapOperator",
    "PeekOperator",
    "MergeMode",
    "MergeOperator",
    "FlatMapOperator",
    "TokenSet",
    "UniqueOperator",
    "NumRangeOperator",
]
