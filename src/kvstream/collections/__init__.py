"""Key/value table helpers and immutable views."""

from kvstream.collections.read_only import ReadOnlyMapping
from kvstream.collections.tables import put_default, put_compute, make_set

__all__ = [
    "ReadOnlyMapping",
    "put_default",
    "put_compute",
    "make_set",
]
