"""
Argument shape checks shared by the stream combinators.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from numbers import Real
from typing import Any, Optional

from kvstream.exceptions import ErrorKind, raise_error


class ValueKind(Enum):
    """Runtime shapes an argument can be asserted against."""
    NONE = "none"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    CALLABLE = "function"
    MAPPING = "mapping"
    SEQUENCE = "sequence"

    def match(self, value: Any) -> bool:
        """True if ``value`` has this shape."""
        if self is ValueKind.NONE:
            return value is None
        if self is ValueKind.STRING:
            return isinstance(value, str)
        if self is ValueKind.BOOLEAN:
            return isinstance(value, bool)
        if self is ValueKind.NUMBER:
            # bool is an int subclass but never a number here
            return isinstance(value, Real) and not isinstance(value, bool)
        if self is ValueKind.CALLABLE:
            return callable(value)
        if self is ValueKind.MAPPING:
            return isinstance(value, Mapping)
        return isinstance(value, Sequence) and not isinstance(value, str)


def describe(value: Any) -> str:
    """Short type name used in mismatch messages."""
    for kind in ValueKind:
        if kind.match(value):
            return kind.value
    return type(value).__name__


def assert_kind(value: Any, kind: ValueKind, name: Optional[str] = None) -> Any:
    """
    Return ``value`` unchanged if it has the expected shape.

    Raises:
        TypeMismatchError: If ``value`` does not match ``kind``
    """
    if not kind.match(value):
        prefix = f"{name}: " if name else ""
        raise_error(ErrorKind.TYPE_MISMATCH,
                    f"{prefix}Received {describe(value)}, Expected: {kind.value}")
    return value


def require_non_none(value: Any, what: str = "Required non-nil argument") -> Any:
    """Return ``value`` unless it is None."""
    if value is None:
        raise_error(ErrorKind.NIL_POINTER, f"{what} was nil")
    return value


def require_pair(result: Any, what: str) -> tuple:
    """Validate a callback result as a ``(key, value)`` pair with a present key."""
    if not isinstance(result, tuple) or len(result) != 2:
        raise_error(ErrorKind.TYPE_MISMATCH,
                    f"{what}: Received {describe(result)}, Expected: (key, value) pair")
    require_non_none(result[0], f"{what} key")
    return result
