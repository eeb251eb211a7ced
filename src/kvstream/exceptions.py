"""
Error kinds and exceptions raised by stream operations.
"""

import logging
from enum import Enum
from typing import NoReturn, Optional

from kvstream.config import config

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Kinds of failure surfaced by the stream engine."""
    UNSUPPORTED_OPERATION = (1, "Unsupported Operation")
    TYPE_MISMATCH = (2, "Type Mismatch")
    NIL_POINTER = (3, "Nil Pointer")
    ILLEGAL_ARGUMENT = (4, "Illegal Argument")
    ILLEGAL_STATE = (5, "Illegal State")

    def __init__(self, ordinal: int, formal: str):
        self.ordinal = ordinal
        self.formal = formal

    def __lt__(self, other):
        if not isinstance(other, ErrorKind):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other):
        if not isinstance(other, ErrorKind):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other):
        if not isinstance(other, ErrorKind):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other):
        if not isinstance(other, ErrorKind):
            return NotImplemented
        return self.ordinal >= other.ordinal

    def __str__(self) -> str:
        return self.formal


class StreamError(Exception):
    """Base class for every error raised by kvstream."""

    kind: ErrorKind = ErrorKind.ILLEGAL_STATE

    def __init__(self, message: str, source: str = "kvstream"):
        self.message = message
        self.source = source
        super().__init__(f"[{source}] {self.kind.formal}: {message}")


class UnsupportedOperationError(StreamError, TypeError):
    """An immutable result was asked to change."""
    kind = ErrorKind.UNSUPPORTED_OPERATION


class TypeMismatchError(StreamError, TypeError):
    """An argument does not have the expected shape."""
    kind = ErrorKind.TYPE_MISMATCH


class NilPointerError(StreamError, ValueError):
    """A required value was None."""
    kind = ErrorKind.NIL_POINTER


class IllegalArgumentError(StreamError, ValueError):
    """An argument is outside its accepted bounds."""
    kind = ErrorKind.ILLEGAL_ARGUMENT


class IllegalStateError(StreamError, RuntimeError):
    """A stream reached a state its invariants rule out."""
    kind = ErrorKind.ILLEGAL_STATE


_ERRORS = {
    ErrorKind.UNSUPPORTED_OPERATION: UnsupportedOperationError,
    ErrorKind.TYPE_MISMATCH: TypeMismatchError,
    ErrorKind.NIL_POINTER: NilPointerError,
    ErrorKind.ILLEGAL_ARGUMENT: IllegalArgumentError,
    ErrorKind.ILLEGAL_STATE: IllegalStateError,
}


def error_class(kind: ErrorKind) -> type:
    """Exception class raised for ``kind``."""
    return _ERRORS[kind]


def raise_error(kind: ErrorKind, message: str, source: Optional[str] = None) -> NoReturn:
    """
    Abort the current operation with an error of the given kind.

    Args:
        kind: Kind of failure
        message: Details of the failure
        source: Tag shown in brackets; defaults to ``config.error_source``
    """
    if source is None:
        source = config.error_source

    error = _ERRORS[kind](message, source=source)
    logger.debug("Raising %s", error)
    raise error
