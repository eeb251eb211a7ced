"""
Helpers for building up plain key/value tables.
"""

from typing import Any, Callable, Dict, MutableMapping

from kvstream.validation import ValueKind, assert_kind


def put_default(table: MutableMapping[Any, Any], key: Any, default_value: Any) -> Any:
    """
    Associate ``key`` with ``default_value`` unless it already has a value.

    A key mapped to None counts as unpaired.

    Returns:
        The value paired with ``key`` after the call
    """
    value = assert_kind(table, ValueKind.MAPPING, "table").get(key)
    if value is None:
        table[key] = default_value
        return default_value
    return value


def put_compute(table: MutableMapping[Any, Any], key: Any,
                computer: Callable[[Any], Any]) -> Any:
    """
    Associate ``key`` with ``computer(key)`` unless it already has a value.

    ``computer`` is only invoked when the key is unpaired.
    """
    assert_kind(computer, ValueKind.CALLABLE, "computer")
    value = assert_kind(table, ValueKind.MAPPING, "table").get(key)
    if value is None:
        value = computer(key)
        table[key] = value
    return value


def make_set(*values: Any) -> Dict[Any, bool]:
    """Table pairing each value with True."""
    return {value: True for value in values}
