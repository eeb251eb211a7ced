"""
ReadOnlyMapping: an immutable view over a mapping.
"""

from typing import Any, Iterator, Mapping as MappingType
from collections.abc import Mapping

from kvstream.exceptions import ErrorKind, raise_error
from kvstream.validation import ValueKind, assert_kind


class ReadOnlyMapping(Mapping):
    """
    A view that exposes lookups on a private mapping but rejects writes.

    The wrapped mapping is borrowed, not copied: changes made through the
    original reference are visible through the view.
    """

    __slots__ = ("_data",)

    def __init__(self, data: MappingType[Any, Any]):
        self._data = assert_kind(data, ValueKind.MAPPING, "data")

    def __getitem__(self, key: Any) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"ReadOnlyMapping({self._data!r})"

    def _reject(self, *args, **kwargs):
        raise_error(ErrorKind.UNSUPPORTED_OPERATION, "Read-only table cannot be modified.")

    __setitem__ = _reject
    __delitem__ = _reject
    pop = _reject
    popitem = _reject
    clear = _reject
    update = _reject
    setdefault = _reject
    __delattr__ = _reject

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__slots__ and not hasattr(self, name):
            object.__setattr__(self, name, value)
        else:
            self._reject()
