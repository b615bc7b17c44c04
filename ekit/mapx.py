"""Helpers for plain dicts and the interface shared by the map types."""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


def keys(mapping: Mapping[K, V] | None) -> list[K]:
    """Return the keys of ``mapping`` as a new list; ``None`` counts as empty."""
    return list(mapping or {})


def values(mapping: Mapping[K, V] | None) -> list[V]:
    """Return the values of ``mapping`` as a new list; ``None`` counts as empty."""
    return list((mapping or {}).values())


def keys_values(mapping: Mapping[K, V] | None) -> tuple[list[K], list[V]]:
    """Return keys and values as two lists whose positions correspond."""
    pairs = list((mapping or {}).items())
    return [k for k, _ in pairs], [v for _, v in pairs]


class MapLike(ABC, Generic[K, V]):
    """A key/value store.

    ``put`` stores or replaces a value; ``get`` returns ``default`` for a
    missing key; ``delete`` removes a key and returns its value, raising
    ``KeyError`` when the key is absent; ``keys`` and ``values`` return new
    lists whose order depends on the implementation.
    """

    @abstractmethod
    def put(self, key: K, value: V) -> None: ...

    @abstractmethod
    def get(self, key: K, default: Any = None) -> Any: ...

    @abstractmethod
    def delete(self, key: K) -> V: ...

    @abstractmethod
    def keys(self) -> list[K]: ...

    @abstractmethod
    def values(self) -> list[V]: ...

    def __contains__(self, key: object) -> bool:
        return self.get(key, _MISSING) is not _MISSING  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())


class BuiltinMap(MapLike[K, V]):
    """A ``MapLike`` that wraps a Python dict without copying it."""

    def __init__(self, data: dict[K, V] | None = None) -> None:
        self._data: dict[K, V] = {} if data is None else data

    def put(self, key, value):
        self._data[key] = value

    def get(self, key, default=None):
        return self._data.get(key, default)

    def delete(self, key):
        return self._data.pop(key)

    def keys(self):
        return keys(self._data)

    def values(self):
        return values(self._data)

    def __contains__(self, key):
        return key in self._data

    def __len__(self):
        return len(self._data)