"""A map from each key to a list of values."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from ekit.hashmap import HashMap
from ekit.mapx import BuiltinMap, MapLike
from ekit.treemap import Comparator, TreeMap

K = TypeVar("K")
V = TypeVar("V")


class MultiMap(Generic[K, V]):
    """Maps each key to a list of values stored in ``backing``.

    Lists handed out are copies; changing them does not change the map.
    """

    def __init__(self, backing: MapLike[K, list[V]]) -> None:
        self._backing = backing

    def put(self, key: K, value: V) -> None:
        """Append ``value`` to the values of ``key``."""
        self.put_many(key, value)

    def put_many(self, key: K, *args: V) -> None:
        """Append every value in ``args`` to the values of ``key``."""
        current = self._backing.get(key)
        self._backing.put(key, [*(current or []), *args])

    def get(self, key: K) -> list[V] | None:
        """Return a copy of the values of ``key``, or None if it is absent."""
        current = self._backing.get(key)
        return None if current is None else list(current)

    def delete(self, key: K) -> list[V]:
        """Remove ``key`` and return its values; raises KeyError if absent."""
        return list(self._backing.delete(key))

    def keys(self) -> list[K]:
        return self._backing.keys()

    def values(self) -> list[list[V]]:
        return [list(group) for group in self._backing.values()]

    def __contains__(self, key: Any) -> bool:
        return self._backing.get(key) is not None


def multi_tree_map(comparator: Comparator | None) -> MultiMap:
    """Return a multimap backed by a ``TreeMap``; the comparator is required."""
    return MultiMap(TreeMap(comparator))


def multi_hash_map(size: int = 0) -> MultiMap:
    """Return a multimap backed by a ``HashMap``; ``size`` is a capacity hint."""
    return MultiMap(HashMap(size))


def multi_builtin_map(size: int = 0) -> MultiMap:
    """Return a multimap backed by a dict; ``size`` is a capacity hint."""
    del size
    return MultiMap(BuiltinMap())