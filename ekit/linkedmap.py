"""A map that remembers insertion order on top of any backing map."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from ekit.hashmap import HashMap
from ekit.mapx import MapLike
from ekit.treemap import Comparator, TreeMap

K = TypeVar("K")
V = TypeVar("V")


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Any = None, value: Any = None) -> None:
        self.key = key
        self.value = value
        self.prev: _Entry[K, V] = self
        self.next: _Entry[K, V] = self


class LinkedMap(MapLike[K, V]):
    """Stores entries in ``backing`` and yields keys in insertion order.

    Replacing the value of an existing key keeps its position. If the backing
    map refuses a new key, the exception propagates and nothing is linked.
    """

    def __init__(self, backing: MapLike[K, Any]) -> None:
        self._backing = backing
        self._sentinel: _Entry[K, V] = _Entry()
        self._length = 0

    def put(self, key: K, value: V) -> None:
        entry = self._backing.get(key)
        if entry is not None:
            entry.value = value
            return
        entry = _Entry(key, value)
        self._backing.put(key, entry)
        last = self._sentinel.prev
        entry.prev, entry.next = last, self._sentinel
        last.next = entry
        self._sentinel.prev = entry
        self._length += 1

    def get(self, key: K, default: Any = None) -> Any:
        entry = self._backing.get(key)
        return default if entry is None else entry.value

    def delete(self, key: K) -> V:
        entry = self._backing.delete(key)
        entry.prev.next = entry.next
        entry.next.prev = entry.prev
        entry.prev = entry.next = entry
        self._length -= 1
        return entry.value

    def _entries(self) -> Iterator[_Entry[K, V]]:
        cur = self._sentinel.next
        while cur is not self._sentinel:
            yield cur
            cur = cur.next

    def keys(self) -> list[K]:
        return [entry.key for entry in self._entries()]

    def values(self) -> list[V]:
        return [entry.value for entry in self._entries()]

    def __contains__(self, key: object) -> bool:
        return self._backing.get(key) is not None

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())


def linked_hash_map(size: int = 0) -> LinkedMap:
    """Return an insertion-ordered map backed by a ``HashMap``."""
    return LinkedMap(HashMap(size))


def linked_tree_map(comparator: Comparator | None) -> LinkedMap:
    """Return an insertion-ordered map backed by a ``TreeMap``."""
    return LinkedMap(TreeMap(comparator))