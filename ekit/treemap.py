"""A sorted map ordered by a user-supplied comparator."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Mapping
from functools import cmp_to_key
from typing import Any

from ekit.mapx import K, MapLike, V

Comparator = Callable[[Any, Any], int]


class ComparatorMissingError(ValueError):
    """Raised when a sorted map is created without a comparator."""

    def __init__(self) -> None:
        super().__init__("ekit: Comparator不能为nil")


class TreeMap(MapLike[K, V]):
    """Map whose keys stay sorted by ``comparator(a, b)`` (<0, 0, >0)."""

    def __init__(self, comparator: Comparator | None) -> None:
        if comparator is None:
            raise ComparatorMissingError()
        self._comparator = comparator
        self._sort_key = cmp_to_key(comparator)
        self._sort_keys: list[Any] = []
        self._keys: list[K] = []
        self._values: list[V] = []

    @classmethod
    def from_mapping(
        cls, comparator: Comparator | None, mapping: Mapping[K, V] | None
    ) -> TreeMap[K, V]:
        """Build a tree map holding every pair of ``mapping``."""
        tree = cls(comparator)
        for pair in (mapping or {}).items():
            tree.put(*pair)
        return tree

    def _position(self, key: Any) -> tuple[int, bool]:
        at = bisect_left(self._sort_keys, self._sort_key(key))
        return at, at < len(self._keys) and self._comparator(self._keys[at], key) == 0

    def _find(self, key: Any) -> int:
        at, found = self._position(key)
        if not found:
            raise KeyError(key)
        return at

    def put(self, key, value):
        at, found = self._position(key)
        if found:
            self._values[at] = value
            return
        self._sort_keys.insert(at, self._sort_key(key))
        self._keys.insert(at, key)
        self._values.insert(at, value)

    def get(self, key, default=None):
        try:
            return self._values[self._find(key)]
        except KeyError:
            return default

    def delete(self, key):
        at = self._find(key)
        del self._sort_keys[at]
        del self._keys[at]
        return self._values.pop(at)

    def keys(self):
        return list(self._keys)

    def values(self):
        return list(self._values)

    def __contains__(self, key):
        return self._position(key)[1]

    def __len__(self):
        return len(self._keys)