"""A hash map for keys that supply their own hash code and equality."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from ekit.mapx import MapLike

HK = TypeVar("HK", bound="Hashable")
HV = TypeVar("HV")


class Hashable(ABC):
    """A key that knows its hash code and how to compare itself."""

    @abstractmethod
    def code(self) -> int:
        """Return the hash code; it should spread keys evenly."""

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Return True when ``other`` is the same key."""


class _Entry(Generic[HK, HV]):
    __slots__ = ("key", "value")

    def __init__(self, key: HK, value: HV) -> None:
        self.key = key
        self.value = value


class HashMap(MapLike[HK, HV]):
    """Map keyed by ``code()``; colliding keys share a bucket in insertion order.

    ``size`` is a capacity hint and does not limit the map.
    """

    def __init__(self, size: int = 0) -> None:
        self._size_hint = size
        self._buckets: dict[int, list[_Entry[HK, HV]]] = {}
        self._length = 0

    def _locate(self, key: HK) -> tuple[int, int] | None:
        """Return (hash code, position in bucket) of ``key`` if present."""
        code = key.code()
        for position, entry in enumerate(self._buckets.get(code, ())):
            if entry.key.equals(key):
                return code, position
        return None

    def _find(self, key: HK) -> _Entry[HK, HV] | None:
        found = self._locate(key)
        if found is None:
            return None
        code, position = found
        return self._buckets[code][position]

    def put(self, key, value):
        entry = self._find(key)
        if entry is None:
            self._buckets.setdefault(key.code(), []).append(_Entry(key, value))
            self._length += 1
        else:
            entry.value = value

    def get(self, key, default=None):
        entry = self._find(key)
        return default if entry is None else entry.value

    def delete(self, key):
        found = self._locate(key)
        if found is None:
            raise KeyError(key)
        code, position = found
        bucket = self._buckets[code]
        removed = bucket.pop(position)
        if not bucket:
            del self._buckets[code]
        self._length -= 1
        return removed.value

    def _entries(self) -> Iterator[_Entry[HK, HV]]:
        for bucket in self._buckets.values():
            yield from bucket

    def keys(self):
        return [entry.key for entry in self._entries()]

    def values(self):
        return [entry.value for entry in self._entries()]

    def buckets(self) -> dict[int, list[tuple[HK, HV]]]:
        """Return each hash code with its chain of (key, value) pairs."""
        return {
            code: [(entry.key, entry.value) for entry in bucket]
            for code, bucket in self._buckets.items()
        }

    def __contains__(self, key):
        return self._locate(key) is not None

    def __len__(self):
        return self._length