"""A list backed by a Python list with explicit capacity management."""

from collections.abc import Iterable, Iterator
from typing import TypeVar

from ekit.listtypes import List

T = TypeVar("T")

_GROWTH_THRESHOLD = 256


def _grown_capacity(old: int, needed: int) -> int:
    doubled = old * 2
    if needed > doubled:
        return needed
    if old < _GROWTH_THRESHOLD:
        return doubled
    new = old
    while 0 < new < needed:
        new += (new + 3 * _GROWTH_THRESHOLD) // 4
    return new if new > 0 else needed


def _shrunk_capacity(capacity: int, length: int) -> int:
    if capacity <= 64:
        return capacity
    if capacity > 2048 and length <= capacity // 2:
        return capacity * 5 // 8
    if capacity <= 2048 and length <= capacity // 4:
        return capacity // 2
    return capacity


class ArrayList(List[T]):
    """Array-backed list that grows on demand and shrinks after deletions.

    Shrinking after ``delete``:
    - capacity above 2048 and length at most half of it: shrink to 5/8;
    - capacity in (64, 2048] and length at most a quarter: shrink to half;
    - capacity 64 or less: never shrink.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._vals: list[T] = []
        self._cap = capacity

    @classmethod
    def of(cls, values: Iterable[T] | None) -> "ArrayList[T]":
        """Build a list holding ``values``, with capacity equal to their count."""
        items = list(values or ())
        result = cls(len(items))
        result._vals = items
        return result

    def _reserve(self, extra: int) -> None:
        needed = len(self._vals) + extra
        if needed > self._cap:
            self._cap = _grown_capacity(self._cap, needed)

    def get(self, index):
        self._check_index(index)
        return self._vals[index]

    def append(self, *args):
        if args:
            self._reserve(len(args))
            self._vals.extend(args)

    def add(self, index, value):
        self._check_index(index, allow_end=True)
        self._reserve(1)
        self._vals.insert(index, value)

    def set(self, index, value):
        self._check_index(index)
        self._vals[index] = value

    def delete(self, index):
        self._check_index(index)
        removed = self._vals.pop(index)
        self._cap = _shrunk_capacity(self._cap, len(self._vals))
        return removed

    def __len__(self):
        return len(self._vals)

    def cap(self):
        return self._cap

    def range(self, fn):
        """Call ``fn(index, value)`` for each element until ``fn`` raises."""
        for index, value in enumerate(self._vals):
            fn(index, value)

    def to_list(self):
        return self._vals.copy()

    def __iter__(self) -> Iterator[T]:
        yield from self._vals.copy()