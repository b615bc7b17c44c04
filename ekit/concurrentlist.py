"""A thread-safe wrapper around any list."""

import threading
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from ekit.listtypes import List

Item = TypeVar("Item")


class ConcurrentList(List[Item]):
    """Guards every operation of the wrapped list with a lock."""

    def __init__(self, inner: List[Item]) -> None:
        self._inner = inner
        self._lock = threading.RLock()

    def _guard(self, operation: Callable[..., Any], *args: Any) -> Any:
        with self._lock:
            return operation(*args)

    def get(self, index):
        return self._guard(self._inner.get, index)

    def append(self, *args):
        self._guard(self._inner.append, *args)

    def add(self, index, value):
        self._guard(self._inner.add, index, value)

    def set(self, index, value):
        self._guard(self._inner.set, index, value)

    def delete(self, index):
        return self._guard(self._inner.delete, index)

    def __len__(self):
        return self._guard(len, self._inner)

    def cap(self):
        return self._guard(self._inner.cap)

    def range(self, fn):
        self._guard(self._inner.range, fn)

    def to_list(self):
        return self._guard(self._inner.to_list)

    def __iter__(self) -> Iterator[Item]:
        """Iterate over a snapshot taken under the lock."""
        return iter(self.to_list())