"""The list interface shared by every list in the package."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class IndexOutOfRangeError(IndexError):
    """Raised when an index falls outside the bounds of a list."""

    def __init__(self, length: int, index: int) -> None:
        super().__init__(f"ekit: 下标超出范围，长度 {length}, 下标 {index}")
        self.length = length
        self.index = index


class List(ABC, Generic[T]):
    """An indexable sequence; negative indices are rejected, not wrapped."""

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the element at ``index``."""

    @abstractmethod
    def append(self, *args: T) -> None:
        """Append the given elements at the end."""

    @abstractmethod
    def add(self, index: int, value: T) -> None:
        """Insert ``value`` at ``index``; ``index == len`` appends."""

    @abstractmethod
    def set(self, index: int, value: T) -> None:
        """Replace the element at ``index``."""

    @abstractmethod
    def delete(self, index: int) -> T:
        """Remove the element at ``index`` and return it."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of elements."""

    @abstractmethod
    def cap(self) -> int:
        """Return the capacity."""

    @abstractmethod
    def to_list(self) -> list[T]:
        """Return the elements as a new Python list."""

    def range(self, fn: Callable[[int, T], Any]) -> None:
        """Call ``fn(index, value)`` for each element; an exception stops the walk."""
        for index, value in enumerate(self):
            fn(index, value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def _check_index(self, index: int, allow_end: bool = False) -> None:
        """Raise unless ``index`` addresses an element (or the end, if allowed)."""
        length = len(self)
        limit = length + 1 if allow_end else length
        if not 0 <= index < limit:
            raise IndexOutOfRangeError(length, index)