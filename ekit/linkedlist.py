"""A doubly linked circular list with sentinel head and tail."""

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from ekit.listtypes import List

E = TypeVar("E")


class _Node(Generic[E]):
    __slots__ = ("prev", "next", "val")

    def __init__(self, val: Any = None) -> None:
        self.prev: "_Node[E]" = self
        self.next: "_Node[E]" = self
        self.val = val


class LinkedList(List[E]):
    """Doubly linked list; lookups walk from whichever end is closer."""

    def __init__(self) -> None:
        self._head: _Node[E] = _Node()
        self._tail: _Node[E] = _Node()
        self._head.next = self._head.prev = self._tail
        self._tail.next = self._tail.prev = self._head
        self._length = 0

    @classmethod
    def of(cls, values: Iterable[E] | None) -> "LinkedList[E]":
        """Build a linked list holding ``values`` in order."""
        result = cls()
        result.append(*(values or ()))
        return result

    def _find(self, index: int) -> _Node[E]:
        if index <= self._length // 2:
            cur = self._head.next
            for _ in range(index):
                cur = cur.next
        else:
            cur = self._tail.prev
            for _ in range(self._length - 1 - index):
                cur = cur.prev
        return cur

    def _node_at(self, index: int) -> _Node[E]:
        """Return the node at an existing position, raising when out of range."""
        self._check_index(index)
        return self._find(index)

    def _link_before(self, successor: _Node[E], value: E) -> None:
        node: _Node[E] = _Node(value)
        node.prev, node.next = successor.prev, successor
        successor.prev.next = node
        successor.prev = node
        self._length += 1

    def get(self, index):
        return self._node_at(index).val

    def append(self, *args):
        for value in args:
            self._link_before(self._tail, value)

    def add(self, index, value):
        self._check_index(index, allow_end=True)
        successor = self._tail if index == self._length else self._find(index)
        self._link_before(successor, value)

    def set(self, index, value):
        self._node_at(index).val = value

    def delete(self, index):
        node = self._node_at(index)
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        self._length -= 1
        return node.val

    def __len__(self):
        return self._length

    def cap(self):
        return len(self)

    def range(self, fn):
        """Walk the nodes front to back, passing position and value to ``fn``."""
        for pair in enumerate(self):
            fn(*pair)

    def to_list(self):
        return list(self)

    def __iter__(self) -> Iterator[E]:
        cur = self._head.next
        while cur is not self._tail:
            yield cur.val
            cur = cur.next