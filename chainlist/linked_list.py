"""A doubly linked list whose removed elements can be handed to a destructor."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any, Optional

Destructor = Optional[Callable[[Any], Any]]


def _matches(stored: Any, wanted: Any) -> bool:
    return stored is wanted or stored == wanted


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    data: Any
    prev: Node | None = field(default=None, repr=False)
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list.

    When an element leaves the list through removal, clearing or
    :meth:`replace`, the ``destructor`` (if any) is called with it.
    """

    def __init__(self, destructor: Destructor = None) -> None:
        self.destructor: Destructor = destructor
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0

    # -- internals -------------------------------------------------------

    def _destroy(self, data: Any) -> None:
        if self.destructor is not None:
            self.destructor(data)

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        if index <= self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _unlink(self, node: Node) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        node.prev = node.next = None
        self._size -= 1

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    # -- structure access ------------------------------------------------

    @property
    def head(self) -> Node | None:
        """First node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> Node | None:
        """Last node, or None when the list is empty."""
        return self._tail

    # -- adding ----------------------------------------------------------

    def append(self, data: Any) -> None:
        """Add ``data`` at the end of the list."""
        node = Node(data, prev=self._tail)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def insert(self, index: int, data: Any) -> None:
        """Insert ``data`` before position ``index`` (``index == len`` appends)."""
        if index == self._size:
            self.append(data)
            return
        at = self._node_at(index)
        node = Node(data, prev=at.prev, next=at)
        if at.prev is not None:
            at.prev.next = node
        else:
            self._head = node
        at.prev = node
        self._size += 1

    # -- removing --------------------------------------------------------

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index`` and pass it to the destructor."""
        node = self._node_at(index)
        self._unlink(node)
        self._destroy(node.data)

    def remove(self, data: Any) -> None:
        """Remove the first occurrence of ``data``; do nothing if absent."""
        for node in self._nodes():
            if _matches(node.data, data):
                self._unlink(node)
                self._destroy(node.data)
                return

    def remove_all(self, data: Any) -> None:
        """Remove every occurrence of ``data``."""
        for node in self._nodes():
            if _matches(node.data, data):
                self._unlink(node)
                self._destroy(node.data)

    def remove_range(self, start: int, stop: int) -> None:
        """Remove elements from ``start`` inclusive to ``stop`` exclusive."""
        if start > stop:
            raise ValueError(f"start {start} is greater than stop {stop}")
        if not 0 <= stop <= self._size:
            raise IndexError(f"stop {stop} out of range for size {self._size}")
        if start == 0 and stop == self._size:
            self.clear()
            return
        node = self._node_at(start)
        before = node.prev
        for _ in range(stop - start):
            doomed = node
            node = node.next
            doomed.prev = doomed.next = None
            self._destroy(doomed.data)
            self._size -= 1
        if before is not None:
            before.next = node
        else:
            self._head = node
        if node is not None:
            node.prev = before
        else:
            self._tail = before

    def clear(self) -> None:
        """Remove every element, last to first."""
        node = self._tail
        while node is not None:
            previous = node.prev
            node.prev = node.next = None
            self._destroy(node.data)
            node = previous
        self._head = self._tail = None
        self._size = 0

    def sub_list(self, start: int, stop: int) -> None:
        """Keep only the elements from ``start`` through ``stop``."""
        if start > stop:
            raise ValueError(f"start {start} is greater than stop {stop}")
        if not 0 <= start <= self._size:
            raise IndexError(f"start {start} out of range for size {self._size}")
        if not 0 <= stop <= self._size:
            raise IndexError(f"stop {stop} out of range for size {self._size}")
        with suppress(IndexError, ValueError):
            self.remove_range(stop + 1, self._size)
        self.remove_range(0, start)

    # -- reordering and updating -----------------------------------------

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        front, back = self._head, self._tail
        for _ in range(self._size // 2):
            front.data, back.data = back.data, front.data
            front, back = front.next, back.prev

    def set(self, index: int, data: Any) -> None:
        """Store ``data`` at ``index`` without destroying the old element."""
        self._node_at(index).data = data

    def replace(self, index: int, data: Any) -> None:
        """Store ``data`` at ``index`` and destroy the old element."""
        node = self._node_at(index)
        self._destroy(node.data)
        node.data = data

    def __setitem__(self, index: int, data: Any) -> None:
        self.set(index, data)

    # -- queries ---------------------------------------------------------

    def get(self, index: int) -> Any:
        """Return the element at ``index``, or None when out of range."""
        try:
            return self._node_at(index).data
        except IndexError:
            return None

    def __getitem__(self, index: int) -> Any:
        return self._node_at(index).data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __contains__(self, data: Any) -> bool:
        return any(_matches(item, data) for item in self)

    def count(self, data: Any) -> int:
        """Number of occurrences of ``data``."""
        return sum(1 for item in self if _matches(item, data))

    def index(self, data: Any) -> int:
        """Position of the first occurrence of ``data``; ValueError if absent."""
        for position, item in enumerate(self):
            if _matches(item, data):
                return position
        raise ValueError(f"{data!r} is not in list")

    def last_index(self, data: Any) -> int:
        """Position of the last occurrence of ``data``; ValueError if absent."""
        for offset, item in enumerate(reversed(self)):
            if _matches(item, data):
                return self._size - 1 - offset
        raise ValueError(f"{data!r} is not in list")

    def is_empty(self) -> bool:
        """True when the list holds no elements."""
        return self._size == 0

    def copy(self) -> LinkedList:
        """New list with the same elements and the same destructor."""
        clone = LinkedList(self.destructor)
        for item in self:
            clone.append(item)
        return clone

    def to_list(self) -> list[Any]:
        """Elements from first to last as a Python list."""
        return list(self)

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"