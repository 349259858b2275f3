"""Singly and doubly linked circular lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    next: _DoubleNode | None = None
    prev: _DoubleNode | None = None


class CircularLinkedList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = _Node(value)
        if self._head is None:
            node.next = node
            self._head = node
        else:
            node.next = self._head
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        if node is None:
            return
        while True:
            yield node.value
            node = node.next
            if node is self._head:
                break

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "  ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyCircularLinkedList:
    """A doubly linked list closed into a ring in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` just before the head."""
        node = _DoubleNode(value)
        if self._head is None:
            node.next = node.prev = node
            self._head = node
        else:
            tail = self._head.prev
            tail.next = node
            node.prev = tail
            node.next = self._head
            self._head.prev = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        if node is None:
            return
        while True:
            yield node.value
            node = node.next
            if node is self._head:
                break

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return
        last = self._head.prev
        node = last
        while True:
            yield node.value
            node = node.prev
            if node is last:
                break

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"