"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "LinkedList"]


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that can grow at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @property
    def head(self) -> Node | None:
        """The first node, or None for an empty list."""
        return self._head

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        return self._tail

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing each content to *delete* first, front to back."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call *func* with each content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding *func* applied to each content."""
        return LinkedList(func(content) for content in self)