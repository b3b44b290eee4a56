"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One cell of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list supporting insertion at both ends."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Optional[Node]:
        """First node, or ``None`` when the list is empty."""
        return self._head

    def push_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        self._head = Node(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Content of the last element; raises IndexError when empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every element in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """New list holding ``func`` applied to every element."""
        return LinkedList(func(content) for content in self)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each one to ``delete`` first if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"