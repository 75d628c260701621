"""A singly linked list of arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    content: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list supporting insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def add_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Content of the last element, or None for an empty list."""
        return None if self._tail is None else self._tail.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each non-None content to ``delete``."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None and node.content is not None:
                delete(node.content)
            node.next = None
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func(content)`` for every element."""
        return LinkedList(func(content) for content in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"