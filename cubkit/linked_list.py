"""A singly linked list that holds arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
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

    def push_front(self, content: Any) -> None:
        """Insert *content* at the front of the list."""
        self._head = _Node(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append *content* at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Content of the last element; IndexError if the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each content to *delete* in order."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call *func* on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Return a new list of ``func(content)`` for each element.

        If *func* raises, the contents already produced are passed to
        *delete* and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result