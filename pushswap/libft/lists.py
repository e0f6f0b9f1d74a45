"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(slots=True)
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps track of its head, tail and length."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the front of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def pop_front(self, deleter: Deleter = None) -> Any:
        """Remove the first element, pass its content to ``deleter`` and return it.

        Raises IndexError when the list is empty.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if deleter is not None:
            deleter(node.content)
        return node.content

    def clear(self, deleter: Deleter = None) -> None:
        """Remove every element, passing each content to ``deleter`` in order."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            node.next = None
            if deleter is not None:
                deleter(node.content)
            node = following

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of each element, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], deleter: Deleter = None) -> "LinkedList":
        """Return a new list holding ``func(content)`` for each element.

        If ``func`` raises, the contents produced so far are passed to
        ``deleter`` and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(deleter)
            raise
        return result