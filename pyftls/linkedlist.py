"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every element, front to back."""
        for node in self._nodes():
            func(node.content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``func`` applied to every element.

        If ``func`` raises, the exception propagates and no list is returned.
        """
        return LinkedList(func(content) for content in self)

    def clear(self, dispose: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element, passing each to ``dispose`` first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if dispose is not None:
                dispose(node.content)
            node.next = None
            self.head = following
            node = following