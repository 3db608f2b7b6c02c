"""A singly linked list with explicit nodes."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One list element: its content and the node that follows it."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list of Node objects."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the end and return its node."""
        node = Node(content)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        return node

    def copy(self) -> "LinkedList":
        """A new list with a shallow copy of every node's content."""
        return LinkedList(_copy.copy(content) for content in self)

    def for_each(self, func: Callable[[Node], Any]) -> None:
        """Call *func* on every node, front to back."""
        for node in self._nodes():
            func(node)

    def map(self, func: Callable[[Node], Node]) -> "LinkedList":
        """A new list of the nodes *func* returns for copies of this list's nodes."""
        result = LinkedList()
        tail: Optional[Node] = None
        for node in self.copy()._nodes():
            mapped = func(Node(node.content))
            if not isinstance(mapped, Node):
                raise TypeError(f"map function must return a Node, got {type(mapped).__name__}")
            mapped.next = None
            if tail is None:
                result.head = mapped
            else:
                tail.next = mapped
            tail = mapped
        return result

    def pop_front(self, release: Optional[Callable[[Any], Any]] = None) -> Any:
        """Remove the first node, pass its content to *release*, and return it."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if release is not None:
            release(node.content)
        return node.content

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to *release* in order."""
        while self.head is not None:
            self.pop_front(release)

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())