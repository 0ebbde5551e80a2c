"""A singly linked list whose nodes hold arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of the list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list of contents, with head insertion and tail appending."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert content at the head and return its new node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the tail and return its new node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The last node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call f on the content of every node, head to tail."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """New list of f(content) for each node.

        If f yields None for any content, every content produced so far is
        passed to delete and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = f(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            result.push_back(mapped)
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each content to delete when it is given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def remove_first(self, delete: Callable[[Any], Any] | None = None) -> Any:
        """Unlink the head node, pass its content to delete and return it."""
        node = self.head
        if node is None:
            raise IndexError("remove from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"