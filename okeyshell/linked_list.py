"""A singly linked list of arbitrary objects.

Membership and removal go by identity, so two equal but distinct objects
are told apart.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One link: its content and the node after it."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list holding any objects."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: ListNode | None = None
        for item in items or ():
            self.append(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, content: Any) -> ListNode:
        """Add ``content`` at the end and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def prepend(self, content: Any) -> ListNode:
        """Add ``content`` at the front and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def last(self) -> ListNode | None:
        """The last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, destroy: Callable[[Any], None] | None = None) -> None:
        """Empty the list, handing each content to ``destroy`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if destroy is not None:
                destroy(node.content)
            node.next = None
            node = following

    def contains(self, content: Any) -> bool:
        """True when this very object is in the list."""
        return any(node.content is content for node in self._nodes())

    def remove(self, content: Any, destroy: Callable[[Any], None] | None = None) -> bool:
        """Unlink the first node holding this very object.

        ``destroy`` is called on the content when it is removed. Returns
        whether a node was removed.
        """
        previous = None
        for node in self._nodes():
            if node.content is content:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                node.next = None
                if destroy is not None:
                    destroy(node.content)
                return True
            previous = node
        return False

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list of ``func(content)`` for every content."""
        return LinkedList(func(content) for content in self)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"