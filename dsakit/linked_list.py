"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Optional["Node"] = None


def build_nodes(values: Iterable[Any]) -> Optional[Node]:
    """Chain ``values`` into nodes in order and return the head, or None when empty."""
    head: Optional[Node] = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


class LinkedList:
    """Singly linked list with 1-based positional insertion and deletion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        items = list(values)
        self._head = build_nodes(items)
        self._size = len(items)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    def _node_before(self, position: int) -> Optional[Node]:
        """Return the node at ``position - 1`` (1-based), or None if the list is shorter."""
        node = self._head
        for _ in range(position - 2):
            if node is None:
                break
            node = node.next
        return node

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` at the front."""
        self._head = Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Put ``value`` at the end."""
        if self._head is None:
            self._head = Node(value)
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = Node(value)
        self._size += 1

    def insert_at_position(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at the 1-based ``position``."""
        if position <= 0:
            raise ValueError("Invalid position")
        if position == 1:
            self.insert_at_head(value)
            return
        previous = self._node_before(position)
        if previous is None:
            raise IndexError("Position out of range")
        previous.next = Node(value, previous.next)
        self._size += 1

    def delete_at_head(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("List is empty")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def delete_at_tail(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("List is empty")
        if self._head.next is None:
            return self.delete_at_head()
        node = self._head
        while node.next.next is not None:
            node = node.next
        removed = node.next
        node.next = None
        self._size -= 1
        return removed.value

    def delete_at_position(self, position: int) -> Any:
        """Remove and return the value at the 1-based ``position``."""
        if position <= 0:
            raise ValueError("Invalid position")
        if position == 1:
            return self.delete_at_head()
        previous = self._node_before(position)
        if previous is None or previous.next is None:
            raise IndexError("Position out of range")
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def delete_by_value(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self._head is None:
            raise IndexError("List is empty")
        if self._head.value == value:
            self.delete_at_head()
            return
        node = self._head
        while node.next is not None and node.next.value != value:
            node = node.next
        if node.next is None:
            raise ValueError("Value not found")
        node.next = node.next.next
        self._size -= 1

    def clear(self) -> None:
        """Remove every value."""
        self._head = None
        self._size = 0