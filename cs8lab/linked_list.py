"""A doubly linked list with node-level insertion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class ListNode(Generic[T]):
    """One link of a :class:`LinkedList`."""

    data: T
    next: Optional[ListNode[T]] = field(default=None, repr=False)
    prev: Optional[ListNode[T]] = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """Doubly linked list with head and tail access.

    Items given to the constructor are each pushed to the front, so the
    list holds them in reverse order.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[ListNode[T]] = None
        self.tail: Optional[ListNode[T]] = None
        self._size = 0
        for item in items:
            self.push_front(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for node in self.nodes():
            yield node.data

    def __reversed__(self) -> Iterator[T]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __str__(self) -> str:
        return "".join(f"{item} " for item in self)

    def __iadd__(self, data: T) -> LinkedList[T]:
        self.push_back(data)
        return self

    def __copy__(self) -> LinkedList[T]:
        duplicate: LinkedList[T] = LinkedList()
        for item in self:
            duplicate.push_back(item)
        return duplicate

    def nodes(self) -> Iterator[ListNode[T]]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def empty(self) -> bool:
        """True when the list holds no nodes."""
        return self.head is None

    def push_front(self, data: T) -> None:
        """Insert ``data`` before the head."""
        node = ListNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def push_back(self, data: T) -> None:
        """Insert ``data`` after the tail."""
        node = ListNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def pop_front(self) -> None:
        """Remove the head node; does nothing on an empty list."""
        if self.head is None:
            return
        if self.head is self.tail:
            self.head = self.tail = None
        else:
            self.head = self.head.next
            self.head.prev = None
        self._size -= 1

    def pop_back(self) -> None:
        """Remove the tail node; does nothing on an empty list."""
        if self.tail is None:
            return
        if self.head is self.tail:
            self.head = self.tail = None
        else:
            self.tail = self.tail.prev
            self.tail.next = None
        self._size -= 1

    def front(self) -> T:
        """Data in the head node."""
        if self.head is None:
            raise IndexError("front of an empty list")
        return self.head.data

    def back(self) -> T:
        """Data in the tail node."""
        if self.tail is None:
            raise IndexError("back of an empty list")
        return self.tail.data

    def insert_before(self, node: ListNode[T], data: T) -> None:
        """Insert ``data`` immediately before ``node``."""
        if node is self.head:
            self.push_front(data)
            return
        previous = node.prev
        new_node = ListNode(data, next=node, prev=previous)
        previous.next = new_node
        node.prev = new_node
        self._size += 1

    def insert_after(self, node: ListNode[T], data: T) -> None:
        """Insert ``data`` immediately after ``node``."""
        if node is self.tail:
            self.push_back(data)
            return
        following = node.next
        new_node = ListNode(data, next=following, prev=node)
        node.next = new_node
        following.prev = new_node
        self._size += 1

    def find(self, data: Any) -> Optional[ListNode[T]]:
        """Return the first node whose data equals ``data``, or None."""
        return next((node for node in self.nodes() if node.data == data), None)

    def remove(self, data: Any) -> None:
        """Unlink the first node whose data equals ``data``, if there is one."""
        node = self.find(data)
        if node is None:
            return
        previous, following = node.prev, node.next
        if previous is None:
            self.head = following
        else:
            previous.next = following
        if following is None:
            self.tail = previous
        else:
            following.prev = previous
        node.next = node.prev = None
        self._size -= 1

    def clear(self) -> None:
        """Remove every node."""
        self.head = self.tail = None
        self._size = 0