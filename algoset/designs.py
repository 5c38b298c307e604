"""Small container designs: stacks, a map, a linked list and a calendar."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from algoset.linkedlist import ListNode


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        self._items.append(val)
        if not self._minima or val <= self._minima[-1]:
            self._minima.append(val)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        val = self._items.pop()
        if val == self._minima[-1]:
            self._minima.pop()
        return val

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._minima:
            raise IndexError("minimum of an empty stack")
        return self._minima[-1]


class QueueStack:
    """A last-in first-out stack kept in a single queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: int) -> None:
        """Push ``x``; the queue is rotated so that ``x`` sits at its front."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._queue


class IntHashMap:
    """A map from integer keys to integer values; missing keys read as -1."""

    MISSING = -1

    def __init__(self) -> None:
        self._data: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        self._data[key] = value

    def get(self, key: int) -> int:
        """Return the value stored under ``key``, or -1 if there is none."""
        return self._data.get(key, self.MISSING)

    def remove(self, key: int) -> None:
        """Forget ``key`` if it is present."""
        self._data.pop(key, None)


class SinglyLinkedList:
    """An index-addressed singly linked list.

    Reads outside the list return -1; insertions and deletions at
    positions outside it are ignored.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._dummy = ListNode()
        self._tail = self._dummy
        self._size = 0
        for value in values:
            self.add_at_tail(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._dummy.next
        for _ in range(self._size):
            yield node.val
            node = node.next

    def _node_before(self, index: int) -> ListNode:
        node = self._dummy
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> int:
        """Return the value at ``index``, or -1 if there is no such node."""
        if not 0 <= index < self._size:
            return -1
        return self._node_before(index).next.val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first node."""
        self.add_at_index(0, val)

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last node."""
        self.add_at_index(self._size, val)

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            return
        previous = self._tail if index == self._size else self._node_before(index)
        node = ListNode(val, previous.next)
        previous.next = node
        if previous is self._tail:
            self._tail = node
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the node at ``index`` if it exists."""
        if not 0 <= index < self._size:
            return
        previous = self._node_before(index)
        removed = previous.next
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1


class Calendar:
    """A calendar that accepts half-open bookings [start, end) without overlap."""

    def __init__(self) -> None:
        self._bookings: list[tuple[int, int]] = []

    def book(self, start: int, end: int) -> bool:
        """Book [start, end) unless it overlaps an earlier booking."""
        if any(max(s, start) < min(e, end) for s, e in self._bookings):
            return False
        self._bookings.append((start, end))
        return True