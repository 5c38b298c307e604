"""Singly linked lists and the classic algorithms that operate on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of an acyclic linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def detect_cycle(head: ListNode | None) -> ListNode | None:
    """Return the node where a cycle begins, or None if the list is acyclic."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None

    fast = head
    while fast is not slow:
        fast = fast.next
        slow = slow.next
    return fast


def reorder_list(head: ListNode | None) -> None:
    """Reorder L0→L1→…→Ln into L0→Ln→L1→Ln-1→… in place."""
    nodes = []
    node = head
    while node is not None:
        nodes.append(node)
        node = node.next
    if len(nodes) <= 2:
        return

    current = head
    for _ in range(len(nodes) // 2):
        following = current.next
        current.next = nodes.pop()
        current = current.next
        current.next = following
        current = following
    current.next = None


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by two lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the n-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError(f"list is shorter than {n} nodes")
        fast = fast.next
    if fast is None:
        return head.next

    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a list in place and return the new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def _middle_for_palindrome(head: ListNode) -> ListNode:
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def is_palindrome_list(head: ListNode | None) -> bool:
    """Tell whether the list's values read the same in both directions.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    middle = _middle_for_palindrome(head)
    reversed_half = reverse_list(middle)
    try:
        left, right = head, reversed_half
        while left is not None and right is not None:
            if left.val != right.val:
                return False
            left = left.next
            right = right.next
        return True
    finally:
        reverse_list(reversed_half)


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    previous = dummy
    while previous.next is not None and previous.next.next is not None:
        first = previous.next
        second = first.next
        first.next = second.next
        second.next = first
        previous.next = second
        previous = first
    return dummy.next


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Group nodes at odd positions before those at even positions."""
    if head is None or head.next is None or head.next.next is None:
        return head
    odd = head
    even = even_start = head.next
    while odd.next is not None and even.next is not None:
        odd.next = even.next
        even.next = odd.next.next
        odd = odd.next
        even = even.next
    odd.next = even_start
    return head


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop every value that occurs more than once in a sorted list."""
    dummy = ListNode(0, head)
    previous = dummy
    node = head
    while node is not None:
        if node.next is not None and node.next.val == node.val:
            duplicate = node.val
            while node is not None and node.val == duplicate:
                node = node.next
            previous.next = node
        else:
            previous = node
            node = node.next
    return dummy.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; the second of two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow