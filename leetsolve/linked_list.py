"""Singly linked lists of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """One node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None if there are none."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``, in order."""
    return [] if head is None else list(head)


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder the list in place as first, last, second, second to last, and so on.

    Raises ValueError if the list is empty.
    """
    if head is None:
        raise ValueError("cannot reorder an empty list")

    rest: deque[ListNode] = deque()
    node = head.next
    while node is not None:
        following = node.next
        node.next = None
        rest.append(node)
        node = following

    tail = head
    take_front = False
    while rest:
        tail.next = rest.popleft() if take_front else rest.pop()
        tail = tail.next
        take_front = not take_front