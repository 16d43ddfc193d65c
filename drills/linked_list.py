"""Singly linked lists: merging sorted lists and reversing in groups."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> ListNode | None:
        """Build a list holding ``values`` in order; an empty input gives None."""
        dummy = cls(0)
        tail = dummy
        for value in values:
            tail.next = cls(value)
            tail = tail.next
        return dummy.next

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def to_list(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def merge_k_lists(lists: Iterable[ListNode | None]) -> ListNode | None:
    """Merge sorted lists into one sorted list, relinking the existing nodes."""
    heap = [(node.val, index, node) for index, node in enumerate(lists) if node is not None]
    heapq.heapify(heap)

    dummy = ListNode(0)
    tail = dummy
    while heap:
        _, index, node = heapq.heappop(heap)
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, index, node.next))
            node.next = None
        tail.next = node
        tail = node
    return dummy.next


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each run of ``k`` nodes; a shorter tail is left as it is."""
    if k < 2:
        return head

    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: ListNode | None = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next

        group_next = kth.next
        previous, current = group_next, group_prev.next
        first = current
        for _ in range(k):
            following = current.next
            current.next = previous
            previous, current = current, following

        group_prev.next = previous
        group_prev = first