"""Singly linked lists and the classic problems built on them."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import count
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


@dataclass(eq=False, repr=False)
class RandomNode:
    """A list node that also carries a pointer to an arbitrary node of its list."""

    val: int = 0
    next: Optional[RandomNode] = None
    random: Optional[RandomNode] = None

    def __repr__(self) -> str:
        return f"RandomNode({self.val!r})"


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding values in order; None for no values."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    return [node.val for node in _iter_nodes(head)]


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous = None
    while head is not None:
        following = head.next
        head.next = previous
        previous = head
        head = following
    return previous


def _merge_runs(
    first: Optional[ListNode], second: Optional[ListNode]
) -> tuple[Optional[ListNode], Optional[ListNode]]:
    """Splice two sorted lists into one, stably; return its head and tail."""
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    while tail.next is not None:
        tail = tail.next
    return dummy.next, (tail if tail is not dummy else None)


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two ascending lists by relinking their nodes."""
    return _merge_runs(list1, list2)[0]


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of decimal digits, least significant first."""
    if l1 is not None and l1.val == 0 and l1.next is None:
        return l2
    if l2 is not None and l2.val == 0 and l2.next is None:
        return l1
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


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Put nodes below x before the others, keeping relative order in each part."""
    small = ListNode()
    large = ListNode()
    small_tail, large_tail = small, large
    for node in list(_iter_nodes(head)):
        if node.val >= x:
            large_tail.next = node
            large_tail = node
        else:
            small_tail.next = node
            small_tail = node
    small_tail.next = large.next
    large_tail.next = None
    return small.next


def copy_random_list(head: Optional[RandomNode]) -> Optional[RandomNode]:
    """Return a deep copy of a list whose nodes carry random pointers."""
    copies: dict[int, RandomNode] = {}
    node = head
    while node is not None:
        copies[id(node)] = RandomNode(node.val)
        node = node.next
    node = head
    while node is not None:
        clone = copies[id(node)]
        clone.next = copies[id(node.next)] if node.next is not None else None
        clone.random = copies[id(node.random)] if node.random is not None else None
        node = node.next
    return copies[id(head)] if head is not None else None


def intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by two lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    nodes_a = list(_iter_nodes(head_a))
    nodes_b = list(_iter_nodes(head_b))
    if nodes_a[-1] is not nodes_b[-1]:
        return None
    longer, shorter = (nodes_a, nodes_b) if len(nodes_a) >= len(nodes_b) else (nodes_b, nodes_a)
    first, second = longer[len(longer) - len(shorter)], shorter[0]
    while first is not second:
        first, second = first.next, second.next
    return first


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None for an acyclic list."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            entry = head
            while entry is not slow:
                entry = entry.next
                slow = slow.next
            return entry
    return None


def is_palindrome(head: Optional[ListNode]) -> bool:
    """True if the list reads the same forwards and backwards."""
    values = list_values(head)
    return values == values[::-1]


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full run of k nodes in place; a short tail stays as it is."""
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        first = group_prev.next
        previous, current = group_next, first
        while current is not group_next:
            following = current.next
            current.next = previous
            previous = current
            current = following
        group_prev.next = kth
        group_prev = first


def _split(node: Optional[ListNode], size: int) -> Optional[ListNode]:
    """Cut the list after size nodes and return what follows."""
    for _ in range(size - 1):
        if node is None:
            return None
        node = node.next
    if node is None:
        return None
    rest = node.next
    node.next = None
    return rest


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort the list stably with bottom-up merge sort, using no extra nodes."""
    length = sum(1 for _ in _iter_nodes(head))
    dummy = ListNode(0, head)
    step = 1
    while step < length:
        tail = dummy
        current = dummy.next
        while current is not None:
            left = current
            right = _split(left, step)
            current = _split(right, step)
            merged_head, merged_tail = _merge_runs(left, right)
            tail.next = merged_head
            tail = merged_tail
        step *= 2
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of ascending lists using a min-heap of their heads."""
    order = count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)
    dummy = ListNode()
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    return dummy.next