"""Singly linked lists and the algorithms that work on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from values; an empty iterable gives None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def to_list(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in _nodes(self)]

    def __iter__(self) -> Iterator[int]:
        return (node.val for node in _nodes(self))

    def __repr__(self) -> str:
        return f"ListNode({self.to_list()!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
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
    return dummy.next


def merge_nodes(head: ListNode) -> Optional[ListNode]:
    """Replace each run of nodes between zeros by one node holding its sum."""
    if head is None:
        raise ValueError("list must start with a zero node")
    merged = head.next
    scan = merged
    while scan is not None:
        total = 0
        while scan.val != 0:
            total += scan.val
            scan = scan.next
            if scan is None:
                raise ValueError("list must end with a zero node")
        merged.val = total
        scan = scan.next
        merged.next = scan
        merged = merged.next
    return head.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways."""
    values = [node.val for node in _nodes(head)]
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove the given node, which must not be the tail, from its list."""
    if node.next is None:
        raise ValueError("cannot delete the last node of a list in place")
    node.val = node.next.val
    node.next = node.next.next


def remove_nodes(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop every node that has a strictly greater value somewhere after it."""
    kept: list[ListNode] = []
    for node in _nodes(head):
        while kept and kept[-1].val < node.val:
            kept.pop()
        kept.append(node)
    if not kept:
        return None
    for current, following in zip(kept, kept[1:]):
        current.next = following
    kept[-1].next = None
    return kept[0]


def double_it(head: Optional[ListNode]) -> Optional[ListNode]:
    """Double a number stored as a most-significant-first digit list."""
    previous: Optional[ListNode] = None
    for node in _nodes(head):
        doubled = node.val * 2
        if doubled < 10:
            node.val = doubled
        elif previous is not None:
            node.val = doubled % 10
            previous.val += 1
        else:
            head = ListNode(1, node)
            node.val = doubled % 10
        previous = node
    return head


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by k places."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0 or head is None or head.next is None:
        return head
    nodes = list(_nodes(head))
    length = len(nodes)
    k %= length
    if k == 0:
        return head
    new_tail = nodes[length - k - 1]
    new_head = nodes[length - k]
    nodes[-1].next = head
    new_tail.next = None
    return new_head