"""Binary tree and singly linked list node types."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def build_linked_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list from values; an empty input gives None."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def linked_list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    return [] if head is None else list(head)