"""Arithmetic puzzles."""

from __future__ import annotations

from collections.abc import Iterator
from math import gcd

from puzzlekit.nodes import ListNode


def min_operations_array(n: int) -> int:
    """Moves to make the array [1, 3, 5, ...] of length n all equal."""
    return n * n // 4


def _digits(n: int, base: int) -> Iterator[int]:
    """Yield the digits of a non-negative n in the given base, least significant first."""
    if n == 0:
        yield 0
        return
    while n:
        n, digit = divmod(n, base)
        yield digit


def _is_palindrome_in_base(n: int, base: int) -> bool:
    digits = list(_digits(n, base))
    return digits == digits[::-1]


def is_strictly_palindromic(n: int) -> bool:
    """Whether n is a palindrome in every base from 2 to n - 2.

    No n has this property: in base n - 2 every n >= 4 is written "12",
    and smaller n have no bases to check.
    """
    bases = range(2, n - 1)
    return bool(bases) and all(_is_palindrome_in_base(n, base) for base in bases)


def insert_greatest_common_divisors(head: ListNode | None) -> ListNode:
    """Insert between each pair of neighbouring nodes a node holding their gcd."""
    if head is None:
        raise ValueError("the list must not be empty")
    node = head
    while node.next is not None:
        following = node.next
        node.next = ListNode(gcd(node.val, following.val), following)
        node = following
    return head