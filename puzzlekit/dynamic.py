"""Dynamic programming and recursive generation puzzles."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache
from itertools import pairwise

from puzzlekit.nodes import TreeNode


def climb_stairs(n: int) -> int:
    """Count the ways to climb n stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError("number of stairs must not be negative")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


def generate_pascal(num_rows: int) -> list[list[int]]:
    """Return the first num_rows rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for size in range(1, num_rows + 1):
        if rows:
            above = rows[-1]
            row = [1, *(a + b for a, b in pairwise(above)), 1] if size > 1 else [1]
        else:
            row = [1]
        rows.append(row)
    return rows


def get_row(row_index: int) -> list[int]:
    """Return row row_index (counted from zero) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError("row index must not be negative")
    row = [1]
    for _ in range(row_index):
        row = [1, *(a + b for a, b in pairwise(row)), 1]
    return row


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell, or zero."""
    if not prices:
        return 0
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to n."""
    counts = [0] * (n + 1)
    for value in range(1, n + 1):
        counts[value] = counts[value & (value - 1)] + 1
    return counts


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; values below two are returned as is."""
    if n < 2:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step zero or one."""
    if len(cost) < 2:
        raise ValueError("at least two steps are required")
    after_next, following = cost[-1], cost[-2]
    for price in reversed(cost[:-2]):
        after_next, following = following, price + min(following, after_next)
    return min(following, after_next)


def divisor_game(n: int) -> bool:
    """Tell whether the first player wins the divisor game starting at n."""
    return n % 2 == 0


def tribonacci(n: int) -> int:
    """Return the n-th Tribonacci number; values below two are returned as is."""
    if n <= 1:
        return n
    a, b, c = 0, 1, 1
    for _ in range(2, n):
        a, b, c = b, c, a + b + c
    return c


def max_repeating(sequence: str, word: str) -> int:
    """Largest k such that word repeated k times occurs in sequence."""
    if not word:
        return 0
    count = 0
    while word * (count + 1) in sequence:
        count += 1
    return count


def get_longest_subsequence(words: Sequence[str], groups: Sequence[int]) -> list[str]:
    """Longest run of words whose neighbouring groups differ, from start 0 or 1."""
    n = len(groups)
    if n < 2:
        return list(words)
    best: list[int] = []
    for start in (0, 1):
        chosen = [start]
        for index in range(start, n):
            if groups[chosen[-1]] != groups[index]:
                chosen.append(index)
        if len(chosen) > len(best):
            best = chosen
    return [words[index] for index in best]


def generate_parenthesis(n: int) -> list[str]:
    """All balanced strings of n pairs of parentheses, in lexicographic order."""
    results: list[str] = []

    def extend(current: str, opened: int, closed: int) -> None:
        if len(current) == 2 * n:
            results.append(current)
            return
        if opened < n:
            extend(current + "(", opened + 1, closed)
        if closed < opened:
            extend(current + ")", opened, closed + 1)

    extend("", 0, 0)
    return results


def _square_sides(matrix: Sequence[Sequence[object]], filled: object):
    """Yield, cell by cell, the side of the largest filled square ending there."""
    above: list[int] = []
    for row in matrix:
        current: list[int] = []
        for col, cell in enumerate(row):
            if cell != filled:
                side = 0
            elif not above or col == 0:
                side = 1
            else:
                side = 1 + min(above[col], current[col - 1], above[col - 1])
            current.append(side)
            yield side
        above = current


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest square made only of '1' cells."""
    side = max(_square_sides(matrix, "1"), default=0)
    return side * side


@cache
def _full_binary_trees(n: int) -> tuple[TreeNode, ...]:
    if n % 2 == 0:
        return ()
    if n == 1:
        return (TreeNode(0),)
    return tuple(
        TreeNode(0, left, right)
        for size in range(1, n - 1, 2)
        for left in _full_binary_trees(size)
        for right in _full_binary_trees(n - 1 - size)
    )


def all_possible_fbt(n: int) -> list[TreeNode]:
    """All full binary trees with n nodes, each value zero; subtrees may be shared."""
    return list(_full_binary_trees(n))


def count_squares(matrix: Sequence[Sequence[int]]) -> int:
    """Count the square submatrices made only of ones."""
    return sum(_square_sides(matrix, 1))


def count_vowel_strings(n: int) -> int:
    """Count strings of n vowels whose letters are in alphabetical order."""
    if n < 0:
        raise ValueError("length must not be negative")

    @cache
    def count(remaining: int, last: str) -> int:
        if remaining == 0:
            return 1
        return sum(count(remaining - 1, vowel) for vowel in "aeiou" if last <= vowel)

    return count(n, "a")