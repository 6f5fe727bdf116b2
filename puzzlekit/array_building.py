"""Puzzles that build, rearrange or transform sequences and grids."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, islice, pairwise

from puzzlekit.nodes import TreeNode


def group_the_people(group_sizes: Sequence[int]) -> list[list[int]]:
    """Greedily gather people into groups of the size each one asks for."""
    taken: set[int] = set()
    groups: list[list[int]] = []
    for person, size in enumerate(group_sizes):
        if person in taken:
            continue
        candidates = (
            other
            for other in range(person + 1, len(group_sizes))
            if group_sizes[other] == size and other not in taken
        )
        group = [person, *islice(candidates, max(size - 1, 0))]
        taken.update(group)
        groups.append(group)
    return groups


def shuffle(nums: Sequence[int], n: int) -> list[int]:
    """Interleave the first n values with the next n values."""
    halves = zip(nums[:n], nums[n:2 * n], strict=True)
    return [value for pair in halves for value in pair]


class SubrectangleQueries:
    """A grid that supports filling rectangles and reading single cells."""

    def __init__(self, rectangle: Sequence[Sequence[int]]) -> None:
        self._rectangle = [list(row) for row in rectangle]

    def update_subrectangle(
        self, row1: int, col1: int, row2: int, col2: int, new_value: int
    ) -> None:
        """Set every cell between the two corners, inclusive, to new_value."""
        for row in self._rectangle[row1:row2 + 1]:
            row[col1:col2 + 1] = [new_value] * len(row[col1:col2 + 1])

    def get_value(self, row: int, col: int) -> int:
        """Return the value held in one cell."""
        return self._rectangle[row][col]


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the prefix sums of nums."""
    return list(accumulate(nums))


def decode(encoded: Sequence[int], first: int) -> list[int]:
    """Rebuild an array from its first value and the xor of neighbouring pairs."""
    return list(accumulate(encoded, operator.xor, initial=first))


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For shrinking prefixes, the value below 2**maximum_bit maximising the xor."""
    mask = (1 << maximum_bit) - 1
    return [prefix ^ mask for prefix in accumulate(nums, operator.xor)][::-1]


def build_array(nums: Sequence[int]) -> list[int]:
    """Return nums composed with itself: result[i] = nums[nums[i]]."""
    return [nums[value] for value in nums]


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return nums followed by itself."""
    return [*nums, *nums]


def pivot_array(nums: Sequence[int], pivot: int) -> list[int]:
    """Stable partition into values below, equal to and above pivot."""
    return [
        *(value for value in nums if value < pivot),
        *(value for value in nums if value == pivot),
        *(value for value in nums if value > pivot),
    ]


def largest_local(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the maximum of every 3x3 window of a square grid."""
    size = len(grid) - 2
    return [
        [
            max((0, *(grid[r][c] for r in range(top, top + 3) for c in range(left, left + 3))))
            for left in range(size)
        ]
        for top in range(size)
    ]


def find_array(pref: Sequence[int]) -> list[int]:
    """Recover an array from its prefix xors."""
    if not pref:
        return []
    return [pref[0], *(earlier ^ later for earlier, later in pairwise(pref))]


def sort_the_students(score: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Sort the score rows by column k, highest first."""
    return sorted((list(row) for row in score), key=lambda row: row[k], reverse=True)


def left_right_difference(nums: Sequence[int]) -> list[int]:
    """For each index, the absolute difference of the sums left and right of it."""
    total = sum(nums)
    left = 0
    answer = []
    for value in nums:
        answer.append(abs(left - (total - left - value)))
        left += value
    return answer


def find_matrix(nums: Sequence[int]) -> list[list[int]]:
    """Split nums into the fewest rows of distinct values, keeping input order."""
    seen: Counter[int] = Counter()
    rows: list[list[int]] = []
    for value in nums:
        row = seen[value]
        seen[value] += 1
        if row == len(rows):
            rows.append([])
        rows[row].append(value)
    return rows


def find_the_prefix_common_array(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each prefix length, count values present in both permutations' prefixes."""
    seen_a: set[int] = set()
    seen_b: set[int] = set()
    common = 0
    answer = []
    for x, y in zip(a, b, strict=True):
        if x == y:
            common += 1
        else:
            common += (x in seen_b) + (y in seen_a)
        seen_a.add(x)
        seen_b.add(y)
        answer.append(common)
    return answer


def find_words_containing(words: Sequence[str], x: str) -> list[int]:
    """Return the indices of the words that contain the character x."""
    return [index for index, word in enumerate(words) if x in word]


def get_final_state(nums: Sequence[int], k: int, multiplier: int) -> list[int]:
    """Multiply the first smallest value by multiplier, k times over."""
    values = list(nums)
    for _ in range(k):
        index = values.index(min(values))
        values[index] *= multiplier
    return values


def get_sneaky_numbers(nums: Sequence[int]) -> list[int]:
    """Return the values seen twice, in the order their second copy appears."""
    seen: Counter[int] = Counter()
    repeated = []
    for value in nums:
        seen[value] += 1
        if seen[value] == 2:
            repeated.append(value)
    return repeated


def transform_array(nums: Sequence[int]) -> list[int]:
    """Replace even values with 0 and odd values with 1, then sort."""
    return sorted(0 if value % 2 == 0 else 1 for value in nums)


def construct_maximum_binary_tree(nums: Sequence[int]) -> TreeNode | None:
    """Build the tree rooted at the maximum with the sides built the same way."""
    if not nums:
        return None
    top = max(nums)
    index = list(nums).index(top)
    return TreeNode(
        top,
        construct_maximum_binary_tree(nums[:index]),
        construct_maximum_binary_tree(nums[index + 1:]),
    )