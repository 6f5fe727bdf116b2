"""Counting and aggregate puzzles over sequences and grids."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate, compress, pairwise, product


def _subsets(nums: Sequence[int]):
    """Yield every subset of nums, the empty one included."""
    for mask in product((False, True), repeat=len(nums)):
        yield list(compress(nums, mask))


def smaller_numbers_than_current(nums: Sequence[int]) -> list[int]:
    """For each value, count how many values in nums are strictly smaller."""
    return [sum(other < value for other in nums) for value in nums]


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """Tell which kids would hold the most candies if given all the extras."""
    most = max((0, *candies))
    return [count + extra_candies >= most for count in candies]


def count_triplets(arr: Sequence[int]) -> int:
    """Count (i, j, k) with i < j <= k where xor of arr[i:j] equals xor of arr[j:k+1]."""
    pre = [0, *accumulate(arr, operator.xor)]
    n = len(arr)
    return sum(
        pre[i - 1] ^ pre[j - 1] == pre[j - 1] ^ pre[k]
        for i in range(1, n + 1)
        for j in range(i + 1, n + 1)
        for k in range(j, n + 1)
    )


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Count index pairs i < j holding equal values."""
    return sum(
        first == second
        for position, first in enumerate(nums)
        for second in nums[position + 1:]
    )


def max_width_of_vertical_area(points: Sequence[Sequence[int]]) -> int:
    """Return the widest gap between neighbouring x coordinates."""
    xs = sorted(point[0] for point in points)
    if len(xs) < 2:
        raise ValueError("at least two points are required")
    return max(right - left for left, right in pairwise(xs))


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Return the largest total held by one customer."""
    return max((0, *(sum(customer) for customer in accounts)))


def count_consistent_strings(allowed: str, words: Sequence[str]) -> int:
    """Count words made only of characters in allowed."""
    return sum(
        sum(word.count(char) for char in allowed) == len(word) for word in words
    )


def min_operations_boxes(boxes: str) -> list[int]:
    """For each box, total moves needed to bring every ball into it."""
    filled = [index for index, box in enumerate(boxes) if box == "1"]
    return [sum(abs(target - index) for index in filled) for target in range(len(boxes))]


def count_points(
    points: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[int]:
    """For each circle query (x, y, r), count points inside or on it."""
    return [
        sum((px - qx) ** 2 + (py - qy) ** 2 <= radius ** 2 for px, py, *_ in points)
        for qx, qy, radius, *_ in queries
    ]


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Sum the xor totals of every subset of nums."""
    return sum(reduce(operator.xor, subset, 0) for subset in _subsets(nums))


def final_value_after_operations(operations: Sequence[str]) -> int:
    """Apply increment and decrement operations to a counter starting at zero."""
    value = 0
    for op in operations:
        if op in ("++X", "X++"):
            value += 1
        elif op in ("--X", "X--"):
            value -= 1
    return value


def min_moves_to_seat(seats: Sequence[int], students: Sequence[int]) -> int:
    """Minimum total moves to seat every student, one per seat."""
    return sum(
        abs(seat - student)
        for seat, student in zip(sorted(seats), sorted(students), strict=True)
    )


def count_max_or_subsets(nums: Sequence[int]) -> int:
    """Count subsets whose bitwise or reaches the largest possible value."""
    best = reduce(operator.or_, nums, 0)
    return sum(reduce(operator.or_, subset, 0) == best for subset in _subsets(nums))


def most_words_found(sentences: Sequence[str]) -> int:
    """Return the largest word count among space-separated sentences."""
    return max((sentence.count(" ") for sentence in sentences), default=0) + 1


def number_of_beams(bank: Sequence[str]) -> int:
    """Count laser beams between consecutive rows that hold devices."""
    devices = [row.count("1") for row in bank if "1" in row]
    return sum(upper * lower for upper, lower in pairwise(devices))


def garbage_collection(garbage: Sequence[str], travel: Sequence[int]) -> int:
    """Total minutes for the metal, paper and glass trucks to collect everything."""
    reach = [0, *accumulate(travel)]
    total = 0
    for kind in "MPG":
        last_stop = 0
        units = 0
        for stop, house in enumerate(garbage):
            found = house.count(kind)
            if found:
                last_stop = stop
            units += found
        total += reach[last_stop] + units
    return total


def number_of_employees_who_met_target(hours: Sequence[int], target: int) -> int:
    """Count employees who worked at least target hours."""
    return sum(worked >= target for worked in hours)


def count_pairs(nums: Sequence[int], target: int) -> int:
    """Count index pairs i < j whose values sum to less than target."""
    return sum(
        first + second < target
        for position, first in enumerate(nums)
        for second in nums[position + 1:]
    )


def min_xor_operations(nums: Sequence[int], k: int) -> int:
    """Minimum bit flips so that the xor of nums equals k."""
    difference = reduce(operator.xor, nums, k)
    return bin(difference).count("1")


def minimum_operations(nums: Sequence[int]) -> int:
    """Count values that are not divisible by three."""
    return sum(value % 3 != 0 for value in nums)


def min_operations_to_divisible(nums: Sequence[int], k: int) -> int:
    """Minimum unit decrements so the sum of nums is divisible by k."""
    return sum(nums) % k


def max_increase_keeping_skyline(grid: Sequence[Sequence[int]]) -> int:
    """Total height that can be added without changing any skyline."""
    row_max = [max((0, *row)) for row in grid]
    col_max = [max((0, *column)) for column in zip(*grid)]
    return sum(
        min(row_max[r], col_max[c]) - height
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
    )