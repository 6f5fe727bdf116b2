# puzzlekit

A library of compact solutions to well-known programming puzzles:
counting over arrays, building and rearranging arrays, string
manipulation, dynamic programming and a little arithmetic. It is plain
Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `puzzlekit.nodes`: the `TreeNode` and `ListNode` dataclasses (a
  `ListNode` iterates over its values from itself onward), plus
  `build_linked_list`, which turns an iterable into a linked list (or
  `None` when empty), and `linked_list_values`, which turns a list back
  into a Python list.
- `puzzlekit.array_counting`: functions that count or measure something
  in a sequence or grid, such as `smaller_numbers_than_current`,
  `num_identical_pairs`, `count_triplets`, `subset_xor_sum`,
  `count_max_or_subsets`, `number_of_beams`, `garbage_collection`,
  `min_xor_operations` and `max_increase_keeping_skyline`.
- `puzzlekit.array_building`: functions that build a new sequence, such
  as `group_the_people`, `running_sum`, `shuffle`, `decode`,
  `pivot_array`, `largest_local`, `sort_the_students`, `find_matrix`,
  `find_the_prefix_common_array`, `get_final_state` and
  `construct_maximum_binary_tree`, and the `SubrectangleQueries` class
  with `update_subrectangle` and `get_value`.
- `puzzlekit.strings`: string puzzles such as
  `smallest_equivalent_string`, `num_tile_possibilities`, `min_steps`,
  `get_happy_string`, `execute_instructions`, `smallest_number`,
  `sort_vowels`, `minimum_pushes`, `valid_strings`, `string_hash` and
  `string_sequence`.
- `puzzlekit.dynamic`: dynamic-programming and generation classics such
  as `climb_stairs`, `generate_pascal`, `get_row`, `max_profit`,
  `count_bits`, `is_subsequence`, `fib`, `tribonacci`,
  `min_cost_climbing_stairs`, `generate_parenthesis`, `maximal_square`,
  `count_squares`, `all_possible_fbt` and `count_vowel_strings`.
- `puzzlekit.arithmetic`: `min_operations_array`,
  `is_strictly_palindromic` (which checks every base from 2 to n - 2,
  and so is never true) and `insert_greatest_common_divisors`.

Functions take ordinary sequences and return new lists; they do not
modify their arguments, except `insert_greatest_common_divisors`, which
links new nodes into the list it is given. The trees returned by
`all_possible_fbt` share subtrees with one another.

## Errors

Invalid input raises `ValueError`, for example:

- `max_width_of_vertical_area` with fewer than two points;
- `min_steps` with strings of different lengths;
- `string_hash` with a block size that is not positive;
- `climb_stairs`, `get_row` and `count_vowel_strings` with a negative
  argument;
- `min_cost_climbing_stairs` with fewer than two steps;
- `insert_greatest_common_divisors` with an empty list (`None`).

`shuffle`, `min_moves_to_seat`, `find_the_prefix_common_array` and
`smallest_equivalent_string` raise `ValueError` when the inputs they pair
up do not have matching lengths.

## Examples

```python
from puzzlekit.array_counting import num_identical_pairs
from puzzlekit.array_building import running_sum, SubrectangleQueries
from puzzlekit.strings import get_happy_string
from puzzlekit.dynamic import generate_parenthesis
from puzzlekit.nodes import build_linked_list, linked_list_values
from puzzlekit.arithmetic import insert_greatest_common_divisors

num_identical_pairs([1, 1])               # 1
running_sum([1, 2, 3, 4])                 # [1, 3, 6, 10]
get_happy_string(1, 3)                    # "c"
generate_parenthesis(2)                   # ["(())", "()()"]

grid = SubrectangleQueries([[1, 2], [3, 4]])
grid.update_subrectangle(0, 0, 1, 0, 9)
grid.get_value(1, 0)                      # 9

head = build_linked_list([18, 6, 10, 3])
linked_list_values(insert_greatest_common_divisors(head))
# [18, 6, 6, 2, 10, 1, 3]
```

## What it does not do

puzzlekit is a library only: it has no command-line tool, and it does
not read or write files. Call its functions from your own code.