from math import comb

import pytest

from puzzlekit.dynamic import (
    all_possible_fbt,
    climb_stairs,
    count_bits,
    count_squares,
    count_vowel_strings,
    divisor_game,
    fib,
    generate_parenthesis,
    generate_pascal,
    get_longest_subsequence,
    get_row,
    is_subsequence,
    max_profit,
    max_repeating,
    maximal_square,
    min_cost_climbing_stairs,
    tribonacci,
)


def _size(node):
    return 0 if node is None else 1 + _size(node.left) + _size(node.right)


def _is_full(node):
    if node is None:
        return True
    if (node.left is None) != (node.right is None):
        return False
    return _is_full(node.left) and _is_full(node.right)


def _balanced(text):
    depth = 0
    for char in text:
        depth += 1 if char == "(" else -1
        if depth < 0:
            return False
    return depth == 0


@pytest.mark.parametrize("n", range(1, 25))
def test_climb_stairs_matches_fibonacci(n):
    assert climb_stairs(n) == fib(n + 1)


def test_climb_stairs_small_and_negative():
    assert climb_stairs(0) == 0
    assert climb_stairs(2) == 2
    with pytest.raises(ValueError):
        climb_stairs(-3)


@pytest.mark.parametrize("n", range(2, 40))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_base_values():
    assert fib(0) == 0
    assert fib(1) == 1


def test_pascal_rows_are_symmetric_and_sum_to_powers_of_two():
    rows = generate_pascal(12)
    assert len(rows) == 12
    for index, row in enumerate(rows):
        assert len(row) == index + 1
        assert row == row[::-1]
        assert sum(row) == 2 ** index


def test_pascal_zero_rows():
    assert generate_pascal(0) == []


@pytest.mark.parametrize("index", range(0, 15))
def test_get_row_agrees_with_triangle(index):
    assert get_row(index) == generate_pascal(index + 1)[-1]
    assert get_row(index) == [comb(index, k) for k in range(index + 1)]


def test_get_row_negative():
    with pytest.raises(ValueError):
        get_row(-1)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_empty_and_falling():
    assert max_profit([]) == 0
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_bounded_by_range():
    prices = [3, 8, 2, 9, 1, 4]
    assert 0 <= max_profit(prices) <= max(prices) - min(prices)


def test_count_bits_matches_popcount():
    counts = count_bits(200)
    assert len(counts) == 201
    assert counts == [bin(value).count("1") for value in range(201)]


def test_is_subsequence():
    assert is_subsequence("abc", "ahbgdc") is True
    assert is_subsequence("axc", "ahbgdc") is False
    assert is_subsequence("", "anything") is True
    assert is_subsequence("a", "") is False


def test_min_cost_climbing_stairs_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_climbing_stairs_two_steps():
    assert min_cost_climbing_stairs([7, 3]) == 3


def test_min_cost_climbing_stairs_too_short():
    with pytest.raises(ValueError):
        min_cost_climbing_stairs([4])


@pytest.mark.parametrize("n", range(1, 20))
def test_divisor_game_parity(n):
    assert divisor_game(n) is (n % 2 == 0)


def test_tribonacci_base_values():
    assert [tribonacci(n) for n in range(3)] == [0, 1, 1]


@pytest.mark.parametrize("n", range(3, 30))
def test_tribonacci_recurrence(n):
    assert tribonacci(n) == tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


@pytest.mark.parametrize("k", range(0, 6))
def test_max_repeating_exact_repeats(k):
    assert max_repeating("xy" + "ab" * k + "z", "ab") == k


def test_max_repeating_empty_word():
    assert max_repeating("abc", "") == 0


def test_longest_subsequence_example():
    assert get_longest_subsequence(["e", "a", "b"], [0, 0, 1]) == ["e", "b"]


def test_longest_subsequence_alternates():
    words = list("abcdefgh")
    groups = [1, 1, 0, 0, 1, 0, 1, 1]
    chosen = get_longest_subsequence(words, groups)
    chosen_groups = [groups[words.index(word)] for word in chosen]
    assert all(a != b for a, b in zip(chosen_groups, chosen_groups[1:]))
    assert chosen == sorted(chosen)


def test_longest_subsequence_single_word():
    assert get_longest_subsequence(["only"], [3]) == ["only"]


@pytest.mark.parametrize("n", range(0, 7))
def test_generate_parenthesis_invariants(n):
    result = generate_parenthesis(n)
    assert len(result) == comb(2 * n, n) // (n + 1)
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert all(len(text) == 2 * n and _balanced(text) for text in result)


def test_maximal_square_example():
    matrix = [
        ["1", "0", "1", "0", "0"],
        ["1", "0", "1", "1", "1"],
        ["1", "1", "1", "1", "1"],
        ["1", "0", "0", "1", "0"],
    ]
    assert maximal_square(matrix) == 4


@pytest.mark.parametrize("side", range(1, 6))
def test_maximal_square_full(side):
    assert maximal_square([["1"] * side for _ in range(side)]) == side * side


def test_maximal_square_empty_and_zero():
    assert maximal_square([]) == 0
    assert maximal_square([["0", "0"], ["0", "0"]]) == 0


@pytest.mark.parametrize("n", [1, 3, 5, 7, 9, 11])
def test_all_possible_fbt_counts_and_shapes(n):
    trees = all_possible_fbt(n)
    m = (n - 1) // 2
    assert len(trees) == comb(2 * m, m) // (m + 1)
    for tree in trees:
        assert _size(tree) == n
        assert _is_full(tree)
        assert tree.val == 0


@pytest.mark.parametrize("n", [0, 2, 4, 10])
def test_all_possible_fbt_even(n):
    assert all_possible_fbt(n) == []


def test_count_squares_zero_matrix_and_row():
    assert count_squares([[0, 0], [0, 0]]) == 0
    assert count_squares([[1, 1, 1, 1]]) == 4
    assert count_squares([]) == 0


@pytest.mark.parametrize("size", range(1, 6))
def test_count_squares_identity(size):
    identity = [[int(r == c) for c in range(size)] for r in range(size)]
    assert count_squares(identity) == size


def test_count_squares_at_least_maximal_square_side():
    matrix = [[0, 1, 1, 1], [1, 1, 1, 1], [0, 1, 1, 1]]
    as_chars = [[str(cell) for cell in row] for row in matrix]
    assert count_squares(matrix) >= maximal_square(as_chars)


@pytest.mark.parametrize("n", range(0, 20))
def test_count_vowel_strings_combinations(n):
    assert count_vowel_strings(n) == comb(n + 4, 4)


def test_count_vowel_strings_single_letter():
    assert count_vowel_strings(1) == len("aeiou")


def test_count_vowel_strings_negative():
    with pytest.raises(ValueError):
        count_vowel_strings(-1)