"""String puzzles: rewriting, counting and generating strings."""

from __future__ import annotations

import string
from collections import Counter
from itertools import pairwise, permutations, product

_VOWELS = frozenset("aeiouAEIOU")
_MOVES = {"L": (0, -1), "R": (0, 1), "U": (-1, 0), "D": (1, 0)}


def smallest_equivalent_string(s1: str, s2: str, base_str: str) -> str:
    """Replace each character by the smallest one equivalent to it."""
    parent: dict[str, str] = {}

    def find(char: str) -> str:
        while parent.get(char, char) != char:
            char = parent[char]
        return char

    for a, b in zip(s1, s2, strict=True):
        root_a, root_b = find(a), find(b)
        if root_a != root_b:
            low, high = sorted((root_a, root_b))
            parent[high] = low
    return "".join(find(char) for char in base_str)


def num_tile_possibilities(tiles: str) -> int:
    """Count distinct non-empty sequences that can be laid out from the tiles."""
    return len(
        {arrangement for size in range(1, len(tiles) + 1) for arrangement in permutations(tiles, size)}
    )


def min_steps(s: str, t: str) -> int:
    """Minimum character replacements in t to make it an anagram of s."""
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    counts_s, counts_t = Counter(s), Counter(t)
    return sum(((counts_s - counts_t) + (counts_t - counts_s)).values()) // 2


def get_happy_string(n: int, k: int) -> str:
    """Return the k-th happy string of length n, or an empty string if there is none."""
    happy = (
        "".join(chars)
        for chars in product("abc", repeat=n)
        if all(a != b for a, b in pairwise(chars))
    )
    if k < 1:
        return ""
    return next((word for position, word in enumerate(happy, 1) if position == k), "")


def min_partitions(n: str) -> int:
    """Fewest deci-binary numbers summing to the decimal string n."""
    return max((int(digit) for digit in n), default=0)


def _steps_inside(n: int, row: int, col: int, instructions: str) -> int:
    steps = 0
    for instruction in instructions:
        move = _MOVES.get(instruction)
        if move is None:
            continue
        row, col = row + move[0], col + move[1]
        if not (0 <= row < n and 0 <= col < n):
            break
        steps += 1
    return steps


def execute_instructions(n: int, start_pos: list[int], s: str) -> list[int]:
    """For each suffix of s, count the moves made before leaving an n by n grid."""
    row, col = start_pos[0], start_pos[1]
    return [_steps_inside(n, row, col, s[start:]) for start in range(len(s))]


def smallest_number(pattern: str) -> str:
    """Smallest digit string from 1..n+1 following an I/D pattern."""
    n = len(pattern)
    digits = list(range(1, n + 2))
    for sweep in range(n + 1):
        for i in range(sweep % 2, n, 2):
            if (pattern[i] == "I") == (digits[i] > digits[i + 1]):
                digits[i], digits[i + 1] = digits[i + 1], digits[i]
    return "".join(map(str, digits))


def sort_vowels(s: str) -> str:
    """Sort the vowels of s by code point, leaving consonants in place."""
    positions = [index for index, char in enumerate(s) if char in _VOWELS]
    chars = list(s)
    for position, vowel in zip(positions, sorted(s[i] for i in positions)):
        chars[position] = vowel
    return "".join(chars)


def minimum_pushes(word: str) -> int:
    """Fewest key presses to type word with letters spread over eight keys."""
    frequencies = sorted(Counter(word).values(), reverse=True)
    return sum(count * min(rank // 8 + 1, 4) for rank, count in enumerate(frequencies))


def score_of_string(s: str) -> int:
    """Sum of absolute code point differences between neighbouring characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in pairwise(s))


def valid_strings(n: int) -> list[str]:
    """All binary strings of length n with no two adjacent zeros, ascending."""
    if n < 1:
        return []
    candidates = (format(value, "b").zfill(n) for value in range(2 ** n))
    return [bits for bits in candidates if "00" not in bits]


def string_hash(s: str, k: int) -> str:
    """Hash each full block of k letters to one letter by summing positions mod 26."""
    if k <= 0:
        raise ValueError("block size must be positive")
    return "".join(
        chr(ord("a") + sum(ord(char) - ord("a") for char in s[start:start + k]) % 26)
        for start in range(0, len(s) - k + 1, k)
    )


def string_sequence(target: str) -> list[str]:
    """Every string shown while typing target with append-'a' and next-letter keys."""
    current = ""
    shown = []
    for wanted in target:
        for letter in string.ascii_lowercase:
            shown.append(current + letter)
            if letter == wanted:
                break
        current += wanted
    return shown