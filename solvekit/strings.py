"""String algorithms: ordering, palindromes, windows, numerals and counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import pairwise

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def is_alien_sorted(words: Sequence[str], order: str) -> bool:
    """Return True when words are in lexicographic order under the given alphabet.

    Characters absent from the alphabet rank lowest, alongside its first letter.
    """
    rank = {char: position for position, char in enumerate(order)}
    for current, following in pairwise(words):
        for a, b in zip(current, following):
            ra, rb = rank.get(a, 0), rank.get(b, 0)
            if ra > rb:
                return False
            if ra < rb:
                break
        else:
            if len(current) > len(following):
                return False
    return True


def _palindrome_span(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindrome(s: str) -> str:
    """Return the first longest palindromic substring of s."""
    best_start, best_end = 0, 0
    for centre in range(len(s)):
        for start, end in (
            _palindrome_span(s, centre, centre),
            _palindrome_span(s, centre, centre + 1),
        ):
            if end - start > best_end - best_start:
                best_start, best_end = start, end
    return s[best_start:best_end]


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    window_start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= window_start:
            window_start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - window_start + 1)
    return best


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as zero."""
    values = [_ROMAN_VALUES.get(char, 0) for char in s]
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring once in s, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)