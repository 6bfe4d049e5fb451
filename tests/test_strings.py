import string

import pytest

from solvekit.strings import (
    first_uniq_char,
    is_alien_sorted,
    length_of_longest_substring,
    longest_palindrome,
    roman_to_int,
)


def test_alien_sorted_with_custom_order():
    assert is_alien_sorted(["hello", "leetcode"], "hlabcdefgijkmnopqrstuvwxyz")


def test_alien_unsorted_with_custom_order():
    assert not is_alien_sorted(["word", "world", "row"], "worldabcefghijkmnpqstuvxyz")


def test_alien_longer_prefix_first_is_unsorted():
    assert not is_alien_sorted(["apple", "app"], string.ascii_lowercase)


def test_alien_standard_order_matches_sorted():
    words = sorted(["pear", "apple", "banana", "app", "cherry"])
    assert is_alien_sorted(words, string.ascii_lowercase)
    assert not is_alien_sorted(list(reversed(words)), string.ascii_lowercase)


def test_alien_reversed_alphabet():
    words = sorted(["pear", "apple", "banana", "cherry"], reverse=True)
    assert is_alien_sorted(words, string.ascii_lowercase[::-1])


def test_alien_single_word_and_empty():
    assert is_alien_sorted(["solo"], string.ascii_lowercase)
    assert is_alien_sorted([], string.ascii_lowercase)


@pytest.mark.parametrize("text", ["babad", "cbbd", "forgeeksskeegfor", "abacdfgdcaba", "a"])
def test_longest_palindrome_is_palindromic_substring(text):
    result = longest_palindrome(text)
    assert result == result[::-1]
    assert result in text
    assert len(result) >= 1


def test_longest_palindrome_prefers_first():
    assert longest_palindrome("babad") == "bab"


def test_longest_palindrome_whole_palindrome():
    assert longest_palindrome("racecar") == "racecar"


def test_longest_palindrome_empty():
    assert longest_palindrome("") == ""


def test_longest_palindrome_even_length():
    result = longest_palindrome("xabbay")
    assert result == "abba"[:len(result)]
    assert len(result) == len("abba")


def test_longest_substring_example():
    assert length_of_longest_substring("abcabcbb") == 3


def test_longest_substring_all_distinct():
    text = "qwertyuiop"
    assert length_of_longest_substring(text) == len(text)


def test_longest_substring_all_same():
    text = "bbbbb"
    assert length_of_longest_substring(text) == len(set(text))


def test_longest_substring_empty():
    assert length_of_longest_substring("") == 0


def test_longest_substring_not_longer_than_distinct_count():
    text = "pwwkewpwwkew"
    assert length_of_longest_substring(text) <= len(set(text))


@pytest.mark.parametrize(
    "numeral, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_single_symbols(numeral, value):
    assert roman_to_int(numeral) == value


def test_roman_repeated_symbols_add():
    assert roman_to_int("III") == len("III")
    assert roman_to_int("MM") == 2 * roman_to_int("M")


def test_roman_subtractive_pair():
    assert roman_to_int("IV") == roman_to_int("V") - roman_to_int("I")
    assert roman_to_int("CM") == roman_to_int("M") - roman_to_int("C")


def test_roman_full_numeral():
    assert roman_to_int("MCMXCIV") == 1994


def test_roman_empty():
    assert roman_to_int("") == 0


def test_first_uniq_char_at_start():
    assert first_uniq_char("leetcode") == 0


def test_first_uniq_char_none():
    assert first_uniq_char("aabb") == -1
    assert first_uniq_char("") == -1


def test_first_uniq_char_later():
    text = "loveleetcode"
    index = first_uniq_char(text)
    assert text.count(text[index]) == 1
    assert all(text.count(c) > 1 for c in text[:index])
    assert index == text.index("v")