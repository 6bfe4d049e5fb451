"""Algorithms over integer sequences and collections of strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of nums."""
    if not nums:
        raise ValueError("nums must not be empty")
    first, *rest = nums
    best = current = first
    for value in rest:
        current = max(value, current + value)
        best = max(best, current)
    return best


def missing_number(nums: Iterable[int]) -> int:
    """Return the smallest value in 0..len(nums) that does not occur in nums."""
    present = set(nums)
    return next(i for i in range(len(present) + 2) if i not in present)


def num_rabbits(answers: Iterable[int]) -> int:
    """Return the fewest rabbits consistent with the answers given.

    Each answer k means "k other rabbits share my colour", so answers of k
    come in groups of k + 1 rabbits.
    """
    total = 0
    for k, count in Counter(answers).items():
        group_size = k + 1
        groups = -(-count // group_size)
        total += groups * group_size
    return total


def subarray_sum(nums: Iterable[int], k: int) -> int:
    """Return how many contiguous runs of nums sum to k."""
    prefix_counts: Counter[int] = Counter({0: 1})
    running = 0
    matches = 0
    for value in nums:
        running += value
        matches += prefix_counts[running - k]
        prefix_counts[running] += 1
    return matches


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group strings that are anagrams of each other, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())