"""Dynamic programming over grids, sequences and coin systems."""

from __future__ import annotations

from collections.abc import Sequence


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a path from top-left to bottom-right.

    Moves go only right or down. An empty grid gives 0.
    """
    if not grid:
        return 0

    first, *rest = grid
    sums: list[int] = []
    running = 0
    for cell in first:
        running += cell
        sums.append(running)

    for row in rest:
        left = None
        updated: list[int] = []
        for above, cell in zip(sums, row):
            best = above if left is None else min(above, left)
            left = cell + best
            updated.append(left)
        sums = updated
    return sums[-1]


def unique_paths_with_obstacles(obstacle_grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths from top-left to bottom-right avoiding cells set to non-zero."""
    if not obstacle_grid:
        return 0

    width = len(obstacle_grid[0])
    ways = [0] * width
    for row_index, row in enumerate(obstacle_grid):
        for col, cell in enumerate(row):
            if cell != 0:
                ways[col] = 0
            elif row_index == 0 and col == 0:
                ways[col] = 1
            elif col > 0:
                ways[col] += ways[col - 1]
    return ways[-1]


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an m by n grid; 0 when either side is not positive."""
    if m <= 0 or n <= 0:
        return 0
    row = [1] * n
    for _ in range(m - 1):
        for col in range(1, n):
            row[col] += row[col - 1]
    return row[-1]


def climb_stairs(n: int) -> int:
    """Count ways to climb n steps taking one or two at a time."""
    _require_non_negative("n", n)
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    _require_non_negative("n", n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def tribonacci(n: int) -> int:
    """Return the n-th Tribonacci number, starting 0, 1, 1."""
    _require_non_negative("n", n)
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest cost to step past the top, starting from step 0 or 1."""
    two_back, one_back = 0, 0
    for i in range(2, len(cost) + 1):
        two_back, one_back = one_back, min(one_back + cost[i - 1], two_back + cost[i - 2])
    return one_back


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to amount, or -1 if no combination does."""
    _require_non_negative("amount", amount)
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if 0 < coin <= total:
                best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] > amount else best[amount]