"""Algorithms over rectangular grids: fills, islands, spreading and masking."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Yield the in-bounds orthogonal neighbours of a cell."""
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def flood_fill(image: list[list[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Recolour the 4-connected region containing (sr, sc) in place and return the image."""
    rows, cols = len(image), len(image[0])
    original = image[sr][sc]
    if original == color:
        return image

    stack = [(sr, sc)]
    image[sr][sc] = color
    while stack:
        row, col = stack.pop()
        for r, c in _neighbours(row, col, rows, cols):
            if image[r][c] == original:
                image[r][c] = color
                stack.append((r, c))
    return image


def max_area_of_island(grid: list[list[int]]) -> int:
    """Return the size of the largest 4-connected group of cells equal to 1."""
    rows, cols = len(grid), len(grid[0])
    visited: set[tuple[int, int]] = set()
    best = 0

    for start_row, line in enumerate(grid):
        for start_col, cell in enumerate(line):
            if cell != 1 or (start_row, start_col) in visited:
                continue
            visited.add((start_row, start_col))
            stack = [(start_row, start_col)]
            area = 0
            while stack:
                row, col = stack.pop()
                area += 1
                for r, c in _neighbours(row, col, rows, cols):
                    if grid[r][c] == 1 and (r, c) not in visited:
                        visited.add((r, c))
                        stack.append((r, c))
            best = max(best, area)
    return best


def oranges_rotting(grid: list[list[int]]) -> int:
    """Return the minutes until no fresh orange (1) remains, or -1 if some never rot.

    Rotten oranges (2) spread to orthogonal fresh neighbours each minute. The
    grid is updated in place.
    """
    rows, cols = len(grid), len(grid[0])
    queue: deque[tuple[int, int]] = deque()
    fresh = 0
    for r, line in enumerate(grid):
        for c, cell in enumerate(line):
            if cell == 2:
                queue.append((r, c))
            elif cell == 1:
                fresh += 1

    if fresh == 0:
        return 0

    minutes = 0
    while queue:
        changed = False
        for _ in range(len(queue)):
            row, col = queue.popleft()
            for r, c in _neighbours(row, col, rows, cols):
                if grid[r][c] == 1:
                    grid[r][c] = 2
                    fresh -= 1
                    queue.append((r, c))
                    changed = True
        if changed:
            minutes += 1

    return minutes if fresh == 0 else -1


def capture_surrounded_regions(board: list[list[str]]) -> None:
    """Turn every 'O' region not connected to the border into 'X', in place."""
    rows = len(board)
    if rows == 0:
        return
    cols = len(board[0])

    border = [(r, 0) for r in range(rows)] + [(r, cols - 1) for r in range(rows)]
    border += [(0, c) for c in range(cols)] + [(rows - 1, c) for c in range(cols)]

    safe: set[tuple[int, int]] = set()
    stack = [cell for cell in border if board[cell[0]][cell[1]] == "O"]
    while stack:
        cell = stack.pop()
        if cell in safe:
            continue
        safe.add(cell)
        for r, c in _neighbours(cell[0], cell[1], rows, cols):
            if board[r][c] == "O" and (r, c) not in safe:
                stack.append((r, c))

    for r, line in enumerate(board):
        for c, cell in enumerate(line):
            if cell == "O" and (r, c) not in safe:
                line[c] = "X"


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, line in enumerate(matrix) if 0 in line}
    zero_cols = {c for line in matrix for c, cell in enumerate(line) if cell == 0}
    if not zero_rows:
        return
    width = len(matrix[0])

    for r, line in enumerate(matrix):
        if r in zero_rows:
            line[:width] = [0] * width
        for c in zero_cols:
            line[c] = 0