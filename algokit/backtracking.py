"""Backtracking and flood-fill searches on boards and grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["solve_n_queens", "solve_maze", "count_rooms"]


def solve_n_queens(n: int) -> list[list[int]] | None:
    """First placement of n non-attacking queens as a 0/1 board, or None.

    Columns are filled left to right, trying rows top to bottom.
    """
    if n < 1:
        raise ValueError(f"board size must be positive, got {n}")
    placed: list[int] = []

    def place(column: int) -> bool:
        if column == n:
            return True
        for row in range(n):
            if all(r != row and abs(r - row) != column - c for c, r in enumerate(placed)):
                placed.append(row)
                if place(column + 1):
                    return True
                placed.pop()
        return False

    if not place(0):
        return None
    board = [[0] * n for _ in range(n)]
    for column, row in enumerate(placed):
        board[row][column] = 1
    return board


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Path from top-left to bottom-right moving down or right over cells equal to 1.

    Returns a grid marking the path with 1, or None if there is no path.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        raise ValueError("maze must not be empty")
    rows, cols = len(grid), len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")
    solution = [[0] * cols for _ in range(rows)]

    def walk(x: int, y: int) -> bool:
        if not (0 <= x < rows and 0 <= y < cols) or grid[x][y] != 1:
            return False
        if (x, y) == (rows - 1, cols - 1):
            solution[x][y] = 1
            return True
        if solution[x][y] == 1:
            return False
        solution[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def count_rooms(grid: Iterable[str]) -> int:
    """Number of connected areas of '.' cells; '#' cells are walls."""
    lines = list(grid)
    seen: set[tuple[int, int]] = set()

    def passable(r: int, c: int) -> bool:
        return 0 <= r < len(lines) and 0 <= c < len(lines[r]) and lines[r][c] != "#"

    rooms = 0
    for r, line in enumerate(lines):
        for c, cell in enumerate(line):
            if cell != "." or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            pending = [(r, c)]
            while pending:
                x, y = pending.pop()
                for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                    if (nx, ny) not in seen and passable(nx, ny):
                        seen.add((nx, ny))
                        pending.append((nx, ny))
    return rooms