"""Recursive backtracking solver for the n-queens puzzle."""

from __future__ import annotations

from typing import Iterator, Sequence


def place(row: int, col: int, queens: Sequence[int]) -> bool:
    """True if a queen at (row, col) is safe from the queens in earlier rows."""
    return all(
        queens[j] != col and abs(queens[j] - col) != abs(j - row)
        for j in range(row)
    )


def n_queens_solutions(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every solution as the column of the queen in each row.

    Solutions come in lexicographic order; columns are zero-based.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    queens = [0] * n

    def solve(row: int) -> Iterator[tuple[int, ...]]:
        for col in range(n):
            if place(row, col, queens):
                queens[row] = col
                if row == n - 1:
                    yield tuple(queens)
                else:
                    yield from solve(row + 1)

    if n:
        yield from solve(0)


def count_solutions(n: int) -> int:
    """Number of distinct n-queens solutions."""
    return sum(1 for _ in n_queens_solutions(n))


def format_solution(queens: Sequence[int]) -> str:
    """Render a solution with one-based column numbers."""
    return "solution found: " + " ".join(str(col + 1) for col in queens)