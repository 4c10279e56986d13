import itertools

import pytest

from cs8lab.nqueens import count_solutions, format_solution, n_queens_solutions, place


def is_valid(solution):
    for a, b in itertools.combinations(range(len(solution)), 2):
        if solution[a] == solution[b] or abs(solution[a] - solution[b]) == b - a:
            return False
    return True


def test_place_rejects_same_column_and_diagonal():
    queens = [1, 0, 0, 0]
    assert not place(1, 1, queens)
    assert not place(1, 0, queens)
    assert not place(1, 2, queens)
    assert place(1, 3, queens)


def test_place_first_row_always_safe():
    assert place(0, 3, [0, 0, 0, 0])


def test_four_queens_solutions():
    assert list(n_queens_solutions(4)) == [(1, 3, 0, 2), (2, 0, 3, 1)]


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_solutions_are_valid_sorted_and_unique(n):
    solutions = list(n_queens_solutions(n))
    assert all(is_valid(s) for s in solutions)
    assert solutions == sorted(set(solutions))
    assert len(solutions) == count_solutions(n)


def test_count_for_small_boards():
    assert count_solutions(1) == 1
    assert count_solutions(2) == 0
    assert count_solutions(3) == 0
    assert count_solutions(0) == 0


def test_count_for_eight():
    assert count_solutions(8) == 92


def test_negative_size_raises():
    with pytest.raises(ValueError):
        list(n_queens_solutions(-1))


def test_format_solution_uses_one_based_columns():
    assert format_solution((1, 3, 0, 2)) == "solution found: 2 4 1 3"