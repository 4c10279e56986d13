import random

from cs8lab.backtracker import Backtracker
from cs8lab.mine_cell import Coordinates
from cs8lab.minesweeper import Model


def opened_corner_board():
    model = Model(3, 3, mines=[Coordinates(0, 0)])
    model.press_node(Coordinates(2, 2))
    model.update_node_combinations()
    return model


def test_solve_records_steps_without_touching_flags():
    model = opened_corner_board()
    solver = Backtracker(model)
    assert solver.solve()
    assert len(model.steps) > 0
    assert model.flagged_nodes == set()
    assert not solver.solving


def test_replaying_steps_solves_board():
    model = opened_corner_board()
    solver = Backtracker(model)
    solver.solve()
    while model.steps:
        step = solver.take_a_step()
        assert solver.current == step.node_position
    assert solver.take_a_step() is None
    assert solver.is_solved(model)
    assert model.flagged_nodes == {Coordinates(0, 0)}


def test_solve_clears_previous_flags():
    model = opened_corner_board()
    model.flag_node(2, 2)
    Backtracker(model).solve()
    assert model.flagged_nodes == set()


def test_nothing_to_check_is_solved():
    model = Model(3, 3, 0)
    solver = Backtracker(model)
    assert solver.solve()
    assert len(model.steps) == 0


def test_without_combinations_solve_fails():
    model = Model(3, 3, mines=[Coordinates(0, 0)])
    model.press_node(Coordinates(2, 2))
    solver = Backtracker(model)
    assert not solver.solve()
    assert len(model.steps) == 0


def test_random_board_solution_is_consistent():
    model = Model(6, 6, 5, rng=random.Random(11))
    safe = next(cell for cell in model if cell.val == 0)
    model.press_node(safe.pos)
    model.update_node_combinations()
    solver = Backtracker(model)
    if solver.solve():
        while solver.take_a_step() is not None:
            pass
        assert solver.is_solved(model)
    else:
        assert len(model.steps) == 0


def test_validate_detects_overflagging():
    model = opened_corner_board()
    solver = Backtracker(model)
    assert solver.validate(model)
    model.flag_node(0, 0)
    assert solver.validate(model)
    assert solver.is_solved(model)
    model.unflag_node(0, 0)
    assert not solver.is_solved(model)


def test_is_solved_false_with_extra_flag():
    model = opened_corner_board()
    model.flag_node(0, 0)
    model.flag_node(2, 0)
    solver = Backtracker(model)
    assert not solver.is_solved(model)


def test_take_a_step_waits_while_solving():
    model = opened_corner_board()
    solver = Backtracker(model)
    solver.solve()
    count = len(model.steps)
    solver.solving = True
    assert solver.take_a_step() is None
    assert len(model.steps) == count


def test_take_a_step_applies_removal():
    model = opened_corner_board()
    model.flag_node(0, 0)
    model.log_step(Coordinates(1, 1), [Coordinates(0, 0)], False)
    solver = Backtracker(model)
    step = solver.take_a_step()
    assert not step.is_placement
    assert not model.get_node(0, 0).flagged
    assert solver.current == Coordinates(1, 1)