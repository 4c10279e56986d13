"""Backtracking solver that places flags around revealed minesweeper numbers."""

from __future__ import annotations

from typing import Optional, Sequence

from cs8lab.mine_cell import Cell, Coordinates
from cs8lab.minesweeper import Model, Step


class Backtracker:
    """Solves a copy of ``model`` and replays the recorded steps on it."""

    def __init__(self, model: Model) -> None:
        self.model = model
        self.solving = False
        self.current: Optional[Coordinates] = None

    def solve(self) -> bool:
        """Search for a flag layout satisfying every numbered cell.

        Existing flags and steps are cleared first. On success the steps of
        the search are left on the model for :meth:`take_a_step`.
        """
        self.solving = True
        try:
            self.current = None
            self.model.remove_all_flags()
            self.model.clear_steps()

            scratch = self.model.clone()
            solver = Backtracker(scratch)
            solved = solver._recursive_solve(list(scratch.cells_to_check()), 0, scratch)

            if solved:
                for step in scratch.steps:
                    self.model.log_step(step.node_position, step.surrounding_flags, step.is_placement)
            return solved
        finally:
            self.solving = False

    def _recursive_solve(self, cells: Sequence[Cell], index: int, model: Model) -> bool:
        if index == len(cells):
            return self.is_solved(model)
        cell = cells[index]
        for combination in cell.combinations:
            if not model.can_place_flags(cell, combination):
                continue
            model.place_flags(combination)
            model.log_step(cell.pos, combination, True)
            if self._recursive_solve(cells, index + 1, model):
                return True
            model.remove_flags(combination)
            model.log_step(cell.pos, combination, False)
        return False

    def take_a_step(self) -> Optional[Step]:
        """Apply the oldest recorded step to the model and return it.

        Returns None when there is nothing to replay or a solve is running.
        """
        steps = self.model.steps
        if not steps or self.solving:
            return None
        step = steps.popleft()
        cell = self.model.get_node(step.node_position.x, step.node_position.y)
        if step.is_placement:
            self.model.place_flags(step.surrounding_flags)
        else:
            self.model.remove_flags(step.surrounding_flags)
        self.current = cell.pos
        return step

    def validate(self, model: Model) -> bool:
        """True if no numbered cell has more flagged open neighbours than its value."""
        for cell in model.cells_to_check():
            flags = sum(1 for c in cell.open_surroundings if model.get_node(c.x, c.y).flagged)
            if flags > cell.val:
                return False
        return True

    def is_solved(self, model: Model) -> bool:
        """True if every numbered cell has exactly its value of flagged neighbours."""
        for cell in model.cells_to_check():
            flags = sum(1 for c in cell.surroundings if model.get_node(c.x, c.y).flagged)
            if flags != cell.val:
                return False
        return True