"""Minesweeper board model: bombs, reveals, flags and solver steps."""

from __future__ import annotations

import copy
import itertools
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence

from cs8lab.mine_cell import BOMB_VALUE, Cell, Coordinates

_NAV = tuple(
    Coordinates(dx, dy)
    for dx, dy in ((0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1))
)


@dataclass
class Step:
    """One solver action: flags placed around, or removed from, a numbered cell."""

    node_position: Coordinates
    surrounding_flags: list[Coordinates] = field(default_factory=list)
    is_placement: bool = True


class Model:
    """A ``cols`` by ``rows`` board indexed as ``board[y][x]``.

    Bombs are placed at random with ``rng``, or exactly at ``mines`` when
    those are given.
    """

    board_pos = 40.0
    node_size = 40.0

    def __init__(
        self,
        cols: int,
        rows: int,
        bombs: int = 0,
        *,
        mines: Optional[Iterable[Coordinates]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError("a board needs at least one row and one column")
        self.cols = cols
        self.rows = rows
        self.board: list[list[Cell]] = [
            [Cell(Coordinates(x, y)) for x in range(cols)] for y in range(rows)
        ]
        self.bomb_coordinates: list[Coordinates] = []
        self.nodes_to_check: set[Coordinates] = set()
        self.flagged_nodes: set[Coordinates] = set()
        self.steps: deque[Step] = deque()
        self.lost = False

        if mines is None:
            self._plant_random(bombs, rng if rng is not None else random.Random())
        else:
            self._plant(mines)
        self.bombs = len(self.bomb_coordinates)
        self._count_neighbours()
        self._initialize_surroundings()

    def __iter__(self) -> Iterator[Cell]:
        for row in self.board:
            yield from row

    @property
    def non_bomb_count(self) -> int:
        return self.cols * self.rows - self.bombs

    def node_pos(self, x: int, y: int) -> tuple[float, float]:
        """Screen position of the cell at ``(x, y)``."""
        return (self.board_pos + x * self.node_size, self.board_pos + y * self.node_size)

    def board_size(self) -> tuple[float, float]:
        """Screen width and height of the whole board."""
        return (self.cols * self.node_size, self.rows * self.node_size)

    def _plant_random(self, bombs: int, rng: random.Random) -> None:
        if not 0 <= bombs <= self.cols * self.rows:
            raise ValueError(f"cannot plant {bombs} bombs on {self.cols}x{self.rows} board")
        while len(self.bomb_coordinates) < bombs:
            x = rng.randrange(self.cols)
            y = rng.randrange(self.rows)
            cell = self.board[y][x]
            if not cell.bomb:
                cell.plant_bomb()
                self.bomb_coordinates.append(Coordinates(x, y))

    def _plant(self, mines: Iterable[Coordinates]) -> None:
        for pos in mines:
            if not self.in_bounds(pos.x, pos.y):
                raise ValueError(f"mine {pos} lies outside the board")
            cell = self.board[pos.y][pos.x]
            if not cell.bomb:
                cell.plant_bomb()
                self.bomb_coordinates.append(pos)

    def _neighbours(self, pos: Coordinates) -> list[Coordinates]:
        return [n for n in (pos + offset for offset in _NAV) if self.in_bounds(n.x, n.y)]

    def _count_neighbours(self) -> None:
        for bomb in self.bomb_coordinates:
            for n in self._neighbours(bomb):
                self.board[n.y][n.x].add_one()

    def _initialize_surroundings(self) -> None:
        for cell in self:
            cell.surroundings = self._neighbours(cell.pos)

    def in_bounds(self, x: int, y: int) -> bool:
        """True if ``(x, y)`` lies on the board."""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get_node(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; raises ``IndexError`` off the board."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is out of bounds")
        return self.board[y][x]

    def press_node(self, pos: Coordinates) -> None:
        """Reveal ``pos``, flooding outward from cells with no neighbouring bombs."""
        pending = [pos]
        while pending:
            current = pending.pop()
            if not self.in_bounds(current.x, current.y):
                continue
            cell = self.board[current.y][current.x]
            if cell.pressed:
                continue
            cell.press()
            if cell.val == 0:
                pending.extend(reversed(cell.surroundings))
            if 0 < cell.val < 9:
                self.nodes_to_check.add(current)
            if cell.val == BOMB_VALUE:
                self._lose()

    def _lose(self) -> None:
        for pos in self.bomb_coordinates:
            self.get_node(pos.x, pos.y).press()
        self.lost = True

    def cells_to_check(self) -> Iterator[Cell]:
        """Yield revealed numbered cells in row-major order."""
        for pos in sorted(self.nodes_to_check):
            yield self.get_node(pos.x, pos.y)

    def update_node_combinations(self) -> None:
        """Recompute open neighbours and candidate flag sets of numbered cells."""
        cells = list(self.cells_to_check())
        for cell in cells:
            cell.open_surroundings = [
                pos for pos in cell.surroundings if not self.get_node(pos.x, pos.y).pressed
            ]
        for cell in cells:
            cell.combinations = [
                list(combo) for combo in itertools.combinations(cell.open_surroundings, cell.val)
            ]

    def can_place_flags(self, node: Cell, combination: Sequence[Coordinates]) -> bool:
        """True if adding ``combination`` keeps ``node``'s flag count within its value."""
        existing = sum(1 for c in node.surroundings if self.get_node(c.x, c.y).flagged)
        new = sum(1 for c in combination if not self.get_node(c.x, c.y).flagged)
        return existing + new <= node.val

    def place_flags(self, combination: Iterable[Coordinates]) -> None:
        for pos in combination:
            self.get_node(pos.x, pos.y).flag()
            self.flagged_nodes.add(pos)

    def remove_flags(self, combination: Iterable[Coordinates]) -> None:
        for pos in combination:
            self.get_node(pos.x, pos.y).unflag()
            self.flagged_nodes.discard(pos)

    def remove_all_flags(self) -> None:
        for pos in self.flagged_nodes:
            self.get_node(pos.x, pos.y).unflag()
        self.flagged_nodes.clear()

    def flag_node(self, x: int, y: int) -> None:
        self.get_node(x, y).flag()
        self.flagged_nodes.add(Coordinates(x, y))

    def unflag_node(self, x: int, y: int) -> None:
        self.get_node(x, y).unflag()
        self.flagged_nodes.discard(Coordinates(x, y))

    def toggle_node_flag(self, x: int, y: int) -> None:
        if self.get_node(x, y).flagged:
            self.unflag_node(x, y)
        else:
            self.flag_node(x, y)

    def log_step(
        self, position: Coordinates, flags: Iterable[Coordinates], is_placement: bool
    ) -> None:
        self.steps.append(Step(position, list(flags), is_placement))

    def undo_last_step(self) -> None:
        """Drop the most recent step, if any."""
        if self.steps:
            self.steps.pop()

    def clear_steps(self) -> None:
        self.steps.clear()

    def clone(self) -> Model:
        """Return a fully independent copy of the board."""
        return copy.deepcopy(self)