"""A* search over sliding-puzzle boards."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

Board = tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class Coord:
    """A grid position: ``y`` is the row, ``x`` the column."""

    y: int
    x: int

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.y + other.y, self.x + other.x)


@dataclass(eq=False)
class PuzzleState:
    """A board configuration with its search costs and parent link.

    States compare, order and hash by board alone.
    """

    board: Board
    g: int = 0
    h: int = 0
    f: int = 0
    parent: Optional[PuzzleState] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.board = tuple(tuple(row) for row in self.board)

    @property
    def board_size(self) -> int:
        return len(self.board)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self.board == other.board

    def __lt__(self, other: PuzzleState) -> bool:
        return self.board < other.board

    def __hash__(self) -> int:
        return hash(self.board)


Heuristic = Callable[[PuzzleState, PuzzleState], int]

_NAV = (Coord(-1, 0), Coord(0, -1), Coord(1, 0), Coord(0, 1))


def find_zero(state: PuzzleState) -> Optional[Coord]:
    """Return the position of the empty tile, or None if there is none."""
    for y, row in enumerate(state.board):
        for x, value in enumerate(row):
            if value == 0:
                return Coord(y, x)
    return None


def _positions(board: Board) -> Iterable[tuple[int, int, int]]:
    for y, row in enumerate(board):
        for x, value in enumerate(row):
            yield y, x, value


def manhattan_distance(state: PuzzleState, goal: PuzzleState) -> int:
    """Sum of grid distances of every non-empty tile from its goal position."""
    goal_positions: dict[int, list[tuple[int, int]]] = {}
    for y, x, value in _positions(goal.board):
        goal_positions.setdefault(value, []).append((y, x))
    return sum(
        abs(y - gy) + abs(x - gx)
        for y, x, value in _positions(state.board)
        if value != 0
        for gy, gx in goal_positions.get(value, ())
    )


def custom_heuristic(state: PuzzleState, goal: PuzzleState) -> int:
    """Manhattan distance weighted by 2.5, truncated to an integer."""
    return int(manhattan_distance(state, goal) * 2.5)


def get_children(state: PuzzleState) -> list[PuzzleState]:
    """Boards reachable by sliding one neighbour into the empty cell.

    Neighbours are tried above, left, below and right of the empty cell.
    """
    empty = find_zero(state)
    if empty is None:
        return []
    size = state.board_size
    children = []
    for offset in _NAV:
        target = empty + offset
        if 0 <= target.y < size and 0 <= target.x < size:
            rows = [list(row) for row in state.board]
            rows[empty.y][empty.x] = rows[target.y][target.x]
            rows[target.y][target.x] = 0
            children.append(PuzzleState(rows))
    return children


def reconstruct(state: Optional[PuzzleState]) -> list[PuzzleState]:
    """Return the states from the root of ``state``'s parent chain to ``state``."""
    path = []
    while state is not None:
        path.append(state)
        state = state.parent
    path.reverse()
    return path


def a_star(
    start: PuzzleState,
    goal: PuzzleState,
    heuristic: Heuristic = manhattan_distance,
) -> list[int]:
    """Return the tile values slid into the empty cell to reach ``goal``.

    An empty list means either the start is the goal or no solution exists.
    """
    started = time.perf_counter()
    order = itertools.count()

    root = PuzzleState(start.board, g=start.g)
    root.h = heuristic(root, goal)
    root.f = root.g + root.h
    frontier: list[tuple[int, int, PuzzleState]] = [(root.f, next(order), root)]
    visited: set[Board] = set()

    while frontier:
        _, _, current = heapq.heappop(frontier)

        if current.board == goal.board:
            moves = []
            for previous, following in itertools.pairwise(reconstruct(current)):
                empty = find_zero(previous)
                moves.append(following.board[empty.y][empty.x])
            logger.info(
                "execution time %.6f s, moves %d, states generated %d",
                time.perf_counter() - started,
                len(moves),
                len(frontier),
            )
            return moves

        visited.add(current.board)
        for child in get_children(current):
            if child.board in visited:
                continue
            child.g = current.g + 1
            child.h = heuristic(child, goal)
            child.f = child.g + child.h
            child.parent = current
            heapq.heappush(frontier, (child.f, next(order), child))

    return []


def _as_state(board: Sequence[Sequence[int]]) -> PuzzleState:
    return PuzzleState(tuple(tuple(row) for row in board))