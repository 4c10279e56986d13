"""Sliding-tile puzzle board with animated moves and an A* solver controller."""

from __future__ import annotations

import copy
import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Optional

from cs8lab.astar import Coord, PuzzleState, a_star, custom_heuristic

logger = logging.getLogger(__name__)

BOARD_POS = 50.0
TILE_SIZE = 75.0
TILE_GAP = 10.0
ANIMATION_FRAMES = 4
FRAMES_PER_TICK = 2
RANDOMIZE_SWAPS = 250

# Neighbours of the empty cell: above, left, below, right.
_NAV = (Coord(-1, 0), Coord(0, -1), Coord(1, 0), Coord(0, 1))


def _screen_position(pos: Coord) -> tuple[float, float]:
    return (
        BOARD_POS + (TILE_SIZE * pos.x + TILE_GAP * pos.x),
        BOARD_POS + (TILE_SIZE * pos.y + TILE_GAP * pos.y),
    )


def _goal_grid(size: int) -> list[list[int]]:
    last = size * size
    return [
        [(row * size + col + 1) % last for col in range(size)]
        for row in range(size)
    ]


@dataclass(eq=False)
class Tile:
    """A puzzle tile: its grid position, its value (0 is the empty cell) and screen position."""

    pos: Coord
    val: int
    position: tuple[float, float] = (0.0, 0.0)


@dataclass
class Frame:
    """One animation frame: move ``tile`` to the screen point ``(tx, ty)``."""

    tile: Tile
    tx: float
    ty: float


class Board:
    """A 3x3 (or 4x4 when ``fifteen``) puzzle indexed as ``board[row][col]``.

    Moves are queued as tile values and replayed one at a time by
    :meth:`process_frame`, each move producing a few animation frames.
    """

    def __init__(self, fifteen: bool = False, *, rng: Optional[random.Random] = None) -> None:
        self.size = 4 if fifteen else 3
        self.rng = rng if rng is not None else random.Random()
        self.swapping = False
        self.enabled = True
        self.frames: deque[Frame] = deque()
        self.swaps: deque[int] = deque()
        self.board: list[list[Tile]] = []
        for row, values in enumerate(_goal_grid(self.size)):
            self.board.append(
                [
                    Tile(Coord(row, col), val, _screen_position(Coord(row, col)))
                    for col, val in enumerate(values)
                ]
            )
        self.empty_tile = self.board[-1][-1]
        self.swapables: list[Tile] = []
        self._update_swapables()

    @property
    def board_pos(self) -> tuple[float, float]:
        """Screen position of the board's top-left corner."""
        return (BOARD_POS, BOARD_POS)

    def board_size(self) -> tuple[float, float]:
        """Screen width and height of the board."""
        extent = TILE_SIZE * self.size + TILE_GAP * (self.size - 1)
        return (extent, extent)

    def _in_bounds(self, pos: Coord) -> bool:
        return 0 <= pos.y < self.size and 0 <= pos.x < self.size

    def _update_swapables(self) -> None:
        empty = self.empty_tile.pos
        self.swapables = [
            self.board[target.y][target.x]
            for target in (offset + empty for offset in _NAV)
            if self._in_bounds(target)
        ]

    def swappable_values(self) -> list[int]:
        """Values of the tiles next to the empty cell, above, left, below, right."""
        return [tile.val for tile in self.swapables]

    def _tile_by_value(self, value: int) -> Tile:
        for row in self.board:
            for tile in row:
                if tile.val == value:
                    return tile
        raise ValueError(f"no tile with value {value}")

    def _swap_tile(self, tile: Tile, animate: bool) -> None:
        tile_pos, empty_pos = tile.pos, self.empty_tile.pos
        tile.pos, self.empty_tile.pos = empty_pos, tile_pos

        if animate:
            current_x, current_y = _screen_position(tile_pos)
            target_x, target_y = _screen_position(empty_pos)
            dx = (target_x - current_x) / ANIMATION_FRAMES
            dy = (target_y - current_y) / ANIMATION_FRAMES
            for i in range(1, ANIMATION_FRAMES + 1):
                self.frames.append(Frame(tile, current_x + dx * i, current_y + dy * i))
                self.frames.append(
                    Frame(self.empty_tile, target_x - dx * i, target_y - dy * i)
                )

        self.board[tile_pos.y][tile_pos.x] = self.empty_tile
        self.board[empty_pos.y][empty_pos.x] = tile
        self._update_swapables()

    def log_swap(self, value: int) -> None:
        """Queue the tile ``value`` to be slid into the empty cell."""
        self.swaps.append(value)

    def click_tile(self, value: int) -> bool:
        """Queue a move of tile ``value`` if it is next to the empty cell.

        Returns True when a move was queued; nothing happens while moves run.
        """
        if self.swapping:
            return False
        tile = self._tile_by_value(value)
        if any(tile.pos == other.pos for other in self.swapables):
            self.swapping = True
            self.log_swap(value)
            return True
        return False

    def current_state(self) -> list[list[int]]:
        """Tile values row by row, with 0 for the empty cell."""
        return [[tile.val for tile in row] for row in self.board]

    def process_frame(self) -> None:
        """Advance the animation by one tick, starting the next move when idle."""
        if not self.enabled:
            return
        if self.swapping and not self.frames:
            self.take_a_step()
        for _ in range(FRAMES_PER_TICK):
            if not self.frames:
                break
            frame = self.frames.popleft()
            frame.tile.position = (frame.tx, frame.ty)

    def take_a_step(self) -> Optional[int]:
        """Perform the oldest queued move and return the value moved.

        With no moves left the board stops swapping and None is returned;
        a queued value of 0 is dropped without moving anything.
        """
        if not self.swaps:
            self.swapping = False
            return None
        value = self.swaps.popleft()
        if value == 0:
            return None
        self._swap_tile(self._tile_by_value(value), True)
        return value

    def random_swapper(self, count: int) -> list[int]:
        """Queue ``count`` random legal moves and return them.

        No move undoes the one before it. Nothing is queued while moves run.
        """
        if self.swapping:
            return []
        self.swapping = True
        self.enabled = False
        try:
            scratch = self.clone()
            previous = -1
            moves = []
            for _ in range(count):
                tile = self.rng.choice(scratch.swapables)
                while tile.val == previous:
                    tile = self.rng.choice(scratch.swapables)
                previous = tile.val
                self.log_swap(tile.val)
                moves.append(tile.val)
                scratch._swap_tile(tile, False)
            return moves
        finally:
            self.enabled = True

    def clone(self) -> Board:
        """Return a fully independent copy of the board."""
        return copy.deepcopy(self)


class BoardController:
    """Randomizes a board and solves it with A* search."""

    def __init__(self, board: Board, fifteen: bool = False) -> None:
        self.board = board
        self.goal = _goal_grid(4 if fifteen else 3)

    def solve_board(self) -> list[int]:
        """Queue the moves that solve the board and return them.

        Returns an empty list when no moves are found or the board is busy.
        """
        moves = a_star(
            PuzzleState(self.board.current_state()),
            PuzzleState(self.goal),
            custom_heuristic,
        )
        if not moves:
            logger.info("No solution found.")
            return []
        if self.board.swapping:
            return []
        self.board.swapping = True
        for value in moves:
            self.board.log_swap(value)
        return moves

    def randomize(self) -> list[int]:
        """Queue a long sequence of random moves on the board."""
        return self.board.random_swapper(RANDOMIZE_SWAPS)