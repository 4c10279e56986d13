"""Cells and coordinates of a minesweeper board."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Iterator

BOMB_VALUE = 11
TEXTURE_FLAG = 9
TEXTURE_UNKNOWN = 12


@functools.total_ordering
@dataclass(frozen=True)
class Coordinates:
    """A board position: ``x`` runs left to right, ``y`` top to bottom.

    Positions order row by row: first by ``y``, then by ``x``.
    """

    x: int
    y: int

    def __add__(self, other: Coordinates) -> Coordinates:
        return Coordinates(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinates) -> Coordinates:
        return Coordinates(self.x - other.x, self.y - other.y)

    def __lt__(self, other: Coordinates) -> bool:
        if not isinstance(other, Coordinates):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)


@dataclass(eq=False)
class Cell:
    """One board cell.

    ``val`` counts neighbouring bombs, or is ``BOMB_VALUE`` for a bomb.
    ``texture`` is the index of the image the cell shows: its value once
    pressed, ``TEXTURE_FLAG`` when flagged and ``TEXTURE_UNKNOWN`` otherwise.
    """

    pos: Coordinates
    val: int = 0
    bomb: bool = False
    pressed: bool = False
    flagged: bool = False
    texture: int = TEXTURE_UNKNOWN
    surroundings: list[Coordinates] = field(default_factory=list)
    open_surroundings: list[Coordinates] = field(default_factory=list)
    combinations: list[list[Coordinates]] = field(default_factory=list)

    def __iter__(self) -> Iterator[list[Coordinates]]:
        return iter(self.combinations)

    def press(self) -> None:
        """Reveal the cell; revealing twice changes nothing."""
        if not self.pressed:
            self.texture = self.val
            self.pressed = True

    def flag(self) -> None:
        """Mark the cell with a flag."""
        self.texture = TEXTURE_FLAG
        self.flagged = True

    def unflag(self) -> None:
        """Remove the flag and show the cell as unknown."""
        self.texture = TEXTURE_UNKNOWN
        self.flagged = False

    def toggle_flag(self) -> None:
        """Flip the flag of an unrevealed cell."""
        if self.pressed:
            return
        if self.flagged:
            self.unflag()
        else:
            self.flag()

    def add_one(self) -> None:
        """Count one more neighbouring bomb, unless this cell is a bomb."""
        if not self.bomb:
            self.val += 1

    def plant_bomb(self) -> None:
        """Turn this cell into a bomb."""
        self.bomb = True
        self.val = BOMB_VALUE