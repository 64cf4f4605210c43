from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List

import numpy as np


class Colour(IntEnum):
    EMPTY = 0
    FILLED = 0xDD  # any non-zero value marks the cell as occupied


@dataclass(frozen=True)
class Position:
    """Cell coordinate. Row grows downward, column grows rightward."""

    row: int
    col: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.row + other.row, self.col + other.col)


class Block:
    """One cell covered by a shape."""

    def __init__(self, pos: Position, colour: Colour = Colour.FILLED) -> None:
        self.pos = pos
        self.colour = Colour(colour)

    def is_empty(self) -> bool:
        return self.colour == Colour.EMPTY

    def __eq__(self, other: object) -> bool:
        # Loose on purpose: only used when comparing rotation tables.
        if not isinstance(other, Block):
            return NotImplemented
        return self.is_empty() and other.is_empty()

    def __repr__(self) -> str:
        return f"Block({self.pos.row}, {self.pos.col}, {self.colour.name})"


class GameGrid:
    """Fixed-size cell buffer with collision checks and row clearing.

    Cells hold `Colour` values; 0 is empty and anything else is occupied.
    The buffer is indexed as ``cells[row, col]`` with row 0 at the top.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.uint8)

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def reset(self) -> None:
        self.grid.fill(Colour.EMPTY)

    def contains(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def collision(self, pos: Position) -> bool:
        if not self.contains(pos):
            return True
        return self.grid[pos.row, pos.col] != Colour.EMPTY

    def get(self, pos: Position) -> Colour:
        assert self.contains(pos), f"{pos} outside {self.height}x{self.width} grid"
        return Colour(int(self.grid[pos.row, pos.col]))

    def set(self, pos: Position, colour: Colour) -> None:
        assert self.contains(pos), f"{pos} outside {self.height}x{self.width} grid"
        self.grid[pos.row, pos.col] = colour

    def fill(self, positions: Iterable[Position], colour: Colour = Colour.FILLED) -> None:
        for pos in positions:
            self.set(pos, colour)

    def is_row_full(self, row: int) -> bool:
        assert 0 <= row < self.height, f"row {row} outside grid"
        return bool(np.all(self.grid[row] != Colour.EMPTY))

    def clear_full_rows(self) -> int:
        """Remove full rows, dropping everything above each one by a row.

        Rows are scanned once from top to bottom, so two stacked full rows
        compact twice. Returns the number of rows removed.
        """
        cleared = 0
        for row in range(self.height):
            if not self.is_row_full(row):
                continue
            if row > 0:
                self.grid[1 : row + 1] = self.grid[0:row].copy()
            self.grid[0].fill(Colour.EMPTY)
            cleared += 1
        return cleared

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the buffer for renderers."""
        view = self.grid.view()
        view.flags.writeable = False
        return view

    def occupancy(self) -> np.ndarray:
        return (self.grid != Colour.EMPTY).astype(np.int8)

    def filled_positions(self) -> List[Position]:
        rows, cols = np.nonzero(self.grid)
        return [Position(int(r), int(c)) for r, c in zip(rows, cols)]

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
