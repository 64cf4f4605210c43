from __future__ import annotations

from enum import Enum, IntEnum
from typing import ClassVar, List, Tuple, Type

from .grid import Block, Colour, GameGrid, Position


class Direction(IntEnum):
    LEFT = -1
    RIGHT = 1


class DrawMode(Enum):
    CLEAR = "clear"
    DRAW = "draw"


Offsets = Tuple[Position, ...]


def _offsets(*cells: Tuple[int, int]) -> Offsets:
    return tuple(Position(r, c) for r, c in cells)


class Shape:
    """A falling piece made of blocks, moved and rotated on a `GameGrid`.

    Subclasses only provide ``ROTATIONS``: one tuple of block offsets per
    orientation, relative to the shape's position. Every orientation of a
    variant has the same number of blocks.

    The shape never erases or draws itself while moving; callers clear it
    from the grid before `translate`/`rotate` and draw it afterwards, so the
    shape does not collide with its own cells.
    """

    ROTATIONS: ClassVar[Tuple[Offsets, ...]] = ()

    def __init__(self, position: Position, rotation: int = 0) -> None:
        if not self.ROTATIONS:
            raise TypeError(f"{type(self).__name__} defines no rotation states")
        self._position = position
        self._rotation = rotation % len(self.ROTATIONS)
        self._blocks = self._materialize(position, self._rotation)

    @classmethod
    def _materialize(cls, position: Position, rotation: int) -> List[Block]:
        return [Block(position + offset) for offset in cls.ROTATIONS[rotation]]

    @property
    def position(self) -> Position:
        return self._position

    @property
    def rotation(self) -> int:
        return self._rotation

    @property
    def blocks(self) -> Tuple[Block, ...]:
        return tuple(self._blocks)

    def positions(self) -> List[Position]:
        return [b.pos for b in self._blocks]

    def block_count(self) -> int:
        return len(self._blocks)

    def state_count(self) -> int:
        return len(self.ROTATIONS)

    def _fits(self, grid: GameGrid, blocks: List[Block]) -> bool:
        return not any(grid.collision(b.pos) for b in blocks)

    def _try_commit(self, grid: GameGrid, position: Position, rotation: int) -> bool:
        candidate = self._materialize(position, rotation)
        if not self._fits(grid, candidate):
            return False
        self._position = position
        self._rotation = rotation
        self._blocks = candidate
        return True

    def translate(self, grid: GameGrid, delta: Position) -> bool:
        """Move by `delta` keeping the orientation. False leaves the shape untouched."""
        return self._try_commit(grid, self._position + delta, self._rotation)

    def rotate(self, grid: GameGrid, direction: Direction) -> bool:
        """Switch to the neighbouring orientation, wrapping in both directions."""
        states = len(self.ROTATIONS)
        if states == 1:
            return True
        rotation = (self._rotation + int(direction)) % states
        return self._try_commit(grid, self._position, rotation)

    def draw(self, grid: GameGrid, mode: DrawMode) -> None:
        colour = Colour.EMPTY if mode == DrawMode.CLEAR else Colour.FILLED
        for block in self._blocks:
            grid.set(block.pos, colour)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(row={self._position.row}, col={self._position.col}, "
            f"rotation={self._rotation})"
        )


class BigSquare(Shape):
    ROTATIONS = (_offsets((0, 0), (0, 1), (1, 0), (1, 1)),)


class Bar(Shape):
    ROTATIONS = (
        _offsets((0, 1), (1, 1), (2, 1)),  # vertical
        _offsets((1, 0), (1, 1), (1, 2)),  # horizontal
    )


class BarT(Shape):
    # fmt: off
    ROTATIONS = (
        _offsets((0, 0), (0, 1), (0, 2), (1, 1)),
        _offsets((0, 1), (1, 0), (1, 1), (2, 1)),
        _offsets((0, 1), (1, 0), (1, 1), (1, 2)),
        _offsets((0, 0), (1, 0), (1, 1), (2, 0)),
    )
    # fmt: on


class Square(Shape):
    ROTATIONS = (_offsets((0, 0)),)


SHAPE_VARIANTS: Tuple[Type[Shape], ...] = (BigSquare, Bar, BarT, Square)
