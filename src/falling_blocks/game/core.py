from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .commands import Command, CommandSlot
from .factory import ShapeFactory
from .grid import GameGrid, Position
from .pieces import Direction, DrawMode, Shape

logger = logging.getLogger(__name__)


MOVES = {
    Command.MOVE_DOWN: Position(1, 0),
    Command.MOVE_LEFT: Position(0, -1),
    Command.MOVE_RIGHT: Position(0, 1),
}

ROTATIONS = {
    Command.ROTATE_LEFT: Direction.LEFT,
    Command.ROTATE_RIGHT: Direction.RIGHT,
}


@dataclass
class GameConfig:
    width: int = 8
    height: int = 16
    random_seed: Optional[int] = None
    gravity_interval: float = 1.0  # seconds between forced MOVE_DOWN commands

    def __post_init__(self) -> None:
        if self.width < 4:
            raise ValueError(f"width must be at least 4, got {self.width}")
        if self.height < 4:
            raise ValueError(f"height must be at least 4, got {self.height}")
        if self.gravity_interval <= 0:
            raise ValueError(f"gravity_interval must be positive, got {self.gravity_interval}")


@dataclass
class TickResult:
    command: Command
    accepted: bool = False
    landed: bool = False
    rows_cleared: int = 0
    game_over: bool = False


class FallingBlockGame:
    """Tick-driven game: one pending command in, one grid update out.

    Producers write into the command slot (directly or through `input`),
    the owner calls `tick` to apply it, and renderers read `grid.cells`.
    `tick` is not safe to call from several threads at once.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        slot: Optional[CommandSlot] = None,
        factory: Optional[ShapeFactory] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.slot = slot or CommandSlot()
        self.factory = factory or ShapeFactory(self.config.width, self.config.random_seed)
        expected = Position(0, self.config.width // 2 - 1)
        if self.factory.spawn_position != expected:
            raise ValueError(
                f"factory spawns at {self.factory.spawn_position}, expected {expected} for width {self.config.width}"
            )
        self.grid = GameGrid(self.config.width, self.config.height)
        self.shape: Shape
        self.game_over = False
        self.rows_cleared_total = 0
        self.ticks = 0
        self.reset()

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.factory.reseed(seed)
        self.grid.reset()
        self.slot.clear()
        self.game_over = False
        self.rows_cleared_total = 0
        self.ticks = 0
        self._spawn_shape()
        logger.info("new game on %dx%d grid", self.grid.width, self.grid.height)

    def _spawn_shape(self) -> None:
        self.shape = self.factory.spawn()
        # A stack reaching the spawn area ends the game; the blocked shape is never drawn.
        if any(self.grid.collision(pos) for pos in self.shape.positions()):
            self.game_over = True
            logger.info("game over: %r blocked at spawn", self.shape)
            return
        self.shape.draw(self.grid, DrawMode.DRAW)

    def input(self, command: Command) -> None:
        self.slot.put(command)

    def _land(self, result: TickResult) -> None:
        result.landed = True
        logger.debug("%r landed", self.shape)
        rows = self.grid.clear_full_rows()
        if rows:
            logger.debug("cleared %d row(s)", rows)
        result.rows_cleared = rows
        self.rows_cleared_total += rows
        self._spawn_shape()

    def tick(self) -> TickResult:
        command = self.slot.take()
        result = TickResult(command=command, game_over=self.game_over)
        if command == Command.IDLE or self.game_over:
            return result
        self.ticks += 1

        # The shape must be off the grid so it cannot collide with itself.
        self.shape.draw(self.grid, DrawMode.CLEAR)
        if command in ROTATIONS:
            result.accepted = self.shape.rotate(self.grid, ROTATIONS[command])
        else:
            result.accepted = self.shape.translate(self.grid, MOVES[command])
        self.shape.draw(self.grid, DrawMode.DRAW)

        if command == Command.MOVE_DOWN and not result.accepted:
            self._land(result)
        result.game_over = self.game_over
        return result

    def get_state(self) -> np.ndarray:
        return self.grid.occupancy()
