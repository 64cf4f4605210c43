"""Game module for Falling Blocks.

Exports the core engine and supporting classes:
- GameGrid: cell buffer, collision test and row clearing
- Shape and its variants: pieces with precomputed rotation tables
- ShapeFactory: uniform random spawning at the spawn position
- CommandSlot: single pending command shared with input producers
- FallingBlockGame: per-tick state machine
"""

from .commands import Command, CommandSlot
from .core import FallingBlockGame, GameConfig, TickResult
from .factory import ShapeFactory
from .grid import Block, Colour, GameGrid, Position
from .loop import GravityTimer, run_loop
from .pieces import SHAPE_VARIANTS, Bar, BarT, BigSquare, Direction, DrawMode, Shape, Square

__all__ = [
    "Block",
    "Colour",
    "GameGrid",
    "Position",
    "Shape",
    "BigSquare",
    "Bar",
    "BarT",
    "Square",
    "SHAPE_VARIANTS",
    "Direction",
    "DrawMode",
    "ShapeFactory",
    "Command",
    "CommandSlot",
    "GameConfig",
    "TickResult",
    "FallingBlockGame",
    "GravityTimer",
    "run_loop",
]
