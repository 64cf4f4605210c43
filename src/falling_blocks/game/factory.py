from __future__ import annotations

import random
from typing import Optional, Sequence, Type

from .grid import Position
from .pieces import SHAPE_VARIANTS, Shape


class ShapeFactory:
    """Spawns shapes picked uniformly among `variants`.

    With ``seed=None`` the generator is seeded from the OS entropy source, so
    every process sees a different sequence.
    """

    def __init__(
        self,
        width: int,
        seed: Optional[int] = None,
        variants: Sequence[Type[Shape]] = SHAPE_VARIANTS,
    ) -> None:
        if not variants:
            raise ValueError("at least one shape variant is required")
        self.variants = tuple(variants)
        self.spawn_position = Position(0, int(width) // 2 - 1)
        self.rng = random.Random(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        self.rng.seed(seed)

    def spawn(self) -> Shape:
        kind = self.rng.choice(self.variants)
        return kind(self.spawn_position)
