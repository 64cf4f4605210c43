import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from falling_blocks.game import FallingBlockGame, GameConfig, ShapeFactory  # noqa: E402


@pytest.fixture
def make_game():
    """Build a game whose factory only spawns the given variants."""

    def _make(*variants, width=8, height=16, seed=0):
        config = GameConfig(width=width, height=height, random_seed=seed)
        factory = ShapeFactory(width, seed=seed, variants=variants) if variants else None
        return FallingBlockGame(config, factory=factory)

    return _make
