from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .commands import Command, CommandSlot
from .core import FallingBlockGame, TickResult

logger = logging.getLogger(__name__)


class GravityTimer(threading.Thread):
    """Pushes MOVE_DOWN into the slot every `interval` seconds until stopped."""

    def __init__(self, slot: CommandSlot, interval: float = 1.0) -> None:
        super().__init__(name="gravity", daemon=True)
        self.slot = slot
        self.interval = float(interval)
        self._stopped = threading.Event()

    def run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.slot.put(Command.MOVE_DOWN)

    def stop(self) -> None:
        self._stopped.set()


def run_loop(
    game: FallingBlockGame,
    stop: threading.Event,
    poll_interval: float = 0.05,
    on_tick: Optional[Callable[[TickResult], None]] = None,
) -> None:
    """Tick `game` once per pending command until `stop` is set or the game ends."""
    while not stop.is_set():
        if not game.slot.wait(poll_interval):
            continue
        result = game.tick()
        if on_tick is not None:
            on_tick(result)
        if result.game_over:
            logger.info("loop finished after %d ticks", game.ticks)
            break
