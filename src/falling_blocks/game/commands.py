from __future__ import annotations

import threading
from enum import IntEnum
from typing import Optional


class Command(IntEnum):
    IDLE = 0
    ROTATE_LEFT = 1
    ROTATE_RIGHT = 2
    MOVE_DOWN = 3
    MOVE_LEFT = 4
    MOVE_RIGHT = 5


class CommandSlot:
    """Single pending command shared between input producers and the game.

    Writes overwrite whatever is pending; nothing is queued and a dropped
    command is never reported. `take` hands the command to exactly one
    consumer and leaves the slot idle.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._command = Command.IDLE

    def put(self, command: Command) -> None:
        with self._cond:
            self._command = Command(command)
            if self._command != Command.IDLE:
                self._cond.notify_all()

    def peek(self) -> Command:
        with self._cond:
            return self._command

    def take(self) -> Command:
        with self._cond:
            command = self._command
            self._command = Command.IDLE
            return command

    def clear(self) -> None:
        self.put(Command.IDLE)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until a non-idle command is pending. False on timeout."""
        with self._cond:
            return self._cond.wait_for(lambda: self._command != Command.IDLE, timeout)
