"""Terminal front end.

Keys are read from stdin one line at a time (press Enter after each):
``a``/``d`` move left/right, ``s`` moves down, space rotates, ``q`` quits.
A timer thread forces a move down every ``--gravity`` seconds.
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import Dict, TextIO

from falling_blocks.game import Command, CommandSlot, FallingBlockGame, GameConfig, GravityTimer, TickResult, run_loop
from .text import format_grid

KEY_TO_COMMAND: Dict[str, Command] = {
    "a": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    " ": Command.ROTATE_RIGHT,
    "s": Command.MOVE_DOWN,
}


def read_keys(stream: TextIO, slot: CommandSlot, stop: threading.Event) -> None:
    while not stop.is_set():
        line = stream.readline()
        if not line:
            break
        for ch in line.rstrip("\n"):
            if ch == "q":
                stop.set()
                return
            command = KEY_TO_COMMAND.get(ch)
            if command is not None:
                slot.put(command)
    stop.set()


def play(config: GameConfig, stream: TextIO = sys.stdin) -> FallingBlockGame:
    game = FallingBlockGame(config)
    stop = threading.Event()
    timer = GravityTimer(game.slot, config.gravity_interval)
    reader = threading.Thread(target=read_keys, args=(stream, game.slot, stop), name="input", daemon=True)

    def show(result: TickResult) -> None:
        print(format_grid(game.get_state()))
        print(f"rows cleared: {game.rows_cleared_total}")
        if result.game_over:
            print("Game over")

    print(format_grid(game.get_state()))
    timer.start()
    reader.start()
    try:
        run_loop(game, stop, on_tick=show)
    finally:
        timer.stop()
        stop.set()
    return game


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks in the terminal")
    p.add_argument("--width", type=int, default=8)
    p.add_argument("--height", type=int, default=16)
    p.add_argument("--gravity", type=float, default=1.0, help="seconds between automatic drops")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", default="WARNING")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    play(GameConfig(width=args.width, height=args.height, random_seed=args.seed, gravity_interval=args.gravity))


if __name__ == "__main__":  # pragma: no cover
    main()
