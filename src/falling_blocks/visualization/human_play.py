from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional

import pygame

from falling_blocks.game import Command, FallingBlockGame, GameConfig, GravityTimer
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_RIGHT,
    pygame.K_z: Command.ROTATE_LEFT,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_SPACE: Command.ROTATE_RIGHT,
}


def handle_event(game: FallingBlockGame, event: pygame.event.Event) -> bool:
    """Apply one pygame event to `game`. False when the window should close."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_r and game.game_over:
            game.reset()
        else:
            command = KEY_TO_COMMAND.get(event.key)
            if command is not None:
                game.input(command)
    return True


def run(
    config: Optional[GameConfig] = None,
    cell_size: int = 28,
    game: Optional[FallingBlockGame] = None,
) -> FallingBlockGame:
    pygame.init()
    game = game or FallingBlockGame(config)
    timer = GravityTimer(game.slot, game.config.gravity_interval)
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game.grid.cells))
        pygame.display.set_caption("Falling Blocks")
        timer.start()

        running = True
        while running:
            # Keys and the gravity timer both write the same slot; the latest wins.
            for event in pygame.event.get():
                if not handle_event(game, event):
                    running = False

            if game.slot.peek() != Command.IDLE:
                game.tick()

            renderer.draw(screen, game.grid.cells)
            if game.game_over:
                font = pygame.font.SysFont(None, 28)
                text = font.render("Game Over - R to restart", True, (255, 255, 255))
                screen.blit(text, text.get_rect(center=(screen.get_width() // 2, 12)))
                pygame.display.flip()

            clock.tick(60)
    finally:
        timer.stop()
        pygame.quit()
    return game


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks in a pygame window")
    p.add_argument("--width", type=int, default=8)
    p.add_argument("--height", type=int, default=16)
    p.add_argument("--gravity", type=float, default=1.0, help="seconds between automatic drops")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    config = GameConfig(width=args.width, height=args.height, random_seed=args.seed, gravity_interval=args.gravity)
    run(config, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
