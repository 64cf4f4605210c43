from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

EMPTY_COLOR = (20, 20, 26)
FILLED_COLOR = (220, 60, 60)


def _color_for_value(v: int) -> Tuple[int, int, int]:
    return EMPTY_COLOR if v == 0 else FILLED_COLOR


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def window_size(self, state: np.ndarray) -> Tuple[int, int]:
        h, w = state.shape
        return w * self.cell_size + self.margin * 2, h * self.cell_size + self.margin * 2

    def grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self.grid_surface(state), (self.margin, self.margin))
        pygame.display.flip()
