from __future__ import annotations

import numpy as np

FILLED = "█"
EMPTY = "·"


def format_grid(grid: np.ndarray) -> str:
    return "\n".join("".join(FILLED if cell else EMPTY for cell in row) for row in grid)


def print_grid(grid: np.ndarray) -> None:
    print(format_grid(grid))
