from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Command, FallingBlockGame, GameConfig


class FallingBlockEnv(gym.Env):
    """One environment step is one command followed by one game tick.

    Action indices are `Command` values (0 is IDLE). The observation is the
    grid occupancy with the falling shape included; the reward is the number
    of rows cleared by the tick.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: int = 5000,
    ) -> None:
        super().__init__()
        self.game = FallingBlockGame(config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)

        h, w = self.game.grid.shape
        self.observation_space = spaces.Box(low=0, high=1, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Command))

        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        return {
            "rows_cleared_total": self.game.rows_cleared_total,
            "shape": type(self.game.shape).__name__,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset(seed)
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action: int):
        command = Command(int(action))
        self.game.input(command)
        result = self.game.tick()
        self._steps += 1

        reward = float(result.rows_cleared)
        terminated = bool(result.game_over)
        truncated = self._steps >= self.max_episode_steps

        info = self._get_info()
        info["landed"] = result.landed
        info["accepted"] = result.accepted
        return self.game.get_state(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            grid = self.game.get_state()
            cell = 12
            h, w = grid.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = (220, 60, 60) if grid[y, x] else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
