"""
DodgeEnv - the dodge game as a Gymnasium environment
----------------------------------------------------
- Wraps the DodgeGame state machine; one env step is one game frame
- Arcade for rendering (imported only when rendering is requested)
- Vector observation: player position, obstacle position, offset, velocity
- MultiDiscrete action space: [vertical(3), horizontal(3)]

Quick test:
    python -m game.dodge --random
"""

from __future__ import annotations

import dataclasses
import time
from typing import Optional, Dict, Any

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import DodgeConfig
from .game_state import DodgeGame, FrameInput, Mode
from .utils import clamp


class DodgeEnv(gym.Env):
    """Dodge-the-axe environment driven by the game state machine"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 30,
        max_steps: int = 1800,  # 60s at 30 FPS
        config: Optional[DodgeConfig] = None,
        **overrides,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        config = config or DodgeConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self.config = config.validate()

        self.dt = dt
        self.max_steps = max_steps

        # Action space:
        # vertical: 0 stay, 1 up, 2 down
        # horizontal: 0 stay, 1 left, 2 right
        self.action_space = spaces.MultiDiscrete([3, 3])

        # Observation space (vector)
        # Player: pos(2)
        # Obstacle: pos(2) offset from player(2) velocity(2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(8,), dtype=np.float32
        )

        self.game = DodgeGame(self.config)

        # Arcade rendering state
        self._window = None

        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        if seed is not None:
            # Seeded reset begins a new run: round count and high score from zero
            self.game = DodgeGame(self.config)
            if self._window is not None:
                self._window.game = self.game

        if self.game.mode is Mode.MENU:
            self.game.start()
        elif self.game.mode is Mode.GAME_OVER:
            self.game.restart()
        else:
            # Truncated episode
            self.game.abandon_round()

        self._step_count = 0

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        vertical, horizontal = int(action[0]), int(action[1])
        if not (0 <= vertical < 3 and 0 <= horizontal < 3):
            raise ValueError(f"Invalid action: {action}")

        prev_score = self.game.score
        self.game.tick(FrameInput(
            dt=self.dt,
            up=vertical == 1,
            down=vertical == 2,
            left=horizontal == 1,
            right=horizontal == 2,
        ))

        terminated = self.game.mode is Mode.GAME_OVER
        reward = self._compute_reward(self.game.score - prev_score, terminated)

        self._step_count += 1
        truncated = (not terminated) and self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        p = self.game.player
        o = self.game.obstacle

        px = p.x / cfg.width
        py = p.y / cfg.height
        ox = o.x / max(1e-6, cfg.width - o.size)
        oy = o.y / max(1e-6, cfg.height - o.size)

        # Offset from player center to obstacle center
        dx = (o.x + o.size / 2 - p.x) / cfg.width
        dy = (o.y + o.size / 2 - p.y) / cfg.height

        vx = o.vx / max(1e-6, cfg.obstacle_max_vx)
        vy = o.vy / max(1e-6, cfg.obstacle_max_vy)

        obs_parts = [
            px * 2 - 1, py * 2 - 1,  # map to [-1,1]
            clamp(ox * 2 - 1, -1, 1), clamp(oy * 2 - 1, -1, 1),
            clamp(dx, -1, 1), clamp(dy, -1, 1),
            clamp(vx, -1, 1), clamp(vy, -1, 1),
        ]
        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, points: int, crashed: bool) -> float:
        R_ALIVE = 0.01
        R_POINT = 0.1
        R_CRASH = 5.0

        if crashed:
            return -R_CRASH
        return float(R_ALIVE + R_POINT * points)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "high_score": self.game.high_score,
            "speed": self.game.obstacle.speed,
            "crashed": self.game.mode is Mode.GAME_OVER,
            "rounds": self.game.rounds_played,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .window import DodgeWindow

            self._window = DodgeWindow(self.game, interactive=False)

        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random episode for testing"""
    env = DodgeEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... Press ESC or close window to exit early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f}, score: {info['score']}")

    env.close()
    return total
