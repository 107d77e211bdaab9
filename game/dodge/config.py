"""
Fixed game configuration
------------------------
All arena dimensions, entity start values, speeds and caps are set once at
startup and never change while the game runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


class ConfigError(ValueError):
    """Raised when a configuration cannot start a round"""


@dataclass(frozen=True)
class DodgeConfig:
    # Arena
    width: int = 800
    height: int = 450

    # Player
    player_radius: float = 25.0
    player_speed: float = 600.0  # px/s (10 px per frame at 60 FPS)
    player_color: Tuple[int, int, int] = (128, 0, 128)

    # Obstacle
    obstacle_x: float = 300.0
    obstacle_y: float = 0.0
    obstacle_size: float = 50.0
    obstacle_vx: float = 0.0
    obstacle_vy: float = 200.0
    obstacle_max_vx: float = 300.0
    obstacle_max_vy: float = 400.0
    obstacle_color: Tuple[int, int, int] = (230, 41, 55)

    # Difficulty / scoring
    growth_factor: float = 1.1
    milestone_interval: int = 10
    score_interval: float = 1.0  # seconds per point

    @property
    def center(self) -> Tuple[float, float]:
        return self.width * 0.5, self.height * 0.5

    def validate(self) -> "DodgeConfig":
        """Reject values that would make a round impossible to run.

        Returns the config itself so callers can chain it.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"arena must be non-empty, got {self.width}x{self.height}")
        if self.player_radius <= 0:
            raise ConfigError(f"player_radius must be positive, got {self.player_radius}")
        if self.player_speed < 0:
            raise ConfigError(f"player_speed must be non-negative, got {self.player_speed}")
        if 2 * self.player_radius > min(self.width, self.height):
            raise ConfigError("player does not fit inside the arena")
        if self.obstacle_size <= 0:
            raise ConfigError(f"obstacle_size must be positive, got {self.obstacle_size}")
        if not (0 <= self.obstacle_x <= self.width - self.obstacle_size
                and 0 <= self.obstacle_y <= self.height - self.obstacle_size):
            raise ConfigError("obstacle must start inside the arena")
        if self.obstacle_max_vx < 0 or self.obstacle_max_vy < 0:
            raise ConfigError("obstacle velocity caps must be non-negative")
        if abs(self.obstacle_vx) > self.obstacle_max_vx or abs(self.obstacle_vy) > self.obstacle_max_vy:
            raise ConfigError("initial obstacle velocity exceeds its cap")
        if self.growth_factor < 1.0:
            raise ConfigError(f"growth_factor must be >= 1, got {self.growth_factor}")
        if self.milestone_interval <= 0:
            raise ConfigError(f"milestone_interval must be positive, got {self.milestone_interval}")
        if self.score_interval <= 0:
            raise ConfigError(f"score_interval must be positive, got {self.score_interval}")
        return self
