"""
Milestone-based difficulty scaling for the obstacle
"""

from __future__ import annotations

import logging

from .entities import Obstacle
from .utils import sign

logger = logging.getLogger(__name__)


class DifficultyScaler:
    """Speeds the obstacle up each time the score hits a new milestone"""

    def __init__(
        self,
        growth_factor: float = 1.1,
        milestone_interval: int = 10,
        max_vx: float = 300.0,
        max_vy: float = 400.0,
    ):
        self.growth_factor = growth_factor
        self.milestone_interval = milestone_interval
        self.max_vx = max_vx
        self.max_vy = max_vy
        self.checkpoint = 0

    def reset(self):
        self.checkpoint = 0

    def _scale(self, v: float, cap: float) -> float:
        if v == 0:
            return v
        return sign(v) * min(abs(v) * self.growth_factor, cap)

    def apply(self, score: int, obstacle: Obstacle) -> bool:
        """Scale the obstacle velocity if `score` is a fresh milestone.

        Fires at most once per milestone value, no matter how many frames
        the score stays there. Returns True when it fired.
        """
        if score <= self.checkpoint or score % self.milestone_interval != 0:
            return False

        obstacle.vx = self._scale(obstacle.vx, self.max_vx)
        obstacle.vy = self._scale(obstacle.vy, self.max_vy)
        self.checkpoint = score

        logger.debug("score %d: obstacle velocity now (%.1f, %.1f)", score, obstacle.vx, obstacle.vy)
        return True
