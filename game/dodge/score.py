"""
Time-based scoring and in-memory high score
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ScoreTracker:
    """Turns survival time into points, one point per `interval` seconds"""

    def __init__(self, interval: float = 1.0):
        self.interval = interval
        self.score = 0
        self.timer = 0.0
        self.high_score = 0

    def reset(self):
        """Start a new round. The high score survives."""
        self.score = 0
        self.timer = 0.0

    def accumulate(self, dt: float) -> int:
        """Add elapsed time and return how many points it earned.

        The timer keeps its sub-interval remainder so that variable frame
        times do not drift the score.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        self.timer += dt
        gained = 0
        while self.timer >= self.interval:
            self.timer -= self.interval
            gained += 1
        self.score += gained
        return gained

    def reconcile_high_score(self) -> bool:
        """Raise the high score to the current score if it was beaten"""
        if self.score > self.high_score:
            logger.info("new high score: %d (was %d)", self.score, self.high_score)
            self.high_score = self.score
            return True
        return False
