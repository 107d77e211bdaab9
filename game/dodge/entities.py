"""
Game entity dataclasses
"""

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class Player:
    """Player avatar, positioned by its center"""
    x: float
    y: float
    radius: float = 25.0
    color: Color = (128, 0, 128)  # purple


@dataclass
class Obstacle:
    """Square axe, positioned by its top-left corner"""
    x: float
    y: float
    size: float = 50.0
    vx: float = 0.0  # px/s
    vy: float = 200.0  # px/s
    color: Color = (230, 41, 55)  # red

    @property
    def speed(self) -> float:
        """Largest velocity component magnitude"""
        return max(abs(self.vx), abs(self.vy))
