"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def sign(x: float) -> float:
    """Return -1.0, 0.0 or 1.0 following the sign of x"""
    return math.copysign(1.0, x) if x != 0 else 0.0


def circle_rect_collide(cx, cy, r, rx, ry, size) -> bool:
    """Check if a circle overlaps an axis-aligned square.

    The square is given by its top-left corner and side length. The nearest
    point of the square to the circle center is found by clamping, so a
    circle that only touches an edge still counts as a hit.
    """
    nx = clamp(cx, rx, rx + size)
    ny = clamp(cy, ry, ry + size)
    dx = cx - nx
    dy = cy - ny
    return (dx * dx + dy * dy) <= (r * r)


def collides(player, obstacle) -> bool:
    """Check if the player circle touches the obstacle"""
    return circle_rect_collide(
        player.x, player.y, player.radius,
        obstacle.x, obstacle.y, obstacle.size,
    )
