"""
Per-frame motion rules for the player and the obstacle
"""

from __future__ import annotations

from .entities import Player, Obstacle


def update_player(
    player: Player,
    dt: float,
    up: bool,
    down: bool,
    left: bool,
    right: bool,
    speed: float,
    width: float,
    height: float,
):
    """Move the player from the held directions.

    Each direction is applied only if the whole circle stays inside the
    arena afterwards. A step that would cross a wall is dropped for this
    frame rather than clipped to the wall.
    """
    d = speed * dt
    r = player.radius

    if right and player.x + d <= width - r:
        player.x += d
    if left and player.x - d >= r:
        player.x -= d
    if down and player.y + d <= height - r:
        player.y += d
    if up and player.y - d >= r:
        player.y -= d


def _reflect(pos: float, size: float, v: float, bound: float) -> float:
    # only flip when moving toward the crossed wall
    if v > 0 and pos + size >= bound:
        return -v
    if v < 0 and pos <= 0:
        return -v
    return v


def update_obstacle(obstacle: Obstacle, dt: float, width: float, height: float):
    """Move the obstacle and bounce it off the arena walls.

    The bounce check runs after the move, so the box can overshoot a wall by
    up to one frame of travel before its velocity turns around.
    """
    obstacle.x += obstacle.vx * dt
    obstacle.y += obstacle.vy * dt

    obstacle.vx = _reflect(obstacle.x, obstacle.size, obstacle.vx, width)
    obstacle.vy = _reflect(obstacle.y, obstacle.size, obstacle.vy, height)
