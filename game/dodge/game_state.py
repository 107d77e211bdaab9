"""
Game state machine
------------------
DodgeGame owns the player, the obstacle, the score tracker and the
difficulty scaler, and advances them one frame at a time.

Modes and the only legal transitions between them:

    MENU      --start-->     PLAYING
    PLAYING   --collision--> GAME_OVER
    GAME_OVER --restart-->   PLAYING

Nothing moves and no collision is checked outside PLAYING.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .config import DodgeConfig
from .difficulty import DifficultyScaler
from .entities import Player, Obstacle
from .motion import update_player, update_obstacle
from .score import ScoreTracker
from .utils import collides

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


TRANSITIONS = frozenset({
    (Mode.MENU, Mode.PLAYING),
    (Mode.PLAYING, Mode.GAME_OVER),
    (Mode.GAME_OVER, Mode.PLAYING),
})


class InvalidTransitionError(RuntimeError):
    """Raised when a mode change is not one of TRANSITIONS"""


@dataclass(frozen=True)
class FrameInput:
    """Input sampled once per frame.

    Directions are "currently held"; start and restart are "newly pressed
    this frame".
    """
    dt: float
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    start: bool = False
    restart: bool = False


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of one frame for the renderer"""
    mode: Mode
    player_x: float
    player_y: float
    player_radius: float
    obstacle_x: float
    obstacle_y: float
    obstacle_size: float
    obstacle_vx: float
    obstacle_vy: float
    score: int
    high_score: int
    rounds_played: int


class DodgeGame:
    """Single owned aggregate of all game state"""

    def __init__(self, config: Optional[DodgeConfig] = None):
        self.config = (config or DodgeConfig()).validate()
        cfg = self.config

        cx, cy = cfg.center
        self.player = Player(x=cx, y=cy, radius=cfg.player_radius, color=cfg.player_color)
        self.obstacle = Obstacle(
            x=cfg.obstacle_x,
            y=cfg.obstacle_y,
            size=cfg.obstacle_size,
            vx=cfg.obstacle_vx,
            vy=cfg.obstacle_vy,
            color=cfg.obstacle_color,
        )
        self.scorer = ScoreTracker(interval=cfg.score_interval)
        self.difficulty = DifficultyScaler(
            growth_factor=cfg.growth_factor,
            milestone_interval=cfg.milestone_interval,
            max_vx=cfg.obstacle_max_vx,
            max_vy=cfg.obstacle_max_vy,
        )

        self.mode = Mode.MENU
        self.rounds_played = 0

        self._handlers: Dict[Mode, Callable[[FrameInput], None]] = {
            Mode.MENU: self._update_menu,
            Mode.PLAYING: self._update_playing,
            Mode.GAME_OVER: self._update_game_over,
        }

    # ----------------------------
    # Public API
    # ----------------------------

    @property
    def score(self) -> int:
        return self.scorer.score

    @property
    def high_score(self) -> int:
        return self.scorer.high_score

    def tick(self, frame: FrameInput) -> GameSnapshot:
        """Advance one frame and return what should be drawn"""
        if frame.dt < 0:
            raise ValueError(f"dt must be non-negative, got {frame.dt}")
        self._handlers[self.mode](frame)
        return self.snapshot()

    def start(self) -> GameSnapshot:
        return self.tick(FrameInput(dt=0.0, start=True))

    def restart(self) -> GameSnapshot:
        return self.tick(FrameInput(dt=0.0, restart=True))

    def abandon_round(self) -> GameSnapshot:
        """Drop an unfinished round and begin the next one in place.

        Used when a round is cut short from outside (an episode step limit).
        The abandoned score never reaches GAME_OVER, so it does not count
        toward the high score.
        """
        if self.mode is not Mode.PLAYING:
            raise InvalidTransitionError(f"cannot abandon a round from {self.mode.name}")

        logger.info("round %d abandoned at score %d", self.rounds_played, self.scorer.score)
        self.reset_round()
        self.rounds_played += 1
        return self.snapshot()

    def reset_round(self):
        """Put every entity and counter back to its round-start value"""
        cfg = self.config
        self.player.x, self.player.y = cfg.center

        self.obstacle.x = cfg.obstacle_x
        self.obstacle.y = cfg.obstacle_y
        self.obstacle.vx = cfg.obstacle_vx
        self.obstacle.vy = cfg.obstacle_vy

        self.scorer.reset()
        self.difficulty.reset()

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            mode=self.mode,
            player_x=self.player.x,
            player_y=self.player.y,
            player_radius=self.player.radius,
            obstacle_x=self.obstacle.x,
            obstacle_y=self.obstacle.y,
            obstacle_size=self.obstacle.size,
            obstacle_vx=self.obstacle.vx,
            obstacle_vy=self.obstacle.vy,
            score=self.scorer.score,
            high_score=self.scorer.high_score,
            rounds_played=self.rounds_played,
        )

    # ----------------------------
    # Transitions
    # ----------------------------

    def _transition(self, target: Mode):
        if (self.mode, target) not in TRANSITIONS:
            raise InvalidTransitionError(f"{self.mode.name} -> {target.name}")

        logger.info("mode %s -> %s", self.mode.name, target.name)
        self.mode = target

        if target is Mode.PLAYING:
            self.reset_round()
            self.rounds_played += 1
        elif target is Mode.GAME_OVER:
            self.scorer.reconcile_high_score()

    # ----------------------------
    # Per-mode updates
    # ----------------------------

    def _update_menu(self, frame: FrameInput):
        if frame.start:
            self._transition(Mode.PLAYING)

    def _update_playing(self, frame: FrameInput):
        cfg = self.config

        update_player(
            self.player, frame.dt,
            up=frame.up, down=frame.down, left=frame.left, right=frame.right,
            speed=cfg.player_speed, width=cfg.width, height=cfg.height,
        )
        update_obstacle(self.obstacle, frame.dt, cfg.width, cfg.height)

        self.scorer.accumulate(frame.dt)
        self.difficulty.apply(self.scorer.score, self.obstacle)

        if collides(self.player, self.obstacle):
            self._transition(Mode.GAME_OVER)

    def _update_game_over(self, frame: FrameInput):
        if frame.restart:
            self._transition(Mode.PLAYING)
