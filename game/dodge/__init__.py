"""Axe dodge: game state machine, arcade window and Gymnasium environment"""

from .config import DodgeConfig, ConfigError
from .game_state import DodgeGame, FrameInput, GameSnapshot, Mode, InvalidTransitionError
from .dodge_env import DodgeEnv, run_random_episode

__all__ = [
    'DodgeConfig', 'ConfigError',
    'DodgeGame', 'FrameInput', 'GameSnapshot', 'Mode', 'InvalidTransitionError',
    'DodgeEnv', 'run_random_episode',
]
