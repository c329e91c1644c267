"""Grid shooter - tick-driven arcade simulation on a bounded 2D grid"""

from .achievements import Achievement, AchievementManager
from .collisions import CollisionReport
from .config import GameConfig
from .controller import GameController
from .entities import Direction, EntityKind, Ship, SpaceObject
from .errors import BoundaryExceededError, GridShooterError, InvalidCommandError
from .model import GameModel
from .shooter_env import GridShooterEnv, run_random_episode
from .stats import PlayerStatsTracker
from .text_ui import TextUI

__all__ = [
    'Achievement',
    'AchievementManager',
    'BoundaryExceededError',
    'CollisionReport',
    'Direction',
    'EntityKind',
    'GameConfig',
    'GameController',
    'GameModel',
    'GridShooterEnv',
    'GridShooterError',
    'InvalidCommandError',
    'PlayerStatsTracker',
    'Ship',
    'SpaceObject',
    'TextUI',
    'run_random_episode',
]
