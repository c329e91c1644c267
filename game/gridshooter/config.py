"""
Game configuration
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GameConfig:
    """Immutable dimensions and tunables for one simulation"""
    # Arena
    width: int = 10
    height: int = 20

    # Progression
    start_spawn_rate: int = 2  # percent
    spawn_rate_increase: int = 5
    start_level: int = 1
    score_threshold: int = 100

    # Combat
    asteroid_damage: int = 10
    enemy_damage: int = 20
    enemy_kill_score: int = 10
    enemy_spawn_factor: float = 0.5
    power_up_spawn_factor: float = 0.25
    power_up_descent_interval: int = 10  # ticks

    # Ship
    max_health: int = 100
    ship_start: Tuple[int, int] = (5, 10)
    health_power_up_amount: int = 20
    shield_power_up_score: int = 50

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid must be non-empty, got {self.width}x{self.height}")
        if not self.in_bounds(*self.ship_start):
            raise ValueError(f"Ship start {self.ship_start} is outside the grid")
        if self.start_spawn_rate < 0 or self.spawn_rate_increase < 0:
            raise ValueError("Spawn rates must be non-negative")
        for name in ("enemy_spawn_factor", "power_up_spawn_factor"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be within [0, 1]")
        if self.power_up_descent_interval <= 0:
            raise ValueError("power_up_descent_interval must be positive")
        if self.max_health <= 0:
            raise ValueError("max_health must be positive")
        if self.start_level < 1:
            raise ValueError("start_level must be at least 1")
        if self.score_threshold <= 0:
            raise ValueError("score_threshold must be positive")
        for name in ("asteroid_damage", "enemy_damage", "enemy_kill_score",
                     "health_power_up_amount", "shield_power_up_score"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a cell lies on the grid"""
        return 0 <= x < self.width and 0 <= y < self.height
