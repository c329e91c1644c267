"""
Achievements and the manager that keeps their progress
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .stats import PlayerStatsTracker
from .utils import clamp

SURVIVOR = "Survivor"
STEADY_AIM = "Steady Aim"
MASTER_BLASTER = "Master Blaster"

SURVIVOR_SECONDS = 120
STEADY_AIM_ACCURACY = 0.99
STEADY_AIM_MIN_SHOTS = 10
MASTER_BLASTER_HITS = 20


@dataclass
class Achievement:
    """Progress towards one goal, always within [0, 1]"""
    name: str
    description: str
    progress: float = 0.0

    def __post_init__(self):
        self.set_progress(self.progress)

    def set_progress(self, new_progress: float):
        if not 0.0 <= new_progress <= 1.0:
            raise ValueError(f"Progress must be within [0, 1], got {new_progress}")
        self.progress = float(new_progress)

    def update_progress(self, delta: float):
        if delta < 0:
            raise ValueError(f"Progress increments must be non-negative, got {delta}")
        self.progress = min(1.0, self.progress + delta)

    @property
    def current_tier(self) -> str:
        if self.progress < 0.5:
            return "Novice"
        if self.progress < 0.999:
            return "Expert"
        return "Master"


def default_achievements() -> List[Achievement]:
    return [
        Achievement(SURVIVOR, f"Survive for {SURVIVOR_SECONDS} seconds or more."),
        Achievement(STEADY_AIM, f"Achieve at least {STEADY_AIM_ACCURACY:.0%} accuracy."),
        Achievement(MASTER_BLASTER, f"Destroy {MASTER_BLASTER_HITS} enemies."),
    ]


class AchievementManager:
    """
    Registry of achievements backed by a stats tracker.

    ``on_mastered`` is called once per achievement the first time it reaches
    the Master tier (the hook a persistence layer would attach to).
    """

    def __init__(
        self,
        stats_tracker: PlayerStatsTracker,
        achievements: Optional[List[Achievement]] = None,
        on_mastered: Optional[Callable[[Achievement], None]] = None,
    ):
        if stats_tracker is None:
            raise ValueError("stats_tracker must not be None")
        self.stats_tracker = stats_tracker
        self.on_mastered = on_mastered
        self._achievements: Dict[str, Achievement] = {}
        self._mastered = set()
        for ach in achievements if achievements is not None else default_achievements():
            self.register(ach)

    def register(self, achievement: Achievement):
        if achievement.name in self._achievements:
            raise ValueError(f"Achievement already registered: {achievement.name}")
        self._achievements[achievement.name] = achievement

    def update_achievement(self, name: str, progress: float):
        """Set absolute progress (clamped to [0, 1])"""
        ach = self._achievements[name]
        ach.set_progress(clamp(progress, 0.0, 1.0))
        if ach.current_tier == "Master" and name not in self._mastered:
            self._mastered.add(name)
            if self.on_mastered is not None:
                self.on_mastered(ach)

    def refresh(self):
        """Recompute the default achievements from the tracked stats"""
        stats = self.stats_tracker
        if SURVIVOR in self._achievements:
            self.update_achievement(SURVIVOR, stats.elapsed_seconds / SURVIVOR_SECONDS)
        if STEADY_AIM in self._achievements and stats.shots_fired >= STEADY_AIM_MIN_SHOTS:
            self.update_achievement(STEADY_AIM, stats.accuracy / STEADY_AIM_ACCURACY)
        if MASTER_BLASTER in self._achievements:
            self.update_achievement(MASTER_BLASTER, stats.shots_hit / MASTER_BLASTER_HITS)

    @property
    def achievements(self) -> List[Achievement]:
        return list(self._achievements.values())
