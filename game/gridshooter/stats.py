"""
Player statistics tracker: shots fired/hit, accuracy and survival time
"""

from __future__ import annotations

import time
from typing import Callable, Optional


class PlayerStatsTracker:
    """Counts shots and measures time since tracking began"""

    def __init__(self, start_time: Optional[float] = None, clock: Callable[[], float] = time.time):
        self._clock = clock
        self.start_time = clock() if start_time is None else start_time
        self.shots_fired = 0
        self.shots_hit = 0

    def record_shot_fired(self):
        self.shots_fired += 1

    def record_shot_hit(self):
        self.shots_hit += 1

    @property
    def accuracy(self) -> float:
        """Hits per shot fired, 0.0 before the first shot"""
        if self.shots_fired == 0:
            return 0.0
        return self.shots_hit / self.shots_fired

    @property
    def elapsed_seconds(self) -> int:
        return int(self._clock() - self.start_time)
