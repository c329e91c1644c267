"""
Utility functions for game mechanics
"""

from __future__ import annotations

import random
from typing import Iterable, Optional


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def same_cell(a, b) -> bool:
    """Check if two positioned objects occupy the same cell"""
    return a.x == b.x and a.y == b.y


def occupied(x: int, y: int, *groups: Iterable) -> bool:
    """Check if any object in the given groups sits on (x, y)"""
    for group in groups:
        for obj in group:
            if obj.x == x and obj.y == y:
                return True
    return False


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create an owned random source; None seeds from the OS"""
    return random.Random(seed)

