"""Shared fixtures: deterministic random sources and a quiet model."""

import random
from typing import List

import pytest

from game.gridshooter.config import GameConfig
from game.gridshooter.model import GameModel
from game.gridshooter.stats import PlayerStatsTracker


class ScriptedRandom:
    """Returns queued values and records every draw as (method, arg)."""

    def __init__(self, values: List[int]):
        self.values = list(values)
        self.calls: List[tuple] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(("randrange", stop))
        return self.values.pop(0)

    def getrandbits(self, k: int) -> int:
        self.calls.append(("getrandbits", k))
        return self.values.pop(0)


class QuietRandom:
    """Never rolls low enough to spawn anything."""

    def __init__(self):
        self.calls: List[tuple] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(("randrange", stop))
        return stop - 1

    def getrandbits(self, k: int) -> int:
        self.calls.append(("getrandbits", k))
        return 0


class CountingRandom:
    """Real seeded draws, counted."""

    def __init__(self, seed: int):
        self._rng = random.Random(seed)
        self.calls: List[tuple] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(("randrange", stop))
        return self._rng.randrange(stop)

    def getrandbits(self, k: int) -> int:
        self.calls.append(("getrandbits", k))
        return self._rng.getrandbits(k)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def log_lines() -> List[str]:
    return []


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def tracker(clock) -> PlayerStatsTracker:
    return PlayerStatsTracker(clock=clock)


@pytest.fixture
def quiet_rng() -> QuietRandom:
    return QuietRandom()


@pytest.fixture
def model(log_lines, tracker, quiet_rng) -> GameModel:
    return GameModel(log_lines.append, tracker, GameConfig(), rng=quiet_rng)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def counting():
    return CountingRandom
