"""
Random spawn generator

Every call to ``Spawner.spawn`` consumes exactly seven draws from the shared
random source, in a fixed order, whether or not anything spawns:

    1. randrange(100)    asteroid roll
    2. randrange(width)  asteroid x
    3. randrange(100)    enemy roll
    4. randrange(width)  enemy x
    5. randrange(100)    power-up roll
    6. randrange(width)  power-up x
    7. getrandbits(1)    power-up kind (1 shield, 0 health)

A spawn whose cell is taken is skipped, never re-rolled.
"""

from __future__ import annotations

from typing import List, Protocol

from .config import GameConfig
from .entities import Ship, SpaceObject, asteroid, enemy, health_power_up, shield_power_up
from .utils import occupied

DRAWS_PER_SPAWN = 7


class RandomSource(Protocol):
    """The slice of ``random.Random`` the spawner relies on"""

    def randrange(self, stop: int) -> int: ...

    def getrandbits(self, k: int) -> int: ...


class Spawner:
    """Decides once per tick which new objects enter at the top row"""

    def __init__(self, rng: RandomSource, config: GameConfig):
        if rng is None:
            raise ValueError("rng must not be None")
        self.rng = rng
        self.config = config

    def spawn(self, ship: Ship, objects: List[SpaceObject], spawn_rate: int) -> List[SpaceObject]:
        """Append this tick's spawns to ``objects`` and return them"""
        cfg = self.config
        spawned: List[SpaceObject] = []

        asteroid_roll = self.rng.randrange(100)
        asteroid_x = self.rng.randrange(cfg.width)
        if asteroid_roll < spawn_rate:
            self._place(asteroid(asteroid_x, 0), ship, objects, spawned)

        enemy_roll = self.rng.randrange(100)
        enemy_x = self.rng.randrange(cfg.width)
        if enemy_roll < spawn_rate * cfg.enemy_spawn_factor:
            self._place(enemy(enemy_x, 0), ship, objects, spawned)

        power_up_roll = self.rng.randrange(100)
        power_up_x = self.rng.randrange(cfg.width)
        shield = self.rng.getrandbits(1) == 1
        if power_up_roll < spawn_rate * cfg.power_up_spawn_factor:
            make = shield_power_up if shield else health_power_up
            self._place(make(power_up_x, 0), ship, objects, spawned)

        return spawned

    @staticmethod
    def _place(obj: SpaceObject, ship: Ship, objects: List[SpaceObject], spawned: List[SpaceObject]):
        if occupied(obj.x, obj.y, (ship,), objects):
            return
        objects.append(obj)
        spawned.append(obj)
