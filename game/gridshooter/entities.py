"""
Game entity dataclasses
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .config import GameConfig
from .errors import BoundaryExceededError
from .utils import clamp


class Direction(Enum):
    """Cardinal move with its (dx, dy) step"""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class EntityKind(Enum):
    """Variant tag for everything on the grid except the ship"""
    BULLET = "Bullet"
    ASTEROID = "Asteroid"
    ENEMY = "Enemy"
    HEALTH_POWER_UP = "HealthPowerUp"
    SHIELD_POWER_UP = "ShieldPowerUp"

    @property
    def is_power_up(self) -> bool:
        return self in (EntityKind.HEALTH_POWER_UP, EntityKind.SHIELD_POWER_UP)

    @property
    def is_hostile(self) -> bool:
        """Asteroids and enemies hurt the ship and stop bullets"""
        return self in (EntityKind.ASTEROID, EntityKind.ENEMY)


SHIP_GLYPH = "🚀"

GLYPHS = {
    EntityKind.BULLET: "🔺",
    EntityKind.ASTEROID: "🌑",
    EntityKind.ENEMY: "👾",
    EntityKind.HEALTH_POWER_UP: "❤️",
    EntityKind.SHIELD_POWER_UP: "🛡️",
}


@dataclass
class Ship:
    """Player ship. Moves only on explicit commands."""
    x: int
    y: int
    health: int
    max_health: int
    score: int = 0

    @classmethod
    def from_config(cls, config: GameConfig) -> "Ship":
        x, y = config.ship_start
        return cls(x=x, y=y, health=config.max_health, max_health=config.max_health)

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def glyph(self) -> str:
        return SHIP_GLYPH

    def take_damage(self, damage: int):
        self.health = int(clamp(self.health - damage, 0, self.max_health))

    def heal(self, amount: int):
        self.health = int(clamp(self.health + amount, 0, self.max_health))

    def add_score(self, points: int):
        if points < 0:
            raise ValueError(f"Score can only grow, got {points}")
        self.score += points

    def move(self, direction: Direction, config: GameConfig):
        """Step one cell, refusing to leave the grid"""
        nx, ny = self.x + direction.dx, self.y + direction.dy
        if not config.in_bounds(nx, ny):
            raise BoundaryExceededError(
                f"Cannot move {direction.name.lower()}. Out of bounds!"
            )
        self.x, self.y = nx, ny

    def __str__(self) -> str:
        return f"Ship({self.x}, {self.y})"


@dataclass(eq=False)
class SpaceObject:
    """A bullet, asteroid, enemy or power-up. Compared by identity."""
    kind: EntityKind
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def glyph(self) -> str:
        return GLYPHS[self.kind]

    def tick(self, tick: int, config: GameConfig):
        if self.kind is EntityKind.BULLET:
            self.y -= 1
        elif self.kind.is_hostile:
            self.y += 1
        elif tick % config.power_up_descent_interval == 0:
            self.y += 1

    def __str__(self) -> str:
        return f"{self.kind.value}({self.x}, {self.y})"


def bullet(x: int, y: int) -> SpaceObject:
    return SpaceObject(EntityKind.BULLET, x, y)


def asteroid(x: int, y: int) -> SpaceObject:
    return SpaceObject(EntityKind.ASTEROID, x, y)


def enemy(x: int, y: int) -> SpaceObject:
    return SpaceObject(EntityKind.ENEMY, x, y)


def health_power_up(x: int, y: int) -> SpaceObject:
    return SpaceObject(EntityKind.HEALTH_POWER_UP, x, y)


def shield_power_up(x: int, y: int) -> SpaceObject:
    return SpaceObject(EntityKind.SHIELD_POWER_UP, x, y)


def apply_power_up(obj: SpaceObject, ship: Ship, config: GameConfig):
    """Apply a power-up's effect to the ship"""
    if obj.kind is EntityKind.HEALTH_POWER_UP:
        ship.heal(config.health_power_up_amount)
    elif obj.kind is EntityKind.SHIELD_POWER_UP:
        ship.add_score(config.shield_power_up_score)
    else:
        raise ValueError(f"{obj} is not a power-up")
