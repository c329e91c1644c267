"""
Collision resolution between the ship, bullets and everything else
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import GameConfig
from .entities import EntityKind, Ship, SpaceObject, apply_power_up
from .utils import same_cell


@dataclass
class CollisionReport:
    """What happened during one resolve pass (used for rewards and logs)"""
    power_ups: int = 0
    asteroid_hits: int = 0
    enemy_hits: int = 0
    enemies_destroyed: int = 0
    bullets_blocked: int = 0
    damage: int = 0


def resolve_collisions(
    ship: Ship,
    objects: List[SpaceObject],
    config: GameConfig,
    on_shot_hit: Callable[[], None],
    log: Optional[Callable[[str], None]] = None,
) -> CollisionReport:
    """
    Resolve this tick's collisions in place.

    Both passes iterate over a snapshot of ``objects`` taken on entry.
    Pass 1 handles everything (except bullets) sitting on the ship. Power-ups
    reaching a ship with no health left are consumed without effect.
    Pass 2 lets each bullet take the first hostile on its cell, in collection
    order, that pass 1 or an earlier bullet has not already claimed.
    """
    snapshot = list(objects)
    removed = set()  # ids
    report = CollisionReport()

    def emit(message: str):
        if log is not None:
            log(message)

    # Ship collisions
    for obj in snapshot:
        if obj.kind is EntityKind.BULLET or not same_cell(obj, ship):
            continue
        if obj.kind.is_power_up:
            if ship.health > 0:
                apply_power_up(obj, ship, config)
                report.power_ups += 1
                emit(f"PowerUp collected: {obj.glyph}")
        elif obj.kind is EntityKind.ASTEROID:
            ship.take_damage(config.asteroid_damage)
            report.asteroid_hits += 1
            report.damage += config.asteroid_damage
            emit(f"Hit by asteroid! Health reduced by {config.asteroid_damage}.")
        elif obj.kind is EntityKind.ENEMY:
            ship.take_damage(config.enemy_damage)
            report.enemy_hits += 1
            report.damage += config.enemy_damage
            emit(f"Hit by enemy! Health reduced by {config.enemy_damage}.")
        removed.add(id(obj))

    # Bullet collisions
    for shot in snapshot:
        if shot.kind is not EntityKind.BULLET:
            continue
        for other in snapshot:
            if id(other) in removed or not other.kind.is_hostile:
                continue
            if not same_cell(shot, other):
                continue
            removed.add(id(shot))
            if other.kind is EntityKind.ENEMY:
                removed.add(id(other))
                ship.add_score(config.enemy_kill_score)
                on_shot_hit()
                report.enemies_destroyed += 1
                emit(f"Enemy destroyed at ({other.x}, {other.y})")
            else:
                report.bullets_blocked += 1
            break

    if removed:
        objects[:] = [obj for obj in objects if id(obj) not in removed]
    return report
