"""Tests for the ship, space objects and configuration."""

import pytest

from game.gridshooter.config import GameConfig
from game.gridshooter.entities import (
    Direction,
    EntityKind,
    Ship,
    apply_power_up,
    asteroid,
    bullet,
    enemy,
    health_power_up,
    shield_power_up,
)
from game.gridshooter.errors import BoundaryExceededError


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def ship(config):
    return Ship.from_config(config)


# --- Ship ---

def test_ship_defaults(ship):
    assert ship.position == (5, 10)
    assert ship.health == 100
    assert ship.score == 0


def test_take_damage_clamps_at_zero(ship):
    ship.take_damage(30)
    assert ship.health == 70
    ship.take_damage(500)
    assert ship.health == 0
    ship.take_damage(10)
    assert ship.health == 0


def test_heal_clamps_at_max(ship):
    ship.take_damage(10)
    ship.heal(50)
    assert ship.health == 100
    ship.heal(1)
    assert ship.health == 100


def test_score_only_grows(ship):
    ship.add_score(15)
    assert ship.score == 15
    with pytest.raises(ValueError):
        ship.add_score(-1)
    assert ship.score == 15


def test_ship_move(ship, config):
    ship.move(Direction.UP, config)
    ship.move(Direction.LEFT, config)
    assert ship.position == (4, 9)
    ship.move(Direction.DOWN, config)
    ship.move(Direction.RIGHT, config)
    assert ship.position == (5, 10)


@pytest.mark.parametrize("start,direction,word", [
    ((0, 5), Direction.LEFT, "left"),
    ((9, 5), Direction.RIGHT, "right"),
    ((5, 0), Direction.UP, "up"),
    ((5, 19), Direction.DOWN, "down"),
])
def test_ship_move_off_grid_is_rejected(config, start, direction, word):
    ship = Ship(x=start[0], y=start[1], health=100, max_health=100)
    with pytest.raises(BoundaryExceededError, match=f"Cannot move {word}. Out of bounds!"):
        ship.move(direction, config)
    assert ship.position == start


def test_ship_does_not_tick():
    assert not hasattr(Ship, "tick")


# --- Space objects ---

def test_bullet_moves_up(config):
    b = bullet(3, 7)
    b.tick(1, config)
    assert b.position == (3, 6)


@pytest.mark.parametrize("make", [asteroid, enemy])
def test_hostiles_descend_every_tick(config, make):
    obj = make(2, 0)
    for tick in range(1, 4):
        obj.tick(tick, config)
    assert obj.position == (2, 3)


@pytest.mark.parametrize("make", [health_power_up, shield_power_up])
def test_power_ups_descend_every_tenth_tick(config, make):
    obj = make(1, 0)
    for tick in range(1, 10):
        obj.tick(tick, config)
    assert obj.y == 0
    obj.tick(10, config)
    assert obj.y == 1
    obj.tick(11, config)
    assert obj.y == 1


def test_objects_compare_by_identity():
    assert bullet(1, 1) != bullet(1, 1)
    b = bullet(1, 1)
    assert b == b


def test_str_and_glyphs():
    assert str(bullet(2, 4)) == "Bullet(2, 4)"
    assert str(health_power_up(0, 0)) == "HealthPowerUp(0, 0)"
    assert asteroid(0, 0).glyph == "🌑"
    assert Ship(x=1, y=2, health=1, max_health=1).glyph == "🚀"


def test_kind_flags():
    assert EntityKind.ENEMY.is_hostile and EntityKind.ASTEROID.is_hostile
    assert not EntityKind.BULLET.is_hostile
    assert EntityKind.SHIELD_POWER_UP.is_power_up
    assert not EntityKind.ENEMY.is_power_up


# --- Power-up effects ---

def test_health_power_up_heals(ship, config):
    ship.take_damage(50)
    apply_power_up(health_power_up(0, 0), ship, config)
    assert ship.health == 70


def test_shield_power_up_adds_score(ship, config):
    apply_power_up(shield_power_up(0, 0), ship, config)
    assert ship.score == 50


def test_apply_power_up_rejects_other_kinds(ship, config):
    with pytest.raises(ValueError):
        apply_power_up(enemy(0, 0), ship, config)


# --- Config ---

def test_config_in_bounds(config):
    assert config.in_bounds(0, 0)
    assert config.in_bounds(9, 19)
    assert not config.in_bounds(10, 0)
    assert not config.in_bounds(0, 20)
    assert not config.in_bounds(-1, 5)


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -1},
    {"ship_start": (10, 0)},
    {"start_spawn_rate": -1},
    {"enemy_spawn_factor": 1.5},
    {"power_up_descent_interval": 0},
    {"start_level": 0},
    {"score_threshold": 0},
    {"asteroid_damage": -5},
    {"enemy_damage": -1},
    {"enemy_kill_score": -10},
])
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_config_is_immutable(config):
    with pytest.raises(Exception):
        config.width = 99
