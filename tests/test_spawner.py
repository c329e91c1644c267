"""Tests for the seven-draw spawn protocol."""

import pytest

from game.gridshooter.config import GameConfig
from game.gridshooter.entities import EntityKind, Ship, asteroid
from game.gridshooter.model import GameModel
from game.gridshooter.spawner import DRAWS_PER_SPAWN, Spawner
from game.gridshooter.stats import PlayerStatsTracker

EXPECTED_CALLS = [
    ("randrange", 100), ("randrange", 10),
    ("randrange", 100), ("randrange", 10),
    ("randrange", 100), ("randrange", 10),
    ("getrandbits", 1),
]


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def ship(config):
    return Ship.from_config(config)


def _kinds(objects):
    return [(o.kind, o.x, o.y) for o in objects]


# --- Draw protocol ---

def test_nothing_spawns_but_seven_draws_consumed(scripted, config, ship):
    rng = scripted([99, 0, 99, 0, 99, 0, 0])
    objects = []
    spawned = Spawner(rng, config).spawn(ship, objects, spawn_rate=2)
    assert spawned == []
    assert objects == []
    assert rng.calls == EXPECTED_CALLS
    assert DRAWS_PER_SPAWN == len(EXPECTED_CALLS)


def test_all_three_spawn(scripted, config, ship):
    rng = scripted([0, 1, 0, 2, 0, 3, 1])
    objects = []
    Spawner(rng, config).spawn(ship, objects, spawn_rate=100)
    assert _kinds(objects) == [
        (EntityKind.ASTEROID, 1, 0),
        (EntityKind.ENEMY, 2, 0),
        (EntityKind.SHIELD_POWER_UP, 3, 0),
    ]
    assert rng.calls == EXPECTED_CALLS


def test_false_bit_spawns_health_power_up(scripted, config, ship):
    rng = scripted([99, 0, 99, 0, 0, 6, 0])
    objects = []
    Spawner(rng, config).spawn(ship, objects, spawn_rate=4)
    # asteroid threshold 4, enemy 2.0, power-up 1.0
    assert _kinds(objects) == [(EntityKind.HEALTH_POWER_UP, 6, 0)]


def test_enemy_and_power_up_thresholds_scale_with_rate(scripted, config, ship):
    rng = scripted([1, 3, 0, 4, 0, 5, 0])
    objects = []
    Spawner(rng, config).spawn(ship, objects, spawn_rate=2)
    # enemy threshold 1.0, power-up threshold 0.5
    assert _kinds(objects) == [
        (EntityKind.ASTEROID, 3, 0),
        (EntityKind.ENEMY, 4, 0),
        (EntityKind.HEALTH_POWER_UP, 5, 0),
    ]


def test_thresholds_are_strict(scripted, config, ship):
    rng = scripted([2, 3, 1, 4, 1, 5, 0])
    objects = []
    Spawner(rng, config).spawn(ship, objects, spawn_rate=2)
    assert objects == []


# --- Skipping ---

def test_spawn_skipped_when_cell_taken_by_earlier_spawn(scripted, config, ship):
    rng = scripted([0, 4, 0, 4, 0, 4, 1])
    objects = []
    Spawner(rng, config).spawn(ship, objects, spawn_rate=100)
    assert _kinds(objects) == [(EntityKind.ASTEROID, 4, 0)]
    assert len(rng.calls) == 7


def test_spawn_skipped_when_cell_taken_by_existing_object(scripted, config, ship):
    existing = asteroid(7, 0)
    objects = [existing]
    rng = scripted([0, 7, 99, 0, 99, 0, 0])
    Spawner(rng, config).spawn(ship, objects, spawn_rate=100)
    assert objects == [existing]


def test_spawn_skipped_on_ship_cell(scripted):
    config = GameConfig(ship_start=(5, 0))
    ship = Ship.from_config(config)
    rng = scripted([0, 5, 0, 6, 99, 0, 0])
    objects = []
    Spawner(rng, config).spawn(ship, objects, spawn_rate=100)
    assert _kinds(objects) == [(EntityKind.ENEMY, 6, 0)]


def test_spawner_requires_rng(config):
    with pytest.raises(ValueError):
        Spawner(None, config)


# --- Determinism through the model ---

def test_each_model_spawn_consumes_exactly_seven_draws(counting):
    rng = counting(1234)
    model = GameModel(lambda m: None, PlayerStatsTracker(), rng=rng)
    for n in range(1, 51):
        model.spawn()
        assert len(rng.calls) == 7 * n
    assert rng.calls[:7] == EXPECTED_CALLS


def test_same_seed_gives_identical_games():
    def run(seed):
        model = GameModel(lambda m: None, PlayerStatsTracker(), seed=seed)
        frames = []
        for tick in range(1, 200):
            if tick % 7 == 0:
                model.fire_bullet()
            model.step(tick)
            frames.append(_kinds(model.objects))
        return frames, model.ship.health, model.ship.score

    assert run(99) == run(99)


def test_different_seeds_diverge():
    def run(seed):
        model = GameModel(lambda m: None, PlayerStatsTracker(), seed=seed)
        frames = []
        for tick in range(1, 300):
            model.step(tick)
            frames.append(_kinds(model.objects))
        return frames

    assert run(1) != run(2)
