"""Tests for the Gymnasium wrapper around the game model."""

import numpy as np
import pytest

from game.gridshooter.config import GameConfig
from game.gridshooter.entities import asteroid, enemy, health_power_up
from game.gridshooter.shooter_env import (
    ACTION_FIRE,
    CH_ASTEROID,
    CH_HEALTH,
    CH_SHIP,
    GridShooterEnv,
)

INFO_KEYS = {
    "health", "score", "level", "spawn_rate", "num_objects", "num_enemies",
    "shots_fired", "shots_hit", "enemies_killed", "damage_taken", "step",
}


@pytest.fixture
def env():
    env = GridShooterEnv(max_steps=50)
    yield env
    env.close()


# --- Spaces and observations ---

def test_reset_observation(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == (6, 20, 10)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert obs[CH_SHIP, 10, 5] == 1.0
    assert obs[CH_SHIP].sum() == 1.0
    assert np.all(obs[CH_HEALTH] == 1.0)
    assert set(info) == INFO_KEYS
    assert info["step"] == 0


def test_custom_grid_size():
    env = GridShooterEnv(game_config=GameConfig(width=4, height=6, ship_start=(1, 3)))
    obs, _ = env.reset(seed=0)
    assert obs.shape == (6, 6, 4)
    assert env.action_space.n == 6


def test_objects_are_drawn_on_their_channel(env):
    env.reset(seed=0)
    env.model.add_object(asteroid(2, 4))
    obs = env._get_obs()
    assert obs[CH_ASTEROID, 4, 2] == 1.0


# --- Stepping ---

def test_step_contract(env):
    env.reset(seed=1)
    obs, reward, terminated, truncated, info = env.step(0)
    assert env.observation_space.contains(obs)
    assert isinstance(reward, float)
    assert not terminated
    assert not truncated
    assert info["step"] == 1


def test_fire_counts_a_shot(env):
    env.reset(seed=1)
    _, _, _, _, info = env.step(ACTION_FIRE)
    assert info["shots_fired"] == 1


def test_move_into_wall_is_a_noop():
    env = GridShooterEnv(game_config=GameConfig(ship_start=(0, 0)))
    env.reset(seed=0)
    env.step(1)  # up
    env.step(3)  # left
    assert env.model.ship.position == (0, 0)


def test_damage_is_penalised(env):
    env.reset(seed=2)
    env.model.add_object(enemy(5, 9))
    _, reward, _, _, info = env.step(0)
    assert info["damage_taken"] == 20
    assert info["health"] == 80
    assert reward < 0


def test_death_terminates(env):
    env.reset(seed=2)
    env.model.ship.take_damage(95)
    env.model.add_object(asteroid(5, 9))
    _, _, terminated, _, _ = env.step(0)
    assert terminated


def test_power_up_after_death_keeps_episode_terminated(env):
    env.reset(seed=2)
    env.model.ship.take_damage(100)
    env.model.add_object(health_power_up(5, 10))
    _, _, terminated, _, info = env.step(0)
    assert terminated
    assert info["health"] == 0


def test_truncation_at_max_steps():
    env = GridShooterEnv(max_steps=5)
    env.reset(seed=3)
    for _ in range(4):
        _, _, _, truncated, _ = env.step(0)
        assert not truncated
    _, _, terminated, truncated, _ = env.step(0)
    assert truncated
    assert not terminated


def test_same_seed_same_trajectory():
    def run(seed):
        env = GridShooterEnv(max_steps=200)
        obs, _ = env.reset(seed=seed)
        frames = [obs]
        for i in range(200):
            obs, reward, terminated, truncated, _ = env.step(i % 6)
            frames.append(obs)
            if terminated or truncated:
                break
        return np.stack(frames)

    assert np.array_equal(run(11), run(11))


def test_reward_config_only_takes_reward_keys():
    env = GridShooterEnv(reward_config={"R_SURVIVE": 0.5, "name": "custom"})
    assert env.reward_config["R_SURVIVE"] == 0.5
    assert "name" not in env.reward_config


# --- Rendering ---

def test_ansi_render():
    env = GridShooterEnv(render_mode="ansi")
    env.reset(seed=0)
    text = env.render()
    lines = text.split("\n")
    assert len(lines) == 20
    assert "🚀" in lines[10]


def test_no_render_mode_renders_nothing(env):
    env.reset(seed=0)
    assert env.render() is None
