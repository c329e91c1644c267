"""
GridShooterEnv - the grid shooter as a Gymnasium environment
------------------------------------------------------------
- One agent ship on a width x height grid
- Discrete action space: stay, up, down, left, right, fire
- Grid observation: one channel per object kind plus a health plane
- Reward shaped from the per-tick collision report

Quick test:
    python -m game.gridshooter.shooter_env
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .collisions import CollisionReport
from .config import GameConfig
from .entities import Direction, EntityKind
from .errors import BoundaryExceededError
from .model import GameModel
from .stats import PlayerStatsTracker
from .text_ui import render_grid

# stay, up, down, left, right, fire
ACTION_MOVES = {
    1: Direction.UP,
    2: Direction.DOWN,
    3: Direction.LEFT,
    4: Direction.RIGHT,
}
ACTION_FIRE = 5

# Observation channels
CH_SHIP, CH_BULLET, CH_ASTEROID, CH_ENEMY, CH_POWER_UP, CH_HEALTH = range(6)
N_CHANNELS = 6
KIND_CHANNELS = {
    EntityKind.BULLET: CH_BULLET,
    EntityKind.ASTEROID: CH_ASTEROID,
    EntityKind.ENEMY: CH_ENEMY,
    EntityKind.HEALTH_POWER_UP: CH_POWER_UP,
    EntityKind.SHIELD_POWER_UP: CH_POWER_UP,
}

DEFAULT_REWARD_CONFIG = {
    "R_KILL": 1.0,       # enemy shot down
    "R_POWER_UP": 0.5,   # power-up collected
    "R_DAMAGE": 2.0,     # multiplied by damage / max health
    "R_SHOT": 0.01,      # cost per bullet fired
    "R_SURVIVE": 0.001,  # per tick alive
    "R_DEATH": 5.0,
}


class GridShooterEnv(gym.Env):
    """Grid shooter environment driven one tick per step"""

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 10}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = 10,
        height: int = 20,
        max_steps: int = 2000,
        game_config: Optional[GameConfig] = None,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        self.game_config = game_config if game_config is not None else GameConfig(width=width, height=height)
        self.max_steps = max_steps
        self.reward_config = dict(DEFAULT_REWARD_CONFIG)
        if reward_config:
            self.reward_config.update(
                {k: v for k, v in reward_config.items() if k.startswith("R_")}
            )

        self.action_space = spaces.Discrete(6)
        self.observation_space = spaces.Box(
            low=0.0,
            high=1.0,
            shape=(N_CHANNELS, self.game_config.height, self.game_config.width),
            dtype=np.float32,
        )

        self._viewer = None
        self.log_lines: List[str] = []

        # World state
        self.model: GameModel = None  # type: ignore
        self.stats: PlayerStatsTracker = None  # type: ignore
        self._step_count = 0
        self._events: Dict[str, float] = {}
        self._damage_taken = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        # Derive the game's own random source from the gym seed stream
        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.stats = PlayerStatsTracker(start_time=0.0, clock=lambda: self._step_count / self.metadata["render_fps"])
        self.log_lines = []
        self.model = GameModel(self.log_lines.append, self.stats, self.game_config, seed=game_seed)
        self._step_count = 0
        self._damage_taken = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        self._events = {"kill": 0.0, "power_up": 0.0, "damage": 0.0, "shot": 0.0}
        action = int(action)

        self._apply_action(action)

        self._step_count += 1
        report = self.model.step(self._step_count)
        self._record_events(report)

        reward = self._compute_reward()
        terminated = self.model.is_game_over()
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def render(self):
        if self.render_mode is None:
            return None
        if self.render_mode == "ansi":
            return render_grid(self.game_config, self.model.objects, self.model.ship)

        if self._viewer is None:
            from .window import EnvViewer
            self._viewer = EnvViewer(self.game_config)
        self._viewer.show(self.model, self._step_count)
        return None

    def close(self):
        if self._viewer is not None:
            self._viewer.close()
            self._viewer = None

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _apply_action(self, action: int):
        if action == ACTION_FIRE:
            self.model.fire_bullet()
            self.stats.record_shot_fired()
            self._events["shot"] += 1.0
        elif action in ACTION_MOVES:
            try:
                self.model.move_ship(ACTION_MOVES[action])
            except BoundaryExceededError:
                pass  # bumping the wall is a no-op

    def _record_events(self, report: CollisionReport):
        self._damage_taken += report.damage
        self._events["kill"] += report.enemies_destroyed
        self._events["power_up"] += report.power_ups
        self._events["damage"] += report.damage / self.game_config.max_health

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        obs = np.zeros(self.observation_space.shape, dtype=np.float32)
        for obj in self.model.objects:
            obs[KIND_CHANNELS[obj.kind], obj.y, obj.x] = 1.0
        ship = self.model.ship
        obs[CH_SHIP, ship.y, ship.x] = 1.0
        obs[CH_HEALTH] = ship.health / ship.max_health
        return obs

    def _compute_reward(self) -> float:
        rc = self.reward_config
        reward = 0.0

        reward += rc["R_KILL"] * self._events.get("kill", 0.0)
        reward += rc["R_POWER_UP"] * self._events.get("power_up", 0.0)

        reward -= rc["R_DAMAGE"] * self._events.get("damage", 0.0)
        reward -= rc["R_SHOT"] * self._events.get("shot", 0.0)
        reward += rc["R_SURVIVE"]

        if self.model.is_game_over():
            reward -= rc["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        objects = self.model.objects
        return {
            "health": self.model.ship.health,
            "score": self.model.ship.score,
            "level": self.model.level,
            "spawn_rate": self.model.spawn_rate,
            "num_objects": len(objects),
            "num_enemies": sum(1 for o in objects if o.kind is EntityKind.ENEMY),
            "shots_fired": self.stats.shots_fired,
            "shots_hit": self.stats.shots_hit,
            "enemies_killed": self.stats.shots_hit,
            "damage_taken": self._damage_taken,
            "step": self._step_count,
        }


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: int = 42, max_steps: int = 500) -> float:
    """Run a random episode and return its total reward"""
    env = GridShooterEnv(render_mode="ansi" if render else None, max_steps=max_steps)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward
        if render:
            print(env.render())
            print()

    print(f"Random episode return: {total:.3f}  score: {info['score']}  "
          f"level: {info['level']}  steps: {info['step']}")
    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
