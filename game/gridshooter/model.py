"""
GameModel - owns the simulation state and runs one phase per call
-----------------------------------------------------------------
An external loop calls, once per tick and in this order:

    advance(tick) -> resolve_collisions() -> spawn() -> level_up()

and then checks is_game_over(). ``step(tick)`` does the four phases in one go.
Player commands (fire_bullet, move_ship) happen between ticks.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

from .collisions import CollisionReport, resolve_collisions
from .config import GameConfig
from .entities import Direction, Ship, SpaceObject, bullet
from .spawner import RandomSource, Spawner
from .stats import PlayerStatsTracker
from .utils import make_rng


class GameModel:
    """Grid shooter simulation driver"""

    def __init__(
        self,
        log: Callable[[str], None],
        stats_tracker: PlayerStatsTracker,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
    ):
        if log is None or not callable(log):
            raise ValueError("log must be a callable taking one message")
        if stats_tracker is None:
            raise ValueError("stats_tracker must not be None")

        self.log = log
        self._stats = stats_tracker
        self._config = config if config is not None else GameConfig()
        self._rng = rng if rng is not None else make_rng(seed)
        self._spawner = Spawner(self._rng, self._config)

        # World state
        self._ship = Ship.from_config(self._config)
        self._objects: List[SpaceObject] = []
        self._level = self._config.start_level
        self._spawn_rate = self._config.start_spawn_rate
        self._verbose = False
        self._game_over = False

    # ----------------------------
    # Accessors
    # ----------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def ship(self) -> Ship:
        return self._ship

    @property
    def objects(self) -> List[SpaceObject]:
        """A copy of the current objects; mutating it does not touch the game"""
        return list(self._objects)

    @property
    def level(self) -> int:
        return self._level

    @property
    def spawn_rate(self) -> int:
        return self._spawn_rate

    @property
    def stats_tracker(self) -> PlayerStatsTracker:
        return self._stats

    @property
    def verbose(self) -> bool:
        return self._verbose

    @verbose.setter
    def verbose(self, value: bool):
        self._verbose = bool(value)

    def set_random_seed(self, seed: int):
        if not hasattr(self._rng, "seed"):
            raise TypeError(f"{type(self._rng).__name__} cannot be reseeded")
        self._rng.seed(seed)

    def in_bounds(self, obj: Union[SpaceObject, Ship]) -> bool:
        if obj is None:
            raise ValueError("obj must not be None")
        return self._config.in_bounds(obj.x, obj.y)

    def add_object(self, obj: SpaceObject):
        if obj is None:
            raise ValueError("obj must not be None")
        if any(o is obj for o in self._objects):
            raise ValueError(f"{obj} is already in the game")
        self._objects.append(obj)

    def _emit(self, message: str):
        if self._verbose:
            self.log(message)

    # ----------------------------
    # Tick phases
    # ----------------------------

    def advance(self, tick: int):
        """Move every object one tick, then drop the ones off the grid"""
        for obj in self._objects:
            obj.tick(tick, self._config)
        self._objects = [obj for obj in self._objects if self.in_bounds(obj)]

    def resolve_collisions(self) -> CollisionReport:
        report = resolve_collisions(
            self._ship,
            self._objects,
            self._config,
            on_shot_hit=self._stats.record_shot_hit,
            log=self._emit,
        )
        self.is_game_over()  # latch
        return report

    def spawn(self) -> List[SpaceObject]:
        spawned = self._spawner.spawn(self._ship, self._objects, self._spawn_rate)
        for obj in spawned:
            self._emit(f"Spawned {obj}")
        return spawned

    def level_up(self) -> bool:
        """Advance at most one level when the score threshold is met"""
        if self._ship.score < self._level * self._config.score_threshold:
            return False
        self._level += 1
        self._spawn_rate += self._config.spawn_rate_increase
        self._emit(
            f"Level Up! Welcome to Level {self._level}. "
            f"Spawn rate increased to {self._spawn_rate}%."
        )
        return True

    def is_game_over(self) -> bool:
        """True once health has reached 0; stays true for the rest of the game"""
        if not self._game_over and self._ship.health <= 0:
            self._game_over = True
        return self._game_over

    def step(self, tick: int) -> CollisionReport:
        """Run the four tick phases in their fixed order"""
        self.advance(tick)
        report = self.resolve_collisions()
        self.spawn()
        self.level_up()
        return report

    # ----------------------------
    # Player commands
    # ----------------------------

    def fire_bullet(self) -> SpaceObject:
        shot = bullet(self._ship.x, self._ship.y)
        self._objects.append(shot)
        return shot

    def move_ship(self, direction: Direction):
        """Raises BoundaryExceededError (ship unchanged) at the grid edge"""
        self._ship.move(direction, self._config)
        self._emit(f"Ship moved to ({self._ship.x}, {self._ship.y})")
