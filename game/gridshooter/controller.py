"""
GameController - wires player commands and the tick loop to the model
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Dict, List, Optional, Protocol

from .achievements import AchievementManager
from .entities import Direction, SpaceObject
from .errors import BoundaryExceededError, InvalidCommandError
from .model import GameModel
from .stats import PlayerStatsTracker

INVALID_INPUT_MESSAGE = "Invalid input. Use W, A, S, D, F, or P."
ACHIEVEMENT_LOG_INTERVAL = 100  # ticks


class GameUI(Protocol):
    """Presentation sink the controller draws into"""

    def log(self, message: str) -> None: ...

    def render(self, objects: List[SpaceObject], stats: Dict[str, object]) -> None: ...

    def show_game_over(self, final_score: int) -> None: ...


class Command(Enum):
    MOVE_UP = "W"
    MOVE_LEFT = "A"
    MOVE_DOWN = "S"
    MOVE_RIGHT = "D"
    FIRE = "F"
    PAUSE = "P"


MOVES = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


def parse_command(token: str) -> Command:
    """Map an input token (case-insensitive) to a command"""
    if not isinstance(token, str):
        raise InvalidCommandError(INVALID_INPUT_MESSAGE)
    try:
        return Command(token.strip().upper())
    except ValueError:
        raise InvalidCommandError(INVALID_INPUT_MESSAGE) from None


class GameController:
    """
    Runs the per-tick phase order and applies player input.

    Input and ticks share one re-entrant lock, so a command never lands in
    the middle of a phase even when the UI delivers keys from another thread.
    """

    def __init__(
        self,
        ui: GameUI,
        model: Optional[GameModel] = None,
        achievements: Optional[AchievementManager] = None,
    ):
        if ui is None:
            raise ValueError("ui must not be None")
        self.ui = ui
        self.model = model if model is not None else GameModel(ui.log, PlayerStatsTracker())
        self.achievements = (
            achievements if achievements is not None
            else AchievementManager(self.model.stats_tracker)
        )
        self.paused = False
        self.game_over = False
        self._lock = threading.RLock()

    @property
    def stats_tracker(self) -> PlayerStatsTracker:
        return self.model.stats_tracker

    @property
    def verbose(self) -> bool:
        return self.model.verbose

    @verbose.setter
    def verbose(self, value: bool):
        self.model.verbose = value

    # ----------------------------
    # Tick loop
    # ----------------------------

    def on_tick(self, tick: int) -> bool:
        """Process one tick; returns False if the tick was skipped"""
        with self._lock:
            if self.paused or self.game_over:
                return False
            self.model.advance(tick)
            self.model.resolve_collisions()
            self.model.spawn()
            self.model.level_up()
            self.refresh_achievements(tick)
            self.render_game()

            if self.model.is_game_over():
                self.game_over = True
                self.paused = True
                self.ui.show_game_over(self.model.ship.score)
            return True

    def refresh_achievements(self, tick: int):
        self.achievements.refresh()
        if self.verbose and tick % ACHIEVEMENT_LOG_INTERVAL == 0:
            for ach in self.achievements.achievements:
                self.ui.log(f"{ach.name}: {ach.progress:.0%} ({ach.current_tier})")

    def render_game(self):
        ship = self.model.ship
        stats = {
            "Score": ship.score,
            "Health": ship.health,
            "Level": self.model.level,
            "Time Survived": f"{self.stats_tracker.elapsed_seconds} seconds",
        }
        self.ui.render(self.model.objects, stats)

    # ----------------------------
    # Player input
    # ----------------------------

    def handle_player_input(self, token: str):
        with self._lock:
            try:
                command = parse_command(token)
            except InvalidCommandError as e:
                self.ui.log(str(e))
                return

            if command is Command.PAUSE:
                self.pause_game()
                return
            if self.paused:
                return

            if command is Command.FIRE:
                self.model.fire_bullet()
                self.stats_tracker.record_shot_fired()
                return

            try:
                self.model.move_ship(MOVES[command])
            except BoundaryExceededError as e:
                self.ui.log(str(e))

    def pause_game(self):
        """Toggle pause; a finished game stays paused"""
        with self._lock:
            if self.game_over:
                return
            self.paused = not self.paused

    def summary(self) -> str:
        """Final statistics and achievement progress, one line each"""
        stats = self.stats_tracker
        lines = [
            f"Shots Fired: {stats.shots_fired}",
            f"Shots Hit: {stats.shots_hit}",
            f"Enemies Destroyed: {stats.shots_hit}",
            f"Survival Time: {stats.elapsed_seconds} seconds",
        ]
        for ach in self.achievements.achievements:
            lines.append(
                f"{ach.name} - {ach.description} "
                f"({ach.progress * 100:.0f}% complete, Tier: {ach.current_tier})"
            )
        return "\n".join(lines)
