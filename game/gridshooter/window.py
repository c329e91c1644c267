"""
Arcade rendering for the grid shooter
"""

from __future__ import annotations

from typing import Dict, List, Optional

import arcade

from .config import GameConfig
from .controller import GameController
from .entities import EntityKind, Ship, SpaceObject
from .model import GameModel
from .stats import PlayerStatsTracker

CELL = 32
HUD_HEIGHT = 48
MAX_LOG_LINES = 4

BG = (18, 18, 22)
GRID_C = (34, 34, 42)
SHIP_C = (80, 200, 120)
HUD_C = (220, 220, 220)
KIND_COLORS = {
    EntityKind.BULLET: (180, 180, 220),
    EntityKind.ASTEROID: (140, 120, 100),
    EntityKind.ENEMY: (220, 80, 80),
    EntityKind.HEALTH_POWER_UP: (240, 110, 160),
    EntityKind.SHIELD_POWER_UP: (240, 210, 80),
}

KEY_TOKENS = {
    arcade.key.W: "W",
    arcade.key.A: "A",
    arcade.key.S: "S",
    arcade.key.D: "D",
    arcade.key.F: "F",
    arcade.key.P: "P",
    arcade.key.UP: "W",
    arcade.key.LEFT: "A",
    arcade.key.DOWN: "S",
    arcade.key.RIGHT: "D",
    arcade.key.SPACE: "F",
}


def window_size(config: GameConfig):
    return config.width * CELL, config.height * CELL + HUD_HEIGHT


def draw_frame(config: GameConfig, objects: List[SpaceObject], ship: Optional[Ship], hud: str):
    """Draw grid, objects, ship and HUD text; grid row 0 is the top row"""
    top = config.height * CELL

    def cell_rect(x: int, y: int, pad: int):
        left = x * CELL + pad
        bottom = top - (y + 1) * CELL + pad
        return left, left + CELL - 2 * pad, bottom, bottom + CELL - 2 * pad

    for gx in range(config.width):
        for gy in range(config.height):
            arcade.draw_lrbt_rectangle_outline(*cell_rect(gx, gy, 0), GRID_C)

    for obj in objects:
        color = KIND_COLORS[obj.kind]
        if obj.kind is EntityKind.BULLET:
            arcade.draw_lrbt_rectangle_filled(*cell_rect(obj.x, obj.y, 12), color)
        else:
            cx = obj.x * CELL + CELL / 2
            cy = top - obj.y * CELL - CELL / 2
            arcade.draw_circle_filled(cx, cy, CELL / 2 - 4, color)

    if ship is not None:
        arcade.draw_lrbt_rectangle_filled(*cell_rect(ship.x, ship.y, 4), SHIP_C)

        # Health bar
        bar_w, bar_h = config.width * CELL - 24, 8
        x0, y0 = 12, top + HUD_HEIGHT - 16
        arcade.draw_lrbt_rectangle_filled(x0, x0 + bar_w, y0, y0 + bar_h, (60, 60, 60))
        fill = bar_w * ship.health / ship.max_health
        if fill > 0:
            arcade.draw_lrbt_rectangle_filled(x0, x0 + fill, y0, y0 + bar_h, SHIP_C)

    arcade.draw_text(hud, 12, top + 8, HUD_C, 12)


class GridShooterWindow(arcade.Window):
    """Playable window: also the controller's presentation sink"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        tick_interval: float = 0.2,
    ):
        self.game_config = config if config is not None else GameConfig()
        width, height = window_size(self.game_config)
        super().__init__(width, height, "Grid Shooter")
        self.background_color = BG
        self.tick_interval = tick_interval
        self._timer = 0.0
        self._tick = 0
        self._objects: List[SpaceObject] = []
        self._hud = ""
        self._log_lines: List[str] = []
        self.final_score: Optional[int] = None

        model = GameModel(self.log, PlayerStatsTracker(), self.game_config, seed=seed)
        self.controller = GameController(self, model)

    # GameUI

    def log(self, message: str):
        print(message)
        self._log_lines = (self._log_lines + [message])[-MAX_LOG_LINES:]

    def render(self, objects: List[SpaceObject], stats: Dict[str, object]):
        self._objects = objects
        self._hud = "  ".join(f"{k}: {v}" for k, v in stats.items())

    def show_game_over(self, final_score: int):
        self.final_score = final_score
        print(f"Game Over! Final score: {final_score}")
        print(self.controller.summary())

    # Arcade callbacks

    def on_update(self, delta_time: float):
        self._timer += delta_time
        if self._timer < self.tick_interval:
            return
        self._timer = 0.0
        if self.controller.on_tick(self._tick + 1):
            self._tick += 1

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        self.controller.handle_player_input(KEY_TOKENS.get(symbol, str(symbol)))

    def on_draw(self):
        self.clear()
        hud = self._hud
        if self.final_score is not None:
            hud = f"GAME OVER  Score: {self.final_score}"
        elif self.controller.paused:
            hud = f"PAUSED  {hud}"
        draw_frame(self.game_config, self._objects, self.controller.model.ship, hud)
        for i, line in enumerate(reversed(self._log_lines)):
            arcade.draw_text(line, 8, 8 + i * 14, HUD_C, 10)


class EnvViewer(arcade.Window):
    """Passive window the gym environment draws into"""

    def __init__(self, config: GameConfig):
        width, height = window_size(config)
        super().__init__(width, height, "GridShooterEnv - Arcade")
        self.background_color = BG
        self.game_config = config

    def show(self, model: GameModel, step: int):
        self.dispatch_events()
        self.clear()
        hud = (f"HP: {model.ship.health}  Score: {model.ship.score}  "
               f"Level: {model.level}  Step: {step}")
        draw_frame(self.game_config, model.objects, model.ship, hud)
        self.flip()


def play(seed: Optional[int] = None, verbose: bool = False, tick_interval: float = 0.2):
    """Open the window and run until it is closed"""
    window = GridShooterWindow(seed=seed, tick_interval=tick_interval)
    window.controller.verbose = verbose
    arcade.run()
