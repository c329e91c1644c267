"""
Terminal presentation sink: draws the grid as rows of glyphs
"""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, TextIO

from .config import GameConfig
from .entities import SHIP_GLYPH, Ship, SpaceObject

EMPTY_CELL = "·"


def render_grid(config: GameConfig, objects: List[SpaceObject], ship: Optional[Ship] = None) -> str:
    """Text frame of the grid, one line per row, top row first"""
    rows = [[EMPTY_CELL] * config.width for _ in range(config.height)]
    for obj in objects:
        if config.in_bounds(obj.x, obj.y):
            rows[obj.y][obj.x] = obj.glyph
    if ship is not None:
        rows[ship.y][ship.x] = SHIP_GLYPH
    return "\n".join("".join(row) for row in rows)


class TextUI:
    """Prints frames, log lines and the game-over banner to a stream"""

    def __init__(self, config: Optional[GameConfig] = None, stream: Optional[TextIO] = None):
        self.config = config if config is not None else GameConfig()
        self.stream = stream if stream is not None else sys.stdout
        self.ship: Optional[Ship] = None
        self.frames = 0

    def attach(self, ship: Ship):
        """Draw this ship on top of every frame"""
        self.ship = ship

    def log(self, message: str):
        print(message, file=self.stream)

    def render(self, objects: List[SpaceObject], stats: Dict[str, object]):
        self.frames += 1
        hud = "  ".join(f"{k}: {v}" for k, v in stats.items())
        print(render_grid(self.config, objects, self.ship), file=self.stream)
        print(hud, file=self.stream)

    def show_game_over(self, final_score: int):
        print(f"Game Over! Final score: {final_score}", file=self.stream)
