"""
Play the grid shooter

    python -m game.gridshooter.play                 # arcade window
    python -m game.gridshooter.play --text --ticks 200 --seed 7
"""

import argparse
import random
from typing import Optional

from .config import GameConfig
from .controller import GameController
from .model import GameModel
from .stats import PlayerStatsTracker
from .text_ui import TextUI

AUTOPLAY_TOKENS = ["W", "A", "S", "D", "F", "F", ""]


def run_text_game(
    ticks: int = 200,
    seed: Optional[int] = None,
    verbose: bool = False,
    config: Optional[GameConfig] = None,
) -> GameController:
    """Run a self-playing game in the terminal until game over or ``ticks``"""
    config = config if config is not None else GameConfig()
    ui = TextUI(config)
    model = GameModel(ui.log, PlayerStatsTracker(), config, seed=seed)
    ui.attach(model.ship)
    controller = GameController(ui, model)
    controller.verbose = verbose

    # Separate source so autoplay input never disturbs the spawn stream
    pilot = random.Random(seed)
    for tick in range(1, ticks + 1):
        token = pilot.choice(AUTOPLAY_TOKENS)
        if token:
            controller.handle_player_input(token)
        controller.on_tick(tick)
        if controller.game_over:
            break

    print(controller.summary())
    return controller


def main():
    parser = argparse.ArgumentParser(description="Play the grid shooter")
    parser.add_argument(
        "--text",
        action="store_true",
        help="Self-playing terminal game instead of the arcade window",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=200,
        help="Tick limit for --text mode (default: 200)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for spawns",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log spawns, collisions and level-ups",
    )
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=0.2,
        help="Seconds per tick in the window (default: 0.2)",
    )

    args = parser.parse_args()

    if args.text:
        run_text_game(ticks=args.ticks, seed=args.seed, verbose=args.verbose)
    else:
        from .window import play
        play(seed=args.seed, verbose=args.verbose, tick_interval=args.tick_interval)


if __name__ == "__main__":
    main()
