"""
main.py
-------
Entry point: build the game, load every resource, show the start screen,
then hand control to the main loop.

Usage:
    cracker-chase                        # defaults + config/game.json
    cracker-chase --assets path/to/assets
    cracker-chase --config my_game.json --seed 42
"""

import argparse
import asyncio
import sys

import pygame

from cracker_chase.core.debug.debug_logger import DebugLogger
from cracker_chase.core.runtime.game_settings import Display, default_settings
from cracker_chase.core.runtime.main_loop import MainLoop
from cracker_chase.core.services.asset_loader import ResourceLoadError
from cracker_chase.core.services.config_manager import load_config
from cracker_chase.game import Game


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Cracker Chase")
    parser.add_argument("--config", default="game.json",
                        help="JSON settings file merged over the defaults")
    parser.add_argument("--assets", default=None,
                        help="Directory holding images and sounds")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for cracker placement")
    return parser.parse_args(argv)


def build_settings(args):
    settings = load_config(args.config, default_settings())
    if args.assets is not None:
        settings["assets"]["root"] = args.assets
    if args.seed is not None:
        settings["gameplay"]["seed"] = args.seed
    return settings


async def bootstrap(game):
    """Load every resource, then show the start screen."""
    await game.initialize()
    game.start()


def main(argv=None):
    args = parse_args(argv)
    settings = build_settings(args)

    screen = MainLoop.open_window(Display.WIDTH, Display.HEIGHT)
    try:
        game = Game(screen, settings)
    except ValueError as e:
        DebugLogger.fail(f"Invalid settings: {e}")
        print(f"cracker-chase: fatal: {e}", file=sys.stderr)
        pygame.quit()
        return 1
    game.sounds.set_master_volume(settings["audio"]["volume"])

    try:
        asyncio.run(bootstrap(game))
    except ResourceLoadError as e:
        DebugLogger.fail(f"Startup aborted: {e}")
        print(f"cracker-chase: fatal: {e}", file=sys.stderr)
        pygame.quit()
        return 1

    MainLoop(game).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
