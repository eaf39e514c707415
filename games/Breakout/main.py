#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python main.py
    python main.py --lives 5
    python main.py --config my_layout.yaml --seed 7
"""

import argparse
import sys
import os

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame
from pydantic import ValidationError

from playfield.games.input.sources import PygameInputSource
from playfield.logging import configure_logging, get_logger
from games.Breakout.config import SettingsError, load_settings
from games.Breakout.game_mode import BreakoutMode

log = get_logger('breakout.main')


def build_parser() -> argparse.ArgumentParser:
    """Argument parser from BreakoutMode metadata plus display options."""
    parser = argparse.ArgumentParser(description=f"{BreakoutMode.NAME} - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=None, help='Field width (default 800)')
    parser.add_argument('--height', type=int, default=None, help='Field height (default 600)')
    parser.add_argument('--max-frames', type=int, default=None,
                        help='Quit after this many frames')

    for arg in BreakoutMode.get_arguments():
        options = dict(arg)
        name = options.pop('name')
        parser.add_argument(name, **options)

    return parser


def main(argv=None) -> int:
    """Run Breakout standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        settings = load_settings(
            args.config,
            width=args.width,
            height=args.height,
            lives=args.lives,
            seed=args.seed,
            fps=args.fps,
        )
    except (SettingsError, ValidationError) as e:
        log.error("Could not load settings: %s", e)
        return 2

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    screen = pygame.display.set_mode((settings.width, settings.height))
    pygame.display.set_caption(BreakoutMode.NAME)

    game = BreakoutMode(settings=settings, skin=args.skin)
    input_source = PygameInputSource()
    clock = pygame.time.Clock()

    print("\n" + "=" * 50)
    print("BREAKOUT")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right or A/D, or move the mouse, to steer the paddle")
    print("  - Space to start, pause and resume")
    print("  - R to restart")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    def poll():
        input_source.update(0.0)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return None
        return input_source.poll_events()

    def schedule():
        pygame.display.flip()
        clock.tick(settings.fps)

    try:
        frames = game.run(screen, schedule, poll, max_frames=args.max_frames)
    finally:
        pygame.quit()

    log.info("Finished after %d frames with score %d", frames, game.get_score())
    return 0


if __name__ == "__main__":
    sys.exit(main())
