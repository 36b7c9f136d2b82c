"""
tuxkart command line runner

Opens the game window and drives one race until the player quits.

Usage:
    tuxkart                                 # Default assets in the current directory
    tuxkart --assets ~/games/tuxkart        # Load imgs/ and fonts/ from elsewhere
    tuxkart --preset player2                # Arrow keys, second spawn point
    tuxkart --fps 144 --laps 3              # Faster pacing, shorter race
    tuxkart --log-level DEBUG               # Log collisions
"""

import argparse
import logging
import sys
from typing import List, Optional

import pygame

from tuxkart.car.car import Car
from tuxkart.car.presets import PRESETS
from tuxkart.config import CONTROL_SCHEMES, LOG_LEVELS, GameConfig
from tuxkart.render.pygame_backend import PygameInput, PygameRenderer, load_assets, open_window
from tuxkart.scoring.race_state import RaceState
from tuxkart.simulation.loop import FrameLoop

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Top-down kart racing prototype",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
    W/A/S/D (player1) or arrow keys (player2), Escape to quit
        """
    )
    
    window_group = parser.add_argument_group("Window")
    window_group.add_argument("--width", type=int, default=2560, help="Window width in pixels")
    window_group.add_argument("--height", type=int, default=1440, help="Window height in pixels")
    window_group.add_argument("--fps", type=float, default=60.0, help="Target frame rate")
    
    asset_group = parser.add_argument_group("Assets")
    asset_group.add_argument("--assets", type=str, default=".", help="Asset root directory")
    asset_group.add_argument("--track", type=str, default="imgs/rennstrecke.jpg", help="Track image")
    asset_group.add_argument("--car", type=str, default="imgs/tuxi.png", help="Car sprite")
    asset_group.add_argument("--font", type=str, default="fonts/arial.ttf", help="Banner font")
    asset_group.add_argument("--scale", type=float, default=0.1, help="Car sprite scale")
    
    race_group = parser.add_argument_group("Race")
    race_group.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="player1",
        help="Vehicle preset"
    )
    race_group.add_argument(
        "--controls",
        choices=CONTROL_SCHEMES,
        default=None,
        help="Override the preset's control scheme"
    )
    race_group.add_argument("--laps", type=int, default=6, help="Laps needed to win")
    
    log_group = parser.add_argument_group("Logging")
    log_group.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level"
    )
    log_group.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Create a GameConfig from parsed arguments."""
    return GameConfig(
        width=args.width,
        height=args.height,
        frame_rate=args.fps,
        asset_root=args.assets,
        track_image=args.track,
        car_image=args.car,
        font_file=args.font,
        sprite_scale=args.scale,
        preset=args.preset,
        controls=args.controls,
        lap_target=args.laps,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def setup_logging(config: GameConfig) -> None:
    """Configure logging."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file))
    
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def run_game(config: GameConfig) -> int:
    """Open the window and run one race.
    
    Returns:
        Number of frames played
    """
    screen = open_window(config)
    try:
        assets = load_assets(config)
        car = Car(config.car_config(), start=config.spawn_position)
        race = RaceState(config.race_config())
        loop = FrameLoop(
            car,
            race,
            PygameRenderer(screen, assets, config),
            PygameInput(config.control_scheme),
            config=config.loop_config(),
        )
        return loop.run()
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    
    setup_logging(config)
    logger.info(f"Starting race: preset={config.preset}, laps={config.lap_target}")
    
    try:
        frames = run_game(config)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (FileNotFoundError, pygame.error) as e:
        logger.error(f"Could not run game: {e}")
        return 1
    
    logger.info(f"Game closed after {frames} frames")
    return 0


if __name__ == "__main__":
    sys.exit(main())
