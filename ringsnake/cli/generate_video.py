#!/usr/bin/env python3
"""
CLI tool to play a headless game and save it as a video

Usage:
    ringsnake-video --output game.mp4

Examples:
    # Reproducible game on the default 15x10 board
    ringsnake-video --seed 42 --output seed42.mp4

    # Bigger board, bigger cells, faster playback
    ringsnake-video --width 30 --height 20 --cell-size 24 --fps 10 -o big.mp4
"""

import argparse
import logging
import sys

from ringsnake.config import GameConfig, configure_logging, load_config
from ringsnake.main import DEFAULT_MAX_TICKS, run_simulation
from ringsnake.services.video_generator import (
    CELL_SIZE,
    DEFAULT_FPS,
    SnakeVideoGenerator,
)

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description='Play a headless snake game and save it as an MP4 video',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        required=True,
        help='Output video file path'
    )

    # Game settings
    parser.add_argument(
        '--width',
        type=int,
        default=None,
        help='Board width in cells (default: SNAKE_GRID_WIDTH or 15)'
    )
    parser.add_argument(
        '--height',
        type=int,
        default=None,
        help='Board height in cells (default: SNAKE_GRID_HEIGHT or 10)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed (default: SNAKE_SEED or unseeded)'
    )
    parser.add_argument(
        '--max-ticks',
        type=int,
        default=DEFAULT_MAX_TICKS,
        help=f'Stop after this many ticks (default: {DEFAULT_MAX_TICKS})'
    )

    # Video settings
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--cell-size',
        type=int,
        default=CELL_SIZE,
        help=f'Cell size in pixels (default: {CELL_SIZE})'
    )
    parser.add_argument(
        '--grid',
        action='store_true',
        help='Draw grid lines'
    )

    args = parser.parse_args()

    try:
        env_config = load_config()
        config = GameConfig(
            width=args.width if args.width is not None else env_config.width,
            height=args.height if args.height is not None else env_config.height,
            frame_period_ms=env_config.frame_period_ms,
            seed=args.seed if args.seed is not None else env_config.seed,
            log_level=env_config.log_level,
        )
        configure_logging(config.log_level)

        logger.info(f"Playing a {config.width}x{config.height} game (seed: {config.seed})...")
        result = run_simulation(config, max_ticks=args.max_ticks, record=True)
        logger.info(
            f"Game finished after {result['ticks']} ticks with score {result['score']}"
        )

        generator = SnakeVideoGenerator(
            fps=args.fps,
            cell_size=args.cell_size,
            draw_grid=args.grid
        )
        video_path = generator.generate_video(result['snapshots'], args.output)

        logger.info(f"[OK] Video generated successfully: {video_path}")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
