"""
Headless game runner.

Drives a GameCore with a Player the way a windowed front end would: once
per tick, ask for an intent, advance the game, then "render" (print the
board and/or keep a snapshot).

Usage:
    ringsnake-simulate
    ringsnake-simulate --width 20 --height 12 --seed 7 --show-board
    ringsnake-simulate --realtime --show-board
"""

import argparse
import json
import logging
import sys
import time
from typing import Any, Callable, Dict, List, Optional

from ringsnake.config import GameConfig, configure_logging, load_config
from ringsnake.domain.constants import QUIT
from ringsnake.domain.game_core import GameCore
from ringsnake.players.base import Player
from ringsnake.players.random_player import RandomPlayer

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 500


class FrameClock:
    """
    Fixed-period tick pacing.

    wait() sleeps until the next tick is due. If the caller has fallen more
    than two periods behind, the lateness is dropped instead of replayed.
    """

    def __init__(
        self,
        period_ms: int,
        now: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.period = period_ms / 1000.0
        self._now = now
        self._sleep = sleep
        self.last_frame = now()

    def wait(self) -> None:
        elapsed = self._now() - self.last_frame
        if elapsed < self.period:
            self._sleep(self.period - elapsed)
            elapsed = self.period
        if elapsed > self.period * 2:
            # catch up
            self.last_frame = self._now()
        else:
            self.last_frame += self.period


def run_simulation(
    config: GameConfig,
    player: Optional[Player] = None,
    max_ticks: int = DEFAULT_MAX_TICKS,
    show_board: bool = False,
    realtime: bool = False,
    record: bool = False,
) -> Dict[str, Any]:
    """
    Play one game until it ends, the player quits or max_ticks is reached.

    Args:
        config: board size, seed and frame period
        player: decides the intent for each tick (RandomPlayer if None)
        max_ticks: upper bound on ticks played
        show_board: print the board after every tick
        realtime: pace ticks at config.frame_period_ms
        record: keep a snapshot of every tick in the result

    Returns:
        Summary dict; includes 'snapshots' when record is set
    """
    game = GameCore(config.width, config.height, seed=config.seed)
    if player is None:
        player = RandomPlayer(rng=game.rng)

    clock = FrameClock(config.frame_period_ms) if realtime else None
    snapshots: List[Dict[str, Any]] = []
    if record:
        snapshots.append(game.state.to_dict())
    if show_board:
        print("\n" + game.print_board() + "\n")

    ticks = 0
    quit_requested = False
    while ticks < max_ticks and not game.is_over:
        if clock is not None:
            clock.wait()

        intent = player.get_intent(game.state)
        if intent == QUIT:
            quit_requested = True
            break
        game.tick(intent)
        ticks += 1

        if record:
            snapshots.append(game.state.to_dict())
        if show_board:
            print("\n" + game.print_board() + "\n")

    if game.crashed:
        logger.info(f"Game over after {ticks} ticks: crashed ({game.state.crash_reason})")
    elif game.won:
        logger.info(f"Board filled after {ticks} ticks")
    else:
        logger.info(f"Stopped after {ticks} ticks")

    result: Dict[str, Any] = {
        "width": config.width,
        "height": config.height,
        "seed": config.seed,
        "ticks": ticks,
        "score": game.score,
        "length": game.length,
        "crashed": game.crashed,
        "crash_reason": game.state.crash_reason,
        "won": game.won,
        "quit": quit_requested,
    }
    if record:
        result["snapshots"] = snapshots
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play a headless snake game with a random autopilot.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in cells (default: SNAKE_GRID_WIDTH or 15)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in cells (default: SNAKE_GRID_HEIGHT or 10)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: SNAKE_SEED or unseeded)")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help=f"Stop after this many ticks (default: {DEFAULT_MAX_TICKS})")
    parser.add_argument("--frame-period", type=int, default=None,
                        help="Tick period in ms for --realtime (default: SNAKE_FRAME_PERIOD_MS or 200)")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks at the frame period instead of running flat out")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Log level (default: SNAKE_LOG_LEVEL or INFO)")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Environment config with command line flags layered on top."""
    config = load_config()
    return GameConfig(
        width=args.width if args.width is not None else config.width,
        height=args.height if args.height is not None else config.height,
        frame_period_ms=args.frame_period if args.frame_period is not None else config.frame_period_ms,
        seed=args.seed if args.seed is not None else config.seed,
        log_level=args.log_level or config.log_level,
    )


def main():
    parser = build_parser()
    args = parser.parse_args()

    try:
        config = config_from_args(args)
        configure_logging(config.log_level)

        result = run_simulation(
            config,
            max_ticks=args.max_ticks,
            show_board=args.show_board,
            realtime=args.realtime,
        )

        print("\nSimulation Result Summary:")
        print(json.dumps(result, indent=2))

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
