"""
Runtime configuration, read from the environment (and a .env file if present).

    SNAKE_GRID_WIDTH        board width in cells (default: 15)
    SNAKE_GRID_HEIGHT       board height in cells (default: 10)
    SNAKE_FRAME_PERIOD_MS   real-time tick period (default: 200)
    SNAKE_SEED              integer seed for reproducible games (default: unset)
    SNAKE_LOG_LEVEL         log level for the command line tools (default: INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ringsnake.domain.constants import (
    DEFAULT_GRID_WIDTH,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_FRAME_PERIOD_MS,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class GameConfig:
    width: int = DEFAULT_GRID_WIDTH
    height: int = DEFAULT_GRID_HEIGHT
    frame_period_ms: int = DEFAULT_FRAME_PERIOD_MS
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.width}x{self.height}")
        if self.frame_period_ms < 0:
            raise ValueError(f"Frame period must not be negative, got {self.frame_period_ms}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config(dotenv: bool = True) -> GameConfig:
    """Build a GameConfig from SNAKE_* environment variables."""
    if dotenv:
        load_dotenv()

    config = GameConfig(
        width=_int_env("SNAKE_GRID_WIDTH", DEFAULT_GRID_WIDTH),
        height=_int_env("SNAKE_GRID_HEIGHT", DEFAULT_GRID_HEIGHT),
        frame_period_ms=_int_env("SNAKE_FRAME_PERIOD_MS", DEFAULT_FRAME_PERIOD_MS),
        seed=_int_env("SNAKE_SEED", None),
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO"),
    )
    logger.debug(f"Loaded config: {config}")
    return config


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the command line tools."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
