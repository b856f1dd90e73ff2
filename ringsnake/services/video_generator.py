"""
Video Generation Service for ringsnake games

This service turns game snapshots into video by:
1. Rendering each snapshot to a frame using PIL (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg

Snapshots are the plain dicts produced by GameState.to_dict(), so the
renderer only ever sees what the engine exposes: the body from head to
tail, the food and the crashed flag.

The body is drawn two segments at a time, one inset rectangle per link,
so consecutive segments read as a connected snake.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw
from moviepy import ImageSequenceClip
import numpy as np

from ringsnake.domain.constants import UP, DOWN, LEFT, RIGHT
from ringsnake.domain.game_core import get_direction

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 5  # 200ms per tick
CELL_SIZE = 16  # Size of each grid cell in pixels


class ColorScheme:
    """Colors for the board"""

    BACKGROUND = "#000000"
    GRID_LINE = "#111111"
    SNAKE = "#00FF00"
    SNAKE_CRASHED = "#808080"
    FOOD = "#FF0000"
    EYE = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class SnakeVideoGenerator:
    """Render game snapshots to frames and encode them as MP4"""

    def __init__(
        self,
        fps: int = DEFAULT_FPS,
        cell_size: int = CELL_SIZE,
        draw_grid: bool = False
    ):
        if cell_size < 4:
            raise ValueError(f"cell_size must be at least 4, got {cell_size}")
        self.fps = fps
        self.cell_size = cell_size
        self.draw_grid = draw_grid

    def frame_size(self, board_width: int, board_height: int) -> Tuple[int, int]:
        """
        Pixel size of a frame for a board. Rounded up to even numbers, which
        the H.264 encoder requires.
        """
        width = board_width * self.cell_size
        height = board_height * self.cell_size
        return (width + width % 2, height + height % 2)

    def render_frame(self, snapshot: Dict[str, Any]) -> Image.Image:
        """
        Render a single frame

        Args:
            snapshot: GameState.to_dict() output

        Returns:
            PIL Image of the frame
        """
        board_width = snapshot['width']
        board_height = snapshot['height']
        img = Image.new('RGB', self.frame_size(board_width, board_height),
                        hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        if self.draw_grid:
            self._draw_grid(draw, board_width, board_height)

        body = [tuple(cell) for cell in snapshot['body']]
        color_hex = ColorScheme.SNAKE_CRASHED if snapshot['crashed'] else ColorScheme.SNAKE
        self._draw_snake(draw, body, hex_to_rgb(color_hex))
        self._draw_head(draw, body, snapshot.get('direction', RIGHT), color_hex)

        # Food is only meaningful while the game is running
        food = snapshot.get('food')
        if food is not None and not snapshot['crashed']:
            self._draw_cell(draw, food[0], food[1], 1, 1,
                            hex_to_rgb(ColorScheme.FOOD), padding=0)

        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, board_width: int, board_height: int):
        color = hex_to_rgb(ColorScheme.GRID_LINE)
        pixel_width = board_width * self.cell_size
        pixel_height = board_height * self.cell_size
        for i in range(board_width + 1):
            x = i * self.cell_size
            draw.line([x, 0, x, pixel_height], fill=color, width=1)
        for i in range(board_height + 1):
            y = i * self.cell_size
            draw.line([0, y, pixel_width, y], fill=color, width=1)

    def _draw_snake(
        self,
        draw: ImageDraw.ImageDraw,
        body: Sequence[Tuple[int, int]],
        color: Tuple[int, int, int]
    ):
        """Draw each link as a two-cell rectangle, then the last segment on its own"""
        for a, b in zip(body, body[1:]):
            direction = get_direction(a, b)
            # Rectangle starts at whichever cell is top/left
            if direction in (RIGHT, DOWN):
                origin = b
            else:
                origin = a
            if direction in (LEFT, RIGHT):
                span = (2, 1)
            else:
                span = (1, 2)
            self._draw_cell(draw, origin[0], origin[1], span[0], span[1], color)

        if body:
            x, y = body[-1]
            self._draw_cell(draw, x, y, 1, 1, color)

    def _draw_head(
        self,
        draw: ImageDraw.ImageDraw,
        body: Sequence[Tuple[int, int]],
        direction: str,
        color_hex: str
    ):
        """Draw the head a shade darker, with eyes on the side it is facing"""
        if not body:
            return
        head_x, head_y = body[0]
        self._draw_cell(draw, head_x, head_y, 1, 1, darken_color(color_hex, 0.3))

        size = self.cell_size
        eye = max(2, size // 5)
        left = head_x * size
        top = head_y * size
        if direction in (LEFT, RIGHT):
            eye_x = left + (size // 4 if direction == LEFT else 3 * size // 4 - eye)
            eye_tops = [top + size // 4, top + 3 * size // 4 - eye]
            boxes = [[eye_x, y, eye_x + eye, y + eye] for y in eye_tops]
        else:
            eye_y = top + (size // 4 if direction == UP else 3 * size // 4 - eye)
            eye_lefts = [left + size // 4, left + 3 * size // 4 - eye]
            boxes = [[x, eye_y, x + eye, eye_y + eye] for x in eye_lefts]
        for box in boxes:
            draw.ellipse(box, fill=hex_to_rgb(ColorScheme.EYE))

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        cells_wide: int,
        cells_high: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Fill a block of cells, inset by `padding` pixels on every side"""
        left = x * self.cell_size + padding
        top = y * self.cell_size + padding
        right = (x + cells_wide) * self.cell_size - padding - 1
        bottom = (y + cells_high) * self.cell_size - padding - 1
        draw.rectangle([left, top, right, bottom], fill=color)

    def render_frames(self, snapshots: Sequence[Dict[str, Any]]) -> List[np.ndarray]:
        frames = []
        for i, snapshot in enumerate(snapshots):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(snapshots)}")
            frames.append(np.array(self.render_frame(snapshot)))
        return frames

    def generate_video(
        self,
        snapshots: Sequence[Dict[str, Any]],
        output_path: str,
        fps: Optional[int] = None
    ) -> str:
        """
        Generate a video from a sequence of game snapshots

        Args:
            snapshots: GameState.to_dict() output, one per tick
            output_path: where to write the MP4
            fps: overrides the generator's frame rate

        Returns:
            Path to the generated video file
        """
        if not snapshots:
            raise ValueError("Cannot generate a video without any snapshots")

        logger.info(f"Rendering {len(snapshots)} frames")
        frames = self.render_frames(snapshots)

        logger.info(f"Rendered {len(frames)} frames, creating video...")
        clip = ImageSequenceClip(frames, fps=fps or self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
