"""
Fixed-for-the-run settings of the wireframe cube animation.
"""

import math
from dataclasses import dataclass


# --- Configuration ---
FPS = 30.0

TERM_COLS = 150
TERM_ROWS = 80

# Logical window (symmetric about the origin)
LEFT = -100.0
RIGHT = 100.0
TOP = -100.0
BOT = 100.0

CUBE_SIZE = 50.0
ROTATION_STEP = math.pi / 100  # radians per frame, per axis

# --- Glyphs ---
VERTICAL_BORDER = "║"
HORIZONTAL_BORDER = "═"
TOP_LEFT_BORDER = "╔"
TOP_RIGHT_BORDER = "╗"
BOT_LEFT_BORDER = "╚"
BOT_RIGHT_BORDER = "╝"

SQUARE = "█"
CIRCLE = "⚪"  # Renders double-width on most terminals


@dataclass(frozen=True)
class CubeConfig:
    cols: int = TERM_COLS
    rows: int = TERM_ROWS
    fps: float = FPS
    left: float = LEFT
    right: float = RIGHT
    top: float = TOP
    bot: float = BOT
    cube_size: float = CUBE_SIZE
    rotation_step: float = ROTATION_STEP
    # Columns taken by one border glyph. Set to 2 for terminals that draw
    # the box characters double-width.
    cell_width: int = 1
    pixel_glyph: str = SQUARE
    draw_axes: bool = False

    def __post_init__(self):
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"grid must be positive, got {self.cols}x{self.rows}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.cube_size <= 0:
            raise ValueError(f"cube_size must be positive, got {self.cube_size}")
        if self.cell_width < 1:
            raise ValueError(f"cell_width must be at least 1, got {self.cell_width}")
        if self.left == self.right or self.top == self.bot:
            raise ValueError("logical window has zero extent")

    @property
    def frame_delay(self) -> float:
        """Seconds slept after each frame. Render time is not subtracted."""
        return 1.0 / self.fps
