import ctypes
import os
import sys

from .config import (
    BOT_LEFT_BORDER,
    BOT_RIGHT_BORDER,
    HORIZONTAL_BORDER,
    TOP_LEFT_BORDER,
    TOP_RIGHT_BORDER,
    VERTICAL_BORDER,
)
from .geometry import Point2

ESC = "\033"

SAVE_SCREEN = ESC + "[?47h"
RESTORE_SCREEN = ESC + "[?47l"
HIDE_CURSOR = ESC + "[?25l"
SHOW_CURSOR = ESC + "[?25h"
ALT_BUFFER_ON = ESC + "[?1049h"
ALT_BUFFER_OFF = ESC + "[?1049l"
ERASE_SCREEN = ESC + "[2J"
CURSOR_HOME = ESC + "[H"


# --- Windows ANSI Support ---
def enable_windows_ansi():
    if os.name == "nt":
        kernel32 = ctypes.windll.kernel32
        hStdOut = kernel32.GetStdHandle(-11)
        mode = ctypes.c_ulong()
        kernel32.GetConsoleMode(hStdOut, ctypes.byref(mode))
        mode.value |= 4  # ENABLE_VIRTUAL_TERMINAL_PROCESSING
        kernel32.SetConsoleMode(hStdOut, mode)


def move_cursor(col, row):
    return f"{ESC}[{row};{col}f"


class Canvas:
    """
    Collects one frame of escape sequences and glyphs, then writes the whole
    frame with a single write + flush so a half-drawn frame is never shown.
    """

    def __init__(self, config, stream=None):
        self.config = config
        self.stream = stream if stream is not None else sys.stdout.buffer
        self._parts = []

    def write(self, text: str):
        self._parts.append(text)

    def pending(self) -> str:
        return "".join(self._parts)

    def flush(self):
        self.stream.write(self.pending().encode("utf-8"))
        self.stream.flush()
        self._parts.clear()

    def cell(self, p: Point2):
        # Map LEFT<->RIGHT to 0<->cols and TOP<->BOT to 0<->rows.
        # No clamping: points outside the window go out as off-grid positions.
        cfg = self.config
        col = int((p.x - cfg.left) / (cfg.right - cfg.left) * cfg.cols)
        row = int((p.y - cfg.top) / (cfg.bot - cfg.top) * cfg.rows)
        return col, row

    def move(self, col, row):
        self.write(move_cursor(col, row))

    def paint(self, p: Point2):
        col, row = self.cell(p)
        self.move(col, row)
        self.write(self.config.pixel_glyph)

    def clear(self):
        self.write(ERASE_SCREEN)
        self.write(CURSOR_HOME)

    def borders(self):
        cols, rows = self.config.cols, self.config.rows
        step = self.config.cell_width

        # Top and bottom
        for col in range(2, cols, step):
            self.move(col, 1)
            self.write(HORIZONTAL_BORDER)
            self.move(col, rows)
            self.write(HORIZONTAL_BORDER)
        # Left and right
        for row in range(2, rows):
            self.move(1, row)
            self.write(VERTICAL_BORDER)
            self.move(cols, row)
            self.write(VERTICAL_BORDER)
        # Corners
        self.move(1, 1)
        self.write(TOP_LEFT_BORDER)
        self.move(cols, 1)
        self.write(TOP_RIGHT_BORDER)
        self.move(1, rows)
        self.write(BOT_LEFT_BORDER)
        self.move(cols, rows)
        self.write(BOT_RIGHT_BORDER)

    def enter(self):
        self.write(SAVE_SCREEN)
        self.write(HIDE_CURSOR)
        self.write(ALT_BUFFER_ON)
        self.flush()

    def restore(self):
        # Anything half-built for an interrupted frame is dropped.
        self._parts.clear()
        self.write(SHOW_CURSOR)
        self.write(ALT_BUFFER_OFF)
        self.write(RESTORE_SCREEN)
        self.flush()
