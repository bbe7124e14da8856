"""
Terminal control
Thin wrapper over ANSI escape sequences and the terminal size query.
"""
import shutil
import sys
from typing import Optional, TextIO, Tuple

from ..constants import FALLBACK_TERMINAL_SIZE, MAX_HEIGHT, MAX_WIDTH, STATUS_LINES

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_SCREEN = "\033[2J\033[H"
CURSOR_HOME = "\033[H"


class Terminal:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _emit(self, code: str):
        self.stream.write(code)
        self.stream.flush()

    def hide_cursor(self):
        self._emit(HIDE_CURSOR)

    def show_cursor(self):
        self._emit(SHOW_CURSOR)

    def clear_screen(self):
        self._emit(CLEAR_SCREEN)

    def home(self):
        self._emit(CURSOR_HOME)

    def size(self) -> Tuple[int, int]:
        size = shutil.get_terminal_size(fallback=FALLBACK_TERMINAL_SIZE)
        return size.columns, size.lines


def grid_size(term_width: int, term_height: int) -> Tuple[int, int]:
    """Grid dimensions for a terminal, leaving room for the status lines."""
    width = min(term_width, MAX_WIDTH)
    height = min(term_height - STATUS_LINES, MAX_HEIGHT)
    return max(1, width), max(1, height)


__all__ = ["Terminal", "grid_size"]
