"""Terminal control helpers for the selector session.

Owns the raw-mode lifecycle and alternate-screen switching, plus the few
cursor primitives the renderer composes into frames.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .layout import Bounds


def move_to(x: int, y: int) -> str:
    """Escape sequence moving the cursor to 0-based cell ``(x, y)``."""
    return f"\x1b[{max(0, y) + 1};{max(0, x) + 1}H"


def clear_rect(bounds: Bounds) -> str:
    """Escape sequences blanking every cell in ``bounds``."""
    blank = " " * max(0, bounds.width)
    return "".join(move_to(bounds.x, row) + blank for row in range(bounds.y, bounds.y + bounds.height))


class TerminalController:
    """Manage terminal mode transitions and frame output.

    Frames go to ``out_fd`` (normally stderr) so stdout stays free for the
    selected path.
    """

    def __init__(self, stdin_fd: int, out_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.out_fd = out_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.out_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore tty state."""
        os.write(self.out_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, text: str) -> None:
        data = text.encode("utf-8", errors="replace")
        while data:
            written = os.write(self.out_fd, data)
            data = data[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()


__all__ = [
    "TerminalController",
    "clear_rect",
    "move_to",
]
