"""Interactive selector bootstrap."""

from __future__ import annotations

import functools
import logging
import os
import shutil
import sys
from pathlib import Path

from ..candidates import list_directory
from ..config import save_show_hidden
from ..layout import Bounds
from ..render import render_frame
from ..terminal import TerminalController
from ..ui_theme import resolve_entry_style, resolve_theme
from .loop import run_main_loop
from .session import SelectorSession, build_state

logger = logging.getLogger(__name__)


def run_selector(
    path: Path,
    show_hidden: bool,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    style_name: str | None = None,
    confirm: bool = False,
) -> Path | None:
    """Browse from ``path`` and return the chosen path, or ``None`` on quit.

    The UI is drawn on stderr. Raises ``OSError`` when a directory cannot be
    read; the terminal is restored before the error propagates.
    """
    if not os.isatty(sys.stdin.fileno()) or not os.isatty(sys.stderr.fileno()):
        raise SystemExit("This is not a terminal!")

    theme = resolve_theme(theme_name, no_color=no_color)
    entry_style = resolve_entry_style(style_name, theme)
    term = shutil.get_terminal_size((80, 24))
    directory = path.resolve()
    logger.info("starting in %s (show_hidden=%s, confirm=%s)", directory, show_hidden, confirm)

    state = build_state(directory, show_hidden, Bounds(0, 0, term.columns, term.lines), list_directory)
    session = SelectorSession(
        state,
        list_directory=list_directory,
        confirm=confirm,
        on_toggle_hidden=save_show_hidden,
    )
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stderr.fileno())
    render = functools.partial(render_frame, theme=theme, entry_style=entry_style)
    return run_main_loop(session, terminal, stdin_fd, render)


__all__ = ["run_selector"]
