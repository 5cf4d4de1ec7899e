"""Main interactive event loop for the selector.

One key read per iteration, with a short timeout so terminal size changes
are noticed while idle. Rendering and state changes are delegated to the
injected renderer and ``SelectorSession``.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import os
import shutil
from pathlib import Path

from ..input import read_key
from ..layout import Bounds
from ..state import SelectorState
from ..terminal import TerminalController
from .session import SelectorSession

logger = logging.getLogger(__name__)

# Idle reads wake up this often so terminal resizes repaint without a keypress.
RESIZE_POLL_MS = 120


def normalize_enter(state: SelectorState, key: str) -> str | None:
    """Fold CR/LF variants into ``ENTER``; ``None`` means drop the key.

    A CR immediately followed by LF counts as a single Enter press.
    """
    if state.skip_next_lf and key == "ENTER_LF":
        state.skip_next_lf = False
        return None
    if key == "ENTER_CR":
        state.skip_next_lf = True
        return "ENTER"
    state.skip_next_lf = False
    if key == "ENTER_LF":
        return "ENTER"
    return key


def run_main_loop(
    session: SelectorSession,
    terminal: TerminalController,
    stdin_fd: int,
    render: Callable[[SelectorState], str],
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> Path | None:
    """Run the selector until a file is picked, a directory is accepted, or quit.

    The terminal is restored on every exit path, including exceptions.
    """
    state = session.state
    with terminal.raw_mode():
        while not state.finished:
            term = get_terminal_size((80, 24))
            session.resize(Bounds(0, 0, term.columns, term.lines))
            if state.dirty:
                terminal.write(render(state))
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=RESIZE_POLL_MS)
            except EOFError:
                logger.info("stdin closed, leaving without a selection")
                state.result = None
                break
            if key == "":
                continue
            key = normalize_enter(state, key)
            if key is None:
                continue
            session.handle_key(key)
    return state.result


__all__ = ["RESIZE_POLL_MS", "normalize_enter", "run_main_loop"]
