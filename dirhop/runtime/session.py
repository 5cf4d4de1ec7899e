"""Selector session operations.

All mutation of ``SelectorState`` happens here, driven one key token at a
time by the main loop. Candidate sets and pages are always rebuilt whole.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

from ..candidates import CandidateSet, Entry
from ..errors import NoMatchError
from ..input import Action, InputClassifier
from ..labels import LABEL_LENGTH
from ..layout import Bounds
from ..matcher import IncrementalMatcher
from ..paging import Paginator
from ..state import SelectorState

HEADER_ROWS = 2

logger = logging.getLogger(__name__)


def list_bounds(bounds: Bounds) -> Bounds:
    """Area below the header and status rows where the grid is drawn."""
    return bounds.below(HEADER_ROWS)


def build_state(
    directory: Path,
    show_hidden: bool,
    bounds: Bounds,
    list_directory: Callable[[Path], list[Entry]],
) -> SelectorState:
    """Scan ``directory`` and return a state showing its first page."""
    candidates = CandidateSet.rebuild(list_directory(directory), show_hidden)
    paginator = Paginator.for_candidates(candidates, list_bounds(bounds))
    page = paginator.page(0)
    assert page is not None
    return SelectorState(
        directory=directory,
        show_hidden=show_hidden,
        bounds=bounds,
        candidates=candidates,
        paginator=paginator,
        page=page,
        matcher=IncrementalMatcher(page),
        classifier=InputClassifier(),
    )


class SelectorSession:
    """Apply classified keys to the selector state."""

    def __init__(
        self,
        state: SelectorState,
        *,
        list_directory: Callable[[Path], list[Entry]],
        confirm: bool = False,
        on_toggle_hidden: Callable[[bool], None] | None = None,
    ) -> None:
        self.state = state
        self._list_directory = list_directory
        self.confirm = confirm
        self._on_toggle_hidden = on_toggle_hidden

    def set_status(self, message: str, *, error: bool = False) -> None:
        self.state.status_message = message
        self.state.status_is_error = error
        self.state.dirty = True

    def show_page(self, index: int) -> bool:
        """Switch to page ``index`` with a fresh prefix and raw log."""
        page = self.state.paginator.page(index)
        if page is None:
            return False
        self.state.page = page
        self.state.matcher = IncrementalMatcher(page)
        self.state.classifier.reset()
        self.state.dirty = True
        return True

    def rebuild(self) -> None:
        """Rescan the current directory and restart at page 0.

        Raises ``OSError`` when the directory cannot be read.
        """
        state = self.state
        state.candidates = CandidateSet.rebuild(self._list_directory(state.directory), state.show_hidden)
        state.paginator = Paginator.for_candidates(state.candidates, list_bounds(state.bounds))
        logger.debug(
            "rebuilt %s: %d candidates, %d pages of %d",
            state.directory,
            len(state.candidates),
            state.paginator.page_count,
            state.paginator.capacity,
        )
        self.show_page(0)

    def resize(self, bounds: Bounds) -> None:
        """Recompute pages for new terminal bounds, keeping the page if it still exists."""
        state = self.state
        if bounds == state.bounds:
            return
        state.bounds = bounds
        state.paginator = Paginator.for_candidates(state.candidates, list_bounds(bounds))
        self.show_page(min(state.page.index, state.paginator.page_count - 1))

    def change_directory(self, directory: Path) -> None:
        self.state.directory = directory
        self.set_status("")
        self.rebuild()

    def toggle_hidden(self) -> None:
        self.state.show_hidden = not self.state.show_hidden
        if self._on_toggle_hidden is not None:
            self._on_toggle_hidden(self.state.show_hidden)
        self.set_status("")
        self.rebuild()

    def move_page(self, delta: int) -> None:
        target = self.state.page.index + delta
        if self.show_page(target):
            self.set_status("")
            return
        # Out of range: still start over on the current page.
        self.state.matcher.clear()
        self.state.classifier.reset()
        self.set_status("No next page" if delta > 0 else "No previous page")

    def report_wrong_label(self, typed: str) -> None:
        """Tell the user ``typed`` names nothing on the page."""
        logger.warning("%s", NoMatchError(typed))
        self.set_status("Wrong label!", error=True)

    def consume(self) -> None:
        """Act on the resolved entry: descend into directories, finish on files."""
        state = self.state
        try:
            entry = state.matcher.require()
        except NoMatchError as exc:
            state.matcher.clear()
            self.report_wrong_label(exc.prefix)
            return
        if entry.is_dir:
            self.change_directory(entry.path)
            return
        state.result = entry.path.absolute()
        state.finished = True

    def accept(self) -> None:
        state = self.state
        if state.matcher.is_complete:
            self.consume()
            return
        state.result = state.directory
        state.finished = True

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return ``True`` once the session is over."""
        state = self.state
        event = state.classifier.classify(key)
        action = event.action

        if action is Action.QUIT:
            state.result = None
            state.finished = True
        elif action is Action.TOGGLE_HIDDEN:
            self.toggle_hidden()
        elif action is Action.ACCEPT:
            self.accept()
        elif action is Action.CLEAR:
            state.matcher.clear()
            self.set_status("")
        elif action is Action.BACK:
            self.change_directory(state.directory.parent)
        elif action is Action.NEXT_PAGE:
            self.move_page(1)
        elif action is Action.PREV_PAGE:
            self.move_page(-1)
        elif action is Action.LABEL:
            if state.matcher.push(event.char):
                state.dirty = True
                if state.status_is_error:
                    self.set_status("")
                if state.matcher.is_complete and not self.confirm:
                    self.consume()
            elif len(state.matcher.prefix) == LABEL_LENGTH - 1:
                # Prefix is kept so the second letter can be retyped.
                self.report_wrong_label(state.matcher.prefix + event.char)
        return state.finished


__all__ = [
    "HEADER_ROWS",
    "SelectorSession",
    "build_state",
    "list_bounds",
]
