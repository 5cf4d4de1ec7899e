"""Keystroke-by-keystroke resolution of a label on the visible page."""

from __future__ import annotations

from .candidates import Entry
from .errors import NoMatchError
from .labels import LABEL_LENGTH
from .paging import Page


class IncrementalMatcher:
    """Accumulate label characters for one page.

    Only characters that keep the prefix a valid label prefix are kept, so
    the prefix never grows past ``LABEL_LENGTH``. A new page needs a new
    matcher.
    """

    def __init__(self, page: Page) -> None:
        self.page = page
        self._prefix = ""

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def is_complete(self) -> bool:
        return len(self._prefix) == LABEL_LENGTH

    def push(self, ch: str) -> bool:
        """Append ``ch`` if some label still starts with the result.

        Returns ``True`` when accepted; on rejection the prefix is unchanged.
        """
        candidate = self._prefix + ch
        if len(candidate) > LABEL_LENGTH or not self.page.has_prefix(candidate):
            return False
        self._prefix = candidate
        return True

    def clear(self) -> None:
        self._prefix = ""

    def resolve(self) -> Entry | None:
        if not self.is_complete:
            return None
        return self.page.find(self._prefix)

    def require(self) -> Entry:
        """Like ``resolve`` but raise ``NoMatchError`` for an unknown label."""
        entry = self.resolve()
        if entry is None:
            raise NoMatchError(self._prefix)
        return entry


__all__ = ["IncrementalMatcher"]
