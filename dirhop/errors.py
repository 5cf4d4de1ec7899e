"""Exception types raised by the selection engine.

Filesystem and terminal failures stay plain ``OSError`` so callers can
handle them with the usual ``except OSError`` clauses.
"""

from __future__ import annotations


class DirhopError(Exception):
    """Base class for selection-engine failures."""


class CapacityExceededError(DirhopError):
    """A single page would need more labels than the generator can produce."""

    def __init__(self, requested: int, capacity: int) -> None:
        super().__init__(f"page needs {requested} labels but only {capacity} exist")
        self.requested = requested
        self.capacity = capacity


class NoMatchError(DirhopError):
    """A complete prefix does not name any label on the current page."""

    def __init__(self, prefix: str) -> None:
        super().__init__(f"no label {prefix!r} on this page")
        self.prefix = prefix


__all__ = [
    "DirhopError",
    "CapacityExceededError",
    "NoMatchError",
]
