"""Split a candidate set into label-capacity-bounded pages."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import logging
import math

from .candidates import CandidateSet, Entry
from .labels import LABEL_CAPACITY, assign_labels
from .layout import Bounds, capacity, cell_width, item_render_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    """A contiguous slice of the candidate set with its per-page labels."""

    index: int
    start: int
    items: tuple[Entry, ...]
    labels: tuple[str, ...]

    @classmethod
    def build(cls, index: int, start: int, items: tuple[Entry, ...]) -> "Page":
        return cls(index=index, start=start, items=items, labels=assign_labels(len(items)))

    def __len__(self) -> int:
        return len(self.items)

    def labelled(self) -> Iterator[tuple[str, Entry]]:
        return zip(self.labels, self.items)

    def has_prefix(self, prefix: str) -> bool:
        return any(candidate.startswith(prefix) for candidate in self.labels)

    def find(self, code: str) -> Entry | None:
        for candidate, entry in self.labelled():
            if candidate == code:
                return entry
        return None


class Paginator:
    """Cut a ``CandidateSet`` into pages sized by the grid capacity.

    ``item_width`` is the width of one grid cell. Pages are recomputed by
    building a new paginator; existing pages are never adjusted.
    """

    def __init__(self, candidates: CandidateSet, item_width: int, bounds: Bounds) -> None:
        self.candidates = candidates
        self.item_width = max(1, item_width)
        self.bounds = bounds
        raw_capacity = capacity(bounds, self.item_width)
        if raw_capacity > LABEL_CAPACITY:
            logger.debug("capping page capacity %d to %d labels", raw_capacity, LABEL_CAPACITY)
        self.capacity = max(1, min(raw_capacity, LABEL_CAPACITY))

    @classmethod
    def for_candidates(cls, candidates: CandidateSet, bounds: Bounds) -> "Paginator":
        """Size pages by the widest rendered entry among all candidates."""
        widths = [item_render_width(entry.name) for entry in candidates]
        return cls(candidates, cell_width(widths), bounds)

    @property
    def page_count(self) -> int:
        return max(1, math.ceil(len(self.candidates) / self.capacity))

    def page(self, n: int) -> Page | None:
        """Return page ``n``; an empty candidate set still has an empty page 0."""
        if n < 0 or n >= self.page_count:
            return None
        start = n * self.capacity
        return Page.build(n, start, self.candidates.slice(start, start + self.capacity))


__all__ = [
    "Page",
    "Paginator",
]
