"""Grid geometry for packing labelled entries into terminal cells.

Two separate calculations live here. ``capacity`` is the coarse bound the
paginator uses to cut pages. ``rows_per_column`` is the finer search used to
draw the page that is actually visible, preferring short columns when the
terminal is wide enough.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import math

from .ansi import display_width

LABEL_DECORATION_WIDTH = 4  # "[" + two label letters + "]"
CELL_SEPARATOR_WIDTH = 1


@dataclass(frozen=True)
class Bounds:
    """Rectangle of character cells; ``x``/``y`` are 0-based."""

    x: int
    y: int
    width: int
    height: int

    def below(self, rows: int) -> "Bounds":
        """Return the area left after reserving ``rows`` at the top."""
        rows = max(0, min(rows, self.height))
        return Bounds(self.x, self.y + rows, self.width, self.height - rows)


@dataclass(frozen=True)
class GridGeometry:
    """Placement parameters for one drawn page."""

    cell_width: int
    rows_per_column: int
    column_count: int


def item_render_width(name: str) -> int:
    """Columns taken by ``[xy]name`` for one entry."""
    return LABEL_DECORATION_WIDTH + display_width(name)


def cell_width(widths: Iterable[int]) -> int:
    """Widest rendered item plus the separator column."""
    widest = max(widths, default=0)
    return max(1, widest) + CELL_SEPARATOR_WIDTH


def rows_per_column(item_count: int, cell_width: int, width: int, height: int) -> int:
    """Pick the shortest column height in ``[height // 2, height]`` that fits.

    Falls back to the full ``height`` when no candidate fits horizontally,
    accepting overflow on the right over leaving rows unused.
    """
    height = max(1, height)
    best: int | None = None
    for rows in range(height, max(1, height // 2) - 1, -1):
        if math.ceil(item_count / rows) * cell_width <= width:
            best = rows
        else:
            break
    return best if best is not None else height


def capacity(bounds: Bounds, item_width: int) -> int:
    """Cells available at full height for items ``item_width`` columns wide."""
    return (bounds.width // max(1, item_width)) * bounds.height


def place(index: int, rows: int, cell_width: int, bounds: Bounds, header_height: int = 0) -> tuple[int, int]:
    """Return the ``(x, y)`` screen cell for the ``index``-th item of a page."""
    rows = max(1, rows)
    column, row = divmod(index, rows)
    return bounds.x + column * cell_width, bounds.y + header_height + row


def compute_geometry(widths: Iterable[int], bounds: Bounds) -> GridGeometry:
    """Lay out a page whose items render ``widths`` columns wide."""
    widths = list(widths)
    cell = cell_width(widths)
    rows = rows_per_column(len(widths), cell, bounds.width, bounds.height)
    columns = math.ceil(len(widths) / rows) if widths else 0
    return GridGeometry(cell_width=cell, rows_per_column=rows, column_count=columns)


__all__ = [
    "Bounds",
    "GridGeometry",
    "CELL_SEPARATOR_WIDTH",
    "LABEL_DECORATION_WIDTH",
    "capacity",
    "cell_width",
    "compute_geometry",
    "item_render_width",
    "place",
    "rows_per_column",
]
