"""Frame rendering for the selector grid.

Everything here is presentation-only: functions return strings of text and
escape sequences and never touch the terminal or mutate state.
"""

from __future__ import annotations

from .ansi import clip_ansi_line, display_width
from .candidates import CandidateSet, Entry
from .layout import Bounds, compute_geometry, item_render_width, place
from .paging import Page, Paginator
from .runtime.session import HEADER_ROWS, list_bounds
from .state import SelectorState
from .terminal import clear_rect, move_to
from .ui_theme import EntryStyle, UITheme

STATUS_HINTS = "..  up   >> <<  page   Esc  clear   Ctrl+H  hidden   Enter  pick dir   Ctrl+C  quit"


def _paint(color: str, text: str, theme: UITheme) -> str:
    if not color or not text:
        return text
    return f"{color}{text}{theme.reset}"


def render_cell(code: str, prefix: str, entry: Entry, theme: UITheme, entry_style: EntryStyle) -> str:
    """Return ``[label]name`` with the already-typed label part highlighted."""
    typed = prefix if prefix and code.startswith(prefix) else ""
    rest = code[len(typed):]
    return (
        _paint(theme.bracket, "[", theme)
        + _paint(theme.label_typed, typed, theme)
        + _paint(theme.label_rest, rest, theme)
        + _paint(theme.bracket, "]", theme)
        + entry_style(entry)
    )


def status_line(state: SelectorState, theme: UITheme) -> str:
    if state.status_message:
        color = theme.status_error if state.status_is_error else theme.status
        return _paint(color, state.status_message, theme)
    hidden = "on" if state.show_hidden else "off"
    text = f"page {state.page.index + 1}/{state.paginator.page_count}  hidden {hidden}   {STATUS_HINTS}"
    return _paint(theme.status, text, theme)


def render_frame(state: SelectorState, theme: UITheme, entry_style: EntryStyle) -> str:
    """Build one full-screen frame for the visible page."""
    bounds = state.bounds
    out: list[str] = [clear_rect(bounds)]
    out.append(move_to(bounds.x, bounds.y))
    out.append(clip_ansi_line(_paint(theme.header, str(state.directory), theme), bounds.width))
    if bounds.height > 1:
        out.append(move_to(bounds.x, bounds.y + 1))
        out.append(clip_ansi_line(status_line(state, theme), bounds.width))

    page = state.page
    grid_bounds = list_bounds(bounds)
    if grid_bounds.height <= 0:
        return "".join(out)
    if not page.items:
        out.append(move_to(grid_bounds.x, grid_bounds.y))
        out.append(clip_ansi_line(_paint(theme.status, "(empty directory)", theme), bounds.width))
        return "".join(out)

    geometry = compute_geometry((item_render_width(entry.name) for entry in page.items), grid_bounds)
    prefix = state.matcher.prefix
    for index, (code, entry) in enumerate(page.labelled()):
        x, y = place(index, geometry.rows_per_column, geometry.cell_width, bounds, HEADER_ROWS)
        if x >= bounds.x + bounds.width or y >= bounds.y + bounds.height:
            continue
        cell = render_cell(code, prefix, entry, theme, entry_style)
        out.append(move_to(x, y))
        out.append(clip_ansi_line(cell, bounds.x + bounds.width - x))
    return "".join(out)


def render_page_rows(page: Page, bounds: Bounds, theme: UITheme, entry_style: EntryStyle) -> list[str]:
    """Lay a page out as plain text rows, padding every cell to the grid."""
    if not page.items:
        return []
    geometry = compute_geometry((item_render_width(entry.name) for entry in page.items), bounds)
    rows: list[list[str]] = [[] for _ in range(geometry.rows_per_column)]
    for index, (code, entry) in enumerate(page.labelled()):
        cell = render_cell(code, "", entry, theme, entry_style)
        row = index % geometry.rows_per_column
        rows[row].append(cell + " " * max(0, geometry.cell_width - display_width(cell)))
    return [clip_ansi_line("".join(cells).rstrip(" "), bounds.width) for cells in rows if cells]


def render_listing(
    candidates: CandidateSet,
    bounds: Bounds,
    theme: UITheme,
    entry_style: EntryStyle,
) -> str:
    """Render every page of ``candidates`` for non-interactive output."""
    grid_bounds = list_bounds(bounds)
    paginator = Paginator.for_candidates(candidates, grid_bounds)
    out: list[str] = []
    for index in range(paginator.page_count):
        page = paginator.page(index)
        assert page is not None
        out.append(_paint(theme.status, f"page {index + 1}/{paginator.page_count}", theme))
        out.extend(render_page_rows(page, grid_bounds, theme, entry_style))
    return "\n".join(out) + "\n"


__all__ = [
    "STATUS_HINTS",
    "render_cell",
    "render_frame",
    "render_listing",
    "render_page_rows",
    "status_line",
]
