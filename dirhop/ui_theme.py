"""UI theme definitions and entry styling.

Themes are ANSI palettes for the header, status row, labels and entries.
Entry styles are plain functions from an ``Entry`` to styled text so the
renderer never decides how names look.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .candidates import Entry


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    header: str
    status: str
    status_error: str
    label_typed: str
    label_rest: str
    bracket: str
    entry_dir: str
    entry_file: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[33m",
    status="\033[2;38;5;250m",
    status_error="\033[1;31m",
    label_typed="\033[34m",
    label_rest="\033[1m",
    bracket="",
    entry_dir="\033[1;34m",
    entry_file="",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;45m",
    status="\033[2;38;5;110m",
    status_error="\033[38;5;215m",
    label_typed="\033[38;5;39m",
    label_rest="\033[1;38;5;153m",
    bracket="\033[2;38;5;31m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header="",
    status="",
    status_error="",
    label_typed="",
    label_rest="",
    bracket="",
    entry_dir="",
    entry_file="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}

EntryStyle = Callable[[Entry], str]


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def _paint(color: str, text: str, reset: str) -> str:
    if not color:
        return text
    return f"{color}{text}{reset}"


def directory_style(theme: UITheme) -> EntryStyle:
    """Style directories with emphasis and leave files in the file color."""

    def style(entry: Entry) -> str:
        color = theme.entry_dir if entry.is_dir else theme.entry_file
        return _paint(color, entry.name, theme.reset)

    return style


def plain_style(theme: UITheme) -> EntryStyle:
    """Render every entry the same way, directories included."""

    def style(entry: Entry) -> str:
        return _paint(theme.entry_file, entry.name, theme.reset)

    return style


ENTRY_STYLES: dict[str, Callable[[UITheme], EntryStyle]] = {
    "directories": directory_style,
    "plain": plain_style,
}


def resolve_entry_style(name: str | None, theme: UITheme) -> EntryStyle:
    factory = ENTRY_STYLES.get((name or "").strip().lower(), directory_style)
    return factory(theme)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "ENTRY_STYLES",
    "EntryStyle",
    "available_theme_names",
    "directory_style",
    "normalize_theme_name",
    "plain_style",
    "resolve_entry_style",
    "resolve_theme",
]
