"""ANSI-aware width measurement for grid cells.

Escape sequences occupy no columns; East Asian wide characters take two and
combining marks none, so names line up in the grid the way they render.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return rendered column count of ``text``, ignoring escape sequences."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled string to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim so styling resets still reach the
    terminal after the visible text is cut.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    full = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch)
        if full or col + w > max_cols:
            # Keep scanning so trailing resets are still emitted.
            full = True
            i += 1
            continue
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "strip_ansi",
]
