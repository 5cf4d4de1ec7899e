"""Turn key tokens into selector actions.

Navigation tokens such as ``>>`` are built from characters that are never
label prefixes, so they are detected on a raw log of everything typed rather
than on the matcher's filtered prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
import enum

BACK_TOKEN = ".."
NEXT_PAGE_TOKEN = ">>"
PREV_PAGE_TOKEN = "<<"


class Action(enum.Enum):
    QUIT = "quit"
    TOGGLE_HIDDEN = "toggle_hidden"
    ACCEPT = "accept"
    CLEAR = "clear"
    BACK = "back"
    NEXT_PAGE = "next_page"
    PREV_PAGE = "prev_page"
    LABEL = "label"
    IGNORE = "ignore"


@dataclass(frozen=True)
class KeyEvent:
    action: Action
    char: str = ""


_NAVIGATION_TOKENS: dict[str, Action] = {
    BACK_TOKEN: Action.BACK,
    NEXT_PAGE_TOKEN: Action.NEXT_PAGE,
    PREV_PAGE_TOKEN: Action.PREV_PAGE,
}


class InputClassifier:
    """Classify keys while keeping the raw keystroke log for one page."""

    def __init__(self) -> None:
        self._raw_log = ""

    @property
    def raw_log(self) -> str:
        return self._raw_log

    def reset(self) -> None:
        """Forget typed characters; call on every page or directory change."""
        self._raw_log = ""

    def classify(self, key: str) -> KeyEvent:
        if key == "CTRL_C":
            return KeyEvent(Action.QUIT)
        if key == "CTRL_H":
            return KeyEvent(Action.TOGGLE_HIDDEN)
        if key == "ENTER":
            return KeyEvent(Action.ACCEPT)
        if key == "ESC":
            return KeyEvent(Action.CLEAR)
        if len(key) != 1 or not key.isprintable():
            return KeyEvent(Action.IGNORE)

        self._raw_log += key
        navigation = _NAVIGATION_TOKENS.get(self._raw_log[-2:])
        if navigation is not None:
            return KeyEvent(navigation)
        if key.isalpha():
            return KeyEvent(Action.LABEL, key)
        return KeyEvent(Action.IGNORE)


__all__ = [
    "Action",
    "KeyEvent",
    "InputClassifier",
    "BACK_TOKEN",
    "NEXT_PAGE_TOKEN",
    "PREV_PAGE_TOKEN",
]
