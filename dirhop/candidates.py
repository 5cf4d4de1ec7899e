"""Directory listing and the sorted, filtered candidate set.

The candidate set is rebuilt from scratch whenever the directory or the
hidden-file filter changes; it is never patched in place.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One selectable directory child."""

    name: str
    path: Path
    is_dir: bool

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


def list_directory(directory: Path) -> list[Entry]:
    """Return the unsorted children of ``directory``.

    Symlinks to directories count as directories so they can be descended
    into. Raises ``OSError`` when the directory itself cannot be read.
    """
    entries: list[Entry] = []
    with os.scandir(directory) as children:
        for child in children:
            try:
                is_dir = child.is_dir(follow_symlinks=True)
            except OSError:
                is_dir = False
            entries.append(Entry(name=child.name, path=Path(child.path), is_dir=is_dir))
    logger.debug("listed %d entries in %s", len(entries), directory)
    return entries


def candidate_sort_key(entry: Entry) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name ignoring leading dots.

    The raw name breaks ties so ``env`` and ``.env`` keep a fixed order
    whatever order the filesystem lists them in.
    """
    return (not entry.is_dir, entry.name.lstrip(".").lower(), entry.name)


class CandidateSet:
    """Ordered, immutable sequence of entries the user can currently pick."""

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)

    @classmethod
    def rebuild(cls, raw_entries: Iterable[Entry], show_hidden: bool) -> "CandidateSet":
        """Filter dotfiles unless ``show_hidden`` and sort into display order."""
        visible = [entry for entry in raw_entries if show_hidden or not entry.is_hidden]
        visible.sort(key=candidate_sort_key)
        return cls(visible)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def item_at(self, position: int) -> Entry:
        if position < 0:
            raise IndexError(position)
        return self._entries[position]

    def slice(self, start: int, stop: int) -> tuple[Entry, ...]:
        return self._entries[start:stop]


__all__ = [
    "Entry",
    "CandidateSet",
    "candidate_sort_key",
    "list_directory",
]
