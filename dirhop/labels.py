"""Two-letter label generation.

Labels are assigned per page, so ``aa`` names the first item of every page.
Only the number of items on one page is bounded by ``LABEL_CAPACITY``.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from .errors import CapacityExceededError

ALPHABET_SIZE = 26
LABEL_LENGTH = 2
LABEL_CAPACITY = ALPHABET_SIZE**LABEL_LENGTH

logger = logging.getLogger(__name__)


def label(index: int) -> str | None:
    """Return the label for page position ``index`` or ``None`` past the end."""
    if index < 0 or index >= LABEL_CAPACITY:
        return None
    return chr(97 + index // ALPHABET_SIZE) + chr(97 + index % ALPHABET_SIZE)


def iter_labels() -> Iterator[str]:
    """Yield every label in position order, ``aa`` through ``zz``."""
    index = 0
    while True:
        current = label(index)
        if current is None:
            return
        yield current
        index += 1


def assign_labels(count: int) -> tuple[str, ...]:
    """Return labels for the first ``count`` positions of a page.

    Raises ``CapacityExceededError`` instead of reusing labels when a page
    would hold more items than there are labels.
    """
    if count > LABEL_CAPACITY:
        logger.error("refusing to label page of %d items (capacity %d)", count, LABEL_CAPACITY)
        raise CapacityExceededError(count, LABEL_CAPACITY)
    return tuple(label(index) for index in range(max(0, count)))


__all__ = [
    "LABEL_CAPACITY",
    "LABEL_LENGTH",
    "label",
    "iter_labels",
    "assign_labels",
]
