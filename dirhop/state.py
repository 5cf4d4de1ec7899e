from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .candidates import CandidateSet
from .input import InputClassifier
from .layout import Bounds
from .matcher import IncrementalMatcher
from .paging import Page, Paginator


@dataclass
class SelectorState:
    directory: Path
    show_hidden: bool
    bounds: Bounds
    candidates: CandidateSet
    paginator: Paginator
    page: Page
    matcher: IncrementalMatcher
    classifier: InputClassifier = field(default_factory=InputClassifier)
    status_message: str = ""
    status_is_error: bool = False
    dirty: bool = True
    skip_next_lf: bool = False
    finished: bool = False
    result: Path | None = None
