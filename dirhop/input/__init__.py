"""Input-layer public API for key decoding and classification.

`read_key` turns raw terminal bytes into key tokens; `InputClassifier` maps
those tokens onto selector actions.
"""

from .classifier import Action, InputClassifier, KeyEvent
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Action",
    "InputClassifier",
    "KeyEvent",
]
