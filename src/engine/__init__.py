"""Word builder engine."""

from .models import (
    Position,
    ExecutorKind,
    EngineConfig,
    ScanResult,
    WordBuilderState,
    StateSnapshot,
    DEAD_END_MESSAGE,
)
from .errors import WordBuilderError, InvalidLetter, InvalidPosition, InvalidIndex
from .scan import scan_embedded, scan_partition, merge_results, partition
from .builder import (
    check_valid_word,
    add_letter,
    remove_letter,
    update_sets,
    new_state,
    reset,
    get_current_state,
)
from .session import WordBuilderSession

__all__ = [
    # Models
    "Position",
    "ExecutorKind",
    "EngineConfig",
    "ScanResult",
    "WordBuilderState",
    "StateSnapshot",
    "DEAD_END_MESSAGE",
    # Errors
    "WordBuilderError",
    "InvalidLetter",
    "InvalidPosition",
    "InvalidIndex",
    # Embedded scan
    "scan_embedded",
    "scan_partition",
    "merge_results",
    "partition",
    # Transitions
    "check_valid_word",
    "add_letter",
    "remove_letter",
    "update_sets",
    "new_state",
    "reset",
    "get_current_state",
    # Sessions
    "WordBuilderSession",
]
