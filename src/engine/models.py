"""
Pydantic models for the word builder engine.

State values are frozen: every transition builds a new WordBuilderState,
so a snapshot handed to another thread or session can never change
underneath it.
"""

from typing import FrozenSet, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from ..index.loader import LARGE_CORPUS_THRESHOLD, IndexKind


# Type aliases
Position = Literal["prefix", "suffix"]
ExecutorKind = Literal["thread", "process"]

DEAD_END_MESSAGE = "This isn't a valid prefix or suffix of any word. Try removing some letters."


class EngineConfig(BaseModel):
    """Tunables for the engine and index selection."""
    model_config = ConfigDict(frozen=True)

    workers: Optional[int] = Field(None, ge=1)  # None: one per CPU
    executor: ExecutorKind = "thread"  # "process" for CPU parallelism on large corpora
    max_completions: int = Field(5, ge=0)  # per trie walk
    display_completions: int = Field(5, ge=0, le=5)
    message_completions: int = Field(3, ge=0)
    index_kind: IndexKind = "auto"
    large_corpus_threshold: int = Field(LARGE_CORPUS_THRESHOLD, ge=1)
    alphabet: Optional[str] = None


class ScanResult(BaseModel):
    """Outcome of scanning (part of) the word list for embedded occurrences."""
    model_config = ConfigDict(frozen=True)

    prefix_letters: FrozenSet[str] = frozenset()
    suffix_letters: FrozenSet[str] = frozenset()
    found: bool = False


class WordBuilderState(BaseModel):
    """
    One immutable step of a word building session.

    Attributes:
        answer: The string built so far
        prefix_set: Letters that may be prepended right now
        suffix_set: Letters that may be appended right now
        step: Number of successful edits since the session started
        is_valid_word: Whether ``answer`` is a complete corpus word
        valid_completions: Candidate full words, shortest first once sorted
        suggestion: Hint for the next move
        has_continuation: Whether any word extends ``answer`` at all
        message: Report of the transition that produced this state
    """
    model_config = ConfigDict(frozen=True)

    answer: str = ""
    prefix_set: FrozenSet[str] = frozenset()
    suffix_set: FrozenSet[str] = frozenset()
    step: int = Field(0, ge=0)
    is_valid_word: bool = False
    valid_completions: Tuple[str, ...] = ()
    suggestion: str = ""
    has_continuation: bool = False
    message: str = ""


class StateSnapshot(BaseModel):
    """Plain view of a state for collaborators (e.g. a UI)."""
    model_config = ConfigDict(frozen=True)

    answer: str
    prefix_set: List[str] = Field(default_factory=list)
    suffix_set: List[str] = Field(default_factory=list)
    step: int = 0
    is_valid_word: bool = False
    valid_completions: List[str] = Field(default_factory=list)
    suggestion: str = ""
