"""Data models and the shared query surface for word indexes."""

from typing import Iterable, List, Optional, Protocol, Sequence, Set, runtime_checkable
from pydantic import BaseModel, ConfigDict, Field


class LetterGroups(BaseModel):
    """Letters that may be prepended / appended to a query string."""
    model_config = ConfigDict(frozen=True)

    prepend: List[str] = Field(default_factory=list)
    append: List[str] = Field(default_factory=list)


class SuggestionGroups(BaseModel):
    """Corpus words containing a query string, split by where it occurs."""
    model_config = ConfigDict(frozen=True)

    prepend: List[str] = Field(default_factory=list)  # query ends the word
    append: List[str] = Field(default_factory=list)  # query starts the word
    middle: List[str] = Field(default_factory=list)  # strictly inside, or the whole word


@runtime_checkable
class WordIndex(Protocol):
    """
    Query surface shared by WordDictionary and WordListDS.

    The engine only talks to this protocol, so either implementation can
    back a session. Instances are read-only once built.
    """

    words: Sequence[str]

    def contains_word(self, word: str) -> bool: ...

    def find_words_with_prefix(self, prefix: str) -> List[str]: ...

    def find_words_with_suffix(self, suffix: str) -> List[str]: ...

    def next_letters(self, prefix: str) -> Set[str]: ...

    def previous_letters(self, suffix: str) -> Set[str]: ...

    def initial_groups(self) -> LetterGroups: ...


def initial_letter_groups(words: Iterable[str], alphabet: Optional[str] = None) -> LetterGroups:
    """
    Compute the empty-query letter groups with one linear scan.

    ``prepend`` holds every letter that ends some word and ``append`` every
    letter that starts some word, optionally restricted to ``alphabet``.
    """
    first: Set[str] = set()
    last: Set[str] = set()
    for word in words:
        if word:
            first.add(word[0])
            last.add(word[-1])

    if alphabet is not None:
        allowed = set(alphabet)
        first &= allowed
        last &= allowed

    return LetterGroups(prepend=sorted(last), append=sorted(first))
