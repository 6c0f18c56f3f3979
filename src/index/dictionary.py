"""Trie-backed word dictionary with forward and reverse lookups."""

import logging
import time
from typing import Iterable, List, Optional, Set

from .models import LetterGroups, initial_letter_groups
from .trie import Trie

logger = logging.getLogger(__name__)


def reverse_word(word: str) -> str:
    """Return ``word`` with its characters in reverse order."""
    return word[::-1]


class WordDictionary:
    """
    Canonical search index over a lower-cased corpus.

    Holds a membership set, a forward trie over the words, a reverse trie
    over the reversed words, and the ordered word list (duplicates kept,
    since the embedded scan iterates it). Never mutated after construction;
    to change the corpus, build a new instance and swap it in.

    Attributes:
        word_set: Deduplicated lower-cased words
        forward_trie: Trie over words as written
        reverse_trie: Trie over reversed words
        words: Lower-cased words in input order, duplicates preserved
    """

    def __init__(self, words: Iterable[str], alphabet: Optional[str] = None):
        started = time.perf_counter()

        self.word_set: Set[str] = set()
        self.forward_trie = Trie()
        self.reverse_trie = Trie()
        self.words: List[str] = []

        for word in words:
            word = word.lower()
            self.word_set.add(word)
            self.forward_trie.insert(word)
            self.reverse_trie.insert(reverse_word(word))
            self.words.append(word)

        self._initial_groups = initial_letter_groups(self.word_set, alphabet)

        logger.debug(
            "Built WordDictionary with %d words (%d unique) in %.3fs",
            len(self.words), len(self.word_set), time.perf_counter() - started,
        )

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return self.contains_word(word)

    def contains_word(self, word: str) -> bool:
        """Exact membership check."""
        return word in self.word_set

    def find_words_with_prefix(self, prefix: str) -> List[str]:
        return self.forward_trie.keys_with_prefix(prefix)

    def find_words_with_suffix(self, suffix: str) -> List[str]:
        """Words ending with ``suffix``, found by walking the reverse trie."""
        reversed_words = self.reverse_trie.keys_with_prefix(reverse_word(suffix))
        return [reverse_word(w) for w in reversed_words]

    def next_letters(self, prefix: str) -> Set[str]:
        return self.forward_trie.get_next_letters(prefix)

    def previous_letters(self, suffix: str) -> Set[str]:
        return self.reverse_trie.get_next_letters(reverse_word(suffix))

    def initial_groups(self) -> LetterGroups:
        """Letters ending (prepend) and starting (append) some word."""
        return self._initial_groups
