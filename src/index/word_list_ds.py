"""
Suffix-array word index for large corpora.

All words are joined with a separator into one flat buffer and a suffix
array is built over it. Every query is answered from the sorted positions
of the query string in the buffer rather than by walking a tree, so no
per-character node objects are allocated.
"""

import bisect
import logging
import time
from typing import Iterable, List, Optional, Set, Tuple

from .models import LetterGroups, SuggestionGroups, initial_letter_groups

logger = logging.getLogger(__name__)

SEPARATOR = "$"


def build_suffix_array(text: str) -> List[int]:
    """
    Build the suffix array of ``text`` by prefix doubling.

    Each round sorts suffixes by the rank pair of their first ``k`` and
    next ``k`` characters, doubling ``k`` until every rank is distinct.

    Args:
        text: Buffer to index

    Returns:
        Start positions of all suffixes of ``text`` in lexicographic order
    """
    n = len(text)
    if n == 0:
        return []

    rank = [ord(ch) for ch in text]
    suffixes = list(range(n))
    k = 1
    while True:
        def sort_key(i: int, rank=rank, k=k) -> Tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        suffixes.sort(key=sort_key)

        new_rank = [0] * n
        for j in range(1, n):
            prev, cur = suffixes[j - 1], suffixes[j]
            new_rank[cur] = new_rank[prev] + (sort_key(prev) != sort_key(cur))
        rank = new_rank

        if rank[suffixes[-1]] == n - 1:
            return suffixes
        k <<= 1


class WordListDS:
    """
    Word index over a separator-joined buffer and its suffix array.

    Answers the same queries as WordDictionary (see WordIndex) plus the
    occurrence-based ``get_groups`` and ``get_suggestion_groups``. Read-only
    once built.

    Attributes:
        data: Words joined by SEPARATOR
        suffix_array: Sorted suffix start positions of ``data``
        words: Lower-cased words in input order, duplicates preserved
    """

    def __init__(self, words: Iterable[str], alphabet: Optional[str] = None):
        started = time.perf_counter()

        self.words: List[str] = [w.lower() for w in words]
        for word in self.words:
            if SEPARATOR in word:
                raise ValueError(f"Word {word!r} contains the separator {SEPARATOR!r}")

        self.data = SEPARATOR.join(self.words)
        self.suffix_array = build_suffix_array(self.data)

        # Start offset of each word in the buffer, for locating word bounds
        self._word_starts: List[int] = []
        offset = 0
        for word in self.words:
            self._word_starts.append(offset)
            offset += len(word) + 1

        self._initial_groups = initial_letter_groups(self.words, alphabet)
        self._first_letters = {w[0] for w in self.words if w}
        self._last_letters = {w[-1] for w in self.words if w}

        logger.debug(
            "Built WordListDS over %d words (%d bytes) in %.3fs",
            len(self.words), len(self.data), time.perf_counter() - started,
        )

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    # occurrence lookup

    def _occurrences(self, s: str) -> List[int]:
        """Sorted buffer positions where ``s`` occurs."""
        if not s or SEPARATOR in s:
            return []
        m = len(s)

        def prefix_of(i: int) -> str:
            return self.data[i:i + m]

        lo = bisect.bisect_left(self.suffix_array, s, key=prefix_of)
        hi = bisect.bisect_right(self.suffix_array, s, lo=lo, key=prefix_of)
        return sorted(self.suffix_array[lo:hi])

    def _word_bounds(self, position: int) -> Tuple[int, int]:
        """Start and end offsets of the word containing ``position``."""
        idx = bisect.bisect_right(self._word_starts, position) - 1
        start = self._word_starts[idx]
        return start, start + len(self.words[idx])

    # occurrence queries

    def get_groups(self, s: str) -> LetterGroups:
        """
        Letters found immediately before / after each occurrence of ``s``.

        The empty query returns the groups cached at construction: letters
        that end some word (prepend) and letters that start some word (append).
        """
        if not s:
            return self._initial_groups

        prepend: Set[str] = set()
        append: Set[str] = set()
        n = len(self.data)
        for p in self._occurrences(s):
            if p > 0 and self.data[p - 1] != SEPARATOR:
                prepend.add(self.data[p - 1])
            end = p + len(s)
            if end < n and self.data[end] != SEPARATOR:
                append.add(self.data[end])

        return LetterGroups(prepend=sorted(prepend), append=sorted(append))

    def get_suggestion_groups(self, s: str) -> SuggestionGroups:
        """
        Classify every word containing ``s`` by where ``s`` sits in it.

        Words starting with ``s`` are append candidates, words ending with it
        are prepend candidates, and words holding it strictly inside are
        middle candidates. A word equal to ``s`` is reported only as middle.
        """
        if not s:
            return SuggestionGroups()

        prepend: Set[str] = set()
        append: Set[str] = set()
        middle: Set[str] = set()
        for p in self._occurrences(s):
            start, end = self._word_bounds(p)
            word = self.data[start:end]
            if word == s:
                middle.add(word)
            elif p == start:
                append.add(word)
            elif p + len(s) == end:
                prepend.add(word)
            else:
                middle.add(word)

        return SuggestionGroups(
            prepend=sorted(prepend),
            append=sorted(append),
            middle=sorted(middle),
        )

    def contains(self, word: str) -> bool:
        """True if ``word`` is one whole entry of the buffer."""
        if not word or SEPARATOR in word:
            return False

        n, m = len(self.data), len(word)
        for p in self._occurrences(word):
            end = p + m
            if (p == 0 or self.data[p - 1] == SEPARATOR) and (end == n or self.data[end] == SEPARATOR):
                return True
        return False

    # WordIndex surface

    def contains_word(self, word: str) -> bool:
        return self.contains(word)

    def find_words_with_prefix(self, prefix: str) -> List[str]:
        if not prefix:
            return sorted(set(self.words))
        found: Set[str] = set()
        for p in self._occurrences(prefix):
            start, end = self._word_bounds(p)
            if p == start:
                found.add(self.data[start:end])
        return sorted(found)

    def find_words_with_suffix(self, suffix: str) -> List[str]:
        if not suffix:
            return sorted(set(self.words))
        found: Set[str] = set()
        for p in self._occurrences(suffix):
            start, end = self._word_bounds(p)
            if p + len(suffix) == end:
                found.add(self.data[start:end])
        return sorted(found)

    def next_letters(self, prefix: str) -> Set[str]:
        """Letters following ``prefix`` where it starts a word."""
        if not prefix:
            return set(self._first_letters)
        letters: Set[str] = set()
        for p in self._occurrences(prefix):
            start, end = self._word_bounds(p)
            if p == start and p + len(prefix) < end:
                letters.add(self.data[p + len(prefix)])
        return letters

    def previous_letters(self, suffix: str) -> Set[str]:
        """Letters preceding ``suffix`` where it ends a word."""
        if not suffix:
            return set(self._last_letters)
        letters: Set[str] = set()
        for p in self._occurrences(suffix):
            start, end = self._word_bounds(p)
            if p + len(suffix) == end and p > start:
                letters.add(self.data[p - 1])
        return letters

    def initial_groups(self) -> LetterGroups:
        return self._initial_groups
