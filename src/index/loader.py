"""Corpus loading and index selection."""

import logging
from pathlib import Path
from typing import List, Literal, Optional, Sequence, Union

from .dictionary import WordDictionary
from .models import WordIndex
from .word_list_ds import WordListDS

logger = logging.getLogger(__name__)

IndexKind = Literal["auto", "trie", "suffix_array"]

# Corpora at least this large default to the suffix-array index
LARGE_CORPUS_THRESHOLD = 200_000


def load_word_list(path: Union[str, Path]) -> List[str]:
    """
    Read a word list with one word per line.

    Lines are stripped and lower-cased; blank lines are skipped. Order and
    duplicates are preserved.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    words: List[str] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                words.append(word)

    logger.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words


def build_index(
    words: Sequence[str],
    index_kind: IndexKind = "auto",
    large_corpus_threshold: int = LARGE_CORPUS_THRESHOLD,
    alphabet: Optional[str] = None,
) -> WordIndex:
    """
    Build the word index for ``words``.

    Args:
        words: Lower-cased corpus
        index_kind: "trie" or "suffix_array" to force an implementation;
            "auto" picks the suffix array for corpora of at least
            ``large_corpus_threshold`` words
        large_corpus_threshold: Cut-over size for "auto"
        alphabet: Optional restriction for the initial letter groups

    Returns:
        A WordDictionary or WordListDS
    """
    if index_kind not in ("auto", "trie", "suffix_array"):
        raise ValueError(f"Unknown index kind: {index_kind!r}")

    use_suffix_array = index_kind == "suffix_array" or (
        index_kind == "auto" and len(words) >= large_corpus_threshold
    )

    if use_suffix_array:
        logger.info("Building suffix-array index for %d words", len(words))
        return WordListDS(words, alphabet=alphabet)

    logger.info("Building trie index for %d words", len(words))
    return WordDictionary(words, alphabet=alphabet)
