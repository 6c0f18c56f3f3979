"""Word indexes for the word builder."""

from .trie import Trie, TrieNode
from .models import LetterGroups, SuggestionGroups, WordIndex, initial_letter_groups
from .dictionary import WordDictionary, reverse_word
from .word_list_ds import WordListDS, SEPARATOR, build_suffix_array
from .loader import load_word_list, build_index, LARGE_CORPUS_THRESHOLD

__all__ = [
    # Trie
    "Trie",
    "TrieNode",
    # Models
    "LetterGroups",
    "SuggestionGroups",
    "WordIndex",
    "initial_letter_groups",
    # Indexes
    "WordDictionary",
    "reverse_word",
    "WordListDS",
    "SEPARATOR",
    "build_suffix_array",
    # Loading
    "load_word_list",
    "build_index",
    "LARGE_CORPUS_THRESHOLD",
]
