"""Prefix trie used for forward and reverse word lookups."""

from typing import Dict, List, Optional, Set


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: Dict[str, "TrieNode"] = {}
        self.is_word: bool = False


class Trie:
    """
    Prefix tree over a word corpus.

    Only prefix-anchored queries are supported. Suffix queries are answered
    by building a second Trie over reversed words (see WordDictionary).
    Result order follows insertion order and is stable for a fixed corpus.
    """

    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child
        node.is_word = True

    def contains(self, word: str) -> bool:
        """True only if the full path exists and ends on a terminal node."""
        node = self._walk(word)
        return node is not None and node.is_word

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def keys_with_prefix(self, prefix: str) -> List[str]:
        """
        Return every complete word under the node reached by ``prefix``.

        Args:
            prefix: Path to walk from the root

        Returns:
            Words starting with ``prefix`` (including ``prefix`` itself when it
            is a word), or an empty list if the path does not exist
        """
        node = self._walk(prefix)
        if node is None:
            return []

        results: List[str] = []
        # Explicit stack so long words cannot hit the recursion limit
        stack = [(node, prefix)]
        while stack:
            current, key = stack.pop()
            if current.is_word:
                results.append(key)
            for ch, child in reversed(list(current.children.items())):
                stack.append((child, key + ch))
        return results

    def get_next_letters(self, prefix: str) -> Set[str]:
        """Distinct characters that can follow ``prefix``; empty if absent."""
        node = self._walk(prefix)
        if node is None:
            return set()
        return set(node.children)

    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
