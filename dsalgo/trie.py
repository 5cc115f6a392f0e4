"""A prefix tree of strings."""

from __future__ import annotations


class Trie:
    """Stores words and answers membership and prefix queries."""

    def __init__(self) -> None:
        self._children: dict[str, Trie] = {}
        self._is_word = False

    def insert(self, word: str) -> None:
        """Add a word."""
        node = self
        for letter in word:
            node = node._children.setdefault(letter, Trie())
        node._is_word = True

    def _walk(self, text: str) -> Trie | None:
        node = self
        for letter in text:
            node = node._children.get(letter)
            if node is None:
                return None
        return node

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._walk(word)
        return node is not None and node._is_word

    def has_prefix(self, prefix: str) -> bool:
        """True when some stored word starts with ``prefix``."""
        return self._walk(prefix) is not None