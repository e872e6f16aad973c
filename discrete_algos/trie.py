"""Prefix tree of strings with insertion, lookup and removal."""

from __future__ import annotations

from collections.abc import Iterable

_END = object()


class Trie:
    """Set of strings stored as a prefix tree.

    The empty string is a member from the start.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root: dict = {_END: None}
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add ``word``; adding a member again changes nothing."""
        if self.find(word):
            return
        node = self._root
        for letter in word:
            node = node.setdefault(letter, {})
        node[_END] = None

    def find(self, word: str) -> bool:
        """Return whether ``word`` is a member."""
        node = self._root
        for letter in word:
            if letter not in node:
                return False
            node = node[letter]
        return _END in node

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.find(word)

    def remove(self, word: str) -> None:
        """Remove ``word`` and prune branches left empty; absent words are ignored."""
        if not self.find(word):
            return
        path = [self._root]
        for letter in word:
            path.append(path[-1][letter])
        del path[-1][_END]

        for depth in range(len(word) - 1, -1, -1):
            parent = path[depth]
            if parent[word[depth]]:
                break
            del parent[word[depth]]