"""Uncompressed suffix trie of one string, searched with other words."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

TERMINAL = "$"


@dataclass
class _SuffixNode:
    number: int = -1
    children: dict[str, _SuffixNode] = field(default_factory=dict)


class SuffixTree:
    """Every suffix of ``pattern`` + ``$`` stored letter by letter."""

    def __init__(self, pattern: str) -> None:
        self._root = _SuffixNode()
        text = pattern + TERMINAL
        for i in range(len(text)):
            self._add_suffix(text[i:], i + 1)

    def _add_suffix(self, suffix: str, number: int) -> None:
        node = self._root
        last = len(suffix) - 1
        for i, letter in enumerate(suffix):
            if letter not in node.children:
                child = _SuffixNode()
                if i == last:
                    child.number = number
                node.children[letter] = child
            node = node.children[letter]

    @staticmethod
    def _positions(node: _SuffixNode) -> Iterator[int]:
        stack = [node]
        while stack:
            current = stack.pop()
            for letter, child in current.children.items():
                if letter == TERMINAL:
                    yield child.number
                stack.append(child)

    def search(self, text: str) -> list[int]:
        """Return the sorted 1-based positions where ``text`` occurs, or []."""
        if not text:
            return []
        node = self._root
        for letter in text:
            node = node.children.get(letter)
            if node is None:
                return []
        return sorted(self._positions(node))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a string and then words from stdin; print where each word occurs."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    tree = SuffixTree(tokens[0])
    for i, word in enumerate(tokens[1:], 1):
        positions = tree.search(word)
        if positions:
            print(f"{i}: {', '.join(map(str, positions))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())