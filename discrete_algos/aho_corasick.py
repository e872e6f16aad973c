"""Aho-Corasick automaton reporting pattern matches with word numbers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Matching:
    """A match start position and the 1-based number of the word it is in."""

    position: int
    word_count: int


@dataclass
class Occurrence:
    """How often a pattern matched, and where."""

    count: int = 0
    matchings: list[Matching] = field(default_factory=list)


@dataclass
class _Node:
    letter: str
    translations: dict[str, int] = field(default_factory=dict)
    longest_prefix: int = 0
    exit_link: int | None = None
    is_terminal: bool = False
    pattern_index: int | None = None


class AhoCorasick:
    """Automaton over a fixed list of patterns."""

    _ROOT = 0

    def __init__(self, patterns: list[str]) -> None:
        self._patterns = list(patterns)
        self._nodes = [_Node("")]
        for index, pattern in enumerate(self._patterns):
            self._insert(pattern, index)
        self._set_links()

    def _insert(self, pattern: str, index: int) -> None:
        node_id = self._ROOT
        for letter in pattern:
            translations = self._nodes[node_id].translations
            if letter not in translations:
                self._nodes.append(_Node(letter))
                translations[letter] = len(self._nodes) - 1
            node_id = translations[letter]
        node = self._nodes[node_id]
        node.is_terminal = True
        node.pattern_index = index

    def _set_links(self) -> None:
        nodes = self._nodes
        root = nodes[self._ROOT]
        root.longest_prefix = self._ROOT
        queue = deque()
        for child in root.translations.values():
            nodes[child].longest_prefix = self._ROOT
            queue.append(child)

        while queue:
            node_id = queue.popleft()
            for letter, child_id in nodes[node_id].translations.items():
                child = nodes[child_id]
                linked = nodes[node_id].longest_prefix
                while linked != self._ROOT and letter not in nodes[linked].translations:
                    linked = nodes[linked].longest_prefix

                if letter in nodes[linked].translations:
                    child.longest_prefix = nodes[linked].translations[letter]
                    target = nodes[child.longest_prefix]
                    if target.is_terminal:
                        child.exit_link = child.longest_prefix
                    elif target.exit_link is not None:
                        final = target.exit_link
                        while not nodes[final].is_terminal:
                            final = nodes[final].exit_link
                        child.exit_link = final
                else:
                    child.longest_prefix = self._ROOT
                queue.append(child_id)

    def _reported_pattern(self, node: _Node) -> str:
        if node.is_terminal:
            return self._patterns[node.pattern_index]
        if node.exit_link is not None:
            return self._patterns[self._nodes[node.exit_link].pattern_index]
        return ""

    def find(self, text: str) -> dict[str, Occurrence]:
        """Scan ``text`` and return the occurrences keyed by pattern.

        At each position at most one pattern is reported: the one ending at
        the current state, or else the one its exit link leads to. Words are
        counted by the spaces seen so far, starting from 1.
        """
        result: dict[str, Occurrence] = {}
        word_count = 1
        nodes = self._nodes
        current = self._ROOT
        for i, letter in enumerate(text):
            if letter == " ":
                word_count += 1
            while current != self._ROOT and letter not in nodes[current].translations:
                current = nodes[current].longest_prefix
            if letter not in nodes[current].translations:
                continue
            current = nodes[current].translations[letter]
            pattern = self._reported_pattern(nodes[current])
            if pattern:
                occurrence = result.setdefault(pattern, Occurrence())
                occurrence.count += 1
                occurrence.matchings.append(Matching(i + 1 - len(pattern), word_count))
        return result