"""Suffix tree of a sentinel-terminated text, built online by Ukkonen's algorithm."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


class _Bound:
    """Mutable right border of an edge; every open leaf shares one."""

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value


@dataclass(eq=False)
class _Node:
    start: int
    end: _Bound
    children: dict[str, _Node] = field(default_factory=dict)
    link: _Node | None = None
    parent: _Node | None = None
    suffix_start: int | None = None

    @property
    def length(self) -> int:
        """Length of the text slice on the edge leading into this node."""
        return self.end.value - self.start

    def ordered_children(self) -> list[tuple[str, _Node]]:
        return sorted(self.children.items(), key=lambda item: item[0])


class SuffixTrie:
    """Suffix tree of ``text``; the last character of ``text`` is its sentinel."""

    def __init__(self, text: str) -> None:
        if not text:
            raise ValueError("text must not be empty")
        self._text = text
        self._sentinel = text[-1]
        self._end = _Bound(-1)
        self._leaves = 0
        self._root = _Node(0, _Bound(0))
        self._build()

    @property
    def text(self) -> str:
        return self._text

    @property
    def root(self) -> _Node:
        return self._root

    def _split_node(self, node: _Node, i: int) -> None:
        node.children[self._text[i]] = _Node(
            i, self._end, parent=node, suffix_start=self._leaves
        )
        self._leaves += 1

    def _split_arc(self, node: _Node, shift: int, i: int) -> _Node:
        text = self._text
        new = _Node(
            node.start,
            _Bound(node.start + shift),
            children={text[node.start + shift]: node},
            parent=node.parent,
        )
        node.parent = new
        node.start += shift
        new.parent.children[text[new.start]] = new
        self._split_node(new, i)
        return new

    def _run_back(self, node: _Node, i: int) -> tuple[_Node, int]:
        root = self._root
        if node is root:
            raise RuntimeError("cannot run back from the root")
        if node.link is not None:
            return node.link, node.link.length

        total = 0
        while node is not root and node.link is None:
            total += node.length
            node = node.parent
        if node is root and total == 0:
            raise RuntimeError("ran back to the root with no shift")
        if node is root:
            total -= 1
        else:
            node = node.link

        if total > 0:
            node = node.children[self._text[i - total]]
            while total > node.length:
                total -= node.length
                node = node.children[self._text[i - total]]
        return node, total

    def _diverges(self, node: _Node, shift: int, letter: str) -> bool:
        if shift == node.length:
            return letter not in node.children
        return shift < node.length and self._text[node.start + shift] != letter

    def _split_cascade(self, node: _Node, shift: int, i: int) -> tuple[_Node, int]:
        text = self._text
        letter = text[i]
        if shift > node.length:
            raise RuntimeError("shift is bigger than the edge length")

        last_split: _Node | None = None
        while node is not self._root and self._diverges(node, shift, letter):
            if shift == node.length:
                self._split_node(node, i)
            else:
                node = self._split_arc(node, shift, i)
                shift = node.length
            if last_split is not None:
                last_split.link = node
            last_split = node
            node, shift = self._run_back(node, i)

        if node is self._root and letter not in node.children:
            self._split_node(node, i)
        elif shift == node.length and letter in node.children:
            node, shift = node.children[letter], 1
        elif shift < node.length and text[node.start + shift] == letter:
            shift += 1
        else:
            raise RuntimeError("undefined case while splitting suffixes")
        return node, shift

    def _build(self) -> None:
        text = self._text
        node, shift = self._root, 0
        for i, letter in enumerate(text):
            self._end.value += 1
            if shift < node.length:
                if text[node.start + shift] == letter:
                    shift += 1
                else:
                    node, shift = self._split_cascade(node, shift, i)
            elif letter in node.children:
                node, shift = node.children[letter], 1
            else:
                node, shift = self._split_cascade(node, shift, i)

    @staticmethod
    def _end_nodes(node: _Node) -> Iterator[_Node]:
        stack = [node]
        while stack:
            current = stack.pop()
            if current.suffix_start is not None:
                yield current
                continue
            stack.extend(child for _, child in reversed(current.ordered_children()))

    def find(self, pattern: str) -> list[int]:
        """Return the start index of every occurrence of ``pattern``."""
        text = self._text
        node, shift = self._root, 0
        for letter in pattern:
            if shift < node.length:
                if text[node.start + shift] != letter:
                    return []
                shift += 1
            elif letter in node.children:
                node, shift = node.children[letter], 1
            else:
                return []
        return [leaf.suffix_start for leaf in self._end_nodes(node)]

    def find_min_slice(self, slice_size: int) -> int:
        """Return where the lexicographically least slice of ``slice_size`` starts."""
        node = self._root
        while slice_size > node.length:
            slice_size -= node.length
            items = node.ordered_children()
            if not items:
                raise ValueError("slice size exceeds the text")
            letter, child = items[0]
            if letter == self._sentinel:
                if len(items) < 2:
                    raise ValueError("slice size exceeds the text")
                child = items[1][1]
            node = child

        while node.children:
            items = node.ordered_children()
            letter, child = items[0]
            if letter == self._sentinel and len(items) > 1:
                child = items[1][1]
            node = child
        return node.suffix_start

    def _describe(self, node: _Node) -> str:
        text = self._text
        label = text[node.start:node.start + node.length]
        if node.link is None:
            return f"{label}; link: none"
        link = node.link
        return f"{label}; link: {text[link.start:link.start + link.length]}"

    def render(self) -> str:
        """Return a text picture of the tree, one node per line."""
        lines: list[str] = []

        def walk(node: _Node, depth: int, prefix: str) -> None:
            lines.append(prefix + self._describe(node))
            for letter, child in node.ordered_children():
                if letter != self._text[child.start]:
                    lines.append("ERROR: translation letter don't correspond real slice")
                walk(child, depth + 1, "  " * depth + f"{letter} : ")

        walk(self._root, 0, "")
        return "\n".join(lines) + "\n"