"""Treap: a binary search tree by key and a max-heap by priority."""

from __future__ import annotations

import random
from typing import Any


class Treap:
    """A treap node, which is also the root of its subtree.

    Operations that restructure the treap return the new root, which may be
    None when nothing is left.
    """

    def __init__(self, key: Any, priority: Any = None) -> None:
        self._key = key
        self._priority = random.randrange(2**31) if priority is None else priority
        self._left: Treap | None = None
        self._right: Treap | None = None
        self._size = 1

    @property
    def key(self) -> Any:
        return self._key

    @property
    def priority(self) -> Any:
        return self._priority

    @staticmethod
    def _size_of(treap: Treap | None) -> int:
        return 0 if treap is None else treap._size

    def _recalc(self) -> None:
        self._size = 1 + self._size_of(self._left) + self._size_of(self._right)

    def _split(self, key: Any, inclusive: bool) -> tuple[Treap | None, Treap | None]:
        goes_left = key >= self._key if inclusive else key > self._key
        if goes_left:
            higher = None
            if self._right is not None:
                self._right, higher = self._right._split(key, inclusive)
            self._recalc()
            return self, higher
        less = None
        if self._left is not None:
            less, self._left = self._left._split(key, inclusive)
        self._recalc()
        return less, self

    def split(self, key: Any) -> tuple[Treap | None, Treap | None]:
        """Split into the keys not greater than ``key`` and the keys greater than it."""
        return self._split(key, True)

    @staticmethod
    def merge(less: Treap | None, higher: Treap | None) -> Treap | None:
        """Join two treaps where every key of ``less`` precedes those of ``higher``.

        When the two roots have equal priorities, the priority of ``less`` is
        raised by one first.
        """
        if less is None:
            return higher
        if higher is None:
            return less
        if less._priority == higher._priority:
            less._priority += 1
        if less._priority > higher._priority:
            less._right = Treap.merge(less._right, higher)
            root = less
        else:
            higher._left = Treap.merge(less, higher._left)
            root = higher
        root._recalc()
        return root

    def insert(self, key: Any, priority: Any = None) -> Treap:
        """Add ``key`` and return the new root; equal keys are kept side by side."""
        less, higher = self.split(key)
        return Treap.merge(Treap.merge(less, Treap(key, priority)), higher)

    def remove(self, key: Any) -> Treap | None:
        """Remove every node with ``key`` and return the new root."""
        not_greater, higher = self.split(key)
        if not_greater is None:
            return higher
        less, _ = not_greater._split(key, False)
        return Treap.merge(less, higher)

    def first(self) -> Treap:
        """Return the node with the smallest key."""
        node = self
        while node._left is not None:
            node = node._left
        return node

    def last(self) -> Treap:
        """Return the node with the largest key."""
        node = self
        while node._right is not None:
            node = node._right
        return node

    def nth_element(self, n: int) -> Treap | None:
        """Return the ``n``-th node in key order, counting from 1, or None."""
        if n < 1 or n > self._size:
            return None
        node = self
        while True:
            left_size = self._size_of(node._left)
            if n == left_size + 1:
                return node
            if n <= left_size:
                node = node._left
            else:
                n -= left_size + 1
                node = node._right

    def find(self, key: Any) -> Treap | None:
        """Return a node holding ``key``, or None."""
        node: Treap | None = self
        while node is not None:
            if node._key == key:
                return node
            node = node._right if node._key < key else node._left
        return None

    def render(self) -> str:
        """Return the treap sideways: right subtree first, one ``<key, size>`` per line."""
        lines: list[str] = []

        def walk(node: Treap | None, depth: int) -> None:
            if node is None:
                return
            walk(node._right, depth + 1)
            lines.append("\t" * depth + f"<{node._key}, {node._size}>")
            walk(node._left, depth + 1)

        walk(self, 0)
        return "".join(line + "\n" for line in lines)

    def __len__(self) -> int:
        return self._size