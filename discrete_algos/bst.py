"""Unbalanced binary search tree and a small command loop over it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any


class _Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Plain binary search tree; keys are never overwritten."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key``; return False, changing nothing, when it is already present."""
        if self._root is None:
            self._root = _Node(key, value)
            self._size += 1
            return True
        node = self._root
        while True:
            if node.key == key:
                return False
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key, value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(key, value)
                    break
                node = node.right
        self._size += 1
        return True

    def find(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        node = self._root
        while node is not None:
            if node.key == key:
                return node.value
            node = node.left if key < node.key else node.right
        return None

    def clear(self) -> None:
        """Remove every node."""
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``+ key value`` inserts and key lookups read from stdin."""
    tree = BinarySearchTree()
    tokens = iter(sys.stdin.read().split())
    for action in tokens:
        if action == "+":
            try:
                key = int(next(tokens))
                value = next(tokens)
            except (StopIteration, ValueError):
                break
            print("OK" if tree.insert(key, value) else "Exists")
        elif action == "-":
            continue
        else:
            value = tree.find(int(action))
            print("NoSuchWord" if value is None else f"OK: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())