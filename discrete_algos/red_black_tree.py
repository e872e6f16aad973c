"""Red-black tree mapping comparable keys to values."""

from __future__ import annotations

from typing import Any


class _Node:
    __slots__ = ("key", "value", "red", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, parent: _Node | None = None) -> None:
        self.key = key
        self.value = value
        self.red = True
        self.parent = parent
        self.left: _Node | None = None
        self.right: _Node | None = None


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.red


class RBTree:
    """Self-balancing binary search tree with red and black nodes."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _rotate_left(self, node: _Node) -> None:
        """Move ``node`` down to the left; its right child takes its place."""
        pivot = node.right
        parent = node.parent
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        pivot.left = node
        node.parent = pivot
        pivot.parent = parent
        if parent is None:
            self._root = pivot
        elif parent.left is node:
            parent.left = pivot
        else:
            parent.right = pivot

    def _rotate_right(self, node: _Node) -> None:
        """Move ``node`` down to the right; its left child takes its place."""
        pivot = node.left
        parent = node.parent
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        pivot.right = node
        node.parent = pivot
        pivot.parent = parent
        if parent is None:
            self._root = pivot
        elif parent.left is node:
            parent.left = pivot
        else:
            parent.right = pivot

    def _find_node(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if node.key == key:
                return node
            node = node.right if node.key < key else node.left
        return None

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        if self._root is None:
            self._root = _Node(key, value)
            self._root.red = False
            return

        node = self._root
        while True:
            if node.key == key:
                node.value = value
                return
            child = node.right if node.key < key else node.left
            if child is None:
                break
            node = child

        inserted = _Node(key, value, node)
        if node.key < key:
            node.right = inserted
        else:
            node.left = inserted
        self._insert_fixup(inserted)

    def _insert_fixup(self, node: _Node) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.red = False
                return
            if not parent.red:
                return
            grand = parent.parent
            uncle = grand.right if grand.left is parent else grand.left
            if _is_red(uncle):
                grand.red = True
                uncle.red = False
                parent.red = False
                node = grand
                continue

            top = parent
            if grand.left is parent and parent.right is node:
                self._rotate_left(parent)
                top = node
            elif grand.right is parent and parent.left is node:
                self._rotate_right(parent)
                top = node

            if grand.right is top:
                self._rotate_left(grand)
            else:
                self._rotate_right(grand)
            top.red = False
            grand.red = True
            return

    def _replace(self, target: _Node, child: _Node | None) -> None:
        parent = target.parent
        if parent is None:
            self._root = child
        elif parent.left is target:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent

    def remove(self, key: Any) -> None:
        """Remove ``key``; a key that is not in the tree is ignored."""
        node = self._find_node(key)
        if node is None:
            return

        target = node
        if node.left is not None and node.right is not None:
            target = node.right
            while target.left is not None:
                target = target.left
            node.key, node.value = target.key, target.value

        child = target.left if target.left is not None else target.right
        parent = target.parent
        self._replace(target, child)

        if target.red:
            return
        if _is_red(child):
            child.red = False
            return
        self._remove_fixup(child, parent)

    def _remove_fixup(self, node: _Node | None, parent: _Node | None) -> None:
        while parent is not None:
            is_left = parent.left is node
            sibling = parent.right if is_left else parent.left

            if sibling.red:
                if is_left:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)
                parent.red, sibling.red = True, False
                sibling = parent.right if is_left else parent.left

            both_black = not _is_red(sibling.left) and not _is_red(sibling.right)
            if not parent.red and both_black:
                sibling.red = True
                node, parent = parent, parent.parent
                continue

            if parent.red and both_black:
                sibling.red = True
                parent.red = False
                break

            if is_left and not _is_red(sibling.right):
                sibling.left.red = False
                sibling.red = True
                self._rotate_right(sibling)
                sibling = parent.right
            elif not is_left and not _is_red(sibling.left):
                sibling.right.red = False
                sibling.red = True
                self._rotate_left(sibling)
                sibling = parent.left

            sibling.red = parent.red
            parent.red = False
            if is_left:
                sibling.right.red = False
                self._rotate_left(parent)
            else:
                sibling.left.red = False
                self._rotate_right(parent)
            break

        if self._root is not None:
            self._root.red = False

    def find(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        node = self._find_node(key)
        return None if node is None else node.value

    def render(self) -> str:
        """Return the tree sideways: right subtree first, one ``key, B|R`` per line."""
        lines: list[str] = []

        def walk(node: _Node | None, depth: int) -> None:
            if node is None:
                return
            walk(node.right, depth + 1)
            lines.append("\t" * depth + f"{node.key}, {'R' if node.red else 'B'}")
            walk(node.left, depth + 1)

        walk(self._root, 0)
        return "".join(line + "\n" for line in lines)

    def validate(self) -> bool:
        """Return whether the root is black, no red node has a red child and
        every path from a node down to a leaf passes the same number of black nodes.
        """
        if self._root is None:
            return True
        if self._root.red:
            return False

        def black_height(node: _Node | None) -> int | None:
            if node is None:
                return 1
            if node.red and (_is_red(node.left) or _is_red(node.right)):
                return None
            left = black_height(node.left)
            right = black_height(node.right)
            if left is None or right is None or left != right:
                return None
            return left + (0 if node.red else 1)

        return black_height(self._root) is not None