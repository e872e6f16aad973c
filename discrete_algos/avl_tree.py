"""AVL tree mapping comparable keys to values."""

from __future__ import annotations

from typing import Any

# Balance factor of a node: height of the left subtree minus the right one.
BAD_RIGHT = -2
RIGHT = -1
BALANCED = 0
LEFT = 1
BAD_LEFT = 2


class _Node:
    __slots__ = ("key", "value", "balance", "parent", "left", "right")

    def __init__(self, key: Any, value: Any, parent: _Node | None = None) -> None:
        self.key = key
        self.value = value
        self.balance = BALANCED
        self.parent = parent
        self.left: _Node | None = None
        self.right: _Node | None = None


class AvlTree:
    """Height-balanced binary search tree with parent links."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def _rotate_left(self, node: _Node | None) -> None:
        """Lift ``node``, a right child, above its parent."""
        if node is None or node is self._root:
            return
        parent = node.parent
        if parent is self._root:
            self._root = node
        node.parent = parent.parent
        if node.parent is not None:
            if node.parent.right is parent:
                node.parent.right = node
            else:
                node.parent.left = node
        parent.parent = node
        parent.right = node.left
        node.left = parent
        if parent.right is not None:
            parent.right.parent = parent

    def _rotate_right(self, node: _Node | None) -> None:
        """Lift ``node``, a left child, above its parent."""
        if node is None or node is self._root:
            return
        parent = node.parent
        if parent is self._root:
            self._root = node
        node.parent = parent.parent
        if node.parent is not None:
            if node.parent.right is parent:
                node.parent.right = node
            else:
                node.parent.left = node
        parent.parent = node
        parent.left = node.right
        node.right = parent
        if parent.left is not None:
            parent.left.parent = parent

    def _rebalance_after_insertion(self, node: _Node) -> None:
        while True:
            balance = node.balance
            if balance == BALANCED:
                return
            if balance in (LEFT, RIGHT):
                if node is self._root:
                    return
                parent = node.parent
                if parent.right is node:
                    parent.balance -= 1
                else:
                    parent.balance += 1
                node = parent
                continue
            if balance == BAD_RIGHT:
                child = node.right
                if child.balance == RIGHT:
                    self._rotate_left(child)
                    node.balance = child.balance = BALANCED
                else:
                    grand = child.left
                    self._rotate_right(grand)
                    self._rotate_left(grand)
                    node.balance = child.balance = BALANCED
                    if grand.balance == LEFT:
                        child.balance = RIGHT
                    elif grand.balance == RIGHT:
                        node.balance = LEFT
                    grand.balance = BALANCED
                return
            child = node.left
            if child.balance == LEFT:
                self._rotate_right(child)
                node.balance = child.balance = BALANCED
            else:
                grand = child.right
                self._rotate_left(grand)
                self._rotate_right(grand)
                node.balance = child.balance = BALANCED
                if grand.balance == LEFT:
                    node.balance = RIGHT
                elif grand.balance == RIGHT:
                    child.balance = LEFT
                grand.balance = BALANCED
            return

    def _rebalance_after_remove(self, node: _Node) -> None:
        while True:
            balance = node.balance
            if balance in (LEFT, RIGHT):
                return
            if balance == BALANCED:
                if node is self._root:
                    return
                parent = node.parent
                if parent.right is node:
                    parent.balance += 1
                else:
                    parent.balance -= 1
                node = parent
                continue
            if balance == BAD_LEFT:
                child = node.left
                if child.balance == LEFT:
                    self._rotate_right(child)
                    node.balance = child.balance = BALANCED
                    node = child
                    continue
                if child.balance == BALANCED:
                    self._rotate_right(child)
                    node.balance = LEFT
                    child.balance = RIGHT
                    return
                grand = child.right
                self._rotate_left(grand)
                self._rotate_right(grand)
                node.balance = child.balance = BALANCED
                if grand.balance == LEFT:
                    node.balance = RIGHT
                if grand.balance == RIGHT:
                    child.balance = LEFT
                grand.balance = BALANCED
                node = grand
                continue
            child = node.right
            if child.balance == RIGHT:
                self._rotate_left(child)
                node.balance = child.balance = BALANCED
                node = child
                continue
            if child.balance == BALANCED:
                self._rotate_left(child)
                node.balance = RIGHT
                child.balance = LEFT
                return
            grand = child.left
            self._rotate_right(grand)
            self._rotate_left(grand)
            node.balance = child.balance = BALANCED
            if grand.balance == LEFT:
                child.balance = RIGHT
            if grand.balance == RIGHT:
                node.balance = LEFT
            grand.balance = BALANCED
            node = grand

    def _find(self, key: Any) -> tuple[_Node | None, _Node | None]:
        """Return the node holding ``key`` and its parent, or None and the would-be parent."""
        node, parent = self._root, None
        while node is not None:
            if node.key == key:
                return node, node.parent
            parent = node
            node = node.left if node.key > key else node.right
        return None, parent

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        if self._root is None:
            self._root = _Node(key, value)
            return
        node, parent = self._find(key)
        if node is not None:
            node.value = value
            return
        child = _Node(key, value, parent)
        if parent.key > key:
            parent.left = child
            parent.balance += 1
        else:
            parent.right = child
            parent.balance -= 1
        self._rebalance_after_insertion(parent)

    def _delete_leaf(self, node: _Node) -> None:
        if node is self._root:
            self._root = None
            return
        parent = node.parent
        if parent.right is node:
            parent.right = None
            parent.balance += 1
        else:
            parent.left = None
            parent.balance -= 1
        self._rebalance_after_remove(parent)

    def _delete_full_node(self, node: _Node) -> None:
        right = node.right
        if right.left is not None:
            successor = right.left
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            parent = successor.parent
            parent.left = successor.right
            if successor.right is not None:
                successor.right.parent = parent
            parent.balance -= 1
            self._rebalance_after_remove(parent)
        else:
            node.key, node.value = right.key, right.value
            node.right = right.right
            if node.right is not None:
                node.right.parent = node
            node.balance += 1
            self._rebalance_after_remove(node)

    def _delete_with_one_child(self, node: _Node, child: _Node) -> None:
        if node is self._root:
            self._root = child
            child.parent = None
            return
        parent = node.parent
        if parent.right is node:
            parent.right = child
            parent.balance += 1
        else:
            parent.left = child
            parent.balance -= 1
        child.parent = parent
        self._rebalance_after_remove(parent)

    def remove(self, key: Any) -> None:
        """Remove ``key``; raise KeyError when it is not in the tree."""
        node, _ = self._find(key)
        if node is None:
            raise KeyError(f"This key: {key} doesn't in the tree")
        if node.left is None and node.right is None:
            self._delete_leaf(node)
        elif node.left is not None and node.right is not None:
            self._delete_full_node(node)
        else:
            self._delete_with_one_child(node, node.left or node.right)

    def find(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        node, _ = self._find(key)
        return None if node is None else node.value

    def render(self) -> str:
        """Return the tree sideways: right subtree first, one ``key, balance`` per line."""
        lines: list[str] = []

        def walk(node: _Node | None, depth: int) -> None:
            if node is None:
                return
            walk(node.right, depth + 1)
            lines.append("\t" * depth + f"{node.key}, {node.balance}")
            walk(node.left, depth + 1)

        walk(self._root, 0)
        return "".join(line + "\n" for line in lines)

    def check(self) -> bool:
        """Return whether every node's subtree heights differ by at most one."""

        def height(node: _Node | None) -> int | None:
            if node is None:
                return 0
            left = height(node.left)
            right = height(node.right)
            if left is None or right is None or abs(left - right) > 1:
                return None
            return max(left, right) + 1

        return height(self._root) is not None