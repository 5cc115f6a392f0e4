"""Self-balancing AVL tree of distinct integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True)
class AVLNode:
    """A tree node with its value, subtrees and the height of its subtree."""

    value: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLNode) -> AVLNode:
    """Single rotation for a left-left imbalance."""
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    """Single rotation for a right-right imbalance."""
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update(node)
    factor = _balance(node)
    if factor == 2:
        assert node.left is not None
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor == -2:
        assert node.right is not None
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _rightmost(node: AVLNode) -> AVLNode:
    while node.right is not None:
        node = node.right
    return node


def _leftmost(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


class AVLTree:
    """A binary search tree kept height-balanced by rotations."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: AVLNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add a value; a value already present is left alone."""
        if value in self:
            return
        self.root = self._insert(self.root, value)
        self._size += 1

    def _insert(self, node: AVLNode | None, value: int) -> AVLNode:
        if node is None:
            return AVLNode(value)
        if value < node.value:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)
        return _rebalance(node)

    def delete(self, value: int) -> None:
        """Remove ``value``; raise KeyError if it is absent.

        An inner node takes the value of its inorder predecessor when its left
        subtree is taller, otherwise that of its inorder successor.
        """
        if value not in self:
            raise KeyError(value)
        self.root = self._delete(self.root, value)
        self._size -= 1

    def _delete(self, node: AVLNode | None, value: int) -> AVLNode | None:
        if node is None:
            return None
        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        elif node.left is None and node.right is None:
            return None
        elif _height(node.left) > _height(node.right):
            assert node.left is not None
            node.value = _rightmost(node.left).value
            node.left = self._delete(node.left, node.value)
        else:
            assert node.right is not None
            node.value = _leftmost(node.right).value
            node.right = self._delete(node.right, node.value)
        return _rebalance(node)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self.root)

    def balance_factor(self) -> int:
        """Left height minus right height at the root; 0 when empty."""
        return _balance(self.root)

    def _inorder_nodes(self) -> list[AVLNode]:
        result: list[AVLNode] = []
        stack: list[AVLNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node)
            node = node.right
        return result

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        return [node.value for node in self._inorder_nodes()]

    def inorder_with_balance(self) -> list[tuple[int, int]]:
        """Pairs of value and balance factor, in ascending order of value."""
        return [(node.value, _balance(node)) for node in self._inorder_nodes()]

    def preorder(self) -> list[int]:
        """Values in root, left, right order."""
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def level_order(self) -> list[int]:
        """Values level by level, left to right."""
        result: list[int] = []
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def __len__(self) -> int:
        return self._size