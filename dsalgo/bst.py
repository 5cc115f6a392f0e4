"""Binary search tree of distinct integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass(slots=True)
class Node:
    """A tree node holding one value and its two subtrees."""

    value: int
    left: Node | None = None
    right: Node | None = None


def _height(node: Node | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


class BinarySearchTree:
    """An unbalanced binary search tree; duplicate values are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    @classmethod
    def from_preorder(cls, preorder: Sequence[int]) -> BinarySearchTree:
        """Rebuild a tree from its preorder traversal."""
        tree = cls()
        if not preorder:
            return tree
        current = Node(preorder[0])
        tree.root = current
        stack: list[Node] = []
        index = 1
        while index < len(preorder):
            value = preorder[index]
            if value < current.value:
                current.left = Node(value)
                stack.append(current)
                current = current.left
                index += 1
            elif current.value < value and (not stack or value < stack[-1].value):
                current.right = Node(value)
                current = current.right
                index += 1
            elif stack:
                current = stack.pop()
            else:
                raise ValueError(f"duplicate value {value} in preorder")
        tree._size = len(preorder)
        return tree

    @classmethod
    def from_postorder(cls, postorder: Sequence[int]) -> BinarySearchTree:
        """Rebuild a tree from its postorder traversal."""
        tree = cls()
        if not postorder:
            return tree
        index = len(postorder) - 1
        current = Node(postorder[index])
        tree.root = current
        stack: list[Node] = []
        index -= 1
        while index >= 0:
            value = postorder[index]
            if current.value < value:
                current.right = Node(value)
                stack.append(current)
                current = current.right
                index -= 1
            elif value < current.value and (not stack or value > stack[-1].value):
                current.left = Node(value)
                current = current.left
                index -= 1
            elif stack:
                current = stack.pop()
            else:
                raise ValueError(f"duplicate value {value} in postorder")
        tree._size = len(postorder)
        return tree

    def insert(self, value: int) -> None:
        """Add a value; a value already present is left alone."""
        if self.root is None:
            self.root = Node(value)
            self._size += 1
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def search(self, value: int) -> Node | None:
        """The node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def delete(self, value: int) -> None:
        """Remove ``value``; raise KeyError if it is absent.

        An inner node takes the value of its inorder predecessor when its left
        subtree is taller, otherwise that of its inorder successor.
        """
        if value not in self:
            raise KeyError(value)
        self.root = self._delete(self.root, value)
        self._size -= 1

    def _delete(self, node: Node | None, value: int) -> Node | None:
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
        return node

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return _height(self.root)

    def inorder(self) -> list[int]:
        """Values in ascending order."""
        result: list[int] = []
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

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

    def __iter__(self) -> Iterator[int]:
        return iter(self.inorder())

    def __len__(self) -> int:
        return self._size