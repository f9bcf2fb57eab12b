"""Binary tree nodes, traversals, a binary search tree and an AVL tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import Any, Optional

__all__ = [
    "TreeNode",
    "preorder",
    "inorder",
    "postorder",
    "is_bst",
    "search",
    "BinarySearchTree",
    "AVLTree",
]


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    key: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the keys in root, left, right order."""
    if root is None:
        return
    yield root.key
    yield from preorder(root.left)
    yield from preorder(root.right)


def inorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the keys in left, root, right order."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.key
    yield from inorder(root.right)


def postorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the keys in left, right, root order."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.key


def is_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the in-order keys are strictly increasing."""
    return all(a < b for a, b in pairwise(inorder(root)))


def search(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Find the node holding key in a binary search tree, or None."""
    node = root
    while node is not None:
        if key == node.key:
            return node
        node = node.left if key < node.key else node.right
    return None


class BinarySearchTree:
    """An unbalanced binary search tree; equal keys go to the left."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.root: Optional[TreeNode] = None
        for value in values or ():
            self.insert(value)

    def insert(self, value: Any) -> None:
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value > current.key:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def search(self, key: Any) -> Optional[TreeNode]:
        return search(self.root, key)

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in sorted order."""
        return inorder(self.root)


@dataclass(eq=False)
class _AVLNode(TreeNode):
    height: int = 1


def _height(node: Optional[_AVLNode]) -> int:
    return node.height if node is not None else 0


def _update(node: _AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _AVLNode) -> _AVLNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _AVLNode) -> _AVLNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_AVLNode], key: Any) -> _AVLNode:
    if node is None:
        return _AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A self-balancing binary search tree; duplicate keys are ignored."""

    def __init__(self, keys: Optional[Iterable[Any]] = None) -> None:
        self.root: Optional[_AVLNode] = None
        for key in keys or ():
            self.insert(key)

    def insert(self, key: Any) -> None:
        self.root = _insert(self.root, key)

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self.root)

    def preorder(self) -> list[Any]:
        return list(preorder(self.root))

    def __contains__(self, key: Any) -> bool:
        return search(self.root, key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in sorted order."""
        return inorder(self.root)