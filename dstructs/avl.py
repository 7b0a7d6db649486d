"""Self-balancing AVL tree of integer keys."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterator

EXAMPLE_KEYS = (1, 2, 4, 5, 6, 3)


@dataclass
class AVLNode:
    """A tree node that caches the height of its subtree."""

    key: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _refresh(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(top: AVLNode) -> AVLNode:
    pivot = top.left
    assert pivot is not None
    top.left = pivot.right
    pivot.right = top
    _refresh(top)
    _refresh(pivot)
    return pivot


def _rotate_left(top: AVLNode) -> AVLNode:
    pivot = top.right
    assert pivot is not None
    top.right = pivot.left
    pivot.left = top
    _refresh(top)
    _refresh(pivot)
    return pivot


def _insert(node: AVLNode | None, key: int) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _refresh(node)
    balance = _balance(node)
    if balance > 1 and node.left is not None:
        if key < node.left.key:
            return _rotate_right(node)
        if key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
    if balance < -1 and node.right is not None:
        if key > node.right.key:
            return _rotate_left(node)
        if key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
    return node


def _preorder(node: AVLNode | None) -> Iterator[int]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


class AVLTree:
    """Binary search tree kept height-balanced by rotations; duplicates are ignored."""

    def __init__(self) -> None:
        self.root: AVLNode | None = None

    def insert(self, key: int) -> None:
        """Add ``key`` and rebalance the path it was inserted along."""
        self.root = _insert(self.root, key)

    def preorder(self) -> list[int]:
        """Return the keys in root, left, right order."""
        return list(_preorder(self.root))

    def height(self) -> int:
        """Return the number of levels in the tree; 0 when empty."""
        return _height(self.root)


def main(argv: list[str] | None = None) -> int:
    """Insert keys into an AVL tree and print its preorder traversal."""
    parser = argparse.ArgumentParser(
        prog="avl", description="Build an AVL tree and print it in preorder."
    )
    parser.add_argument("keys", nargs="*", type=int, help="keys to insert")
    args = parser.parse_args(argv)
    tree = AVLTree()
    for key in args.keys or EXAMPLE_KEYS:
        tree.insert(key)
    print(" ".join(str(key) for key in tree.preorder()))
    return 0


if __name__ == "__main__":
    sys.exit(main())