"""Plain binary tree built by hand, with counting helpers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node whose children are attached explicitly."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    def insert_left(self, item: int) -> TreeNode:
        """Attach a new left child holding ``item`` and return it."""
        self.left = TreeNode(item)
        return self.left

    def insert_right(self, item: int) -> TreeNode:
        """Attach a new right child holding ``item`` and return it."""
        self.right = TreeNode(item)
        return self.right


def inorder(root: TreeNode | None) -> list[int]:
    """Return the items in left, root, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def count_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def height(root: TreeNode | None) -> int:
    """Return the number of edges on the longest root-to-leaf path; -1 when empty."""
    if root is None:
        return -1
    return max(height(root.left), height(root.right)) + 1


def leaf_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_nodes(root.left) + leaf_nodes(root.right)


def nonleaf_nodes(root: TreeNode | None) -> int:
    """Return the number of nodes with at least one child."""
    if root is None or (root.left is None and root.right is None):
        return 0
    return nonleaf_nodes(root.left) + nonleaf_nodes(root.right) + 1


def _example() -> TreeNode:
    root = TreeNode(45)
    root.insert_left(39)
    right = root.insert_right(78)
    right.insert_left(54).insert_right(55)
    right.insert_right(79).insert_right(80)
    return root


def main(argv: list[str] | None = None) -> int:
    """Build the sample tree and print its traversal and counts."""
    argparse.ArgumentParser(
        prog="binary-tree", description="Print statistics of a sample binary tree."
    ).parse_args(argv)
    root = _example()
    print("\n The tree(inorder) is")
    print("".join(f"{value}\t" for value in inorder(root)))
    print(f"\n The total number of nodes is {count_nodes(root)}\n")
    print(f"\n The height of the tree is {height(root)}\n")
    print(f"\n The total number of leaf nodes is {leaf_nodes(root)}\n")
    print(f"\n The total number of non-leaf nodes is {nonleaf_nodes(root)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())