"""Left-threaded binary tree: empty left links point to the reverse-inorder successor."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class LeftThreadedNode:
    """Node whose left link is a thread to the next node in reverse inorder when ``lthread``."""

    info: int
    left: LeftThreadedNode | None = field(default=None, repr=False)
    right: LeftThreadedNode | None = field(default=None, repr=False)
    lthread: bool = True

    def set_left_child(self, value: int) -> LeftThreadedNode:
        """Attach a left child that inherits this node's thread."""
        if not self.lthread:
            raise ValueError("Cannot insert left child!")
        child = LeftThreadedNode(value, left=self.left, lthread=True)
        self.left = child
        self.lthread = False
        return child

    def set_right_child(self, value: int) -> LeftThreadedNode:
        """Attach a right child, threaded back to this node, and return it."""
        if self.right is not None:
            raise ValueError("Cannot insert right child!")
        child = LeftThreadedNode(value, left=self, lthread=True)
        self.right = child
        return child


def reverse_inorder(root: LeftThreadedNode | None) -> Iterator[int]:
    """Yield the values in reverse inorder by following the left threads."""
    current = root
    while True:
        previous = None
        while current is not None:
            previous = current
            current = current.right
        if previous is None:
            return
        yield previous.info
        current = previous.left
        while previous.lthread and current is not None:
            yield current.info
            previous = current
            current = current.left


def _example() -> LeftThreadedNode:
    root = LeftThreadedNode(10)
    root.set_right_child(15)
    root.set_left_child(5)
    assert root.left is not None
    root.left.set_right_child(7)
    root.left.set_left_child(2)
    return root


def main(argv: list[str] | None = None) -> int:
    """Build the sample left-threaded tree and print its reverse inorder traversal."""
    argparse.ArgumentParser(
        prog="left-threaded", description="Traverse a sample left-threaded tree."
    ).parse_args(argv)
    print("Reverse Inorder Traversal of Left-Threaded Binary Tree:")
    print(" ".join(str(value) for value in reverse_inorder(_example())))
    return 0


if __name__ == "__main__":
    sys.exit(main())