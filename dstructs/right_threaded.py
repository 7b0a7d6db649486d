"""Right-threaded binary tree: empty right links point to the inorder successor."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class RightThreadedNode:
    """Node whose right link is a thread to its inorder successor when ``rthread``."""

    info: int
    left: RightThreadedNode | None = field(default=None, repr=False)
    right: RightThreadedNode | None = field(default=None, repr=False)
    rthread: bool = True

    def set_left_child(self, value: int) -> RightThreadedNode:
        """Attach a left child, threaded back to this node, and return it."""
        if self.left is not None:
            raise ValueError("Cannot insert left child!")
        self.left = RightThreadedNode(value, right=self)
        return self.left

    def set_right_child(self, value: int) -> RightThreadedNode:
        """Attach a right child that inherits this node's successor thread."""
        if not self.rthread:
            raise ValueError("Cannot insert right child!")
        self.right = RightThreadedNode(value, right=self.right)
        self.rthread = False
        return self.right


def inorder(root: RightThreadedNode | None) -> Iterator[int]:
    """Yield the values in inorder by following the right threads."""
    current = root
    while True:
        previous = None
        while current is not None:
            previous, current = current, current.left
        if previous is None:
            return
        yield previous.info
        current = previous.right
        while previous.rthread and current is not None:
            yield current.info
            previous, current = current, current.right


def _example() -> RightThreadedNode:
    root = RightThreadedNode(10)
    five = root.set_left_child(5)
    root.set_right_child(15)
    five.set_left_child(2)
    five.set_right_child(7)
    return root


def main(argv: list[str] | None = None) -> int:
    """Build the sample right-threaded tree and print its inorder traversal."""
    argparse.ArgumentParser(
        prog="right-threaded", description="Traverse a sample right-threaded tree."
    ).parse_args(argv)
    print("Inorder Traversal of Threaded Binary Tree:")
    print(*inorder(_example()))
    return 0


if __name__ == "__main__":
    sys.exit(main())