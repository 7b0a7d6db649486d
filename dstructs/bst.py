"""Unbalanced binary search tree with insertion, deletion and traversals."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from dstructs.double_hashing import _read_int, _session


@dataclass
class BSTNode:
    """A node of the search tree."""

    data: int
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """Binary search tree in which equal items go to the right subtree."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, item: int) -> None:
        """Add ``item`` as a new leaf."""
        node = BSTNode(item)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            side = "left" if item < current.data else "right"
            child = getattr(current, side)
            if child is None:
                setattr(current, side, node)
                return
            current = child

    def _replace(
        self, parent: BSTNode | None, node: BSTNode, child: BSTNode | None
    ) -> None:
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def delete(self, key: int) -> bool:
        """Remove the topmost node holding ``key``; return whether one was found."""
        parent: BSTNode | None = None
        node = self.root
        while node is not None and node.data != key:
            parent = node
            node = node.left if key < node.data else node.right
        if node is None:
            return False

        if node.left is None or node.right is None:
            self._replace(parent, node, node.right if node.left is None else node.left)
            return True

        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        node.data = successor.data
        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right
        return True

    def _root_first(self, right_first: bool) -> list[int]:
        result: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            children = (node.left, node.right) if right_first else (node.right, node.left)
            stack.extend(child for child in children if child is not None)
        return result

    def preorder(self) -> list[int]:
        """Return the items in root, left, right order."""
        return self._root_first(right_first=False)

    def inorder(self) -> list[int]:
        """Return the items in left, root, right order, i.e. sorted."""
        result: list[int] = []
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def postorder(self) -> list[int]:
        """Return the items in left, right, root order."""
        return self._root_first(right_first=True)[::-1]


_MENU = (
    "\n 1. Insert"
    "\n 2. Preorder"
    "\n 3. Inorder"
    "\n 4. Postorder"
    "\n 5. Delete"
    "\n 6. Exit"
    "\n Read your choice:"
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary-search-tree menu on standard input."""
    tokens = _session(argv, "bst", "Interactive binary search tree.")
    tree = BinarySearchTree()
    traversals = {
        2: ("Preorder", tree.preorder),
        3: ("Inorder", tree.inorder),
        4: ("Postorder", tree.postorder),
    }
    while True:
        try:
            choice = _read_int(tokens, _MENU)
            if choice == 1:
                tree.insert(_read_int(tokens, "\n Read element to be inserted: "))
            elif choice in traversals:
                name, walk = traversals[choice]
                print(f"\n The {name} traversal is:")
                print("".join(f"{value}\t" for value in walk()), end="")
            elif choice == 5:
                tree.delete(_read_int(tokens, "\n Read node to be deleted: "))
            else:
                return 0
        except (EOFError, ValueError):
            return 0


if __name__ == "__main__":
    sys.exit(main())