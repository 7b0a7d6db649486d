import math
import random

import pytest

from dstructs.avl import AVLTree, main

EXAMPLE_PREORDER = [4, 2, 1, 3, 5, 6]


def _check(node):
    """Return (height, inorder keys), asserting AVL invariants on the way."""
    if node is None:
        return 0, []
    left_height, left_keys = _check(node.left)
    right_height, right_keys = _check(node.right)
    assert abs(left_height - right_height) <= 1
    assert node.height == 1 + max(left_height, right_height)
    return node.height, left_keys + [node.key] + right_keys


def _build(keys):
    tree = AVLTree()
    for key in keys:
        tree.insert(key)
    return tree


def test_example_preorder():
    tree = _build([1, 2, 4, 5, 6, 3])
    assert tree.preorder() == EXAMPLE_PREORDER


def test_empty_tree():
    tree = AVLTree()
    assert tree.preorder() == []
    assert tree.height() == 0


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_insertions_stay_balanced(seed):
    keys = random.Random(seed).sample(range(1000), 200)
    tree = _build(keys)
    height, inorder = _check(tree.root)
    assert inorder == sorted(keys)
    assert tree.height() == height
    assert height <= 1.45 * math.log2(len(keys) + 2)


def test_sequential_insertions_stay_balanced():
    keys = list(range(1, 128))
    tree = _build(keys)
    height, inorder = _check(tree.root)
    assert inorder == keys
    assert height <= 1.45 * math.log2(len(keys) + 2)


def test_duplicates_are_ignored():
    tree = _build([5, 3, 8])
    before = tree.preorder()
    tree.insert(3)
    tree.insert(8)
    assert tree.preorder() == before


def test_preorder_holds_every_key_once():
    keys = [9, 4, 17, 1, 6, 12, 20, 15]
    tree = _build(keys)
    result = tree.preorder()
    assert sorted(result) == sorted(keys)
    assert result[0] == tree.root.key


def test_main_default_prints_example(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.split() == [str(k) for k in EXAMPLE_PREORDER]


def test_main_with_keys(capsys):
    keys = [30, 10, 20, 40]
    assert main([str(k) for k in keys]) == 0
    expected = [str(k) for k in _build(keys).preorder()]
    assert capsys.readouterr().out.split() == expected