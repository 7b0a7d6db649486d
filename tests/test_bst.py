import io
import random

import pytest

from dstructs.bst import BinarySearchTree, main

BALANCED = [50, 30, 70, 20, 40, 60, 80]


def _build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_traversals():
    tree = BinarySearchTree()
    assert tree.preorder() == []
    assert tree.inorder() == []
    assert tree.postorder() == []


def test_inorder_is_sorted_with_duplicates():
    values = [5, 3, 8, 3, 5, 1, 9, 8]
    assert _build(values).inorder() == sorted(values)


def test_duplicates_go_right():
    tree = _build([5, 5])
    assert tree.root.left is None
    assert tree.root.right.data == 5


def test_postorder_pinned():
    assert _build(BALANCED).postorder() == [20, 40, 30, 60, 80, 70, 50]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_traversal_endpoints(seed):
    values = random.Random(seed).sample(range(500), 50)
    tree = _build(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == tree.inorder()


@pytest.mark.parametrize("key", [20, 30, 50, 80])
def test_delete_keeps_order(key):
    tree = _build(BALANCED)
    assert tree.delete(key) is True
    expected = sorted(BALANCED)
    expected.remove(key)
    assert tree.inorder() == expected


def test_delete_root_with_two_children_uses_successor():
    tree = _build(BALANCED)
    tree.delete(50)
    assert tree.root.data == min(v for v in BALANCED if v > 50)


def test_delete_node_with_one_child():
    tree = _build([10, 5, 2])
    assert tree.delete(5) is True
    assert tree.root.left.data == 2
    assert tree.inorder() == [2, 10]


def test_delete_missing_key():
    tree = _build(BALANCED)
    assert tree.delete(99) is False
    assert tree.inorder() == sorted(BALANCED)
    assert BinarySearchTree().delete(1) is False


def test_delete_everything():
    values = [8, 3, 10, 1, 6, 14, 4, 7, 13]
    tree = _build(values)
    for value in values:
        assert tree.delete(value) is True
    assert tree.root is None


def test_delete_one_of_duplicates():
    tree = _build([4, 4, 4])
    tree.delete(4)
    assert tree.inorder() == [4, 4]


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5 1 3 1 8 5 3 3 6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "The Inorder traversal is:\n5\t8\t" in out