import random

import pytest

from edakit.avl import AVL, AVLNode, RotationType, Side


def _check(node):
    """Check heights, balance and parent links; return the node's height."""
    if node is None:
        return -1
    for child, side in ((node.left, Side.LEFT), (node.right, Side.RIGHT)):
        if child is not None:
            assert child.parent is node
            assert child.side is side
    left = _check(node.left)
    right = _check(node.right)
    assert node.h_left == left + 1
    assert node.h_right == right + 1
    assert node.balance_score() <= 1
    return node.height()


@pytest.fixture
def source_tree():
    tree = AVL()
    for value in (16, 32, 45, 8, 10, 15):
        tree.insert(value)
    return tree


def test_source_case_traverse(source_tree):
    assert source_tree.traverse() == "\n".join(
        ["*16  L", "**10  L", "***8  L", "***15  R", "**32  R", "***45  R"]
    )


def test_source_case_rotations(source_tree):
    assert source_tree.rotations == [
        (RotationType.LEFT, 16),
        (RotationType.LEFT_RIGHT, 16),
        (RotationType.LEFT_RIGHT, 32),
    ]


def test_source_case_root_and_order(source_tree):
    assert source_tree.root.data == 16
    assert source_tree.root.parent is None
    assert list(source_tree) == [8, 10, 15, 16, 32, 45]


def test_find(source_tree):
    assert source_tree.find(15).data == 15
    assert source_tree.find(16) is source_tree.root
    assert source_tree.find(99) is None


def test_find_on_empty_tree():
    assert AVL().find(3) is None
    assert AVL().traverse() == ""


def test_sorted_inserts_stay_balanced():
    tree = AVL()
    for value in range(1, 101):
        tree.insert(value)
    assert list(tree) == list(range(1, 101))
    assert _check(tree.root) <= 9


def test_shuffled_inserts_stay_balanced():
    values = list(range(500))
    random.Random(7).shuffle(values)
    tree = AVL()
    for value in values:
        tree.insert(value)
    assert list(tree) == sorted(values)
    assert _check(tree.root) <= 12


def test_duplicates_kept_in_order():
    tree = AVL()
    for value in (5, 5, 3, 5, 3):
        tree.insert(value)
    assert list(tree) == [3, 3, 5, 5, 5]


def test_node_height_and_balance():
    node = AVLNode(5, h_left=3, h_right=1)
    assert node.height() == 3
    assert node.balance_score() == 2
    node.update_heights()
    assert (node.h_left, node.h_right) == (0, 0)


def test_right_rotation_for_descending_inserts():
    tree = AVL()
    for value in (3, 2, 1):
        tree.insert(value)
    assert tree.rotations == [(RotationType.RIGHT, 3)]
    assert tree.root.data == 2