import pytest

from edakit.tree import Tree, TreeNode


@pytest.fixture
def tree():
    t = Tree()
    t.set_root(TreeNode(10))
    t.insert(5, 10)
    t.insert(6, 5)
    t.insert(7, 10)
    t.insert(17, 7)
    t.insert(71, 7)
    t.insert(41, 7)
    return t


def test_traverse_matches_source(tree):
    assert tree.traverse().splitlines() == [
        "--10 at level 1",
        "----7 at level 2",
        "------41 at level 3",
        "------71 at level 3",
        "------17 at level 3",
        "----5 at level 2",
        "------6 at level 3",
    ]


def test_children_of_root(tree):
    assert tree.find(10).child_values() == [7, 5]


def test_find(tree):
    node = tree.find(71)
    assert node.data == 71
    assert node.parent.data == 7
    assert tree.find(99) is None


def test_insert_missing_parent(tree):
    before = tree.traverse()
    assert tree.insert(3, 1234) is None
    assert tree.traverse() == before


def test_set_root_keeps_existing(tree):
    tree.set_root(TreeNode(99))
    assert tree.root.data == 10


def test_remove_and_find_child():
    node = TreeNode(1)
    for value in (2, 3, 2, 4):
        node.add_child(TreeNode(value))
    assert node.child_values() == [4, 2, 3, 2]
    node.remove_child(2)
    assert node.child_values() == [4, 3]
    assert node.find_child(3).data == 3
    assert node.find_child(2) is None


def test_empty_tree():
    t = Tree()
    assert t.traverse() == ""
    assert t.find(1) is None
    assert t.insert(1, 2) is None