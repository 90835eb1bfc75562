import pytest

from bintree.node import Node


def test_new_node_is_unlinked_leaf():
    node = Node(98)
    assert node.value == 98
    assert node.parent is None
    assert node.left is None and node.right is None
    assert node.is_leaf()


def test_add_children_sets_parent():
    root = Node(98)
    left = root.add_left(12)
    right = root.add_right(402)
    assert root.left is left and root.right is right
    assert left.parent is root and right.parent is root
    assert left.value == 12 and right.value == 402
    assert not root.is_leaf()


def test_add_left_replaces_existing_child():
    root = Node(1)
    old = root.add_left(2)
    new = root.add_left(3)
    assert root.left is new
    assert old.parent is None


def test_insert_left_pushes_old_child_down():
    root = Node(98)
    old = root.add_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_old_child_down():
    root = Node(98)
    old = root.add_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.parent is root
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_insert_on_empty_side():
    root = Node(5)
    new = root.insert_left(6)
    assert new.left is None
    assert root.left is new


@pytest.mark.parametrize("side", ["left", "right"])
def test_is_leaf_false_with_one_child(side):
    root = Node(1)
    getattr(root, f"add_{side}")(2)
    assert root.is_leaf() is False


def test_delete_detaches_subtree():
    root = Node(98)
    left = root.add_left(12)
    grandchild = left.add_right(54)
    root.add_right(402)
    left.delete()
    assert root.left is None
    assert root.right is not None and root.right.value == 402
    assert left.parent is None and left.right is None
    assert grandchild.parent is None


def test_delete_root_clears_everything():
    root = Node(1)
    a = root.add_left(2)
    b = root.add_right(3)
    root.delete()
    assert root.left is None and root.right is None
    assert a.parent is None and b.parent is None