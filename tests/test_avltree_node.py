import pytest

from edatos.avltree_node import AVLTNode


def test_new_node_is_a_leaf():
    node = AVLTNode("a")
    assert node.item == "a"
    assert node.left is None
    assert node.right is None
    assert node.parent is None
    assert node.height() == 0
    assert node.balance_factor() == 0
    assert node.check_height_invariant()


def test_set_left_links_parent_and_updates_height():
    root = AVLTNode(10)
    child = AVLTNode(5)
    root.set_left(child)
    assert root.left is child
    assert child.parent is root
    assert root.height() == child.height() + 1
    assert root.balance_factor() == -(child.height() + 1)
    assert root.check_height_invariant()


def test_set_right_links_parent_and_updates_height():
    root = AVLTNode(10)
    child = AVLTNode(15)
    root.set_right(child)
    assert root.right is child
    assert child.parent is root
    assert root.height() == child.height() + 1
    assert root.balance_factor() == child.height() + 1


def test_balanced_node():
    root = AVLTNode(10)
    root.set_left(AVLTNode(5))
    root.set_right(AVLTNode(15))
    assert root.balance_factor() == 0
    assert root.check_height_invariant()


def test_child_by_direction():
    root = AVLTNode(10)
    left, right = AVLTNode(5), AVLTNode(15)
    root.set_child(0, left)
    root.set_child(1, right)
    assert root.child(0) is left
    assert root.child(1) is right
    assert left.parent is root and right.parent is root


def test_clearing_a_child_restores_height():
    root = AVLTNode(10)
    root.set_left(AVLTNode(5))
    root.set_left(None)
    assert root.left is None
    assert root.height() == 0


def test_stale_height_breaks_invariant_until_updated():
    root = AVLTNode(10)
    child = AVLTNode(5)
    root.set_left(child)
    child.set_left(AVLTNode(1))
    assert not root.check_height_invariant()
    root.update_height()
    assert root.check_height_invariant()
    assert root.height() == child.height() + 1


@pytest.mark.parametrize("direction", [-1, 2])
def test_bad_direction(direction):
    node = AVLTNode(1)
    with pytest.raises(ValueError):
        node.child(direction)
    with pytest.raises(ValueError):
        node.set_child(direction, AVLTNode(2))