import pytest

from dsalgo.bst import BinarySearchTree, Node

PREORDER = [10, 5, 3, 4, 8, 7, 9, 15, 12, 18, 17, 22]
POSTORDER = [4, 3, 7, 8, 9, 5, 12, 17, 22, 18, 15, 10]


def _is_bst(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.value <= low:
        return False
    if high is not None and node.value >= high:
        return False
    return _is_bst(node.left, low, node.value) and _is_bst(node.right, node.value, high)


def test_insert_and_inorder():
    tree = BinarySearchTree([20, 10, 30, 5, 25])
    assert tree.inorder() == [5, 10, 20, 25, 30]
    assert list(tree) == [5, 10, 20, 25, 30]
    assert len(tree) == 5


def test_search_absent_and_present():
    tree = BinarySearchTree([20, 10, 30, 5, 25])
    assert tree.search(80) is None
    assert 80 not in tree
    found = tree.search(25)
    assert isinstance(found, Node) and found.value == 25
    assert 25 in tree


def test_duplicates_ignored():
    tree = BinarySearchTree([7, 7, 3, 3, 9])
    assert tree.inorder() == [3, 7, 9]
    assert len(tree) == 3


def test_delete_leaf():
    tree = BinarySearchTree([10, 5, 20, 15])
    tree.delete(15)
    assert tree.inorder() == [5, 10, 20]
    assert 10 in tree
    assert len(tree) == 3


def test_delete_root_with_two_children_keeps_order():
    tree = BinarySearchTree([20, 10, 30, 5, 25])
    tree.delete(20)
    assert tree.inorder() == [5, 10, 25, 30]
    assert _is_bst(tree.root)
    assert tree.root.value == 25


def test_delete_uses_predecessor_when_left_taller():
    tree = BinarySearchTree([20, 10, 30, 5, 15])
    tree.delete(20)
    assert tree.root.value == 15
    assert tree.inorder() == [5, 10, 15, 30]


def test_delete_all_empties_tree():
    values = [50, 40, 30, 45, 60, 55, 70]
    tree = BinarySearchTree(values)
    for value in values:
        tree.delete(value)
        assert value not in tree
        assert _is_bst(tree.root)
    assert tree.root is None
    assert len(tree) == 0
    assert tree.inorder() == []


def test_delete_missing_raises():
    tree = BinarySearchTree([1, 2])
    with pytest.raises(KeyError):
        tree.delete(3)


def test_from_preorder_small():
    tree = BinarySearchTree.from_preorder([50, 40, 30, 45, 60, 55, 70])
    assert tree.inorder() == [30, 40, 45, 50, 55, 60, 70]
    assert tree.preorder() == [50, 40, 30, 45, 60, 55, 70]


def test_from_postorder_small():
    tree = BinarySearchTree.from_postorder([30, 45, 40, 55, 70, 60, 50])
    assert tree.inorder() == [30, 40, 45, 50, 55, 60, 70]
    assert tree.preorder() == [50, 40, 30, 45, 60, 55, 70]


def test_from_preorder_round_trip():
    tree = BinarySearchTree.from_preorder(PREORDER)
    assert tree.preorder() == PREORDER
    assert tree.inorder() == sorted(PREORDER)
    assert _is_bst(tree.root)
    assert len(tree) == len(PREORDER)


def test_preorder_of_inserted_tree_rebuilds_same_tree():
    original = BinarySearchTree([8, 3, 10, 1, 6, 14, 4, 7, 13])
    rebuilt = BinarySearchTree.from_preorder(original.preorder())
    assert rebuilt.level_order() == original.level_order()


def test_empty_traversal_inputs():
    assert BinarySearchTree.from_preorder([]).inorder() == []
    assert BinarySearchTree.from_postorder([]).height() == 0


def test_duplicate_in_preorder_raises():
    with pytest.raises(ValueError):
        BinarySearchTree.from_preorder([5, 5])


def test_duplicate_in_postorder_raises():
    with pytest.raises(ValueError):
        BinarySearchTree.from_postorder([5, 5])


def test_level_order_and_height():
    tree = BinarySearchTree([20, 10, 30, 5, 25])
    assert tree.level_order() == [20, 10, 30, 5, 25]
    assert tree.height() == 3


def test_height_of_chain_equals_length():
    values = [1, 2, 3, 4, 5, 6]
    tree = BinarySearchTree(values)
    assert tree.height() == len(values)
    assert BinarySearchTree().height() == 0