import pytest
from hypothesis import given, strategies as st

from dsalgo.bst import BinarySearchTree, BSNode

SAMPLE = [50, 30, 70, 20, 40, 60, 80]


def _build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def _is_valid(node, low=None, high=None):
    if node is None:
        return True
    if low is not None and node.data <= low:
        return False
    if high is not None and node.data >= high:
        return False
    return _is_valid(node.left, low, node.data) and _is_valid(node.right, node.data, high)


def test_inorder_after_insert_is_sorted():
    tree = _build(SAMPLE)
    assert tree.inorder() == sorted(SAMPLE)


def test_search_found_and_missing():
    tree = _build(SAMPLE)
    found = tree.search(40)
    assert isinstance(found, BSNode) and found.data == 40
    assert tree.search(99) is None
    assert 40 in tree
    assert 99 not in tree


def test_delete_leaf_single_child_and_root():
    tree = _build(SAMPLE)
    tree.delete(20)
    assert tree.inorder() == sorted(set(SAMPLE) - {20})
    tree.delete(30)
    assert tree.inorder() == sorted(set(SAMPLE) - {20, 30})
    tree.delete(50)
    assert tree.inorder() == sorted(set(SAMPLE) - {20, 30, 50})
    # the root with two children is replaced by the largest key on its left
    assert tree.root.data == 40
    assert _is_valid(tree.root)


def test_delete_missing_raises():
    tree = _build(SAMPLE)
    with pytest.raises(KeyError):
        tree.delete(99)
    assert tree.inorder() == sorted(SAMPLE)


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)


def test_delete_only_root_empties_tree():
    tree = _build([5])
    tree.delete(5)
    assert tree.root is None
    assert tree.inorder() == []


def test_duplicate_insert_ignored():
    tree = _build([5, 3, 5, 3, 8])
    assert tree.inorder() == [3, 5, 8]


def test_iter_matches_inorder():
    tree = _build(SAMPLE)
    assert list(tree) == tree.inorder()


@given(st.lists(st.integers(-1000, 1000)))
def test_insert_keeps_order_and_uniqueness(values):
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(set(values))
    assert _is_valid(tree.root)


@given(st.lists(st.integers(-100, 100)), st.lists(st.integers(-100, 100)))
def test_delete_keeps_search_property(values, removals):
    tree = BinarySearchTree(values)
    remaining = set(values)
    for value in removals:
        if value in remaining:
            tree.delete(value)
            remaining.discard(value)
        else:
            with pytest.raises(KeyError):
                tree.delete(value)
        assert _is_valid(tree.root)
    assert tree.inorder() == sorted(remaining)
    assert all(value in tree for value in remaining)