import copy

import pytest

from cs8lab.trees import AVLTree, BSTree, TreeNode


def collect(method):
    items = []
    method(items.append)
    return items


def both(values=None):
    """Build one tree of each kind from the same values."""
    if values is None:
        return [BSTree(), AVLTree()]
    return [BSTree(values), AVLTree(values)]


def test_inorder_is_sorted():
    values = [7, 2, 9, 1, 5, 8, 3]
    for tree in both(values):
        assert collect(tree.inorder) == sorted(values)


def test_iteration_matches_inorder():
    for tree in both([4, 6, 2, 5]):
        assert list(tree) == collect(tree.inorder)
        assert len(tree) == 4


def test_breadthorder_levels():
    for tree in both([5, 3, 8, 1, 4]):
        assert collect(tree.breadthorder) == [5, 3, 8, 1, 4]


def test_preorder_visits_root_first_then_subtrees_in_order():
    for tree in both([5, 3, 8, 1, 4]):
        assert collect(tree.preorder) == [5, 1, 3, 4, 8]


def test_postorder_visits_root_last():
    for tree in both([5, 3, 8, 1, 4]):
        assert collect(tree.postorder) == [1, 3, 4, 8, 5]


def test_duplicates_go_left():
    for tree in both([5, 5]):
        assert tree.root.left.data == 5
        assert tree.root.right is None


def test_structure_after_push():
    for tree in both():
        tree.push(10)
        tree.push(20)
        tree.push(5)
        assert isinstance(tree.root, TreeNode)
        assert (tree.root.data, tree.root.left.data, tree.root.right.data) == (10, 5, 20)


def test_copy_is_independent_and_same_shape():
    for tree in both([5, 3, 8, 1, 4]):
        duplicate = tree.copy()
        assert type(duplicate) is type(tree)
        assert collect(duplicate.breadthorder) == collect(tree.breadthorder)
        duplicate.push(100)
        assert 100 not in list(tree)
        assert 100 in list(duplicate)


def test_copy_module_copy():
    for tree in both([2, 1, 3]):
        duplicate = copy.copy(tree)
        duplicate.clear()
        assert list(tree) == [1, 2, 3]
        assert list(duplicate) == []


def test_pop_clears_everything():
    for tree in both([3, 1, 2]):
        tree.pop()
        assert tree.root is None
        assert collect(tree.inorder) == []
        assert not tree


def test_empty_traversals_visit_nothing():
    for tree in both():
        for method in (tree.inorder, tree.preorder, tree.postorder, tree.breadthorder):
            assert collect(method) == []


@pytest.mark.parametrize("kind", ["bst", "avl"])
def test_default_visitor_prints(kind, capsys):
    tree = BSTree([5, 3, 8]) if kind == "bst" else AVLTree([5, 3, 8])
    tree.inorder()
    assert capsys.readouterr().out == "358"


def test_deep_degenerate_tree():
    values = list(range(3000))
    for tree in both(values):
        assert collect(tree.inorder) == values
        assert len(tree.copy()) == len(values)


def test_strings_sorted():
    words = ["pear", "apple", "fig"]
    for tree in both(words):
        assert list(tree) == sorted(words)