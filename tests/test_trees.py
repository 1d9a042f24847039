import io
import random

import pytest

from ordenaciones.nif import Nif
from ordenaciones.trees import AvlTree, BalancedTree, SearchTree, Node, AvlNode


def _all_nodes(node):
    if node is None:
        return []
    return [node] + _all_nodes(node.left) + _all_nodes(node.right)


def _depth(node):
    if node is None:
        return 0
    return 1 + max(_depth(node.left), _depth(node.right))


def _sample(count=40, seed=7):
    return random.Random(seed).sample(range(1000), count)


def test_search_tree_rejects_duplicates():
    tree = SearchTree(out=io.StringIO())
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert tree.inorder() == [5]


def test_search_tree_inorder_is_sorted():
    values = _sample()
    tree = SearchTree()
    for value in values:
        tree.insert(value)
    assert tree.inorder() == sorted(values)


def test_search_tree_membership():
    tree = SearchTree()
    for value in (8, 3, 10):
        tree.insert(value)
    assert 3 in tree
    assert tree.search(10)
    assert not tree.search(4)
    assert 99 not in tree


def test_search_tree_format_levels():
    tree = SearchTree()
    for value in (5, 3, 7):
        tree.insert(value)
    assert tree.format_levels() == (
        "Nivel 0: 5 \nNivel 1: 3 7 \nNivel 2: [.] [.] [.] [.] \n"
    )
    assert str(tree) == tree.format_levels()


def test_empty_tree_levels():
    tree = SearchTree()
    assert tree.format_levels() == "Nivel 0: [.] \n"
    assert tree.levels() == [[None]]
    assert tree.inorder() == []


def test_levels_values():
    tree = SearchTree()
    for value in (5, 3, 7):
        tree.insert(value)
    assert tree.levels() == [[5], [3, 7], [None, None, None, None]]


def test_balanced_tree_stays_balanced():
    tree = BalancedTree()
    values = _sample()
    for value in values:
        assert tree.insert(value) is True
    assert tree.size() == len(values)
    assert tree.is_balanced()
    assert sorted(tree.inorder()) == sorted(values)


def test_balanced_tree_duplicates_and_search():
    tree = BalancedTree()
    values = _sample(15)
    for value in values:
        tree.insert(value)
    for value in values:
        assert tree.search(value)
        assert tree.insert(value) is False
    assert tree.size() == len(values)


def test_balanced_tree_first_goes_left():
    tree = BalancedTree()
    for value in (1, 2, 3):
        tree.insert(value)
    assert tree.levels()[1] == [2, 3]
    assert tree.height() == 2


def test_balanced_tree_detects_unbalanced_shape():
    tree = BalancedTree()
    tree.root = Node(1, Node(2, Node(3)))
    assert not tree.is_balanced()
    assert tree.height() == 3


def test_avl_sorted_and_balanced():
    tree = AvlTree(out=io.StringIO())
    values = _sample(60)
    for value in values:
        assert tree.insert(value) is True
    assert tree.inorder() == sorted(values)
    for node in _all_nodes(tree.root):
        diff = _depth(node.left) - _depth(node.right)
        assert abs(diff) <= 1
        assert node.balance == diff
    assert tree.height() == _depth(tree.root)


def test_avl_sequential_inserts_stay_balanced():
    tree = AvlTree(out=io.StringIO())
    for value in range(1, 64):
        tree.insert(value)
    for node in _all_nodes(tree.root):
        assert abs(_depth(node.left) - _depth(node.right)) <= 1
    assert tree.inorder() == list(range(1, 64))


def test_avl_rotation_trace_message():
    out = io.StringIO()
    tree = AvlTree(trace=True, out=out)
    for value in (3, 2, 1):
        tree.insert(value)
    assert "Rotation II en [3(2)]" in out.getvalue()
    assert tree.levels()[0] == [2]


def test_avl_ii_counter_on_even_pivot():
    out = io.StringIO()
    tree = AvlTree(out=out)
    for value in (4, 2, 1):
        tree.insert(value)
    assert tree.rotation_counts["II"] == 1
    assert "Counter II incrementado" in out.getvalue()
    assert "Rotation" not in out.getvalue()


def test_avl_dd_not_counted_on_odd_pivot():
    out = io.StringIO()
    tree = AvlTree(out=out)
    for value in (1, 2, 3):
        tree.insert(value)
    assert tree.rotation_counts["DD"] == 0
    assert "Counter DD: 0" in out.getvalue()
    assert tree.levels()[0] == [2]


def test_avl_di_counted_on_odd_pivot():
    out = io.StringIO()
    tree = AvlTree(out=out)
    for value in (1, 3, 2):
        tree.insert(value)
    assert tree.rotation_counts["DI"] == 1
    assert tree.levels()[:2] == [[2], [1, 3]]


def test_avl_format_with_and_without_trace():
    plain = AvlTree(out=io.StringIO())
    traced = AvlTree(trace=True, out=io.StringIO())
    for tree in (plain, traced):
        for value in (2, 1, 3):
            tree.insert(value)
    assert plain.format_levels().startswith("Nivel 0: [2] \nNivel 1: [1] [3] \n")
    assert traced.format_levels().startswith(
        "Nivel 0: [2(0)] \nNivel 1: [1(0)] [3(0)] \n"
    )


def test_avl_root_is_avl_node():
    tree = AvlTree(out=io.StringIO())
    tree.insert(10)
    assert isinstance(tree.root, AvlNode)
    assert tree.root.balance == 0


@pytest.mark.parametrize("tree_class", [SearchTree, BalancedTree])
def test_trees_accept_nif_keys(tree_class):
    tree = tree_class()
    keys = [Nif(n) for n in (30000000, 10000000, 20000000)]
    for key in keys:
        tree.insert(key)
    assert tree.search(Nif(20000000))
    assert sorted(tree.inorder()) == sorted(keys)


def test_avl_accepts_nif_keys():
    tree = AvlTree(out=io.StringIO())
    keys = [Nif(n) for n in (30000000, 20000000, 10000000)]
    for key in keys:
        tree.insert(key)
    assert tree.inorder() == sorted(keys)
    assert tree.rotation_counts["II"] == 1