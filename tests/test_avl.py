import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from treekit.avl import AVLTree


def _max_avl_height(n):
    return 1.4405 * math.log2(n + 2) - 0.3277


def test_empty_tree():
    tree = AVLTree()
    assert len(tree) == 0
    assert tree.height() == 0
    assert tree.inorder() == []
    assert tree.render() == ""


def test_source_example_inserts_and_deletes():
    tree = AVLTree([10, 20, 30, 5, 4, 15, 25, 27])
    assert tree.inorder() == [4, 5, 10, 15, 20, 25, 27, 30]
    assert tree.delete(20) is True
    assert 20 not in tree
    assert tree.delete(5) is True
    assert tree.inorder() == [4, 10, 15, 25, 27, 30]
    assert len(tree) == 6
    assert tree.height() <= _max_avl_height(6)


def test_render_small_tree():
    tree = AVLTree([1, 2, 3])
    expected = (
        "\n      3(h=1, p=2)\n"
        "\n2(h=2, p=-1)\n"
        "\n      1(h=1, p=2)\n"
    )
    assert tree.render() == expected


def test_render_custom_indent_lists_every_key():
    tree = AVLTree(range(7))
    text = tree.render(indent=2)
    keys = [int(line.strip().split("(")[0]) for line in text.splitlines() if line.strip()]
    assert keys == list(reversed(range(7)))


def test_sorted_insertion_gives_perfect_tree():
    tree = AVLTree(range(1, 1024))
    assert tree.height() == 10


def test_delete_missing_returns_false():
    tree = AVLTree([1, 2, 3])
    assert tree.delete(42) is False
    assert len(tree) == 3


def test_duplicates_allowed_by_default():
    tree = AVLTree([5, 5, 5, 5])
    assert tree.inorder() == [5, 5, 5, 5]
    assert tree.delete(5) is True
    assert tree.inorder() == [5, 5, 5]


def test_duplicates_refused():
    tree = AVLTree([3, 1, 3], allow_duplicates=False)
    assert tree.inorder() == [1, 3]
    assert tree.insert(1) is False
    assert len(tree) == 2


@given(st.lists(st.integers(-1000, 1000)))
def test_inorder_is_sorted_and_balanced(values):
    tree = AVLTree(values)
    assert tree.inorder() == sorted(values)
    assert len(tree) == len(values)
    assert tree.height() <= _max_avl_height(len(values))


@given(st.lists(st.integers(-50, 50)), st.lists(st.integers(-50, 50)))
def test_deletes_match_list_model(values, removals):
    tree = AVLTree(values)
    model = list(values)
    for key in removals:
        expected = key in model
        if expected:
            model.remove(key)
        assert tree.delete(key) is expected
    assert tree.inorder() == sorted(model)
    assert len(tree) == len(model)
    assert tree.height() <= _max_avl_height(len(model))


@given(st.sets(st.integers()), st.integers())
def test_contains_matches_set(values, probe):
    tree = AVLTree(values, allow_duplicates=False)
    assert (probe in tree) == (probe in values)


@pytest.mark.parametrize("words", [["pear", "apple", "fig", "kiwi"], ["b", "a"]])
def test_works_with_strings(words):
    tree = AVLTree(words)
    assert list(tree) == sorted(words)