# Comparators and package setup
import sys
import pytest
import searchtrees
from searchtrees import AVLTree, comparator_from_key, natural_order, reverse_order

def test_natural_order():
    assert natural_order(1, 2) == -1
    assert natural_order(2, 1) == 1
    assert natural_order(2, 2) == 0
    assert natural_order("apple", "banana") == -1
    assert natural_order((1, "b"), (1, "a")) == 1

def test_comparator_from_key():
    by_length = comparator_from_key(len)
    assert by_length("abc", "de") == 1
    assert by_length("ab", "cd") == 0
    tree = AVLTree(["ccc", "a", "bb"], compare=by_length)
    assert tree.to_ascending_list() == ["a", "bb", "ccc"]
    assert "zz" in tree

def test_reverse_order():
    descending = reverse_order(natural_order)
    assert descending(1, 2) == 1
    assert descending(2, 1) == -1
    assert descending(3, 3) == 0
    tree = AVLTree([2, 5, 1, 4, 3], compare=descending)
    assert tree.to_ascending_list() == [5, 4, 3, 2, 1]
    assert tree.get_range(4, 2) == [4, 3, 2]
    tree.validate()

@pytest.fixture
def fresh_setup(monkeypatch):
    monkeypatch.setattr(searchtrees, "_RECURSION_LIMIT_SETUP", False)
    limit = sys.getrecursionlimit()
    yield limit
    sys.setrecursionlimit(limit)

def test_setup_raises_recursion_limit(fresh_setup):
    searchtrees.setup(fresh_setup + 2000)
    assert sys.getrecursionlimit() == fresh_setup + 2000
    assert searchtrees._RECURSION_LIMIT_SETUP

    # Only the first call counts
    searchtrees.setup(fresh_setup + 10000)
    assert sys.getrecursionlimit() == fresh_setup + 2000

def test_setup_never_lowers_limit(fresh_setup):
    with pytest.warns(UserWarning):
        searchtrees.setup(10)
    assert sys.getrecursionlimit() == fresh_setup

def test_setup_rejects_invalid_limit(fresh_setup):
    with pytest.raises(ValueError):
        searchtrees.setup(0)
    with pytest.raises(ValueError):
        searchtrees.setup(searchtrees.MAX_RECURSION_LIMIT + 1)
    assert not searchtrees._RECURSION_LIMIT_SETUP

def test_deep_binary_search_tree(fresh_setup):
    searchtrees.setup(fresh_setup + 10000)
    tree = searchtrees.BinarySearchTree(range(fresh_setup + 200))
    assert tree.height == fresh_setup + 200
    assert tree.get_max() == fresh_setup + 199
    assert len(tree.to_ascending_list()) == fresh_setup + 200
