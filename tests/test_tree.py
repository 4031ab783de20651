import io
import random

import pytest

from bptree.config import InvalidDegree
from bptree.tree import BTree


def test_basic_operations():
    btree = BTree(4)
    assert btree.is_empty()
    assert btree.find(1) is None

    btree.set(5, "five")
    assert not btree.is_empty()
    assert btree.find(5) == "five"

    btree.set(3, "three")
    btree.set(7, "seven")
    btree.set(1, "one")
    btree.set(9, "nine")

    assert btree.find(3) == "three"
    assert btree.find(10) is None


def test_overwrite_values():
    btree = BTree(4)
    btree.set(5, "five")
    btree.set(5, "FIVE")
    assert btree.find(5) == "FIVE"
    assert len(btree) == 1


def test_deletion_operations():
    btree = BTree(4)
    for key in range(1, 11):
        btree.set(key, f"value_{key}")

    btree.remove(5)
    assert btree.find(5) is None
    assert btree.find(4) == "value_4"

    btree.remove(1)
    btree.remove(10)
    btree.remove(3)

    assert btree.find(1) is None
    assert btree.find(10) is None
    assert btree.find(3) is None
    assert btree.find(2) == "value_2"
    assert [key for key, _ in btree.items()] == [2, 4, 6, 7, 8, 9]


def test_large_dataset():
    btree = BTree(6)
    count = 1000
    for i in range(1, count + 1):
        btree.set(i, i * 10)

    assert all(btree.find(i) == i * 10 for i in range(1, count + 1))

    for i in range(1, count + 1, 2):
        btree.remove(i)

    for i in range(1, count + 1):
        if i % 2:
            assert btree.find(i) is None
        else:
            assert btree.find(i) == i * 10
    assert len(btree) == count // 2


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5, 6, 7])
def test_random_operations(seed):
    rng = random.Random(seed)
    btree = BTree(5)
    inserted = []
    for _ in range(50):
        key = rng.randint(1, 100)
        btree.set(key, f"val_{key}")
        if key not in inserted:
            inserted.append(key)

    assert all(btree.find(key) == f"val_{key}" for key in inserted)

    rng.shuffle(inserted)
    half = len(inserted) // 2
    removed, kept = inserted[:half], inserted[half:]
    for key in removed:
        btree.remove(key)

    for key in kept:
        assert btree.find(key) == f"val_{key}"
    for key in removed:
        assert btree.find(key) is None
    assert list(btree.items()) == sorted((key, f"val_{key}") for key in kept)


@pytest.mark.parametrize("degree", [3, 4, 5, 6, 10, 20])
def test_different_degrees(degree):
    btree = BTree(degree)
    for i in range(1, 21):
        btree.set(i, i * i)
    assert [btree.find(i) for i in range(1, 21)] == [i * i for i in range(1, 21)]


def test_remove_from_empty_tree():
    btree = BTree(3)
    btree.remove(999)
    assert btree.is_empty()
    assert btree.format_tree() == "├ []"


def test_duplicate_removal():
    btree = BTree(3)
    btree.set(5, "five")
    btree.remove(5)
    btree.remove(5)
    assert btree.find(5) is None
    assert btree.is_empty()


def test_minimum_degree_tree():
    btree = BTree(2)
    for i in range(1, 11):
        btree.set(i, i)
    assert [btree.find(i) for i in range(1, 11)] == list(range(1, 11))
    assert [key for key, _ in btree.items()] == list(range(1, 11))


@pytest.mark.parametrize("degree", [1, 0, -3])
def test_invalid_degree(degree):
    with pytest.raises(InvalidDegree) as info:
        BTree(degree)
    assert str(info.value) == f"Invalid B-tree degree: {degree}"


def test_contains_and_len():
    btree = BTree(4)
    for key in (8, 3, 12, 1):
        btree.set(key, str(key))
    assert 3 in btree
    assert 4 not in btree
    assert "3" not in btree
    assert len(btree) == 4


def test_items_sorted_after_unordered_inserts():
    btree = BTree(3)
    keys = [50, 10, 40, 20, 30, 60, 5, 45, 25]
    for key in keys:
        btree.set(key, -key)
    assert list(btree.items()) == [(key, -key) for key in sorted(keys)]


def test_clear_resets_tree():
    btree = BTree(4)
    for i in range(1, 30):
        btree.set(i, i)
    btree.clear()
    assert btree.is_empty()
    assert btree.depth == 1
    btree.set(7, "seven")
    assert btree.find(7) == "seven"


def test_depth_grows_and_shrinks():
    btree = BTree(4)
    for i in range(1, 11):
        btree.set(i, i)
    assert btree.depth == 3
    btree.remove(5)
    assert btree.depth == 2


def test_format_after_inserts_degree_four():
    btree = BTree(4)
    for i in range(1, 11):
        btree.set(i, i)
    assert btree.format_tree().split("\n") == [
        "├ [7]",
        "   ├ [3, 5]",
        "   ╎  ├ [1, 2]",
        "   ╎  ├ [3, 4]",
        "   ╎  ├ [5, 6]",
        "   ├ [9]",
        "      ├ [7, 8]",
        "      ├ [9, 10]",
    ]


def _demo_tree():
    btree = BTree(6)
    for key, value in [
        (1, "one"), (2, "two"), (3, "three"), (4, "four"), (5, "five"),
        (6, "six"), (7, "seven"), (9, "nine"), (11, "eleven"),
        (8, "eight"), (10, "ten"),
    ]:
        btree.set(key, value)
    return btree


def test_format_of_demo_tree():
    btree = _demo_tree()
    assert btree.format_tree().split("\n") == [
        "├ [4, 7]",
        "   ├ [1, 2, 3]",
        "   ├ [4, 5, 6]",
        "   ├ [7, 8, 9, 10, 11]",
    ]
    for key in (1, 5, 3, 8):
        btree.remove(key)
    assert btree.format_tree().split("\n") == [
        "├ [7]",
        "   ├ [2, 4, 6]",
        "   ├ [7, 9, 10, 11]",
    ]


def test_print_tree_writes_format():
    btree = _demo_tree()
    buffer = io.StringIO()
    btree.print_tree(buffer)
    assert buffer.getvalue() == btree.format_tree() + "\n"