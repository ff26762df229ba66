import random

from mobagen.tree import BinaryTree, Node


def test_empty_tree():
    tree = BinaryTree()
    assert tree.root is None
    assert list(tree) == []


def test_first_value_becomes_root():
    tree = BinaryTree()
    tree.add(5)
    assert tree.root == Node(5)


def test_smaller_left_larger_right():
    tree = BinaryTree()
    for value in (5, 3, 8):
        tree.add(value)
    assert tree.root.left.value == 3
    assert tree.root.right.value == 8


def test_duplicates_go_right():
    tree = BinaryTree()
    tree.add(4)
    tree.add(4)
    assert tree.root.left is None
    assert tree.root.right.value == 4


def test_iteration_is_sorted():
    values = list(range(50))
    random.Random(7).shuffle(values)
    tree = BinaryTree()
    for value in values:
        tree.add(value)
    assert list(tree) == sorted(values)


def test_works_with_strings():
    tree = BinaryTree()
    for word in ("pear", "apple", "fig", "apple"):
        tree.add(word)
    assert list(tree) == sorted(["pear", "apple", "fig", "apple"])