import pytest

from algokit.nary_tree import TreeNode, are_identical, max_node, parse_level_order

SAMPLE = [10, 3, 20, 30, 40, 2, 40, 50, 0, 0, 0, 0]


def test_parse_level_order_structure():
    root = parse_level_order(SAMPLE)
    assert root.data == 10
    assert [child.data for child in root.children] == [20, 30, 40]
    assert [child.data for child in root.children[0].children] == [40, 50]
    assert root.children[1].children == []


def test_parse_single_node():
    root = parse_level_order([7, 0])
    assert root.data == 7
    assert root.children == []


def test_parse_short_input():
    with pytest.raises(ValueError):
        parse_level_order([1, 2, 3])
    with pytest.raises(ValueError):
        parse_level_order([])


def test_parse_negative_count():
    with pytest.raises(ValueError):
        parse_level_order([1, -1])


def test_identical_trees():
    assert are_identical(parse_level_order(SAMPLE), parse_level_order(SAMPLE)) is True


def test_trees_differing_in_a_deep_value():
    changed = list(SAMPLE)
    changed[7] = 51
    assert are_identical(parse_level_order(SAMPLE), parse_level_order(changed)) is False


def test_trees_differing_in_shape():
    first = parse_level_order([1, 1, 2, 0])
    second = parse_level_order([1, 2, 2, 3, 0, 0])
    assert are_identical(first, second) is False


def test_same_root_different_children():
    first = TreeNode(1, [TreeNode(2)])
    second = TreeNode(1, [TreeNode(3)])
    assert are_identical(first, second) is False


def test_identical_with_empty():
    assert are_identical(None, None) is True
    assert are_identical(TreeNode(1), None) is False


def test_max_node_finds_deepest_largest():
    root = parse_level_order(SAMPLE)
    assert max_node(root).data == 50


def test_max_node_returns_node_in_tree():
    root = parse_level_order(SAMPLE)
    assert max_node(root) is root.children[0].children[1]


def test_max_node_root_wins_tie():
    root = TreeNode(5, [TreeNode(5), TreeNode(1)])
    assert max_node(root) is root
    assert max_node(None) is None