import pytest

from algoset.tree import TreeNode, del_nodes, evaluate_tree, remove_leaf_nodes


def _all_values(node):
    if node is None:
        return []
    return [node.val] + _all_values(node.left) + _all_values(node.right)


def _leaves(node):
    if node is None:
        return []
    if node.left is None and node.right is None:
        return [node.val]
    return _leaves(node.left) + _leaves(node.right)


@pytest.mark.parametrize(
    "values",
    [[1], [1, 2, 3], [1, None, 2, None, 3], [5, 4, 8, 11, None, 13, 4]],
)
def test_level_order_round_trip(values):
    assert TreeNode.from_level_order(values).to_level_order() == values


def test_from_empty_level_order():
    assert TreeNode.from_level_order([]) is None


def test_del_nodes_forest_values():
    original = [1, 2, 3, 4, 5, 6, 7]
    root = TreeNode.from_level_order(original)
    forest = del_nodes(root, [3, 5])
    remaining = sorted(v for tree in forest for v in _all_values(tree))
    assert remaining == sorted(set(original) - {3, 5})
    assert sorted(tree.val for tree in forest) == [1, 6, 7]


def test_del_nodes_order_puts_root_last():
    root = TreeNode.from_level_order([1, 2, 3, 4, 5, 6, 7])
    forest = del_nodes(root, [3, 5])
    assert [tree.to_level_order() for tree in forest] == [[6], [7], [1, 2, None, 4]]


def test_del_nodes_root_deleted():
    root = TreeNode.from_level_order([1, 2, 4, None, 3])
    forest = del_nodes(root, [1])
    assert [tree.val for tree in forest] == [2, 4]


def test_del_nodes_nothing_deleted():
    root = TreeNode.from_level_order([1, 2, 3])
    forest = del_nodes(root, [])
    assert forest == [root]


def test_remove_leaf_nodes_example():
    root = TreeNode.from_level_order([1, 2, 3, 2, None, 2, 4])
    result = remove_leaf_nodes(root, 2)
    assert result.to_level_order() == [1, None, 3, None, 4]


@pytest.mark.parametrize(
    "values, target",
    [([1, 3, 3, 3, 2], 3), ([1, 2, None, 2, None, 2], 2), ([4, 1, 1, 1, 4], 1)],
)
def test_remove_leaf_nodes_no_target_leaf(values, target):
    result = remove_leaf_nodes(TreeNode.from_level_order(values), target)
    assert target not in _leaves(result)


def test_remove_leaf_nodes_all_target():
    root = TreeNode.from_level_order([1, 1, 1])
    assert remove_leaf_nodes(root, 1) is None


def test_evaluate_tree_true():
    assert evaluate_tree(TreeNode.from_level_order([2, 1, 3, None, None, 0, 1]))


def test_evaluate_tree_leaf_false():
    assert not evaluate_tree(TreeNode.from_level_order([0]))


@pytest.mark.parametrize("left, right", [(0, 0), (0, 1), (1, 0), (1, 1)])
def test_evaluate_tree_operators(left, right):
    or_tree = TreeNode.from_level_order([2, left, right])
    and_tree = TreeNode.from_level_order([3, left, right])
    assert evaluate_tree(or_tree) == bool(left or right)
    assert evaluate_tree(and_tree) == bool(left and right)