import pytest

from dsakit.tree import (
    TreeNode,
    build_tree,
    inorder,
    inorder_iterative,
    is_balanced,
    leaf_similar,
    leaves,
    level_order,
    max_depth,
    max_depth_bfs,
    postorder,
    postorder_iterative,
    preorder,
    preorder_iterative,
)

SAMPLE = [1, 2, 3, 4, 5]

TREES = [
    [],
    [7],
    [15, 10, 20],
    SAMPLE,
    [1, None, 2, None, 3],
    [5, 3, 8, 1, 4, None, 9, None, None, 2],
]


def test_small_example_traversals():
    root = TreeNode(15, TreeNode(10), TreeNode(20))
    assert preorder(root) == [15, 10, 20]
    assert inorder(root) == [10, 15, 20]
    assert postorder(root) == [10, 20, 15]


def test_documented_example_traversals():
    root = build_tree(SAMPLE)
    assert preorder(root) == [1, 2, 4, 5, 3]
    assert inorder(root) == [4, 2, 5, 1, 3]
    assert postorder(root) == [4, 5, 2, 3, 1]


def test_documented_example_leaves():
    assert leaves(build_tree(SAMPLE)) == [4, 5, 3]


def test_build_tree_shape():
    root = build_tree(SAMPLE)
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left.val == 4
    assert root.left.right.val == 5
    assert root.right.left is None and root.right.right is None


def test_build_tree_empty_and_none_root():
    assert build_tree([]) is None
    assert build_tree([None, 1]) is None


def test_build_tree_skips_gaps():
    root = build_tree([1, None, 2])
    assert root.left is None
    assert root.right.val == 2


@pytest.mark.parametrize("values", TREES)
def test_iterative_matches_recursive(values):
    root = build_tree(values)
    assert preorder_iterative(root) == preorder(root)
    assert inorder_iterative(root) == inorder(root)
    assert postorder_iterative(root) == postorder(root)


@pytest.mark.parametrize("values", TREES)
def test_traversals_visit_every_node_once(values):
    root = build_tree(values)
    present = sorted(v for v in values if v is not None)
    assert sorted(preorder(root)) == present
    assert sorted(inorder(root)) == present
    assert sorted(postorder(root)) == present


def test_level_order_groups_levels():
    assert level_order(build_tree(SAMPLE)) == [[1], [2, 3], [4, 5]]
    assert level_order(None) == []


@pytest.mark.parametrize("values", TREES)
def test_level_order_length_is_depth(values):
    root = build_tree(values)
    assert len(level_order(root)) == max_depth(root)


@pytest.mark.parametrize("values", TREES)
def test_depth_recursive_matches_bfs(values):
    root = build_tree(values)
    assert max_depth(root) == max_depth_bfs(root)


def test_depth_of_empty_and_single():
    assert max_depth(None) == 0
    assert max_depth_bfs(None) == 0
    assert max_depth(TreeNode(1)) == 1


def test_depth_of_chain_counts_nodes():
    root = build_tree([1, None, 2, None, 3])
    assert max_depth(root) == len(preorder(root))


def test_is_balanced():
    assert is_balanced(None) is True
    assert is_balanced(build_tree(SAMPLE)) is True
    assert is_balanced(build_tree([1, None, 2, None, 3])) is False


def test_is_balanced_detects_deep_imbalance():
    root = TreeNode(1, TreeNode(2, TreeNode(3, TreeNode(4))), TreeNode(5, TreeNode(6)))
    assert is_balanced(root) is False


def test_leaves_of_single_and_empty():
    assert leaves(TreeNode(9)) == [9]
    assert leaves(None) == []


def test_leaf_similar_true_for_different_shapes():
    first = TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3))
    second = TreeNode(8, TreeNode(4), TreeNode(6, TreeNode(5), TreeNode(3)))
    assert leaf_similar(first, second) is True


def test_leaf_similar_false_for_order():
    first = TreeNode(1, TreeNode(2), TreeNode(3))
    second = TreeNode(1, TreeNode(3), TreeNode(2))
    assert leaf_similar(first, second) is False