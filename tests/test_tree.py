import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.tree import (
    TreeNode,
    build_tree,
    inorder,
    is_valid_bst,
    level_order,
    lowest_common_ancestor,
    lowest_common_ancestor_bst,
    max_depth,
    min_depth,
    path_sum,
    postorder,
    postorder_two_stacks,
    preorder,
    rob,
    trim_bst,
    width_of_binary_tree,
    zigzag_level_order,
)

SAMPLE = [3, 9, 20, None, None, 15, 7]

unique_values = st.lists(st.integers(-100, 100), unique=True, min_size=1, max_size=30)


def _insert(root, value):
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if value < current.val:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def _bst(values):
    root = None
    for value in values:
        root = _insert(root, value)
    return root


def _find(root, value):
    node = root
    while node.val != value:
        node = node.left if value < node.val else node.right
    return node


def test_build_tree_shape():
    root = build_tree(SAMPLE)
    assert root.val == 3
    assert root.left.val == 9
    assert root.left.left is None
    assert root.right.left.val == 15
    assert root.right.right.val == 7


def test_build_tree_empty_and_errors():
    assert build_tree([]) is None
    assert build_tree([None]) is None
    with pytest.raises(ValueError):
        build_tree([None, 1])
    with pytest.raises(ValueError):
        build_tree([1, None, None, 2])


def test_sample_traversals():
    root = build_tree(SAMPLE)
    assert preorder(root) == [3, 9, 20, 15, 7]
    assert level_order(root) == [[3], [9, 20], [15, 7]]
    assert zigzag_level_order(root) == [[3], [20, 9], [15, 7]]


def test_empty_tree_results():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []
    assert postorder_two_stacks(None) == []
    assert level_order(None) == []
    assert max_depth(None) == 0
    assert min_depth(None) == 0
    assert width_of_binary_tree(None) == 0
    assert path_sum(None, 0) == []
    assert rob(None) == 0


@given(unique_values)
def test_inorder_of_bst_is_sorted(values):
    assert inorder(_bst(values)) == sorted(values)


@given(unique_values)
def test_traversals_agree(values):
    root = _bst(values)
    assert postorder(root) == postorder_two_stacks(root)
    assert preorder(root)[0] == root.val
    assert postorder(root)[-1] == root.val
    assert sorted(preorder(root)) == sorted(values)
    assert sorted(postorder(root)) == sorted(values)


@given(unique_values)
def test_levels_and_depths(values):
    root = _bst(values)
    levels = level_order(root)
    assert sorted(v for row in levels for v in row) == sorted(values)
    assert len(levels) == max_depth(root)
    assert 1 <= min_depth(root) <= max_depth(root)
    for depth, (row, zig) in enumerate(zip(levels, zigzag_level_order(root))):
        assert zig == (row[::-1] if depth % 2 else row)


def test_min_depth_of_chain_equals_max_depth():
    chain = build_tree([1, 2, None, 3, None, 4])
    assert min_depth(chain) == max_depth(chain)
    assert max_depth(chain) == len(level_order(chain))


@given(unique_values)
def test_width_at_least_widest_level(values):
    root = _bst(values)
    assert width_of_binary_tree(root) >= max(len(row) for row in level_order(root))


@given(st.integers(1, 40))
def test_width_of_complete_tree_is_widest_level(size):
    root = build_tree(list(range(size)))
    assert width_of_binary_tree(root) == max(len(row) for row in level_order(root))


@given(st.data())
def test_lowest_common_ancestor_in_bst(data):
    values = data.draw(unique_values)
    root = _bst(values)
    p = _find(root, data.draw(st.sampled_from(values)))
    q = _find(root, data.draw(st.sampled_from(values)))
    general = lowest_common_ancestor(root, p, q)
    assert general is lowest_common_ancestor_bst(root, p, q)
    assert min(p.val, q.val) <= general.val <= max(p.val, q.val)
    below = preorder(general)
    assert p.val in below and q.val in below


def test_lowest_common_ancestor_of_node_with_itself():
    root = build_tree(SAMPLE)
    node = root.right.left
    assert lowest_common_ancestor(root, node, node) is node
    assert lowest_common_ancestor(root, root.right.left, root.right.right) is root.right


@given(unique_values)
def test_path_sum_finds_leftmost_path(values):
    root = _bst(values)
    path = []
    node = root
    while node is not None:
        path.append(node.val)
        node = node.left if node.left is not None else node.right
    found = path_sum(root, sum(path))
    assert path in found
    assert all(sum(p) == sum(path) and p[0] == root.val for p in found)


@given(unique_values)
def test_bst_built_by_insertion_is_valid(values):
    assert is_valid_bst(_bst(values))


def test_invalid_bsts_rejected():
    assert not is_valid_bst(build_tree([5, None, 10, 3]))
    assert not is_valid_bst(build_tree([2, 2, 2]))
    assert not is_valid_bst(build_tree([5, 1, 4, None, None, 3, 6]))


@given(unique_values, st.integers(-100, 100), st.integers(0, 100))
def test_trim_bst_keeps_range(values, low, span):
    high = low + span
    trimmed = trim_bst(_bst(values), low, high)
    assert inorder(trimmed) == [v for v in sorted(values) if low <= v <= high]
    assert is_valid_bst(trimmed)


def test_rob_single_node():
    assert rob(TreeNode(5)) == 5


@given(st.lists(st.integers(0, 100), unique=True, min_size=1, max_size=30))
def test_rob_bounds(values):
    root = _bst(values)
    levels = level_order(root)
    even = sum(sum(row) for row in levels[0::2])
    odd = sum(sum(row) for row in levels[1::2])
    result = rob(root)
    assert max(even, odd) <= result <= sum(values)