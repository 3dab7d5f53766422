"""Binary trees: traversals, level-based measures and classic recursive problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from math import inf
from typing import Optional


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where None marks a missing child.

    Raises ValueError when values are left over with no node to hang from.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        if any(value is not None for value in items):
            raise ValueError("children given without a root")
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    if any(value is not None for value in items):
        raise ValueError("values left over with no parent to attach to")
    return root


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in node, left, right order, visited with an explicit stack."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, node, right order, visited with an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            result.append(node.val)
            node = node.right
    return result


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, node order, using one stack and the last node emitted."""
    if root is None:
        return []
    result: list[int] = []
    stack = [root]
    last = root
    while stack:
        current = stack[-1]
        if (
            current.left is not None
            and last is not current.left
            and last is not current.right
        ):
            stack.append(current.left)
        elif current.right is not None and last is not current.right:
            stack.append(current.right)
        else:
            result.append(current.val)
            last = stack.pop()
    return result


def postorder_two_stacks(root: Optional[TreeNode]) -> list[int]:
    """Post-order values: collect node, right, left order, then reverse it."""
    if root is None:
        return []
    collected: list[int] = []
    stack = [root]
    while stack:
        node = stack.pop()
        collected.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return collected[::-1]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, each level read left to right."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by depth, alternating left-to-right and right-to-left."""
    return [
        row[::-1] if depth % 2 else row
        for depth, row in enumerate(level_order(root))
    ]


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    children = [child for child in (root.left, root.right) if child is not None]
    if not children:
        return 1
    return min(min_depth(child) for child in children) + 1


def width_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    best = 0
    level = [(root, 0)]
    while level:
        best = max(best, level[-1][1] - level[0][1] + 1)
        base = level[0][1]
        level = [
            (child, 2 * (position - base) + offset)
            for node, position in level
            for offset, child in enumerate((node.left, node.right))
            if child is not None
        ]
    return best


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Deepest node having both p and q as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def lowest_common_ancestor_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Lowest common ancestor in a binary search tree, found by walking the values."""
    if root is None or root is p or root is q:
        return root
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def path_sum(root: Optional[TreeNode], target_sum: int) -> list[list[int]]:
    """Every root-to-leaf path whose values add up to target_sum."""
    results: list[list[int]] = []
    path: list[int] = []

    def _walk(node: TreeNode, remaining: int) -> None:
        path.append(node.val)
        if node.left is None and node.right is None:
            if node.val == remaining:
                results.append(list(path))
        else:
            for child in (node.left, node.right):
                if child is not None:
                    _walk(child, remaining - node.val)
        path.pop()

    if root is not None:
        _walk(root, target_sum)
    return results


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True if every node is strictly above its left subtree and below its right."""

    def _check(node: Optional[TreeNode]) -> tuple[bool, float, float]:
        if node is None:
            return True, inf, -inf
        left_ok, left_min, left_max = _check(node.left)
        right_ok, right_min, right_max = _check(node.right)
        valid = left_ok and right_ok and left_max < node.val < right_min
        return (
            valid,
            min(left_min, right_min, node.val),
            max(left_max, right_max, node.val),
        )

    return _check(root)[0]


def trim_bst(root: Optional[TreeNode], low: int, high: int) -> Optional[TreeNode]:
    """Drop the nodes of a search tree whose values fall outside [low, high]."""
    if root is None:
        return None
    if root.val < low:
        return trim_bst(root.right, low, high)
    if root.val > high:
        return trim_bst(root.left, low, high)
    root.left = trim_bst(root.left, low, high)
    root.right = trim_bst(root.right, low, high)
    return root


def rob(root: Optional[TreeNode]) -> int:
    """Largest total of node values with no two chosen nodes directly linked."""

    def _best(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_take, left_skip = _best(node.left)
        right_take, right_skip = _best(node.right)
        take = node.val + left_skip + right_skip
        skip = max(left_take, left_skip) + max(right_take, right_skip)
        return take, skip

    return max(_best(root))