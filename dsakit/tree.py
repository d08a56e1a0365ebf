"""Binary tree nodes, traversals and common tree queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: Any = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from values listed level by level, ``None`` marking a gap.

    The first value is the root; the following values fill the left and right
    children of the existing nodes in breadth-first order.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending: deque[TreeNode] = deque([root])
    while pending:
        parent = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                pending.append(child)
    return root


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.val


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in root, left, right order (recursive)."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, root, right order (recursive)."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, right, root order (recursive)."""
    return list(_postorder(root))


def preorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Return the preorder values using an explicit stack."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Return the inorder values using an explicit stack."""
    result = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def postorder_iterative(root: Optional[TreeNode]) -> list[Any]:
    """Return the postorder values using two explicit stacks."""
    if root is None:
        return []
    to_visit = [root]
    visited: list[TreeNode] = []
    while to_visit:
        node = to_visit.pop()
        visited.append(node)
        if node.left is not None:
            to_visit.append(node.left)
        if node.right is not None:
            to_visit.append(node.right)
    return [node.val for node in reversed(visited)]


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Return the values of each level, top to bottom, left to right."""
    if root is None:
        return []
    levels = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path (recursive)."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_depth_bfs(root: Optional[TreeNode]) -> int:
    """Return the depth of the tree by counting breadth-first levels."""
    if root is None:
        return 0
    depth = 0
    queue: deque[TreeNode] = deque([root])
    while queue:
        depth += 1
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return depth


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Return True if no node's subtrees differ in height by more than one."""
    return _balanced_height(root) is not None


def _leaves(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    if node.left is None and node.right is None:
        yield node.val
        return
    yield from _leaves(node.left)
    yield from _leaves(node.right)


def leaves(root: Optional[TreeNode]) -> list[Any]:
    """Return the leaf values from left to right."""
    return list(_leaves(root))


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same leaf value sequence."""
    return leaves(root1) == leaves(root2)