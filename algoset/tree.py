"""Binary trees and the algorithms that work on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Optional[int]]) -> Optional[TreeNode]:
        """Build a tree from level-order values where None marks a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending = deque([root])
        while pending:
            node = pending.popleft()
            try:
                left_val = next(items)
            except StopIteration:
                break
            if left_val is not None:
                node.left = cls(left_val)
                pending.append(node.left)
            try:
                right_val = next(items)
            except StopIteration:
                break
            if right_val is not None:
                node.right = cls(right_val)
                pending.append(node.right)
        return root

    def to_level_order(self) -> list[Optional[int]]:
        """Return level-order values, None for missing children, trailing Nones removed."""
        result: list[Optional[int]] = []
        pending: deque[Optional[TreeNode]] = deque([self])
        while pending:
            node = pending.popleft()
            if node is None:
                result.append(None)
                continue
            result.append(node.val)
            pending.append(node.left)
            pending.append(node.right)
        while result and result[-1] is None:
            result.pop()
        return result


def del_nodes(root: Optional[TreeNode], to_delete: Iterable[int]) -> list[TreeNode]:
    """Delete the nodes whose values are listed and return the roots of the remaining forest."""
    doomed = set(to_delete)
    forest: list[TreeNode] = []

    def prune(node: Optional[TreeNode]) -> Optional[TreeNode]:
        if node is None:
            return None
        node.left = prune(node.left)
        node.right = prune(node.right)
        if node.val in doomed:
            if node.left is not None:
                forest.append(node.left)
            if node.right is not None:
                forest.append(node.right)
            return None
        return node

    root = prune(root)
    if root is not None:
        forest.append(root)
    return forest


def remove_leaf_nodes(root: Optional[TreeNode], target: int) -> Optional[TreeNode]:
    """Repeatedly remove leaves whose value equals target."""
    if root is None:
        return None
    root.left = remove_leaf_nodes(root.left, target)
    root.right = remove_leaf_nodes(root.right, target)
    if root.left is None and root.right is None and root.val == target:
        return None
    return root


def evaluate_tree(root: TreeNode) -> bool:
    """Evaluate a full boolean tree: leaves are 0/1, inner nodes 2 (OR) or 3 (AND)."""
    if root.left is None and root.right is None:
        return bool(root.val)
    left = evaluate_tree(root.left)
    right = evaluate_tree(root.right)
    if root.val == 2:
        return left or right
    return left and right