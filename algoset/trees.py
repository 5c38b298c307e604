"""Binary trees and a few algorithms over them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    def inorder(self) -> Iterator[int]:
        """Yield the values of this subtree in in-order sequence."""
        stack: list[TreeNode] = []
        node: TreeNode | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.val
            node = node.right


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from a sorted sequence."""
    if not nums:
        return None
    middle = len(nums) // 2
    return TreeNode(
        nums[middle],
        sorted_array_to_bst(nums[:middle]),
        sorted_array_to_bst(nums[middle + 1 :]),
    )


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the k-th smallest value (1-based) of a search tree."""
    if root is not None and k >= 1:
        for position, value in enumerate(root.inorder(), start=1):
            if position == k:
                return value
    raise IndexError(f"tree has no element number {k}")


def is_identical(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if root is None and sub_root is None:
        return True
    if root is None or sub_root is None:
        return False
    return (
        root.val == sub_root.val
        and is_identical(root.left, sub_root.left)
        and is_identical(root.right, sub_root.right)
    )


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Tell whether ``sub_root`` occurs as a whole subtree of ``root``."""
    if sub_root is None:
        return True
    if root is None:
        return False
    if root.val == sub_root.val and is_identical(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)