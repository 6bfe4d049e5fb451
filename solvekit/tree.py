"""Binary tree node type and common binary tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _iter_inorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _iter_preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in left, root, right order."""
    return [node.val for node in _iter_inorder(root)]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return values level by level, alternating left-to-right and right-to-left."""
    levels: list[list[int]] = []
    if root is None:
        return levels

    queue: deque[TreeNode] = deque([root])
    left_to_right = True
    while queue:
        level: deque[int] = deque()
        for _ in range(len(queue)):
            node = queue.popleft()
            if left_to_right:
                level.append(node.val)
            else:
                level.appendleft(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(list(level))
        left_to_right = not left_to_right
    return levels


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced BST from ascending values, rooted at the lower middle."""

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def flatten(root: Optional[TreeNode]) -> None:
    """Flatten the tree in place into a right-linked list in preorder."""
    nodes = list(_iter_preorder(root))
    for current, following in zip(nodes, nodes[1:] + [None]):
        current.left = None
        current.right = following


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
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


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and values."""
    pending = [(p, q)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.left, b.left))
        pending.append((a.right, b.right))
    return True


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True when the tree is a mirror image of itself."""
    if root is None:
        return True
    pending = [(root.left, root.right)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        pending.append((a.left, b.right))
        pending.append((a.right, b.left))
    return True