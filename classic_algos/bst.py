"""Binary trees: traversals, level lookup and binary-search-tree editing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer."""

    data: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def pre_order(node: TreeNode | None) -> list[int]:
    """Return the values in root, left, right order."""
    order: list[int] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        order.append(current.data)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return order


def in_order(node: TreeNode | None) -> list[int]:
    """Return the values in left, root, right order."""
    order: list[int] = []
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        order.append(current.data)
        current = current.right
    return order


def post_order(node: TreeNode | None) -> list[int]:
    """Return the values in left, right, root order."""
    reversed_order: list[int] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        reversed_order.append(current.data)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    return reversed_order[::-1]


def get_level(node: TreeNode | None, data: int) -> int | None:
    """Return the level (root is 1) of the first node holding ``data``.

    Nodes are examined in pre-order; None is returned if no node matches.
    """
    stack = [(node, 1)] if node is not None else []
    while stack:
        current, level = stack.pop()
        if current.data == data:
            return level
        if current.right is not None:
            stack.append((current.right, level + 1))
        if current.left is not None:
            stack.append((current.left, level + 1))
    return None


def insert(node: TreeNode | None, data: int) -> TreeNode:
    """Insert ``data`` into a binary search tree and return its root.

    Values equal to a node's value go to its right subtree.
    """
    new_node = TreeNode(data)
    if node is None:
        return new_node
    current = node
    while True:
        if data < current.data:
            if current.left is None:
                current.left = new_node
                return node
            current = current.left
        else:
            if current.right is None:
                current.right = new_node
                return node
            current = current.right


def minimum_value_node(node: TreeNode | None) -> TreeNode | None:
    """Return the leftmost node below ``node``, or None for an empty tree."""
    current = node
    while current is not None and current.left is not None:
        current = current.left
    return current


def delete(node: TreeNode | None, data: int) -> TreeNode | None:
    """Remove the first node holding ``data`` from a binary search tree.

    Returns the new root; the tree is unchanged if ``data`` is absent.
    """
    parent: TreeNode | None = None
    current = node
    while current is not None and current.data != data:
        parent = current
        current = current.left if data < current.data else current.right
    if current is None:
        return node

    if current.left is not None and current.right is not None:
        successor_parent = current
        successor = current.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        current.data = successor.data
        if successor_parent is current:
            current.right = successor.right
        else:
            successor_parent.left = successor.right
        return node

    child = current.left if current.left is not None else current.right
    if parent is None:
        return child
    if parent.left is current:
        parent.left = child
    else:
        parent.right = child
    return node


def table_rows(node: TreeNode | None) -> list[tuple[int, int | None, int | None]]:
    """List (item, left child, right child) for every node that has a child.

    Rows follow pre-order; a missing child is given as None.
    """
    rows: list[tuple[int, int | None, int | None]] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        if current.left is not None or current.right is not None:
            rows.append(
                (
                    current.data,
                    current.left.data if current.left is not None else None,
                    current.right.data if current.right is not None else None,
                )
            )
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return rows