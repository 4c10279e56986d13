"""Unbalanced binary search trees with callback traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

Visitor = Callable[[T], None]


def _print_item(data: object) -> None:
    print(data, end="")


@dataclass(eq=False)
class TreeNode(Generic[T]):
    """A node holding ``data`` and links to its two children."""

    data: T
    left: Optional[TreeNode[T]] = field(default=None, repr=False)
    right: Optional[TreeNode[T]] = field(default=None, repr=False)


def _inorder_nodes(node: Optional[TreeNode[T]]) -> Iterator[TreeNode[T]]:
    stack: list[TreeNode[T]] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(node: Optional[TreeNode[T]]) -> Iterator[TreeNode[T]]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


class BSTree(Generic[T]):
    """Binary search tree; items equal to a node go to its left subtree.

    ``preorder`` and ``postorder`` visit the root before or after its two
    subtrees, and walk each subtree in order.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.root: Optional[TreeNode[T]] = None
        for item in items:
            self.push(item)

    def __iter__(self) -> Iterator[T]:
        for node in _inorder_nodes(self.root):
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in _inorder_nodes(self.root))

    def __bool__(self) -> bool:
        return self.root is not None

    def __copy__(self) -> BSTree[T]:
        return self.copy()

    def push(self, data: T) -> None:
        """Insert ``data`` at the leaf position its value leads to."""
        if self.root is None:
            self.root = TreeNode(data)
            return
        node = self.root
        while True:
            if data <= node.data:
                if node.left is None:
                    node.left = TreeNode(data)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(data)
                    return
                node = node.right

    def pop(self) -> None:
        """Remove every item from the tree."""
        self.clear()

    def clear(self) -> None:
        """Remove every item from the tree."""
        self.root = None

    def copy(self) -> BSTree[T]:
        """Return an independent tree with the same shape and items."""
        duplicate = type(self)()
        for node in _preorder_nodes(self.root):
            duplicate.push(node.data)
        return duplicate

    def inorder(self, visit: Visitor = _print_item) -> None:
        """Call ``visit`` on each item in ascending order."""
        for node in _inorder_nodes(self.root):
            visit(node.data)

    def preorder(self, visit: Visitor = _print_item) -> None:
        """Call ``visit`` on the root, then the left and right subtrees in order."""
        if self.root is None:
            return
        visit(self.root.data)
        for node in _inorder_nodes(self.root.left):
            visit(node.data)
        for node in _inorder_nodes(self.root.right):
            visit(node.data)

    def postorder(self, visit: Visitor = _print_item) -> None:
        """Call ``visit`` on the left and right subtrees in order, then the root."""
        if self.root is None:
            return
        for node in _inorder_nodes(self.root.left):
            visit(node.data)
        for node in _inorder_nodes(self.root.right):
            visit(node.data)
        visit(self.root.data)

    def breadthorder(self, visit: Visitor = _print_item) -> None:
        """Call ``visit`` on each item level by level, left to right."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            visit(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)


class AVLTree(BSTree[T]):
    """Search tree with the same interface and insertion rule as :class:`BSTree`."""