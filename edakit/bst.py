"""Binary search tree with subtree sizes and order statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass(eq=False)
class BSTNode:
    """A tree node with its key, children and subtree size."""

    data: int
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None
    size: int = 1


def _size(node: Optional[BSTNode]) -> int:
    return node.size if node is not None else 0


class BST:
    """An unbalanced binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None

    def insert(self, value: int) -> None:
        """Insert a key."""
        new = BSTNode(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def find(self, value: int) -> Optional[BSTNode]:
        """Return the node holding the key, or None."""
        node = self.root
        while node is not None and node.data != value:
            node = node.left if value < node.data else node.right
        return node

    def _preorder(self) -> Iterator[Tuple[BSTNode, int]]:
        pending = [(self.root, 1)] if self.root is not None else []
        while pending:
            node, level = pending.pop()
            yield node, level
            if node.right is not None:
                pending.append((node.right, level + 1))
            if node.left is not None:
                pending.append((node.left, level + 1))

    def traverse(self) -> str:
        """Render the tree in preorder, one node per line, indented by depth."""
        return "\n".join(
            f"{'-' * (level * 2)}{node.data} | s = {node.size}"
            for node, level in self._preorder()
        )

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        pending = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right

    def update_sizes(self) -> None:
        """Recompute the subtree size stored in every node."""
        for node, _ in reversed(list(self._preorder())):
            node.size = _size(node.left) + _size(node.right) + 1

    def k_element(self, k: int) -> Optional[BSTNode]:
        """Return the node with the k-th smallest key (1-based), or None.

        Relies on sizes computed by ``update_sizes``.
        """
        node = self.root
        while node is not None:
            position = _size(node.left) + 1
            if k == position:
                return node
            if k > position:
                k -= position
                node = node.right
            else:
                node = node.left
        return None