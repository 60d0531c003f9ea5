"""General tree whose nodes keep a list of children, newest first."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


@dataclass(eq=False)
class TreeNode:
    """A tree node with a value, an optional parent and its children."""

    data: int = -1
    parent: Optional["TreeNode"] = None
    children: List["TreeNode"] = field(default_factory=list)

    def add_child(self, child: "TreeNode") -> None:
        """Put a child at the front of the children list."""
        child.parent = self
        self.children.insert(0, child)

    def remove_child(self, value: int) -> None:
        """Remove every child holding the value."""
        self.children = [child for child in self.children if child.data != value]

    def find_child(self, value: int) -> Optional["TreeNode"]:
        """Return the first child holding the value, or None."""
        return next((child for child in self.children if child.data == value), None)

    def child_values(self) -> List[int]:
        """Values of the children in list order."""
        return [child.data for child in self.children]


class Tree:
    """A rooted tree of ``TreeNode`` objects."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def set_root(self, node: TreeNode) -> None:
        """Set the root; an existing root is kept."""
        if self.root is None:
            self.root = node

    def insert(self, value: int, parent_value: int) -> Optional[TreeNode]:
        """Add a child under the node holding ``parent_value``.

        Returns the new node, or None when no such parent exists.
        """
        parent = self.find(parent_value)
        if parent is None:
            return None
        child = TreeNode(value)
        parent.add_child(child)
        return child

    def _preorder(self) -> Iterator[Tuple[TreeNode, int]]:
        pending = [(self.root, 1)] if self.root is not None else []
        while pending:
            node, level = pending.pop()
            yield node, level
            pending.extend((child, level + 1) for child in reversed(node.children))

    def find(self, value: int) -> Optional[TreeNode]:
        """Return the first node in preorder holding the value, or None."""
        return next((node for node, _ in self._preorder() if node.data == value), None)

    def traverse(self) -> str:
        """Render the tree in preorder, one node per line with its level."""
        return "\n".join(
            f"{'-' * (level * 2)}{node.data} at level {level}"
            for node, level in self._preorder()
        )