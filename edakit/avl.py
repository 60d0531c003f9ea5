"""Self-balancing AVL tree with parent links and per-side heights."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, List, Optional, Tuple


class RotationType(IntEnum):
    """The rotation chosen to rebalance a node."""

    LEFT = 10
    RIGHT = 20
    LEFT_RIGHT = 30
    RIGHT_LEFT = 40


class Side(Enum):
    """Which child of its parent a node is."""

    LEFT = 10
    RIGHT = 20

    @property
    def letter(self) -> str:
        return "L" if self is Side.LEFT else "R"


@dataclass(eq=False)
class AVLNode:
    """A tree node keeping the heights of its left and right subtrees."""

    data: int
    parent: Optional["AVLNode"] = field(default=None, repr=False)
    left: Optional["AVLNode"] = None
    right: Optional["AVLNode"] = None
    h_left: int = 0
    h_right: int = 0
    side: Side = Side.LEFT

    def height(self) -> int:
        """Height of the node; a leaf has height 0."""
        return max(self.h_left, self.h_right)

    def balance_score(self) -> int:
        """Absolute difference between the two subtree heights."""
        return abs(self.h_left - self.h_right)

    def update_heights(self) -> None:
        """Recompute both subtree heights from the children."""
        self.h_left = self.left.height() + 1 if self.left is not None else 0
        self.h_right = self.right.height() + 1 if self.right is not None else 0

    def _set_left(self, node: Optional["AVLNode"]) -> None:
        self.left = node
        if node is not None:
            node.parent = self
            node.side = Side.LEFT

    def _set_right(self, node: Optional["AVLNode"]) -> None:
        self.right = node
        if node is not None:
            node.parent = self
            node.side = Side.RIGHT


class AVL:
    """An AVL tree; equal keys go to the right.

    ``rotations`` records each rebalancing as the rotation type and the key
    of the node that was unbalanced.
    """

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None
        self.rotations: List[Tuple[RotationType, int]] = []

    def insert(self, value: int) -> None:
        """Insert a key and rebalance along the way back up."""
        if self.root is None:
            self.root = AVLNode(value)
        else:
            self._insert(value, self.root)

    def _insert(self, value: int, node: AVLNode) -> None:
        if value < node.data:
            if node.left is None:
                node._set_left(AVLNode(value))
            else:
                self._insert(value, node.left)
        else:
            if node.right is None:
                node._set_right(AVLNode(value))
            else:
                self._insert(value, node.right)
        node.update_heights()
        if node.balance_score() > 1:
            self._balance(node)

    @staticmethod
    def _rotation_type(node: AVLNode) -> RotationType:
        if node.h_left > node.h_right:
            child = node.left
            if child.h_left > child.h_right:
                return RotationType.RIGHT
            return RotationType.LEFT_RIGHT
        child = node.right
        if child.h_left > child.h_right:
            return RotationType.RIGHT_LEFT
        return RotationType.LEFT

    def _balance(self, node: AVLNode) -> None:
        rotation = self._rotation_type(node)
        self.rotations.append((rotation, node.data))
        if rotation is RotationType.LEFT:
            self._rotate_left(node)
        elif rotation is RotationType.RIGHT:
            self._rotate_right(node)
        elif rotation is RotationType.LEFT_RIGHT:
            self._rotate_left(node.left)
            self._rotate_right(node)
        else:
            self._rotate_right(node.right)
            self._rotate_left(node)

    def _replace_in_parent(
        self, node: AVLNode, parent: Optional[AVLNode], was_left: bool, new_top: AVLNode
    ) -> None:
        if node is self.root:
            self.root = new_top
            new_top.parent = None
        else:
            if was_left:
                parent._set_left(new_top)
            else:
                parent._set_right(new_top)
            parent.update_heights()

    def _rotate_left(self, node: AVLNode) -> None:
        child = node.right
        parent = node.parent
        was_left = node.side is Side.LEFT
        node._set_right(child.left)
        child._set_left(node)
        node.update_heights()
        child.update_heights()
        self._replace_in_parent(node, parent, was_left, child)

    def _rotate_right(self, node: AVLNode) -> None:
        child = node.left
        parent = node.parent
        was_left = node.side is Side.LEFT
        node._set_left(child.right)
        child._set_right(node)
        node.update_heights()
        child.update_heights()
        self._replace_in_parent(node, parent, was_left, child)

    def find(self, value: int) -> Optional[AVLNode]:
        """Return the node holding the key, or None."""
        node = self.root
        while node is not None and node.data != value:
            node = node.left if value < node.data else node.right
        return node

    def _preorder(self) -> Iterator[Tuple[AVLNode, int]]:
        pending = [(self.root, 1)] if self.root is not None else []
        while pending:
            node, level = pending.pop()
            yield node, level
            if node.right is not None:
                pending.append((node.right, level + 1))
            if node.left is not None:
                pending.append((node.left, level + 1))

    def traverse(self) -> str:
        """Render the tree in preorder: stars for depth, key and side letter."""
        return "\n".join(
            f"{'*' * level}{node.data}  {node.side.letter}"
            for node, level in self._preorder()
        )

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        pending: List[AVLNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right