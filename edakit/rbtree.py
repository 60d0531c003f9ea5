"""Red-black tree and a timing run over binary files of keys."""

from __future__ import annotations

import struct
import sys
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

DEFAULT_DATA_FILE = "data_trees/keys_sorted_1024.bin"
DEFAULT_QUERY_FILE = "data_trees/queries_1000.bin"


class Color(Enum):
    """Colour of a red-black node."""

    RED = 10
    BLACK = 20

    @property
    def letter(self) -> str:
        return "R" if self is Color.RED else "B"


@dataclass(eq=False)
class RBNode:
    """A red-black tree node; new nodes start red."""

    data: int
    parent: Optional["RBNode"] = field(default=None, repr=False)
    left: Optional["RBNode"] = None
    right: Optional["RBNode"] = None
    color: Color = Color.RED


class RBTree:
    """A red-black tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: Optional[RBNode] = None

    def insert(self, value: int) -> None:
        """Insert a key and restore the red-black properties."""
        parent = None
        node = self.root
        while node is not None:
            parent = node
            node = node.left if value < node.data else node.right
        new = RBNode(value, parent)
        if parent is None:
            self.root = new
        elif value < parent.data:
            parent.left = new
        else:
            parent.right = new
        self._fix_insert(new)

    def _fix_insert(self, node: RBNode) -> None:
        while node is not self.root and node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is parent.right:
                        node = parent
                        self._rotate_left(node)
                        parent = node.parent
                    parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is parent.left:
                        node = parent
                        self._rotate_right(node)
                        parent = node.parent
                    parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    self._rotate_left(grandparent)
        self.root.color = Color.BLACK

    def _replace(self, node: RBNode, new_top: RBNode) -> None:
        new_top.parent = node.parent
        if node.parent is None:
            self.root = new_top
        elif node is node.parent.left:
            node.parent.left = new_top
        else:
            node.parent.right = new_top

    def _rotate_left(self, node: RBNode) -> None:
        child = node.right
        node.right = child.left
        if child.left is not None:
            child.left.parent = node
        self._replace(node, child)
        child.left = node
        node.parent = child

    def _rotate_right(self, node: RBNode) -> None:
        child = node.left
        node.left = child.right
        if child.right is not None:
            child.right.parent = node
        self._replace(node, child)
        child.right = node
        node.parent = child

    def find(self, value: int) -> Optional[RBNode]:
        """Return the node holding the key, or None."""
        node = self.root
        while node is not None and node.data != value:
            node = node.left if value < node.data else node.right
        return node

    def _preorder(self) -> Iterator[Tuple[RBNode, int]]:
        pending = [(self.root, 1)] if self.root is not None else []
        while pending:
            node, level = pending.pop()
            yield node, level
            if node.right is not None:
                pending.append((node.right, level + 1))
            if node.left is not None:
                pending.append((node.left, level + 1))

    def traverse(self) -> str:
        """Render the tree in preorder: stars for depth, key and colour letter."""
        return "\n".join(
            f"{'*' * level}{node.data} ({node.color.letter})"
            for node, level in self._preorder()
        )

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        pending: List[RBNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.data
            node = node.right


def read_keys(path) -> List[int]:
    """Read 32-bit little-endian signed keys; a trailing partial key is ignored."""
    data = Path(path).read_bytes()
    usable = len(data) - len(data) % 4
    return [value for (value,) in struct.iter_unpack("<i", data[:usable])]


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    data_file = args[0] if args else DEFAULT_DATA_FILE
    query_file = args[1] if len(args) > 1 else DEFAULT_QUERY_FILE

    try:
        keys = read_keys(data_file)
    except OSError:
        print(f"Error al abrir el archivo: {data_file}", file=sys.stderr)
        print(f"Error al cargar las llaves de inserción desde: {data_file}", file=sys.stderr)
        return 1

    tree = RBTree()
    start = time.perf_counter()
    for key in keys:
        tree.insert(key)
    print(f"Tiempo de inserción desde {data_file}: {_elapsed_ms(start)} ms")

    try:
        queries = read_keys(query_file)
    except OSError:
        print(f"Error al abrir el archivo: {query_file}", file=sys.stderr)
        print(f"Error al cargar las llaves de consulta desde: {query_file}", file=sys.stderr)
        return 1

    start = time.perf_counter()
    for query in queries:
        tree.find(query)
    print(f"Tiempo de búsqueda en {query_file}: {_elapsed_ms(start)} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())