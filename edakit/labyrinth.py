"""Path search through a square labyrinth of open and blocked cells."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

LABYRINTH = (
    (1, 1, 1, 0, 1, 0, 1, 1),
    (1, 0, 1, 1, 1, 1, 0, 1),
    (0, 0, 1, 1, 1, 1, 0, 1),
    (1, 0, 1, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 1, 1, 1, 1),
    (1, 1, 0, 1, 1, 0, 0, 0),
    (1, 1, 1, 1, 0, 1, 1, 1),
    (1, 1, 1, 1, 0, 1, 1, 1),
)


@dataclass(frozen=True)
class Cell:
    """A position in the labyrinth given by row and column."""

    row: int = -1
    col: int = -1

    def neighbours(self) -> List["Cell"]:
        """Cells above, below, left and right, in that order."""
        return [
            Cell(self.row - 1, self.col),
            Cell(self.row + 1, self.col),
            Cell(self.row, self.col - 1),
            Cell(self.row, self.col + 1),
        ]

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def create_lab(size: int, value: bool = False) -> List[List[bool]]:
    """Return a ``size`` by ``size`` grid with every cell set to ``value``."""
    return [[value] * size for _ in range(size)]


def is_valid_cell(cell: Cell, size: int) -> bool:
    """Whether the cell lies inside a square grid of the given size."""
    return 0 <= cell.row < size and 0 <= cell.col < size


def _open_unvisited(
    cell: Cell, lab: Sequence[Sequence[bool]], visited: List[List[bool]]
) -> Iterable[Cell]:
    size = len(lab)
    return (
        n
        for n in cell.neighbours()
        if is_valid_cell(n, size) and lab[n.row][n.col] and not visited[n.row][n.col]
    )


def path_exists(lab: Sequence[Sequence[bool]], start: Cell, end: Cell) -> bool:
    """Whether ``end`` can be reached from ``start`` through open cells."""
    visited = create_lab(len(lab), False)
    stack = [start]
    while stack:
        cell = stack[-1]
        visited[cell.row][cell.col] = True
        if cell == end:
            return True
        stack.pop()
        stack.extend(_open_unvisited(cell, lab, visited))
    return False


@dataclass(eq=False)
class _Step:
    cell: Cell
    parent: Optional["_Step"] = None


def find_path(
    lab: Sequence[Sequence[bool]], start: Cell, end: Cell
) -> Optional[List[Cell]]:
    """Return the cells of a path from ``start`` to ``end``, or None if none exists."""
    visited = create_lab(len(lab), False)
    stack = [_Step(start)]
    found = False
    while not found and stack:
        step = stack[-1]
        cell = step.cell
        if visited[cell.row][cell.col]:
            stack.pop()
            continue
        visited[cell.row][cell.col] = True
        if cell == end:
            found = True
        else:
            stack.extend(_Step(n, step) for n in _open_unvisited(cell, lab, visited))
    if not found:
        return None
    path: List[Cell] = []
    step: Optional[_Step] = stack[-1]
    while step is not None:
        path.append(step.cell)
        step = step.parent
    path.reverse()
    return path


def format_path(path: Iterable[Cell]) -> str:
    """Render cells as ``(r,c)``, each followed by a dash."""
    return "".join(f"{cell}-" for cell in path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = [int(a) for a in (sys.argv[1:] if argv is None else argv)]
    if len(args) >= 4:
        start, end = Cell(args[0], args[1]), Cell(args[2], args[3])
    else:
        start, end = Cell(1, 2), Cell(5, 4)
    lab = [[bool(v) for v in row] for row in LABYRINTH]
    path = find_path(lab, start, end)
    if path is not None:
        print("Existe Ruta")
        print(format_path(path))
    else:
        print("No Existe Ruta")
    return 0


if __name__ == "__main__":
    sys.exit(main())