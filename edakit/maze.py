"""Random maze generation by depth-first carving of a wall grid."""

from __future__ import annotations

import random
import sys
from enum import Enum
from typing import List, Optional, Sequence, Tuple


class Direction(Enum):
    """The four directions the carver can move in."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @property
    def delta(self) -> Tuple[int, int]:
        """Row and column offsets of one step in this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


class Maze:
    """A grid of walls and empty cells carved from the top-left corner."""

    WALL = "@"
    EMPTY = "-"
    LIMIT = "="

    def __init__(
        self, height: int, width: int, rng: Optional[random.Random] = None
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._directions: List[Direction] = list(Direction)
        self.height = 0
        self.width = 0
        self._grid: List[List[bool]] = []
        self.generate(height, width)

    def reset(self, height: int, width: int) -> None:
        """Resize the maze and fill every cell with wall."""
        if height < 1 or width < 1:
            raise ValueError(f"maze size must be positive, got {height} x {width}")
        self.height = height
        self.width = width
        self._grid = [[True] * width for _ in range(height)]

    def generate(self, height: int, width: int) -> None:
        """Build a new maze of the given size."""
        self.reset(height, width)
        self._carve(0, 0)

    def _shuffle_directions(self) -> None:
        dirs = self._directions
        for i in range(len(dirs)):
            r = self._rng.randrange(4)
            dirs[r], dirs[i] = dirs[i], dirs[r]

    def _open(self, i: int, j: int) -> List[int]:
        self._grid[i][j] = False
        self._shuffle_directions()
        return [i, j, 0]

    def _carve(self, i: int, j: int) -> None:
        # The direction order is shared by every level and reshuffled on each
        # visit, so an outer level continues with whatever order is current.
        frames = [self._open(i, j)]
        while frames:
            frame = frames[-1]
            ci, cj, k = frame
            if k == len(self._directions):
                frames.pop()
                continue
            frame[2] = k + 1
            dy, dx = self._directions[k].delta
            ni, nj = ci + 2 * dy, cj + 2 * dx
            if self.in_range(ni, nj) and self._grid[ni][nj]:
                self._grid[ni - dy][nj - dx] = False
                frames.append(self._open(ni, nj))

    def in_range(self, i: int, j: int) -> bool:
        """Whether the cell lies inside the grid."""
        return 0 <= i < self.height and 0 <= j < self.width

    def is_wall(self, i: int, j: int) -> bool:
        """Whether the cell is a wall."""
        if not self.in_range(i, j):
            raise IndexError(f"cell ({i}, {j}) is outside the maze")
        return self._grid[i][j]

    def render(self) -> str:
        """Draw the maze with a title line and a frame around it."""
        border = f" {self.LIMIT * self.width} "
        rows = (
            "|" + "".join(self.WALL if cell else self.EMPTY for cell in row) + "|"
            for row in self._grid
        )
        return "\n".join(
            [f" Maze ( {self.height} x {self.width} ) ", border, *rows, border]
        )

    def __str__(self) -> str:
        return self.render()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    height = int(args[0]) if args else 21
    width = int(args[1]) if len(args) > 1 else height
    print(Maze(height, width).render())
    return 0


if __name__ == "__main__":
    sys.exit(main())