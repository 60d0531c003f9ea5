import random
from collections import deque

import pytest

from edakit.maze import Direction, Maze, main


def _empty_cells(maze):
    return {
        (i, j)
        for i in range(maze.height)
        for j in range(maze.width)
        if not maze.is_wall(i, j)
    }


def _reachable(maze, start):
    seen = {start}
    pending = deque([start])
    while pending:
        i, j = pending.popleft()
        for d in Direction:
            dy, dx = d.delta
            ni, nj = i + dy, j + dx
            if maze.in_range(ni, nj) and not maze.is_wall(ni, nj) and (ni, nj) not in seen:
                seen.add((ni, nj))
                pending.append((ni, nj))
    return seen


def test_direction_deltas():
    assert Direction.NORTH.delta == (-1, 0)
    assert Direction.SOUTH.delta == (1, 0)
    assert Direction.EAST.delta == (0, 1)
    assert Direction.WEST.delta == (0, -1)
    maze = Maze(3, 3, random.Random(0))
    in_range_from_origin = {
        d: maze.in_range(d.delta[0], d.delta[1]) for d in Direction
    }
    assert in_range_from_origin == {
        Direction.NORTH: False,
        Direction.SOUTH: True,
        Direction.EAST: True,
        Direction.WEST: False,
    }


def test_maze_21_by_21_render_frame():
    maze = Maze(21, 21, random.Random(1))
    lines = maze.render().split("\n")
    assert lines[0] == " Maze ( 21 x 21 ) "
    assert lines[1] == " " + "=" * 21 + " "
    assert lines[-1] == " " + "=" * 21 + " "
    assert len(lines) == 21 + 3
    for line in lines[2:-1]:
        assert line.startswith("|") and line.endswith("|")
        assert len(line) == 23
        assert set(line[1:-1]) <= {"@", "-"}


def test_origin_is_empty():
    maze = Maze(21, 21, random.Random(3))
    assert maze.is_wall(0, 0) is False


def test_every_even_cell_is_carved_and_odd_odd_cells_stay_walls():
    maze = Maze(21, 21, random.Random(5))
    for i in range(21):
        for j in range(21):
            if i % 2 == 0 and j % 2 == 0:
                assert not maze.is_wall(i, j)
            if i % 2 == 1 and j % 2 == 1:
                assert maze.is_wall(i, j)


def test_maze_is_connected_tree():
    maze = Maze(21, 21, random.Random(11))
    empty = _empty_cells(maze)
    assert _reachable(maze, (0, 0)) == empty
    rooms = sum(1 for i, j in empty if i % 2 == 0 and j % 2 == 0)
    passages = len(empty) - rooms
    assert passages == rooms - 1


def test_same_seed_gives_same_maze():
    first = Maze(15, 9, random.Random(42)).render()
    second = Maze(15, 9, random.Random(42)).render()
    assert first == second


def test_str_matches_render():
    maze = Maze(7, 7, random.Random(0))
    assert str(maze) == maze.render()


def test_reset_fills_with_walls():
    maze = Maze(9, 9, random.Random(2))
    maze.reset(4, 6)
    assert (maze.height, maze.width) == (4, 6)
    assert all(maze.is_wall(i, j) for i in range(4) for j in range(6))


def test_generate_resizes():
    maze = Maze(5, 5, random.Random(2))
    maze.generate(11, 13)
    assert (maze.height, maze.width) == (11, 13)
    assert _reachable(maze, (0, 0)) == _empty_cells(maze)


def test_in_range():
    maze = Maze(5, 7, random.Random(0))
    assert maze.in_range(0, 0)
    assert maze.in_range(4, 6)
    assert not maze.in_range(5, 0)
    assert not maze.in_range(0, 7)
    assert not maze.in_range(-1, 3)


def test_is_wall_outside_raises():
    maze = Maze(5, 5, random.Random(0))
    with pytest.raises(IndexError):
        maze.is_wall(5, 5)


def test_single_cell_maze():
    maze = Maze(1, 1, random.Random(0))
    assert maze.render().split("\n")[2] == "|-|"


@pytest.mark.parametrize("height, width", [(0, 5), (5, 0), (-1, 3)])
def test_non_positive_size_raises(height, width):
    with pytest.raises(ValueError):
        Maze(height, width)


def test_main_prints_maze(capsys):
    assert main(["5", "7"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(" Maze ( 5 x 7 ) ")
    assert out.count("|") == 10