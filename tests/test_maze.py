import random
from collections import deque

import pytest

from conftest import open_neighbours
from maze import Cell, Direction, Grid, generate_maze


def _reachable(grid, start=(0, 0)):
    seen = {start}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nxt, _ in open_neighbours(grid, *cur):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def test_new_cell_has_every_wall():
    assert Cell().wall_flags() == (True, True, True, True)


def test_grid_starts_closed():
    grid = Grid(3, 4)
    assert len(grid.cells) == 12
    assert grid.open_passage_count() == 0
    assert all(flag for row in grid.walls() for cell in row for flag in cell)


@pytest.mark.parametrize("rows,cols", [(2, 5), (5, 2), (0, 0), (-1, 3)])
def test_too_small_grid_is_rejected(rows, cols):
    with pytest.raises(ValueError):
        Grid(rows, cols)
    with pytest.raises(ValueError):
        generate_maze(rows, cols, random.Random(0))


def test_cell_outside_grid():
    grid = Grid(3, 3)
    with pytest.raises(IndexError):
        grid.cell(3, 0)


def test_neighbour_does_not_wrap():
    grid = Grid(3, 3)
    assert grid.neighbour(0, 0, Direction.UP) is None
    assert grid.neighbour(0, 0, Direction.LEFT) is None
    assert grid.neighbour(2, 2, Direction.DOWN) is None
    assert grid.neighbour(2, 2, Direction.RIGHT) is None
    assert grid.neighbour(1, 1, Direction.UP) == (0, 1)


def test_remove_wall_clears_both_sides():
    grid = Grid(3, 3)
    grid.remove_wall(1, 1, Direction.RIGHT)
    assert not grid.cell(1, 1).right
    assert not grid.cell(1, 2).left
    assert grid.open_passage_count() == 1


def test_remove_wall_on_border_fails():
    grid = Grid(3, 3)
    with pytest.raises(ValueError):
        grid.remove_wall(0, 0, Direction.UP)


def test_snake_layout(snake_grid):
    walls = snake_grid.walls()
    # (top, right, bottom, left)
    assert walls[0] == ((True, False, True, True),
                        (True, False, True, False),
                        (True, True, False, False))
    assert walls[1] == ((True, False, False, True),
                        (True, False, True, False),
                        (False, True, True, False))
    assert walls[2] == ((False, False, True, True),
                        (True, False, True, False),
                        (True, True, True, False))


@pytest.mark.parametrize("rows,cols,seed", [(3, 3, 0), (5, 8, 7), (21, 31, 42), (12, 3, 99)])
def test_spanning_tree(rows, cols, seed):
    grid = generate_maze(rows, cols, random.Random(seed))
    assert grid.open_passage_count() == rows * cols - 1
    assert len(_reachable(grid)) == rows * cols


def test_walls_are_symmetric(seeded_grid):
    for row in range(seeded_grid.rows):
        for col in range(seeded_grid.cols):
            if col < seeded_grid.cols - 1:
                assert seeded_grid.cell(row, col).right == seeded_grid.cell(row, col + 1).left
            if row < seeded_grid.rows - 1:
                assert seeded_grid.cell(row, col).bottom == seeded_grid.cell(row + 1, col).top


def test_outer_border_stays_closed(seeded_grid):
    for col in range(seeded_grid.cols):
        assert seeded_grid.has_wall(0, col, Direction.UP)
        assert seeded_grid.has_wall(seeded_grid.rows - 1, col, Direction.DOWN)
    for row in range(seeded_grid.rows):
        assert seeded_grid.has_wall(row, 0, Direction.LEFT)
        assert seeded_grid.has_wall(row, seeded_grid.cols - 1, Direction.RIGHT)


def test_same_seed_same_maze():
    a = generate_maze(9, 14, random.Random(2024))
    b = generate_maze(9, 14, random.Random(2024))
    assert a == b
    assert a.walls() == b.walls()


def test_seeds_usually_differ():
    layouts = {generate_maze(9, 14, random.Random(seed)).walls() for seed in range(5)}
    assert len(layouts) > 1
