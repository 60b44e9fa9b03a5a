import random
from collections import deque

import pytest

from maze import Direction, generate_maze


class ScriptedRandom:
    """Stand-in for random.Random that replays fixed draws."""

    def __init__(self, draws):
        self.draws = list(draws)

    def _next(self, n):
        value = self.draws.pop(0)
        assert 0 <= value < n, f"scripted draw {value} out of range for {n}"
        return value

    def randrange(self, n):
        return self._next(n)

    def choice(self, seq):
        return seq[self._next(len(seq))]


# start (0,0), then right, right, down, left, left, down, right, right
SNAKE_DRAWS = [0, 0, 0, 0, 0, 1, 1, 0, 0, 0]
SNAKE_PATH = [
    Direction.RIGHT, Direction.RIGHT, Direction.DOWN,
    Direction.LEFT, Direction.LEFT, Direction.DOWN,
    Direction.RIGHT, Direction.RIGHT,
]


def open_neighbours(grid, row, col):
    for direction in Direction:
        if not grid.has_wall(row, col, direction):
            yield grid.neighbour(row, col, direction), direction


def path_between(grid, start, end):
    """Directions from start to end (both (row, col)) along open passages."""
    came_from = {start: None}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == end:
            break
        for nxt, direction in open_neighbours(grid, *cur):
            if nxt not in came_from:
                came_from[nxt] = (cur, direction)
                queue.append(nxt)
    steps = []
    cur = end
    while came_from[cur] is not None:
        cur, direction = came_from[cur]
        steps.append(direction)
    return steps[::-1]


@pytest.fixture
def snake_rng():
    return ScriptedRandom(SNAKE_DRAWS)


@pytest.fixture
def snake_grid(snake_rng):
    return generate_maze(3, 3, snake_rng)


@pytest.fixture
def seeded_grid():
    return generate_maze(12, 17, random.Random(1234))
