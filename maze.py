# maze.py

from enum import Enum

from config import MIN_DIMENSION


class Direction(Enum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


# direction -> (row delta, col delta, wall on source cell, wall on destination cell)
DIRECTION_TABLE = {
    Direction.UP:    (-1,  0, "top",    "bottom"),
    Direction.RIGHT: ( 0,  1, "right",  "left"),
    Direction.DOWN:  ( 1,  0, "bottom", "top"),
    Direction.LEFT:  ( 0, -1, "left",   "right"),
}


def check_dimensions(rows, cols):
    """Raise ValueError unless the grid is at least 3x3."""
    if rows < MIN_DIMENSION or cols < MIN_DIMENSION:
        raise ValueError(
            f"maze must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {rows}x{cols}"
        )


class Cell:
    __slots__ = ("top", "right", "bottom", "left")

    def __init__(self):
        self.top = True
        self.right = True
        self.bottom = True
        self.left = True

    def wall_flags(self):
        return (self.top, self.right, self.bottom, self.left)

    def __repr__(self):
        return "Cell(top=%s, right=%s, bottom=%s, left=%s)" % self.wall_flags()


class Grid:
    """
    Rows x Cols cells stored in one flat list, indexed by row*cols+col.
    Every wall starts present.
    """

    def __init__(self, rows, cols):
        check_dimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        self.cells = [Cell() for _ in range(rows * cols)]

    def index(self, row, col):
        return row * self.cols + col

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row, col):
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self.cells[self.index(row, col)]

    def neighbour(self, row, col, direction):
        """(row, col) next to the given cell, or None at the border."""
        dr, dc, _, _ = DIRECTION_TABLE[direction]
        nr, nc = row + dr, col + dc
        if self.in_bounds(nr, nc):
            return nr, nc
        return None

    def has_wall(self, row, col, direction):
        _, _, side, _ = DIRECTION_TABLE[direction]
        return getattr(self.cell(row, col), side)

    def remove_wall(self, row, col, direction):
        # clears both sides so passages never go one way
        target = self.neighbour(row, col, direction)
        if target is None:
            raise ValueError(f"no neighbour {direction.name} of ({row}, {col})")
        _, _, side, opposite = DIRECTION_TABLE[direction]
        setattr(self.cell(row, col), side, False)
        setattr(self.cell(*target), opposite, False)

    def open_passage_count(self):
        # only right/bottom so each passage is counted once
        count = 0
        for row in range(self.rows):
            for col in range(self.cols):
                c = self.cells[self.index(row, col)]
                if col < self.cols - 1 and not c.right:
                    count += 1
                if row < self.rows - 1 and not c.bottom:
                    count += 1
        return count

    def walls(self):
        return tuple(
            tuple(self.cells[self.index(row, col)].wall_flags() for col in range(self.cols))
            for row in range(self.rows)
        )

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.walls() == other.walls()

    def __repr__(self):
        return f"Grid(rows={self.rows}, cols={self.cols})"


def unvisited_neighbours(grid, visited, row, col):
    res = []
    for direction in Direction:
        target = grid.neighbour(row, col, direction)
        if target is not None and not visited[grid.index(*target)]:
            res.append((target[0], target[1], direction))
    return res


def generate_maze(rows, cols, rng):
    """Generate a perfect maze using DFS backtracking."""
    grid = Grid(rows, cols)
    visited = [False] * (rows * cols)

    sr = rng.randrange(rows)
    sc = rng.randrange(cols)
    visited[grid.index(sr, sc)] = True
    stack = [(sr, sc)]

    while stack:
        r, c = stack[-1]
        neighbours = unvisited_neighbours(grid, visited, r, c)
        if not neighbours:
            stack.pop()
            continue
        nr, nc, direction = rng.choice(neighbours)
        grid.remove_wall(r, c, direction)
        visited[grid.index(nr, nc)] = True
        stack.append((nr, nc))

    return grid
