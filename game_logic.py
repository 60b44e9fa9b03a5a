# game_logic.py

import random
from collections import namedtuple
from enum import Enum

from config import (
    START_CELL,
    STATE_PLAYING, STATE_WON,
    STATUS_PLAYING, STATUS_WON
)
from maze import Direction, DIRECTION_TABLE, check_dimensions, generate_maze


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    REGENERATE = "regenerate"
    RESET_TO_START = "reset_to_start"


MOVE_COMMANDS = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_RIGHT: Direction.RIGHT,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
}

MazeSnapshot = namedtuple("MazeSnapshot", ["rows", "cols", "walls", "player", "goal", "won"])


class GameState:
    """
    Everything one session mutates: grid, player, goal and win flag.
    Positions are (x=col, y=row).
    """

    def __init__(self, rows, cols, grid, rng):
        self.rows = rows
        self.cols = cols
        self.grid = grid
        self.rng = rng
        self.player = START_CELL
        self.goal = goal_for(rows, cols)
        self.won = False

    def __repr__(self):
        return (f"GameState(rows={self.rows}, cols={self.cols}, "
                f"player={self.player}, goal={self.goal}, won={self.won})")


def goal_for(rows, cols):
    return (cols - 1, rows - 1)


def new_game(rows, cols, rng=None):
    check_dimensions(rows, cols)
    if rng is None:
        rng = random.Random()
    return GameState(rows, cols, generate_maze(rows, cols, rng), rng)


# -------------------------------------------------------------------------
# Movement
# -------------------------------------------------------------------------
def _clamp(value, low, high):
    return max(low, min(high, value))


def _clamp_position(state, row, col):
    assert 0 <= row < state.rows and 0 <= col < state.cols, \
        f"open passage leads outside the grid at ({row}, {col})"
    return _clamp(row, 0, state.rows - 1), _clamp(col, 0, state.cols - 1)


def apply_move(state, direction):
    """Move the player one cell if no wall blocks it. Returns True on success."""
    if state.won:
        return False

    c, r = state.player
    if state.grid.has_wall(r, c, direction):
        return False

    dr, dc, _, _ = DIRECTION_TABLE[direction]
    r, c = _clamp_position(state, r + dr, c + dc)
    state.player = (c, r)
    state.won = state.player == state.goal
    return True


def reset_to_start(state):
    state.player = START_CELL
    state.won = False


def regenerate(state, rng=None):
    if rng is None:
        rng = state.rng
    state.grid = generate_maze(state.rows, state.cols, rng)
    state.player = START_CELL
    state.goal = goal_for(state.rows, state.cols)
    state.won = False


def handle_command(state, command):
    if command in MOVE_COMMANDS:
        return apply_move(state, MOVE_COMMANDS[command])
    elif command == Command.REGENERATE:
        regenerate(state)
        return True
    elif command == Command.RESET_TO_START:
        reset_to_start(state)
        return True
    raise ValueError(f"unknown command: {command!r}")


# -------------------------------------------------------------------------
# Read-only views for the renderer
# -------------------------------------------------------------------------
def game_phase(state):
    return STATE_WON if state.won else STATE_PLAYING


def status_text(state):
    if game_phase(state) == STATE_WON:
        return STATUS_WON
    return STATUS_PLAYING


def snapshot(state):
    return MazeSnapshot(
        rows=state.rows,
        cols=state.cols,
        walls=state.grid.walls(),
        player=state.player,
        goal=state.goal,
        won=state.won,
    )
