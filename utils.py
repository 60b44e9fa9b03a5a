# utils.py

from config import CELL_SIZE, WALL_THICKNESS, INFO_BAR_HEIGHT, PLAYER_RADIUS_RATIO


def window_size(rows, cols, cell_size=CELL_SIZE, thickness=WALL_THICKNESS):
    width = cols * cell_size + thickness + 1
    height = rows * cell_size + thickness + 1 + INFO_BAR_HEIGHT
    return width, height


def maze_area(rows, cols, cell_size=CELL_SIZE, thickness=WALL_THICKNESS):
    """(x, y, w, h) covered by the maze background."""
    return (0, 0, cols * cell_size + thickness, rows * cell_size + thickness)


def wall_segments(walls, cell_size=CELL_SIZE):
    """
    Turn the nested (top, right, bottom, left) flags into line segments
    between cell corners. Shared walls show up once per side that has them.
    """
    segments = []
    for r, row in enumerate(walls):
        for c, (top, right, bottom, left) in enumerate(row):
            x = c * cell_size
            y = r * cell_size
            if top:
                segments.append(((x, y), (x + cell_size, y)))
            if right:
                segments.append(((x + cell_size, y), (x + cell_size, y + cell_size)))
            if bottom:
                segments.append(((x, y + cell_size), (x + cell_size, y + cell_size)))
            if left:
                segments.append(((x, y), (x, y + cell_size)))
    return segments


def marker_rect(pos, cell_size=CELL_SIZE, thickness=WALL_THICKNESS):
    col, row = pos
    x = col * cell_size + thickness
    y = row * cell_size + thickness
    return (x + 2, y + 2, cell_size - 3, cell_size - 3)


def player_circle(pos, cell_size=CELL_SIZE):
    col, row = pos
    cx = col * cell_size + cell_size // 2
    cy = row * cell_size + cell_size // 2
    return (cx, cy), int(cell_size * PLAYER_RADIUS_RATIO)


def status_position(rows, cell_size=CELL_SIZE):
    return (6, rows * cell_size + 8)
