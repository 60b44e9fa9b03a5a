# rendering.py

import pygame
from config import (
    CELL_SIZE, WALL_THICKNESS, START_CELL,
    WINDOW_BG_COLOR, MAZE_BG_COLOR, WALL_COLOR,
    START_COLOR, GOAL_COLOR, PLAYER_COLOR, TEXT_COLOR
)
from utils import (
    maze_area, wall_segments, marker_rect,
    player_circle, status_position
)


def draw_maze(screen, snap, cell_size=CELL_SIZE, thickness=WALL_THICKNESS):
    screen.fill(WINDOW_BG_COLOR)
    pygame.draw.rect(screen, MAZE_BG_COLOR,
                     maze_area(snap.rows, snap.cols, cell_size, thickness))
    for start, end in wall_segments(snap.walls, cell_size):
        pygame.draw.line(screen, WALL_COLOR, start, end, thickness)


def draw_markers(screen, snap, cell_size=CELL_SIZE, thickness=WALL_THICKNESS):
    pygame.draw.rect(screen, START_COLOR, marker_rect(START_CELL, cell_size, thickness))
    pygame.draw.rect(screen, GOAL_COLOR, marker_rect(snap.goal, cell_size, thickness))


def draw_player(screen, snap, cell_size=CELL_SIZE):
    center, radius = player_circle(snap.player, cell_size)
    pygame.draw.circle(screen, PLAYER_COLOR, center, radius)


def draw_status(screen, font, text, rows, cell_size=CELL_SIZE):
    lbl = font.render(text, True, TEXT_COLOR)
    screen.blit(lbl, status_position(rows, cell_size))


def draw_frame(screen, font, snap, status, cell_size=CELL_SIZE, thickness=WALL_THICKNESS):
    draw_maze(screen, snap, cell_size, thickness)
    draw_markers(screen, snap, cell_size, thickness)
    draw_player(screen, snap, cell_size)
    draw_status(screen, font, status, snap.rows, cell_size)
