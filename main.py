# main.py

import argparse
import random
import sys

import pygame

from config import (
    ROWS, COLS, CELL_SIZE, WALL_THICKNESS, MIN_DIMENSION,
    FPS, FONT_SIZE, WINDOW_TITLE
)
from controls import command_for_key
from game_logic import (
    Command, new_game, handle_command,
    snapshot, status_text
)
from rendering import draw_frame
from utils import window_size


def build_parser():
    parser = argparse.ArgumentParser(description="Walk a randomly generated maze.")
    parser.add_argument("--rows", type=int, default=ROWS)
    parser.add_argument("--cols", type=int, default=COLS)
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rows < MIN_DIMENSION or args.cols < MIN_DIMENSION:
        parser.error(f"--rows and --cols must both be at least {MIN_DIMENSION}")
    if args.cell_size <= WALL_THICKNESS:
        parser.error(f"--cell-size must be greater than {WALL_THICKNESS}")
    return args


def on_key(state, key):
    """Apply the command bound to key. Returns True if it was handled."""
    command = command_for_key(key)
    if command is None:
        return False
    was_won = state.won
    handle_command(state, command)
    if command == Command.REGENERATE:
        print("New maze generated")
    elif state.won and not was_won:
        print("Maze solved!")
    return True


def main(argv=None):
    args = parse_args(argv)
    rng = random.Random(args.seed)
    state = new_game(args.rows, args.cols, rng)
    print(f"Maze {args.rows}x{args.cols}, seed={args.seed}")

    pygame.init()
    screen = pygame.display.set_mode(window_size(args.rows, args.cols, args.cell_size))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, FONT_SIZE)

    snap = snapshot(state)
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if on_key(state, event.key):
                    snap = snapshot(state)

        draw_frame(screen, font, snap, status_text(state),
                   args.cell_size, WALL_THICKNESS)
        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
