# controls.py

import pygame
from game_logic import Command

KEY_COMMANDS = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_r: Command.REGENERATE,
    pygame.K_SPACE: Command.RESET_TO_START,
}


def command_for_key(key):
    """Command bound to a pygame key code, or None for anything else."""
    return KEY_COMMANDS.get(key)
