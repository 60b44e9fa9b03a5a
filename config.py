# config.py

# -------------------------------------------------------------------------
# GLOBAL CONFIG
# -------------------------------------------------------------------------
ROWS = 21   # maze rows (>2)
COLS = 31   # maze cols (>2)
MIN_DIMENSION = 3

CELL_SIZE = 24
WALL_THICKNESS = 2
INFO_BAR_HEIGHT = 40  # status line below the maze

FPS = 60

START_CELL = (0, 0)  # (x=col, y=row)

WINDOW_BG_COLOR = (220, 220, 220)  # Gainsboro
MAZE_BG_COLOR = (255, 255, 255)
WALL_COLOR = (0, 0, 0)
START_COLOR = (144, 238, 144)      # LightGreen
GOAL_COLOR = (255, 69, 0)          # OrangeRed
PLAYER_COLOR = (0, 191, 255)       # DeepSkyBlue
TEXT_COLOR = (0, 0, 0)

PLAYER_RADIUS_RATIO = 0.35
FONT_SIZE = 24

WINDOW_TITLE = "Maze (arrows move / R regenerate / Space back to start)"
STATUS_PLAYING = "Arrows move; R regenerates; Space returns to start"
STATUS_WON = "Solved! Press R to regenerate; Space returns to start"

STATE_PLAYING = "playing"
STATE_WON = "won"
