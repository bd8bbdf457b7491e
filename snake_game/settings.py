"""Compile-time settings for the Snake game."""
import os

# ---------- Config ----------
TILE_SIZE = 20            # pixels per grid cell
GRID_W, GRID_H = 30, 20   # grid size in cells
WINDOW_W, WINDOW_H = GRID_W * TILE_SIZE, GRID_H * TILE_SIZE

TICKS_PER_SECOND = 8      # simulation steps per second
FPS = 60                  # render rate

START_CELL = (2, 2)
START_FOOD = (6, 4)

# False: arrow keys queue a heading for the next tick.
# True: every key press also moves the snake one cell right away.
MOVE_ON_KEY_PRESS = False

FOOD_SAMPLE_ATTEMPTS = 64

# Colors (R, G, B)
BG    = (0, 0, 0)
SNAKE = (80, 200, 120)
FOOD  = (204, 0, 0)
TEXT  = (240, 240, 240)
RED   = (220, 70, 70)

LOG_LEVEL = os.environ.get("SNAKE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
