"""
config.py — Shared constants for the entire application.
No game logic, no imports from internal modules.
"""

import os
from pathlib import Path

# ── Window & Grid ─────────────────────────────────────────────────
GRID_SIZE       = 20                 # tiles per side (N)
CELL            = 20                 # pixels per tile
GAME_W = GAME_H = GRID_SIZE * CELL
PANEL_H         = 60
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
WIDTH           = GAME_W + 2 * OFFSET_X
HEIGHT          = OFFSET_Y + GAME_H + 10
FPS             = 60

# ── Timing ────────────────────────────────────────────────────────
TICK_INTERVAL       = 0.100      # seconds per simulation tick
MAX_CATCH_UP_TICKS  = 5          # ticks run at most per frame after a stall

# ── Gameplay ──────────────────────────────────────────────────────
WALL_COUNT              = 15
WALL_SAFE_DISTANCE      = 3      # min Manhattan distance from the start head
START_LENGTH            = 3
FOOD_SCORE              = 10
MAX_PLACEMENT_ATTEMPTS  = 1000   # rejection-sampling draws before the fallback

# ── Particles ─────────────────────────────────────────────────────
PARTICLE_COUNT  = 10
PARTICLE_DECAY  = 0.05           # life lost per rendered frame
PARTICLE_SPEED  = 0.5            # width of the symmetric velocity range (tiles)
PARTICLE_SIZE   = (2.0, 7.0)     # pixel size range

# ── Colors ────────────────────────────────────────────────────────
BG          = (0,   0,   0)
GRID_COL    = (26,  26,  26)
WALL_COL    = (0,   204, 255)
FOOD_COL    = (255, 0,   85)
SNAKE_COL   = (0,   255, 136)
HEAD_COL    = (255, 255, 255)
UI_COL      = (120, 120, 170)
TEXT_COL    = (255, 255, 255)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (26,  26,  62)

# ── Game States ───────────────────────────────────────────────────
STATE_NOT_STARTED = "not_started"
STATE_RUNNING     = "running"
STATE_OVER        = "over"

# ── Persistence ───────────────────────────────────────────────────
HIGHSCORE_KEY  = "snakeHighScore"
HIGHSCORE_FILE = Path(
    os.environ.get(
        "WALLSNAKE_HIGHSCORE_FILE",
        Path.home() / ".wallsnake" / HIGHSCORE_KEY,
    )
)
