"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

from pathlib import Path

# ── Window & Grid ─────────────────────────────────────────────────
CELL            = 18
COLS            = 50
ROWS            = 38
GAME_W, GAME_H  = COLS * CELL, ROWS * CELL
PANEL_H         = 60
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
WIDTH, HEIGHT   = GAME_W + 2 * OFFSET_X, OFFSET_Y + GAME_H + 10
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (0,   0,   0)
GRID_COL    = (0,   255, 255)
GRID_ALPHA  = 13
HEAD_COL    = (0,   255, 255)
TRAIL_COL   = (255, 0,   255)
FOOD_COL    = (255, 0,   255)
UI_COL      = (120, 120, 170)
PANEL_BG    = (8,   8,   16)
BORDER_COL  = (26,  26,  62)
PARTICLE_COLORS = (HEAD_COL, TRAIL_COL)
FADE_ALPHA  = 46         # trailing fade per frame (~0.18 opacity)

# ── Timing (milliseconds) ─────────────────────────────────────────
MAX_FRAME_DELTA  = 50.0
REFERENCE_FRAME  = 16.67
MIN_INTERVAL     = 30
WALL_GRACE_TIME  = 150
TAIL_GRACE_TIME  = 150
DEATH_SHAKE_MS   = 600

# ── Gameplay ──────────────────────────────────────────────────────
FOOD_REWARD     = 10
START_CELL      = (15, 15)
START_MARGIN    = 8      # random restart cell keeps this far from walls
WALL_MARGIN     = 5      # input queue widens inside this band
QUEUE_SIZE      = 2
QUEUE_SIZE_WALL = 4

# ── Effects ───────────────────────────────────────────────────────
PARTICLE_FOOD_COUNT  = 15
PARTICLE_DEATH_COUNT = 25
PARTICLE_SPEED       = 6.0   # velocity range width, centred on zero
PARTICLE_DECAY       = 0.03
PARTICLE_DAMPING     = 0.98
SHAKE_EAT            = 6.0
SHAKE_REJECT         = 3.0
SHAKE_DEATH          = 15.0
SHAKE_DECAY          = 0.88
SHAKE_EPSILON        = 0.02
INTERPOLATION        = 0.24
FOOD_PULSE_STEP      = 0.14

DIFFICULTIES = {
    1: {"label": "EASY",    "start_interval": 150, "interval_step": 3,  "threshold": 50},
    2: {"label": "MEDIUM",  "start_interval": 120, "interval_step": 5,  "threshold": 40},
    3: {"label": "HARD",    "start_interval": 100, "interval_step": 8,  "threshold": 30},
    4: {"label": "EXTREME", "start_interval": 80,  "interval_step": 15, "threshold": 25},
}
DEFAULT_DIFFICULTY = 2

# ── Persistence ───────────────────────────────────────────────────
SAVE_PATH = Path.home() / ".neonsnake.json"

# ── Game States ───────────────────────────────────────────────────
STATE_MENU    = "menu"
STATE_PLAYING = "playing"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"
