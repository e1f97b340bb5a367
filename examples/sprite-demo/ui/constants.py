"""Layout constants and color definitions."""

FPS = 60

# Atlas
ATLAS_COLS = 5
ATLAS_ROWS = 5
CELL = 64

# Layout
SCALE = 3
STAGE_W = 480
STATUS_H = 48
SCREEN_W = STAGE_W
SCREEN_H = CELL * SCALE + 80 + STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
GROUND_COLOR = (50, 50, 70)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
WARN_COLOR = (230, 120, 90)

# Atlas row -> body color
ROW_COLORS = [
    (120, 170, 255),  # idle
    (120, 230, 140),  # forward
    (255, 210, 90),   # jump
    (255, 110, 110),  # attack
    (160, 160, 160),  # unused
]
