"""
constants.py: Centralized configuration for the game world, scoring and display.
"""

# -------- Display Config --------
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
WINDOW_TITLE = "Floppy Game"
TARGET_FPS = 60

# -------- Floppy Config --------
FLOPPY_RADIUS = 20
FLOPPY_START_X = 80
FLOPPY_START_Y = SCREEN_HEIGHT / 2 - FLOPPY_RADIUS
FLOPPY_TEXTURE_SIZE = (80, 40)  # Texture is stretched to this (w, h)

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.9                   # Constant downward drift applied every tick
MOVE_STEP = 3                   # Displacement per held direction key

# -------- Tube Config --------
TUBE_COUNT = 8                  # Slots in the obstacle field (pairs are recycled)
TUBE_WIDTH = 80
TUBE_HEIGHT = 255
TUBE_BASE_OFFSET = 600          # bottom.y = TUBE_BASE_OFFSET + top.y - TUBE_HEIGHT
TUBE_START_X = 400              # x of the first pair
TUBE_SPACING = 280              # Horizontal distance between consecutive pairs
TUBE_MAX_OFFSET = 120           # Top rect y is drawn from [-TUBE_MAX_OFFSET, 0]

# -------- Scoring Config --------
SCORE_AWARD = 100
# (threshold, scroll speed) pairs, ascending by threshold
SPEED_TIERS = (
    (0, 2.0),
    (2500, 3.5),
    (4500, 4.0),
    (5500, 6.0),
)
MAX_HIGH_SCORES = 5
HIGHSCORE_FILE = "highscores.txt"

# -------- Assets --------
ASSETS_DIR = "assets"
FLOPPY_TEXTURE = "floppy.png"
BACKGROUND_TEXTURE = "floppy background.png"
TITLE_TEXTURE = "THE ADVENTURE OF FLOPPY.png"

# -------- Colors (RGB) --------
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (130, 130, 130)
RAYWHITE = (245, 245, 245)
GREEN = (0, 228, 48)
SKY_BLUE = (0, 191, 255)
FLOPPY_COLOR = (255, 203, 0)
TITLE_BACKGROUND = (30, 30, 40)
