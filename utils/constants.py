"""
Global constants for Maze Escape
"""

# Screen settings
CELL_SIZE = 24
FPS = 60

# HUD panel height (level title)
PANEL_H = 50

# Cell kinds
PATH = 0
WALL = 1
EXIT = 2

# Direction vectors (dx, dy): up, right, down, left
DIRECTIONS = [
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, 0),
]

# Maze generation
MIN_MAZE_SIZE = 5
MAZE_SEED_CELL = (1, 1)

# Level size formula: base + 2 * level, bumped to the next odd number
BASE_ROWS = 31
BASE_COLS = 41
LEVEL_SIZE_STEP = 2

# Player settings
PLAYER_START = (1, 1)
PLAYER_VISION_RADIUS = 5
PLAYER_BOOSTED_VISION_RADIUS = 10
PLAYER_MOVE_INTERVAL = 0  # Frames between moves (0 = unthrottled)

# Enemy settings
ENEMY_BASE_MOVE_INTERVAL = 30
ENEMY_MOVE_INTERVAL_STEP = 2
ENEMY_MIN_MOVE_INTERVAL = 15
ENEMY_BASE_PROXIMITY = 6

# Bonuses (wall-clock values, converted to frames)
BONUS_SPAWN_INTERVAL_MS = 60000
BONUS_DURATION_MS = 15000

# Status effect names
EFFECT_VISION = 'vision'
EFFECT_SPEED = 'speed'

# Audio cues
SOUND_BONUS = 'bonus'
SOUND_DIR = "assets"

# Notification shown after a win or a loss
NOTIFICATION_TIMEOUT_MS = 2500
