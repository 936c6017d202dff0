"""
Color palette for Maze Escape
"""

# Background colors
COLOR_BG = (0, 0, 0)              # Main background
COLOR_PANEL_BG = (12, 14, 18)     # HUD panel background

# Cell colors
COLOR_PATH = (17, 17, 17)         # Visible path
COLOR_WALL = (85, 85, 85)         # Visible wall
COLOR_EXIT = (255, 0, 0)          # Exit
COLOR_DARKNESS = (0, 0, 0)        # Outside vision radius

# UI colors
COLOR_TEXT = (255, 255, 255)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Notification text
COLOR_MENU_OVERLAY = (0, 0, 0, 180)     # Notification backdrop

# Entity colors
COLOR_PLAYER = (255, 215, 0)      # Player (gold)
COLOR_ENEMY = (170, 0, 0)         # Enemy

# Power-up colors
COLOR_POWERUP_VISION = (0, 255, 0)     # Extended vision potion
COLOR_POWERUP_SPEED = (0, 0, 255)      # Speed potion
