"""
Game metadata
"""

GAME_TITLE = "Maze Escape"
GAME_VERSION = "1.0.0"
