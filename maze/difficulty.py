"""
Level configurations for Maze Escape
Maze size and enemy strength grow with the level number
"""

from utils.constants import (
    BASE_ROWS, BASE_COLS, LEVEL_SIZE_STEP,
    ENEMY_BASE_MOVE_INTERVAL, ENEMY_MOVE_INTERVAL_STEP, ENEMY_MIN_MOVE_INTERVAL,
    ENEMY_BASE_PROXIMITY
)
from utils.helpers import next_odd


class LevelConfig:
    """Configuration for a single level"""
    def __init__(self, **kwargs):
        self.level = kwargs.get('level', 1)

        # Maze dimensions
        self.cols = kwargs.get('cols', BASE_COLS)
        self.rows = kwargs.get('rows', BASE_ROWS)

        # Enemy
        self.enemy_move_interval = kwargs.get('enemy_move_interval', ENEMY_BASE_MOVE_INTERVAL)

    def __repr__(self):
        return (f"LevelConfig(level={self.level}, size={self.cols}x{self.rows}, "
                f"enemy_interval={self.enemy_move_interval})")


def level_dimensions(level):
    """Maze (cols, rows) for a level, always odd"""
    cols = next_odd(BASE_COLS + LEVEL_SIZE_STEP * level)
    rows = next_odd(BASE_ROWS + LEVEL_SIZE_STEP * level)
    return cols, rows


def enemy_move_interval(level):
    """Frames between enemy decisions; the enemy speeds up with each level"""
    return max(ENEMY_BASE_MOVE_INTERVAL - ENEMY_MOVE_INTERVAL_STEP * level, ENEMY_MIN_MOVE_INTERVAL)


def proximity_threshold(level):
    """Distance under which the enemy starts chasing the player"""
    return ENEMY_BASE_PROXIMITY + level


def get_level_config(level):
    """Get configuration for a level number (1-based)"""
    cols, rows = level_dimensions(level)
    return LevelConfig(
        level=level,
        cols=cols,
        rows=rows,
        enemy_move_interval=enemy_move_interval(level),
    )
