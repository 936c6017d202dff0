"""
Helper utility functions for Maze Escape
"""

import math


def distance(x1, y1, x2, y2):
    """Calculate Euclidean distance between two points"""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def next_odd(value):
    """Return value if it is odd, otherwise the next odd number"""
    return value if value % 2 == 1 else value + 1


def ms_to_ticks(ms, fps):
    """Convert a wall-clock duration to a whole number of frames"""
    return max(1, int(round(ms * fps / 1000.0)))


def random_choice(items, rng):
    """Safely choose random item from list"""
    if not items:
        return None
    return rng.choice(items)
