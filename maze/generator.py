"""
Maze generation - randomized depth-first backtracking
"""

import logging
import random
from utils.constants import PATH, WALL, DIRECTIONS, MAZE_SEED_CELL
from maze.maze_core import validate_dimensions

logger = logging.getLogger(__name__)


def _shuffled_directions(rng):
    """Fresh random permutation of the four directions"""
    dirs = list(DIRECTIONS)
    rng.shuffle(dirs)
    return dirs


def carve_steps(grid, start=MAZE_SEED_CELL, rng=None):
    """
    DFS backtracker over cells two apart, carving in place

    Each stack frame holds a cell and the directions it has not tried yet.
    Yields every carved connection as (cell, wall_cell, next_cell).
    """
    rng = rng or random
    sx, sy = start
    grid.set_kind(sx, sy, PATH)

    stack = [((sx, sy), _shuffled_directions(rng))]

    while stack:
        (cx, cy), remaining = stack[-1]
        if not remaining:
            stack.pop()
            continue

        dx, dy = remaining.pop(0)
        nx, ny = cx + dx * 2, cy + dy * 2

        if 0 < ny < grid.rows - 1 and 0 < nx < grid.cols - 1 and grid.kind_at(nx, ny) == WALL:
            wx, wy = cx + dx, cy + dy
            grid.set_kind(wx, wy, PATH)
            grid.set_kind(nx, ny, PATH)
            stack.append(((nx, ny), _shuffled_directions(rng)))
            yield (cx, cy), (wx, wy), (nx, ny)


def generate_maze(grid, start=MAZE_SEED_CELL, rng=None):
    """
    Carve a perfect maze into a wall-filled grid

    Returns:
        Number of connections carved
    """
    validate_dimensions(grid.cols, grid.rows)

    carved = 0
    for _ in carve_steps(grid, start, rng):
        carved += 1

    logger.debug("Carved %d connections into %r", carved, grid)
    return carved
