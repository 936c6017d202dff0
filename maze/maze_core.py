"""
Core maze functions - grid storage, bounds checks and pathfinding
"""

from collections import deque
from utils.constants import WALL, EXIT, DIRECTIONS, MIN_MAZE_SIZE


class OutOfBoundsError(IndexError):
    """Grid access outside the maze dimensions"""
    def __init__(self, x, y, cols, rows):
        super().__init__(f"cell ({x}, {y}) is outside a {cols}x{rows} maze")
        self.x = x
        self.y = y


class InvalidDimensionsError(ValueError):
    """Maze dimensions the backtracker cannot carve correctly"""


def validate_dimensions(cols, rows):
    """
    Check that a maze can be carved from (1, 1) all the way to the exit.
    Both sides must be odd and at least MIN_MAZE_SIZE.
    """
    for name, value in (("cols", cols), ("rows", rows)):
        if value < MIN_MAZE_SIZE or value % 2 == 0:
            raise InvalidDimensionsError(
                f"{name} must be odd and >= {MIN_MAZE_SIZE}, got {value}"
            )


class MazeGrid:
    """
    Maze grid with cell-based representation
    Each cell is PATH, WALL or EXIT; positions are (x, y) = (column, row)
    """
    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        # Initialize every cell as wall
        self.cells = [WALL] * (cols * rows)

    def idx(self, x, y):
        """Convert 2D coordinates to 1D index"""
        return y * self.cols + x

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def kind_at(self, x, y):
        """Get the kind of a cell, raising OutOfBoundsError outside the grid"""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.cols, self.rows)
        return self.cells[self.idx(x, y)]

    def set_kind(self, x, y, kind):
        """Set the kind of a cell, raising OutOfBoundsError outside the grid"""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.cols, self.rows)
        self.cells[self.idx(x, y)] = kind

    def is_walkable(self, x, y):
        """True for in-bounds PATH and EXIT cells"""
        return self.in_bounds(x, y) and self.cells[self.idx(x, y)] != WALL

    def walkable_neighbors(self, x, y):
        """Get walkable 4-connected neighbors, in DIRECTIONS order"""
        res = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.is_walkable(nx, ny):
                res.append((nx, ny))
        return res

    def cells_of_kind(self, kind):
        """List every (x, y) holding the given kind"""
        return [
            (i % self.cols, i // self.cols)
            for i, cell in enumerate(self.cells)
            if cell == kind
        ]

    def count(self, kind):
        """Count cells of the given kind"""
        return self.cells.count(kind)

    def __repr__(self):
        return f"MazeGrid({self.cols}x{self.rows})"


def place_exit(grid):
    """Mark the bottom-right inner corner as the exit and return it"""
    x, y = grid.cols - 2, grid.rows - 2
    grid.set_kind(x, y, EXIT)
    return x, y


# ========== PATHFINDING ==========

def bfs_shortest_path(grid, start, goal):
    """
    BFS shortest path over walkable cells

    Returns the steps after start up to and including goal. Returns an empty
    list when start == goal, when either end is a wall or off the grid, or
    when goal cannot be reached.
    """
    if start == goal:
        return []
    if not grid.is_walkable(*start) or not grid.is_walkable(*goal):
        return []

    visited = [False] * (grid.cols * grid.rows)
    visited[grid.idx(*start)] = True
    q = deque([(start, [])])

    while q:
        (x, y), path = q.popleft()
        if (x, y) == goal:
            return path

        for n in grid.walkable_neighbors(x, y):
            i = grid.idx(*n)
            if not visited[i]:
                visited[i] = True
                q.append((n, path + [n]))
    return []
