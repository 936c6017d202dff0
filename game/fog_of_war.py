"""
Fog of War - only cells near the player are drawn, the rest is darkness
"""

import math


def cell_in_vision(x, y, player_x, player_y, vision_radius):
    """Euclidean distance from the player strictly below the vision radius"""
    return math.sqrt((x - player_x) ** 2 + (y - player_y) ** 2) < vision_radius


class FogOfWar:
    """
    Tracks which cells are visible this frame
    """
    def __init__(self, cols, rows):
        """
        Args:
            cols, rows: Maze dimensions
        """
        self.cols = cols
        self.rows = rows
        self.visible = [[False for _ in range(cols)] for _ in range(rows)]

    def update(self, player_x, player_y, vision_radius):
        """
        Update visibility based on player position

        Only the bounding square of the radius is scanned; everything
        outside it stays dark.
        """
        for row in self.visible:
            for x in range(self.cols):
                row[x] = False

        reach = int(math.ceil(vision_radius))
        for y in range(max(0, player_y - reach), min(self.rows, player_y + reach + 1)):
            for x in range(max(0, player_x - reach), min(self.cols, player_x + reach + 1)):
                if cell_in_vision(x, y, player_x, player_y, vision_radius):
                    self.visible[y][x] = True

    def is_visible(self, x, y):
        """Check if cell is currently visible"""
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            return False
        return self.visible[y][x]
