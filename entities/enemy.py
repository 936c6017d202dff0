"""
Enemy AI entity
Wanders the maze until the player comes close, then chases along the shortest path
"""

import logging
import random
from enum import Enum
from maze.maze_core import bfs_shortest_path
from maze.difficulty import proximity_threshold
from utils.constants import ENEMY_BASE_MOVE_INTERVAL
from utils.helpers import distance, random_choice

logger = logging.getLogger(__name__)


class EnemyMode(Enum):
    """Enemy behavior modes"""
    WANDERING = 'wandering'
    PURSUING = 'pursuing'


def decide_mode(enemy_x, enemy_y, player_x, player_y, level):
    """Pursue when the player is closer than the level's proximity threshold"""
    if distance(enemy_x, enemy_y, player_x, player_y) < proximity_threshold(level):
        return EnemyMode.PURSUING
    return EnemyMode.WANDERING


class Enemy:
    """
    The creature hunting the player
    """
    def __init__(self, x, y, move_interval=ENEMY_BASE_MOVE_INTERVAL, rng=None,
                 repath_every_step=True):
        """
        Args:
            x, y: Grid position
            move_interval: Frames between decisions
            rng: Random source for wandering (defaults to the random module)
            repath_every_step: Recompute the chase path on every pursuing
                decision; otherwise only when pursuit starts or the path runs out
        """
        self.x = x
        self.y = y
        self.move_interval = move_interval
        self.rng = rng or random
        self.repath_every_step = repath_every_step

        # AI state
        self.mode = EnemyMode.WANDERING
        self.path = []

        # Movement
        self.move_timer = 0

    @property
    def pos(self):
        return self.x, self.y

    def update(self, grid, player, level):
        """
        Update enemy AI for one frame

        Args:
            grid: MazeGrid
            player: Player object
            level: Current level number

        Returns:
            True if a decision tick ran this frame
        """
        self.move_timer += 1
        if self.move_timer < self.move_interval:
            return False

        self.move_timer = 0
        self.decide(grid, player, level)
        return True

    def decide(self, grid, player, level):
        """Re-evaluate the mode and take at most one step"""
        previous = self.mode
        self.mode = decide_mode(self.x, self.y, player.x, player.y, level)

        if self.mode != previous:
            logger.debug("Enemy at (%d, %d) switched to %s", self.x, self.y, self.mode.value)

        if self.mode == EnemyMode.PURSUING:
            self._pursue(grid, player, restarted=previous != EnemyMode.PURSUING)
        else:
            self.path = []
            self._wander(grid)

    def _wander(self, grid):
        """Step into a random walkable neighbor"""
        step = random_choice(grid.walkable_neighbors(self.x, self.y), self.rng)
        if step is not None:
            self.x, self.y = step

    def _pursue(self, grid, player, restarted):
        """Follow the shortest path toward the player"""
        if (self.x, self.y) == (player.x, player.y):
            # Already on the player: hold
            self.path = []
            return

        if self.repath_every_step or restarted or not self.path:
            self.path = bfs_shortest_path(grid, (self.x, self.y), (player.x, player.y))

        # No route: hold position
        if self.path:
            self.x, self.y = self.path.pop(0)

    def reset(self, x, y, move_interval):
        """Reset enemy for a new level"""
        self.x = x
        self.y = y
        self.move_interval = move_interval
        self.mode = EnemyMode.WANDERING
        self.path = []
        self.move_timer = 0

    def __repr__(self):
        return f"Enemy(pos=({self.x},{self.y}), mode={self.mode.value}, interval={self.move_interval})"
