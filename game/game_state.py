"""
Game state - the world aggregate shared by the level controller and the game loop
"""

from enum import Enum, auto


class GameEvent(Enum):
    """Outcome of a frame or a move"""
    NONE = auto()
    LEVEL_COMPLETE = auto()
    CAUGHT = auto()


class GameState:
    """
    Everything that makes up the running world

    Owned by the LevelController, which builds a fresh one on every level
    transition and swaps it in. The actors carry over and are reset.
    """
    def __init__(self, player, enemy, powerup_manager):
        self.level = 1
        self.generation = 0  # Bumped on every level start
        self.tick = 0        # Frames since the game started

        self.grid = None
        self.exit_pos = None

        self.player = player
        self.enemy = enemy
        self.powerup_manager = powerup_manager

    def __repr__(self):
        return (f"GameState(level={self.level}, generation={self.generation}, "
                f"tick={self.tick}, grid={self.grid!r})")
