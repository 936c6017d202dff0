"""
Level Controller - handles maze generation, actor resets and level progression
"""

import logging
import random
from maze.maze_core import MazeGrid, validate_dimensions, place_exit
from maze.generator import generate_maze
from maze.difficulty import get_level_config
from entities.player import Player
from entities.enemy import Enemy
from entities.powerup import PowerUpManager
from game.game_state import GameState
from utils.constants import EXIT, MAZE_SEED_CELL, PLAYER_START

logger = logging.getLogger(__name__)


class LevelController:
    """
    Builds levels and moves between them

    Level transitions are full resets: a fresh maze, the player back at the
    start, the enemy back by the exit and no potions on the floor.
    """
    def __init__(self, rng=None, audio=None, repath_every_step=True):
        """
        Args:
            rng: Random source shared by maze, enemy and potions
            audio: Optional AudioCue fired on potion pickup
            repath_every_step: Enemy chase cadence (see Enemy)
        """
        self.rng = rng or random
        self.state = GameState(
            player=Player(),
            enemy=Enemy(0, 0, rng=self.rng, repath_every_step=repath_every_step),
            powerup_manager=PowerUpManager(rng=self.rng, audio=audio),
        )

    @property
    def level(self):
        return self.state.level

    def start_level(self, level):
        """
        Generate and enter a level

        Args:
            level: Level number (1-based)

        Returns:
            The new GameState, now held by the controller
        """
        config = get_level_config(level)
        validate_dimensions(config.cols, config.rows)

        grid = MazeGrid(config.cols, config.rows)
        generate_maze(grid, MAZE_SEED_CELL, self.rng)
        exit_pos = place_exit(grid)

        old = self.state
        state = GameState(old.player, old.enemy, old.powerup_manager)
        state.level = level
        state.generation = old.generation + 1
        state.tick = old.tick
        state.grid = grid
        state.exit_pos = exit_pos

        state.player.reset(*PLAYER_START)
        state.enemy.reset(config.cols - 2, config.rows - 2, config.enemy_move_interval)
        state.powerup_manager.reset(state.tick)

        # Swap only once the new level is fully built
        self.state = state

        logger.info("Level %d started (%dx%d maze, enemy interval %d)",
                    level, config.cols, config.rows, config.enemy_move_interval)
        return state

    def level_up(self):
        """Player escaped: advance to the next level"""
        logger.info("Level %d complete", self.state.level)
        return self.start_level(self.state.level + 1)

    def reset_game(self):
        """Player caught: start over from level 1"""
        logger.info("Caught on level %d, restarting", self.state.level)
        return self.start_level(1)

    def check_win(self):
        """True when the player stands on the exit"""
        player = self.state.player
        return self.state.grid.kind_at(player.x, player.y) == EXIT

    def check_loss(self):
        """True when the enemy shares the player's cell"""
        return self.state.enemy.pos == self.state.player.pos

    def __repr__(self):
        return f"LevelController(level={self.state.level})"
