"""
Power-up entities
A vision potion and a speed potion appear on a fixed interval
"""

import logging
import random
from utils.colors import COLOR_POWERUP_VISION, COLOR_POWERUP_SPEED
from utils.constants import (
    PATH, FPS, EFFECT_VISION, EFFECT_SPEED, SOUND_BONUS,
    BONUS_SPAWN_INTERVAL_MS, BONUS_DURATION_MS
)
from utils.helpers import ms_to_ticks

logger = logging.getLogger(__name__)

POWERUP_TYPES = (EFFECT_VISION, EFFECT_SPEED)


class PowerUp:
    """
    A potion lying on the maze floor
    """
    def __init__(self, x, y, powerup_type):
        """
        Args:
            x, y: Grid position
            powerup_type: 'vision' or 'speed'
        """
        self.x = x
        self.y = y
        self.type = powerup_type

    def get_color(self):
        """Get RGB color based on type"""
        colors = {
            EFFECT_VISION: COLOR_POWERUP_VISION,
            EFFECT_SPEED: COLOR_POWERUP_SPEED,
        }
        return colors.get(self.type, (255, 255, 255))

    def get_name(self):
        """Get human-readable name"""
        names = {
            EFFECT_VISION: 'Extended Vision Potion',
            EFFECT_SPEED: 'Speed Potion',
        }
        return names.get(self.type, 'Unknown')

    def is_at_position(self, x, y):
        """Check if power-up is at given position"""
        return self.x == x and self.y == y

    def __repr__(self):
        return f"PowerUp(pos=({self.x},{self.y}), type={self.type})"


class PowerUpManager:
    """
    Spawns potions on a timer and handles pickups
    """
    def __init__(self, rng=None, audio=None,
                 spawn_interval=None, duration=None):
        """
        Args:
            rng: Random source for spawn positions
            audio: Optional object with a play(name) method
            spawn_interval: Frames between spawns
            duration: Frames a picked-up effect lasts
        """
        self.rng = rng or random
        self.audio = audio
        self.spawn_interval = spawn_interval or ms_to_ticks(BONUS_SPAWN_INTERVAL_MS, FPS)
        self.duration = duration or ms_to_ticks(BONUS_DURATION_MS, FPS)

        self.powerups = {t: None for t in POWERUP_TYPES}
        self.last_spawn_tick = 0

    def update(self, tick, grid, player):
        """Spawn a fresh pair of potions once the interval has elapsed"""
        if tick - self.last_spawn_tick < self.spawn_interval:
            return False

        self.last_spawn_tick = tick
        free = [c for c in grid.cells_of_kind(PATH) if c != (player.x, player.y)]
        if not free:
            return False

        for powerup_type in POWERUP_TYPES:
            x, y = self.rng.choice(free)
            self.powerups[powerup_type] = PowerUp(x, y, powerup_type)
            logger.debug("Spawned %s at (%d, %d)", powerup_type, x, y)
        return True

    def collect(self, player, tick, generation):
        """
        Pick up every potion under the player and apply its effect

        Returns:
            List of collected PowerUp objects
        """
        collected = []
        for powerup_type, powerup in self.powerups.items():
            if powerup is None or not powerup.is_at_position(player.x, player.y):
                continue

            self.powerups[powerup_type] = None
            player.apply_effect(powerup_type, tick, generation, self.duration)
            collected.append(powerup)
            logger.debug("Collected %s", powerup.get_name())

            if self.audio is not None:
                self.audio.play(SOUND_BONUS)
        return collected

    def get_active_powerups(self):
        """Get list of potions currently on the floor"""
        return [p for p in self.powerups.values() if p is not None]

    def reset(self, tick):
        """Clear all potions and restart the spawn timer"""
        self.powerups = {t: None for t in POWERUP_TYPES}
        self.last_spawn_tick = tick

    def __repr__(self):
        return f"PowerUpManager(active={len(self.get_active_powerups())})"
