"""
Player entity with movement cooldown and timed status effects
"""

import logging
from utils.constants import (
    PLAYER_START, PLAYER_VISION_RADIUS, PLAYER_BOOSTED_VISION_RADIUS,
    PLAYER_MOVE_INTERVAL, EFFECT_VISION, EFFECT_SPEED
)

logger = logging.getLogger(__name__)


class StatusEffect:
    """
    A temporary change to a player attribute

    Expires at a frame number and belongs to the level generation that
    granted it.
    """
    def __init__(self, effect, expires_at_tick, generation):
        self.effect = effect
        self.expires_at_tick = expires_at_tick
        self.generation = generation

    def __repr__(self):
        return (f"StatusEffect({self.effect}, expires_at_tick={self.expires_at_tick}, "
                f"generation={self.generation})")


class Player:
    """
    Player entity
    """
    def __init__(self, x=PLAYER_START[0], y=PLAYER_START[1]):
        self.x = x
        self.y = y

        self.default_vision_radius = PLAYER_VISION_RADIUS
        self.default_move_interval = PLAYER_MOVE_INTERVAL
        self.vision_radius = self.default_vision_radius
        self.move_interval = self.default_move_interval
        self.move_cooldown = 0

        self.effects = []  # Active StatusEffect records

    @property
    def pos(self):
        return self.x, self.y

    def attempt_move(self, dx, dy, grid):
        """
        Move player in direction (dx, dy)
        Returns True if move was successful
        """
        if self.move_cooldown > 0:
            return False

        nx, ny = self.x + dx, self.y + dy
        if not grid.is_walkable(nx, ny):
            return False

        self.x, self.y = nx, ny
        self.move_cooldown = self.move_interval
        return True

    def update(self, tick, generation):
        """
        Per-frame update: cooldown countdown and effect expiry

        Args:
            tick: Current frame number
            generation: Current level generation
        """
        if self.move_cooldown > 0:
            self.move_cooldown -= 1

        for effect in self.effects[:]:
            if effect.generation != generation:
                # Granted on an earlier level; the reset already restored defaults
                logger.debug("Discarding stale %r", effect)
                self.effects.remove(effect)
            elif tick >= effect.expires_at_tick:
                self._remove_effect(effect)
                self.effects.remove(effect)

    def apply_effect(self, effect_type, tick, generation, duration):
        """
        Apply a status effect for duration frames
        effect_type: 'vision' or 'speed'
        """
        if effect_type == EFFECT_VISION:
            self.vision_radius = PLAYER_BOOSTED_VISION_RADIUS
        elif effect_type == EFFECT_SPEED:
            self.move_interval = max(self.default_move_interval - 1, 0)
        else:
            raise ValueError(f"unknown status effect: {effect_type!r}")

        # Picking up the same effect again extends it
        self.effects = [e for e in self.effects if e.effect != effect_type]
        self.effects.append(StatusEffect(effect_type, tick + duration, generation))

    def _remove_effect(self, effect):
        """Remove effect and revert its changes"""
        logger.debug("Status effect %s expired", effect.effect)
        if effect.effect == EFFECT_VISION:
            self.vision_radius = self.default_vision_radius
        elif effect.effect == EFFECT_SPEED:
            self.move_interval = self.default_move_interval

    def has_effect(self, effect_type):
        """Check if player has a specific effect"""
        return any(e.effect == effect_type for e in self.effects)

    def reset(self, x=PLAYER_START[0], y=PLAYER_START[1]):
        """Reset position, defaults and effects for a new level"""
        self.x = x
        self.y = y
        self.vision_radius = self.default_vision_radius
        self.move_interval = self.default_move_interval
        self.move_cooldown = 0
        self.effects = []

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), vision={self.vision_radius}, cooldown={self.move_cooldown})"
