"""
Keyboard input - turns key presses into movement directions
"""

import pygame

KEY_DIRECTIONS = {
    pygame.K_UP: (0, -1),
    pygame.K_w: (0, -1),
    pygame.K_RIGHT: (1, 0),
    pygame.K_d: (1, 0),
    pygame.K_DOWN: (0, 1),
    pygame.K_s: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_a: (-1, 0),
}


class InputHandler:
    """
    Maps KEYDOWN events to (dx, dy) intents
    """
    def direction_for_key(self, key):
        """Get the direction bound to a key, or None"""
        return KEY_DIRECTIONS.get(key)

    def direction_for_event(self, event):
        """Get the direction for a pygame event, or None if it is not a move key"""
        if event.type != pygame.KEYDOWN:
            return None
        return self.direction_for_key(event.key)
