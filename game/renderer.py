"""
Renderer - draws the maze, potions, player, enemy and HUD with pygame
"""

import pygame
from game.fog_of_war import FogOfWar
from utils.constants import CELL_SIZE, PANEL_H, PATH, WALL, EXIT
from utils.colors import (
    COLOR_BG, COLOR_PANEL_BG, COLOR_PATH, COLOR_WALL, COLOR_EXIT, COLOR_DARKNESS,
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_MENU_OVERLAY, COLOR_PLAYER, COLOR_ENEMY
)

CELL_COLORS = {
    PATH: COLOR_PATH,
    WALL: COLOR_WALL,
    EXIT: COLOR_EXIT,
}


def screen_size(cols, rows):
    """Window size in pixels for a maze"""
    return cols * CELL_SIZE, rows * CELL_SIZE + PANEL_H


class Renderer:
    """
    Draws a GameState onto a pygame surface
    """
    def __init__(self):
        pygame.font.init()
        self.font_medium = pygame.font.SysFont("arial", 24)
        self.font_large = pygame.font.SysFont("arial", 36, bold=True)
        self.fog = None

    def draw(self, screen, state):
        """
        Draw one frame

        Args:
            screen: Pygame screen
            state: GameState
        """
        grid = state.grid
        player = state.player

        if self.fog is None or (self.fog.cols, self.fog.rows) != (grid.cols, grid.rows):
            self.fog = FogOfWar(grid.cols, grid.rows)
        self.fog.update(player.x, player.y, player.vision_radius)

        screen.fill(COLOR_BG)
        self._draw_hud(screen, state.level, grid.cols * CELL_SIZE)

        for y in range(grid.rows):
            for x in range(grid.cols):
                if self.fog.is_visible(x, y):
                    color = CELL_COLORS[grid.kind_at(x, y)]
                else:
                    color = COLOR_DARKNESS
                self._draw_cell(screen, x, y, color)

        for powerup in state.powerup_manager.get_active_powerups():
            self._draw_cell(screen, powerup.x, powerup.y, powerup.get_color())

        self._draw_cell(screen, player.x, player.y, COLOR_PLAYER)
        self._draw_cell(screen, state.enemy.x, state.enemy.y, COLOR_ENEMY)

    def draw_notification(self, screen, message):
        """Dim the frame and show a centered message"""
        screen_w, screen_h = screen.get_size()
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, 0))

        text = self.font_large.render(message, True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(text, (screen_w // 2 - text.get_width() // 2,
                           screen_h // 2 - text.get_height() // 2))

    def _draw_hud(self, screen, level, screen_w):
        """Draw the level title above the maze"""
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, 0, screen_w, PANEL_H))
        text = self.font_medium.render(f"Level {level}", True, COLOR_TEXT)
        screen.blit(text, (10, (PANEL_H - text.get_height()) // 2))

    def _draw_cell(self, screen, x, y, color):
        """Draw filled cell below the HUD"""
        pygame.draw.rect(screen, color, (x * CELL_SIZE, y * CELL_SIZE + PANEL_H, CELL_SIZE, CELL_SIZE))
