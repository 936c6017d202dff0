"""
Maze Escape
Find the exit before the creature finds you
"""

import argparse
import logging
import random
import sys

import pygame

from config import GAME_TITLE, GAME_VERSION
from game.audio import AudioCue
from game.game_loop import GameLoop
from game.game_state import GameEvent
from game.input_handler import InputHandler
from game.level_manager import LevelController
from game.renderer import Renderer, screen_size
from utils.constants import FPS, NOTIFICATION_TIMEOUT_MS

logger = logging.getLogger(__name__)


class MazeEscapeGame:
    """
    Main game class
    """
    def __init__(self, start_level=1, seed=None):
        pygame.init()
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        rng = random.Random(seed)
        self.audio = AudioCue()
        self.controller = LevelController(rng=rng, audio=self.audio)
        self.game_loop = GameLoop(self.controller, notify=self._show_notification)
        self.input_handler = InputHandler()
        self.renderer = Renderer()

        self.screen = None
        self.clock = pygame.time.Clock()
        self.running = True

        self.controller.start_level(start_level)
        self._resize_screen_for_level()

    def _resize_screen_for_level(self):
        """Match the window to the current maze"""
        grid = self.controller.state.grid
        size = screen_size(grid.cols, grid.rows)
        if self.screen is None or self.screen.get_size() != size:
            self.screen = pygame.display.set_mode(size)

    def handle_events(self):
        """Process pygame events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            else:
                direction = self.input_handler.direction_for_event(event)
                if direction is not None:
                    if self.game_loop.handle_move(*direction) != GameEvent.NONE:
                        self._resize_screen_for_level()

    def update(self):
        """Advance the world by one frame"""
        if self.game_loop.tick() != GameEvent.NONE:
            self._resize_screen_for_level()

    def render(self):
        """Draw the current frame"""
        self.renderer.draw(self.screen, self.controller.state)
        pygame.display.flip()

    def _show_notification(self, event, level):
        """Block on a message until a key press or timeout"""
        if event == GameEvent.LEVEL_COMPLETE:
            message = f"You have escaped Level {level}!"
        else:
            message = "You were caught by the creature!"

        self.renderer.draw(self.screen, self.controller.state)
        self.renderer.draw_notification(self.screen, message)
        pygame.display.flip()

        waited = 0
        while waited < NOTIFICATION_TIMEOUT_MS and self.running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                elif e.type == pygame.KEYDOWN:
                    waited = NOTIFICATION_TIMEOUT_MS
            waited += self.clock.tick(FPS)

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(FPS)

            self.handle_events()
            if not self.running:
                break
            self.update()
            self.render()

        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=GAME_TITLE)
    parser.add_argument("--level", type=int, default=1, help="starting level (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible mazes")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    if args.level < 1:
        parser.error("--level must be at least 1")
    return args


def main(argv=None):
    """Entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = MazeEscapeGame(start_level=args.level, seed=args.seed)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
