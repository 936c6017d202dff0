"""
Game loop - per-frame sequencing of player, enemy, potions and win/loss checks
"""

from game.game_state import GameEvent


class GameLoop:
    """
    Drives one level controller a frame at a time
    """
    def __init__(self, controller, notify=None):
        """
        Args:
            controller: LevelController
            notify: Optional callable(event, level) run before a level reset,
                e.g. to show a blocking message
        """
        self.controller = controller
        self.notify = notify

    @property
    def state(self):
        return self.controller.state

    def handle_move(self, dx, dy):
        """
        Deliver a directional intent to the player

        Returns:
            GameEvent.LEVEL_COMPLETE if the move reached the exit
        """
        state = self.state
        state.player.attempt_move(dx, dy, state.grid)

        if self.controller.check_win():
            self._finish(GameEvent.LEVEL_COMPLETE)
            self.controller.level_up()
            return GameEvent.LEVEL_COMPLETE
        return GameEvent.NONE

    def tick(self):
        """
        Advance one frame

        Returns:
            GameEvent.CAUGHT if the enemy reached the player, else GameEvent.NONE
        """
        state = self.state
        state.tick += 1

        state.player.update(state.tick, state.generation)
        state.enemy.update(state.grid, state.player, state.level)
        state.powerup_manager.update(state.tick, state.grid, state.player)
        state.powerup_manager.collect(state.player, state.tick, state.generation)

        if self.controller.check_loss():
            self._finish(GameEvent.CAUGHT)
            self.controller.reset_game()
            return GameEvent.CAUGHT
        return GameEvent.NONE

    def _finish(self, event):
        if self.notify is not None:
            self.notify(event, self.state.level)
