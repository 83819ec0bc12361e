"""
Input Handler - Translates pygame keys to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from ..gameplay.game import Game, ControlSignals
from ..gameplay.progression import GamePhase


LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
FIRE_KEYS = (pygame.K_SPACE,)


class InputHandler:
    """
    Handles keyboard input and translates to game commands.

    The input handler:
    - Samples held keys into ControlSignals once per tick
    - Maps key presses to pause / restart / quit
    """

    def __init__(self, game: Game):
        self.game = game

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if key == pygame.K_p:
            self.game.toggle_pause()
        elif key == pygame.K_r and self.game.phase == GamePhase.GAME_OVER:
            self.game.restart()

        return False

    def pump(self) -> bool:
        """
        Drain the pygame event queue.
        Returns True if the game should quit.
        """
        should_quit = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                should_quit = True
            elif event.type == pygame.KEYDOWN:
                should_quit = self.handle_key(event.key) or should_quit
        return should_quit

    def sample_controls(self) -> ControlSignals:
        """Read held keys into control signals."""
        keys = pygame.key.get_pressed()
        return ControlSignals(
            move_left=any(keys[k] for k in LEFT_KEYS),
            move_right=any(keys[k] for k in RIGHT_KEYS),
            fire=any(keys[k] for k in FIRE_KEYS),
        )
