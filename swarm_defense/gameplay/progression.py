"""
Progression state machine - level clear, pause and game over.
NO UI DEPENDENCIES.
"""
import logging
from enum import Enum, auto
from typing import Optional, Tuple

from .store import EntityStore
from .spawning import SpawnSystem

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current phase of the simulation."""
    PLAYING = auto()        # Ticks advance the simulation
    PAUSED = auto()         # User paused; nothing advances
    LEVEL_CLEARED = auto()  # Last alien died; next tick starts the next level
    GAME_OVER = auto()      # Terminal until restart


PhaseChange = Tuple[GamePhase, GamePhase]


class ProgressionStateMachine:
    """
    Owns the game phase and derives transitions from post-collision state.

    Playing -> LevelCleared -> Playing
    Playing <-> Paused (user driven)
    Playing -> GameOver (lives exhausted or the swarm reached the player)
    """

    def __init__(self):
        self.phase = GamePhase.PLAYING
        self._resume_phase = GamePhase.PLAYING

    def _transition(self, new_phase: GamePhase) -> PhaseChange:
        old_phase = self.phase
        self.phase = new_phase
        return (old_phase, new_phase)

    @staticmethod
    def alien_breached(store: EntityStore) -> bool:
        """True if any live alien's lower edge reached the player's row."""
        player_y = store.player.y
        return any(alien.y + alien.height >= player_y for alien in store.live_aliens())

    @staticmethod
    def is_defeated(store: EntityStore) -> bool:
        return store.progress.lives <= 0 or ProgressionStateMachine.alien_breached(store)

    def evaluate(self, store: EntityStore) -> Optional[PhaseChange]:
        """
        Check the state after collisions. Game over takes precedence over
        a level clear in the same tick.
        """
        if self.phase != GamePhase.PLAYING:
            return None

        if self.is_defeated(store):
            progress = store.progress
            logger.info(f"Game over: score={progress.score} level={progress.level} lives={progress.lives}")
            return self._transition(GamePhase.GAME_OVER)

        if store.all_aliens_dead():
            logger.info(f"Level {store.progress.level} cleared")
            return self._transition(GamePhase.LEVEL_CLEARED)

        return None

    def begin_next_level(self, store: EntityStore, spawner: SpawnSystem) -> Optional[PhaseChange]:
        """From LEVEL_CLEARED: bump the level, clear all shots, lay a new grid."""
        if self.phase != GamePhase.LEVEL_CLEARED:
            return None

        store.progress.level += 1
        store.clear_projectiles()
        spawner.populate_level(store)
        logger.info(f"Starting level {store.progress.level}")
        return self._transition(GamePhase.PLAYING)

    def toggle_pause(self) -> Optional[PhaseChange]:
        """Pause or resume. Ignored once the game is over."""
        if self.phase == GamePhase.GAME_OVER:
            return None
        if self.phase == GamePhase.PAUSED:
            return self._transition(self._resume_phase)

        self._resume_phase = self.phase
        return self._transition(GamePhase.PAUSED)

    def restart(self) -> Optional[PhaseChange]:
        """Leave GAME_OVER. Callers reset the rest of the state."""
        if self.phase != GamePhase.GAME_OVER:
            return None
        self._resume_phase = GamePhase.PLAYING
        return self._transition(GamePhase.PLAYING)

    @property
    def is_running(self) -> bool:
        """Whether ticks currently advance the simulation."""
        return self.phase in (GamePhase.PLAYING, GamePhase.LEVEL_CLEARED)
