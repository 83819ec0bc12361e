"""
Entity store - owns every live entity and the scalar progression state.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import List

from .entities import Player, Alien, Projectile, PowerUp
from .constants import (
    VIEWPORT_WIDTH, VIEWPORT_HEIGHT,
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_BOTTOM_MARGIN,
    STARTING_LIVES,
)


@dataclass
class ProgressionState:
    """Score, lives, hit counter and level."""
    score: int = 0
    lives: int = STARTING_LIVES
    hits: int = 0
    level: int = 1


class EntityStore:
    """
    Mutable collections of entities for one game.

    All simulation state lives here; systems receive the store and
    mutate it. Collections are replaced (never spliced in place) when
    entities are removed.
    """

    def __init__(self, width: int = VIEWPORT_WIDTH, height: int = VIEWPORT_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")

        self.width = width
        self.height = height

        self.player = self._create_player()
        self.aliens: List[Alien] = []
        self.alien_projectiles: List[Projectile] = []
        self.powerups: List[PowerUp] = []
        self.progress = ProgressionState()

        # +1 moves the swarm right, -1 left
        self.alien_direction: int = 1

    def _create_player(self) -> Player:
        return Player(
            x=self.width / 2 - PLAYER_WIDTH / 2,
            y=self.height - PLAYER_HEIGHT - PLAYER_BOTTOM_MARGIN,
        )

    @property
    def player_projectiles(self) -> List[Projectile]:
        return self.player.projectiles

    @player_projectiles.setter
    def player_projectiles(self, projectiles: List[Projectile]) -> None:
        self.player.projectiles = projectiles

    def live_aliens(self) -> List[Alien]:
        """Aliens that have not been shot down."""
        return [alien for alien in self.aliens if alien.alive]

    def all_aliens_dead(self) -> bool:
        return all(not alien.alive for alien in self.aliens)

    def clear_projectiles(self) -> None:
        """Remove every projectile from both sides."""
        self.player_projectiles = []
        self.alien_projectiles = []

    def reset(self) -> None:
        """Return to the initial state of a new game (empty alien grid)."""
        self.player = self._create_player()
        self.aliens = []
        self.alien_projectiles = []
        self.powerups = []
        self.progress = ProgressionState()
        self.alien_direction = 1
