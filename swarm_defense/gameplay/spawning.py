"""
Spawn system - alien grid, alien fire and player shots.
NO UI DEPENDENCIES.
"""
import random
from typing import List, Optional

from .entities import Alien, AlienType, Projectile, CARRIER_TYPES
from .store import EntityStore
from .constants import (
    ALIEN_ROWS, ALIEN_COLS, ALIEN_WIDTH, ALIEN_HEIGHT, ALIEN_SPACING, ALIEN_GRID_TOP,
    CARRIER_CHANCE, BASE_SHOT_CHANCE, SHOT_CHANCE_PER_LEVEL,
    PROJECTILE_WIDTH, SPREAD_ANGLES,
)


def shot_chance(level: int) -> float:
    """Probability that some alien fires on a given tick."""
    return BASE_SHOT_CHANCE + level * SHOT_CHANCE_PER_LEVEL


class SpawnSystem:
    """
    Creates entities. All randomness comes from the injected `rng` so
    games can be replayed from a seed.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def roll_alien_type(self) -> AlienType:
        """Basic alien, or with CARRIER_CHANCE a uniformly chosen carrier."""
        if self.rng.random() < CARRIER_CHANCE:
            return self.rng.choice(CARRIER_TYPES)
        return AlienType.BASIC

    def create_grid(self) -> List[Alien]:
        """Build a fresh ALIEN_ROWS x ALIEN_COLS grid, row-major."""
        aliens = []
        for row in range(ALIEN_ROWS):
            for col in range(ALIEN_COLS):
                aliens.append(Alien(
                    x=col * (ALIEN_WIDTH + ALIEN_SPACING),
                    y=row * (ALIEN_HEIGHT + ALIEN_SPACING) + ALIEN_GRID_TOP,
                    alien_type=self.roll_alien_type(),
                ))
        return aliens

    def populate_level(self, store: EntityStore) -> None:
        """Replace the swarm with a new grid moving right."""
        store.aliens = self.create_grid()
        store.alien_direction = 1

    def maybe_alien_shot(self, store: EntityStore) -> Optional[Projectile]:
        """
        Possibly fire from one random live alien's lower-centre edge.
        Returns the new projectile, or None.
        """
        if self.rng.random() >= shot_chance(store.progress.level):
            return None

        live = store.live_aliens()
        if not live:
            return None

        shooter = self.rng.choice(live)
        projectile = Projectile(
            x=shooter.x + shooter.width / 2 - PROJECTILE_WIDTH / 2,
            y=shooter.y + shooter.height,
        )
        store.alien_projectiles.append(projectile)
        return projectile

    def fire_player_shot(self, store: EntityStore) -> List[Projectile]:
        """Fire from the player's muzzle: three lanes with spread shot, else one."""
        player = store.player
        muzzle_x = player.x + player.width / 2 - PROJECTILE_WIDTH / 2
        angles = SPREAD_ANGLES if player.has_spread_shot else SPREAD_ANGLES[:1]

        shots = [Projectile(x=muzzle_x, y=player.y, angle=angle) for angle in angles]
        player.projectiles.extend(shots)
        return shots
