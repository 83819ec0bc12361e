"""
Collision system - AABB overlap tests and their immediate consequences.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import List

from .entities import Alien, PowerUp, PowerUpType, Rect
from .store import EntityStore
from .constants import HITS_PER_LIFE


def overlaps(a: Rect, b: Rect) -> bool:
    """Standard AABB test: both axis projections must overlap."""
    return a.overlaps(b)


@dataclass
class CollisionReport:
    """What the collision pass resolved during one tick."""
    destroyed: List[Alien] = field(default_factory=list)
    dropped: List[PowerUp] = field(default_factory=list)
    hits_taken: int = 0
    lives_lost: int = 0
    collected: List[PowerUpType] = field(default_factory=list)


class CollisionSystem:
    """
    Resolves player shots vs aliens, alien shots vs player, and
    power-ups vs player.

    Each collection is rebuilt from the survivors instead of being
    mutated while iterated, so nothing is skipped or visited twice.
    """

    def update(self, store: EntityStore) -> CollisionReport:
        report = CollisionReport()
        self.resolve_player_projectiles(store, report)
        self.resolve_alien_projectiles(store, report)
        self.resolve_powerups(store, report)
        return report

    def resolve_player_projectiles(self, store: EntityStore, report: CollisionReport) -> None:
        """Each player shot kills at most one live alien (first in grid order)."""
        remaining = []
        for projectile in store.player_projectiles:
            shot = projectile.rect
            target = next(
                (alien for alien in store.aliens if alien.alive and overlaps(shot, alien.rect)),
                None,
            )
            if target is None:
                remaining.append(projectile)
                continue

            target.alive = False
            store.progress.score += target.alien_type.points
            report.destroyed.append(target)

            drop = target.alien_type.drop
            if drop is not None:
                powerup = PowerUp.centered_on(target.rect, drop)
                store.powerups.append(powerup)
                report.dropped.append(powerup)

        store.player_projectiles = remaining

    def resolve_alien_projectiles(self, store: EntityStore, report: CollisionReport) -> None:
        """Alien shots hitting the player count toward losing a life."""
        # Shield is full immunity: shots pass through and keep falling
        if store.player.has_shield:
            return

        progress = store.progress
        body = store.player.rect
        remaining = []
        for projectile in store.alien_projectiles:
            if not overlaps(projectile.rect, body):
                remaining.append(projectile)
                continue

            progress.hits += 1
            report.hits_taken += 1
            if progress.hits >= HITS_PER_LIFE:
                progress.hits = 0
                if progress.lives > 0:
                    progress.lives -= 1
                    report.lives_lost += 1

        store.alien_projectiles = remaining

    def resolve_powerups(self, store: EntityStore, report: CollisionReport) -> None:
        """Remove power-ups touching the player and report their types."""
        body = store.player.rect
        remaining = []
        for powerup in store.powerups:
            if overlaps(powerup.rect, body):
                report.collected.append(powerup.power_up_type)
            else:
                remaining.append(powerup)
        store.powerups = remaining
