"""
Immutable per-tick views of the simulation for renderers and HUDs.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Tuple

from .entities import AlienType, PowerUpType
from .progression import GamePhase
from .store import EntityStore


@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: int
    height: int
    has_shield: bool
    has_spread_shot: bool


@dataclass(frozen=True)
class AlienView:
    x: float
    y: float
    width: int
    height: int
    alien_type: AlienType
    alive: bool


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    width: int
    height: int
    angle: float


@dataclass(frozen=True)
class PowerUpView:
    x: float
    y: float
    width: int
    height: int
    power_up_type: PowerUpType


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs for one frame."""
    player: PlayerView
    player_projectiles: Tuple[ProjectileView, ...]
    aliens: Tuple[AlienView, ...]
    alien_projectiles: Tuple[ProjectileView, ...]
    powerups: Tuple[PowerUpView, ...]
    score: int
    lives: int
    hits: int
    level: int
    phase: GamePhase
    width: int
    height: int

    @property
    def has_shield(self) -> bool:
        return self.player.has_shield

    @property
    def has_spread_shot(self) -> bool:
        return self.player.has_spread_shot


def _projectile_views(projectiles) -> Tuple[ProjectileView, ...]:
    return tuple(ProjectileView(p.x, p.y, p.width, p.height, p.angle) for p in projectiles)


def take_snapshot(store: EntityStore, phase: GamePhase) -> GameSnapshot:
    """Copy the store into frozen views."""
    player = store.player
    progress = store.progress
    return GameSnapshot(
        player=PlayerView(
            player.x, player.y, player.width, player.height,
            player.has_shield, player.has_spread_shot,
        ),
        player_projectiles=_projectile_views(player.projectiles),
        aliens=tuple(
            AlienView(a.x, a.y, a.width, a.height, a.alien_type, a.alive)
            for a in store.aliens
        ),
        alien_projectiles=_projectile_views(store.alien_projectiles),
        powerups=tuple(
            PowerUpView(p.x, p.y, p.width, p.height, p.power_up_type)
            for p in store.powerups
        ),
        score=progress.score,
        lives=progress.lives,
        hits=progress.hits,
        level=progress.level,
        phase=phase,
        width=store.width,
        height=store.height,
    )
