"""
Movement system - integrates positions once per tick.
NO UI DEPENDENCIES.
"""
import math

from .store import EntityStore
from .constants import (
    PLAYER_PROJECTILE_VELOCITY,
    ALIEN_PROJECTILE_BASE_SPEED, ALIEN_PROJECTILE_SPEED_PER_LEVEL,
    ALIEN_BASE_STEP, ALIEN_STEP_PER_LEVEL, ALIEN_STEP_DOWN,
    POWERUP_SEEK_SPEED, SEEK_EPSILON,
)


def swarm_step(level: int) -> float:
    """Horizontal swarm speed in pixels per tick."""
    return ALIEN_BASE_STEP + level * ALIEN_STEP_PER_LEVEL


def alien_projectile_speed(level: int) -> float:
    """Fall speed of alien shots in pixels per tick."""
    return ALIEN_PROJECTILE_BASE_SPEED + level * ALIEN_PROJECTILE_SPEED_PER_LEVEL


class MovementSystem:
    """
    Moves every entity kind. Speeds are per tick and scale with level.

    Projectiles that leave the viewport are dropped in the same call
    that moves them, so no projectile survives a tick out of bounds.
    """

    def move_player(self, store: EntityStore, move_left: bool, move_right: bool) -> None:
        """Shift the player horizontally, clamped to the viewport."""
        player = store.player
        dx = 0.0
        if move_left:
            dx -= player.speed
        if move_right:
            dx += player.speed

        max_x = store.width - player.width
        player.x = min(max(player.x + dx, 0.0), max_x)

    def move_player_projectiles(self, store: EntityStore) -> None:
        """Advance player shots along their angle and drop those that left."""
        remaining = []
        for projectile in store.player_projectiles:
            projectile.x += math.sin(projectile.angle) * PLAYER_PROJECTILE_VELOCITY
            projectile.y -= math.cos(projectile.angle) * PLAYER_PROJECTILE_VELOCITY
            if projectile.y < 0 or projectile.x < 0 or projectile.x > store.width:
                continue
            remaining.append(projectile)
        store.player_projectiles = remaining

    def move_alien_projectiles(self, store: EntityStore) -> None:
        """Drop alien shots straight down; remove those below the viewport."""
        speed = alien_projectile_speed(store.progress.level)
        remaining = []
        for projectile in store.alien_projectiles:
            projectile.y += speed
            if projectile.y > store.height:
                continue
            remaining.append(projectile)
        store.alien_projectiles = remaining

    def move_swarm(self, store: EntityStore) -> bool:
        """
        Sweep live aliens sideways; bounce and descend at the edges.

        If any live alien leaves [0, width - alien width] this tick the
        direction flips and every live alien moves down one step, once.
        Returns True if the swarm bounced.
        """
        live = store.live_aliens()
        if not live:
            return False

        step = swarm_step(store.progress.level) * store.alien_direction
        touched_edge = False
        for alien in live:
            alien.x += step
            if alien.x < 0 or alien.x > store.width - alien.width:
                touched_edge = True

        if touched_edge:
            store.alien_direction *= -1
            for alien in live:
                alien.y += ALIEN_STEP_DOWN

        return touched_edge

    def move_powerups(self, store: EntityStore) -> None:
        """Pull every power-up toward the player's centre."""
        target_x, target_y = store.player.center
        for powerup in store.powerups:
            cx, cy = powerup.center
            dx = target_x - cx
            dy = target_y - cy
            distance = math.hypot(dx, dy)
            if distance < SEEK_EPSILON:
                continue
            powerup.x += dx / distance * POWERUP_SEEK_SPEED
            powerup.y += dy / distance * POWERUP_SEEK_SPEED
