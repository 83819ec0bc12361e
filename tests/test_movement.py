"""
Tests for the movement system.
"""
import math

import pytest
from swarm_defense.gameplay.movement import MovementSystem, swarm_step, alien_projectile_speed
from swarm_defense.gameplay.entities import Alien, Projectile, PowerUp, PowerUpType
from swarm_defense.gameplay.constants import (
    PLAYER_SPEED, PLAYER_PROJECTILE_VELOCITY, ALIEN_STEP_DOWN, POWERUP_SEEK_SPEED,
)


class TestPlayerMovement:
    """Tests for player steering."""

    def test_moves_left_and_right(self, store):
        movement = MovementSystem()
        start = store.player.x

        movement.move_player(store, move_left=True, move_right=False)
        assert store.player.x == start - PLAYER_SPEED

        movement.move_player(store, move_left=False, move_right=True)
        assert store.player.x == start

    def test_both_directions_cancel(self, store):
        movement = MovementSystem()
        start = store.player.x
        movement.move_player(store, move_left=True, move_right=True)
        assert store.player.x == start

    def test_clamped_at_left_edge(self, store):
        movement = MovementSystem()
        store.player.x = 2
        movement.move_player(store, move_left=True, move_right=False)
        assert store.player.x == 0

    def test_clamped_at_right_edge(self, store):
        movement = MovementSystem()
        max_x = store.width - store.player.width
        store.player.x = max_x - 1
        movement.move_player(store, move_left=False, move_right=True)
        assert store.player.x == max_x


class TestProjectileMovement:
    """Tests for shots in flight."""

    def test_straight_shot_moves_up(self, store):
        movement = MovementSystem()
        store.player_projectiles = [Projectile(100, 300)]

        movement.move_player_projectiles(store)

        shot = store.player_projectiles[0]
        assert shot.x == pytest.approx(100)
        assert shot.y == pytest.approx(300 - PLAYER_PROJECTILE_VELOCITY)

    def test_angled_shot_drifts_sideways(self, store):
        movement = MovementSystem()
        store.player_projectiles = [Projectile(100, 300, angle=0.3)]

        movement.move_player_projectiles(store)

        shot = store.player_projectiles[0]
        assert shot.x == pytest.approx(100 + math.sin(0.3) * PLAYER_PROJECTILE_VELOCITY)
        assert shot.y == pytest.approx(300 - math.cos(0.3) * PLAYER_PROJECTILE_VELOCITY)

    def test_shot_leaving_top_removed_same_tick(self, store):
        """A shot that crosses y=0 is gone after the same movement pass."""
        movement = MovementSystem()
        keep = Projectile(100, 300)
        store.player_projectiles = [Projectile(100, 5), keep]

        movement.move_player_projectiles(store)

        assert store.player_projectiles == [keep]

    def test_shot_leaving_sides_removed(self, store):
        movement = MovementSystem()
        store.player_projectiles = [
            Projectile(store.width - 1, 300, angle=0.3),
            Projectile(1, 300, angle=-0.3),
        ]

        movement.move_player_projectiles(store)

        assert store.player_projectiles == []

    def test_alien_shot_falls_faster_each_level(self, store):
        movement = MovementSystem()
        store.alien_projectiles = [Projectile(100, 100)]

        movement.move_alien_projectiles(store)
        assert store.alien_projectiles[0].y == pytest.approx(100 + alien_projectile_speed(1))

        store.progress.level = 4
        movement.move_alien_projectiles(store)
        assert store.alien_projectiles[0].y == pytest.approx(
            100 + alien_projectile_speed(1) + alien_projectile_speed(4)
        )
        assert alien_projectile_speed(4) > alien_projectile_speed(1)

    def test_alien_shot_leaving_bottom_removed(self, store):
        movement = MovementSystem()
        store.alien_projectiles = [Projectile(100, store.height - 1)]

        movement.move_alien_projectiles(store)

        assert store.alien_projectiles == []


class TestSwarmMovement:
    """Tests for bounce-and-descend."""

    def test_swarm_steps_sideways(self, store):
        movement = MovementSystem()
        store.aliens = [Alien(100, 100), Alien(200, 100)]

        bounced = movement.move_swarm(store)

        assert not bounced
        assert [a.x for a in store.aliens] == [100 + swarm_step(1), 200 + swarm_step(1)]
        assert all(a.y == 100 for a in store.aliens)

    def test_step_scales_with_level(self, store):
        movement = MovementSystem()
        store.progress.level = 3
        store.aliens = [Alien(100, 100)]

        movement.move_swarm(store)

        assert store.aliens[0].x == pytest.approx(100 + 3.5)

    def test_bounce_flips_direction_and_descends_once(self, store):
        """Two aliens crossing the edge still only step down once."""
        movement = MovementSystem()
        edge = store.width - 40
        store.aliens = [Alien(edge - 1, 100), Alien(edge, 145), Alien(300, 100)]

        bounced = movement.move_swarm(store)

        assert bounced
        assert store.alien_direction == -1
        assert [a.y for a in store.aliens] == [
            100 + ALIEN_STEP_DOWN, 145 + ALIEN_STEP_DOWN, 100 + ALIEN_STEP_DOWN
        ]

    def test_swarm_moves_left_after_bounce(self, store):
        movement = MovementSystem()
        store.alien_direction = -1
        store.aliens = [Alien(100, 100)]

        movement.move_swarm(store)

        assert store.aliens[0].x == pytest.approx(100 - swarm_step(1))

    def test_left_edge_bounce(self, store):
        movement = MovementSystem()
        store.alien_direction = -1
        store.aliens = [Alien(1, 100)]

        assert movement.move_swarm(store)
        assert store.alien_direction == 1

    def test_dead_aliens_do_not_move(self, store):
        """Tombstones stay put and never trigger a bounce."""
        movement = MovementSystem()
        dead = Alien(store.width - 40, 100, alive=False)
        live = Alien(100, 100)
        store.aliens = [dead, live]

        bounced = movement.move_swarm(store)

        assert not bounced
        assert (dead.x, dead.y) == (store.width - 40, 100)
        assert live.x == 100 + swarm_step(1)


class TestPowerUpMovement:
    """Tests for power-ups seeking the player."""

    def test_power_up_moves_toward_player(self, store):
        movement = MovementSystem()
        cx, cy = store.player.center
        powerup = PowerUp(cx - 10, 100, PowerUpType.SHIELD)
        store.powerups = [powerup]

        movement.move_powerups(store)

        assert powerup.x == pytest.approx(cx - 10)
        assert powerup.y == pytest.approx(100 + POWERUP_SEEK_SPEED)

    def test_diagonal_seek_is_normalized(self, store):
        movement = MovementSystem()
        powerup = PowerUp(0, 0, PowerUpType.SHIELD)
        store.powerups = [powerup]
        before = powerup.center

        movement.move_powerups(store)

        after = powerup.center
        travelled = math.hypot(after[0] - before[0], after[1] - before[1])
        assert travelled == pytest.approx(POWERUP_SEEK_SPEED)

    def test_power_up_on_player_centre_holds_still(self, store):
        """Zero-length seek vector means no movement, not an error."""
        movement = MovementSystem()
        cx, cy = store.player.center
        powerup = PowerUp(cx - 10, cy - 10, PowerUpType.SPREAD_SHOT)
        store.powerups = [powerup]

        movement.move_powerups(store)

        assert (powerup.x, powerup.y) == (cx - 10, cy - 10)
