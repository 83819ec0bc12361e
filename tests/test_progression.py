"""
Tests for the progression state machine.
"""
import pytest
from swarm_defense.gameplay.progression import ProgressionStateMachine, GamePhase
from swarm_defense.gameplay.spawning import SpawnSystem
from swarm_defense.gameplay.entities import Projectile


@pytest.fixture
def level_store(store, quiet_rng):
    """A store with a fresh level-1 grid."""
    SpawnSystem(quiet_rng).populate_level(store)
    return store


class TestEvaluate:
    """Tests for post-collision transitions."""

    def test_nothing_happens_mid_level(self, level_store):
        machine = ProgressionStateMachine()
        assert machine.evaluate(level_store) is None
        assert machine.phase == GamePhase.PLAYING

    def test_out_of_lives_is_game_over(self, level_store):
        machine = ProgressionStateMachine()
        level_store.progress.lives = 0

        assert machine.evaluate(level_store) == (GamePhase.PLAYING, GamePhase.GAME_OVER)
        assert machine.phase == GamePhase.GAME_OVER

    def test_swarm_reaching_player_is_game_over(self, level_store):
        machine = ProgressionStateMachine()
        alien = level_store.aliens[-1]
        alien.y = level_store.player.y - alien.height

        machine.evaluate(level_store)

        assert machine.phase == GamePhase.GAME_OVER

    def test_dead_alien_at_player_row_is_harmless(self, level_store):
        machine = ProgressionStateMachine()
        alien = level_store.aliens[-1]
        alien.y = level_store.player.y
        alien.alive = False

        assert machine.evaluate(level_store) is None

    def test_all_dead_clears_level(self, level_store):
        machine = ProgressionStateMachine()
        for alien in level_store.aliens:
            alien.alive = False

        assert machine.evaluate(level_store) == (GamePhase.PLAYING, GamePhase.LEVEL_CLEARED)

    def test_game_over_beats_level_clear(self, level_store):
        machine = ProgressionStateMachine()
        for alien in level_store.aliens:
            alien.alive = False
        level_store.progress.lives = 0

        machine.evaluate(level_store)

        assert machine.phase == GamePhase.GAME_OVER

    def test_game_over_is_terminal(self, level_store):
        machine = ProgressionStateMachine()
        level_store.progress.lives = 0
        machine.evaluate(level_store)

        level_store.progress.lives = 3
        assert machine.evaluate(level_store) is None
        assert machine.phase == GamePhase.GAME_OVER


class TestLevelTransition:
    """Tests for moving to the next level."""

    def test_next_level(self, level_store, quiet_rng):
        machine = ProgressionStateMachine()
        for alien in level_store.aliens:
            alien.alive = False
        machine.evaluate(level_store)
        level_store.player_projectiles = [Projectile(10, 10)]
        level_store.alien_projectiles = [Projectile(20, 20)]

        change = machine.begin_next_level(level_store, SpawnSystem(quiet_rng))

        assert change == (GamePhase.LEVEL_CLEARED, GamePhase.PLAYING)
        assert level_store.progress.level == 2
        assert level_store.player_projectiles == []
        assert level_store.alien_projectiles == []
        assert len(level_store.live_aliens()) == 50

    def test_next_level_requires_clear(self, level_store, quiet_rng):
        machine = ProgressionStateMachine()
        assert machine.begin_next_level(level_store, SpawnSystem(quiet_rng)) is None
        assert level_store.progress.level == 1


class TestPauseAndRestart:
    """Tests for user-driven transitions."""

    def test_toggle_pause(self):
        machine = ProgressionStateMachine()

        assert machine.toggle_pause() == (GamePhase.PLAYING, GamePhase.PAUSED)
        assert not machine.is_running
        assert machine.toggle_pause() == (GamePhase.PAUSED, GamePhase.PLAYING)
        assert machine.is_running

    def test_pause_resumes_level_cleared(self):
        machine = ProgressionStateMachine()
        machine.phase = GamePhase.LEVEL_CLEARED

        machine.toggle_pause()
        machine.toggle_pause()

        assert machine.phase == GamePhase.LEVEL_CLEARED

    def test_pause_ignored_after_game_over(self):
        machine = ProgressionStateMachine()
        machine.phase = GamePhase.GAME_OVER
        assert machine.toggle_pause() is None
        assert machine.phase == GamePhase.GAME_OVER

    def test_restart_only_from_game_over(self):
        machine = ProgressionStateMachine()
        assert machine.restart() is None

        machine.phase = GamePhase.GAME_OVER
        assert machine.restart() == (GamePhase.GAME_OVER, GamePhase.PLAYING)
