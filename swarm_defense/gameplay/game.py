"""
Main Game class - orchestrates all gameplay systems.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from dataclasses import dataclass
from typing import Optional, List, Tuple

from .entities import AlienType, PowerUpType
from .store import EntityStore
from .movement import MovementSystem
from .spawning import SpawnSystem
from .collisions import CollisionSystem, CollisionReport
from .powerups import PowerUpSystem
from .progression import GamePhase, ProgressionStateMachine, PhaseChange
from .snapshot import GameSnapshot, take_snapshot
from .constants import VIEWPORT_WIDTH, VIEWPORT_HEIGHT, TICK_SECONDS, SHOOT_DELAY, TIME_EPSILON

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControlSignals:
    """Abstract controls sampled once per tick."""
    move_left: bool = False
    move_right: bool = False
    fire: bool = False


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class PhaseChangedEvent(GameEvent):
    """Game phase changed."""
    old_phase: GamePhase
    new_phase: GamePhase


@dataclass
class ScoreChangedEvent(GameEvent):
    old: int
    new: int


@dataclass
class LivesChangedEvent(GameEvent):
    old: int
    new: int


@dataclass
class LevelChangedEvent(GameEvent):
    old: int
    new: int


@dataclass
class AlienDestroyedEvent(GameEvent):
    """A player shot destroyed an alien."""
    alien_type: AlienType
    points: int


@dataclass
class PlayerHitEvent(GameEvent):
    """Alien fire hit the player this tick."""
    hits: int
    lives: int
    life_lost: bool


@dataclass
class PowerUpCollectedEvent(GameEvent):
    power_up_type: PowerUpType


@dataclass
class PowerUpExpiredEvent(GameEvent):
    power_up_type: PowerUpType


class Game:
    """
    The main game class that orchestrates all gameplay.

    This class is COMPLETELY DECOUPLED from UI.
    It exposes state as immutable snapshots and accepts commands as
    method calls.

    Tick order: expire effects -> movement (and player fire) ->
    alien fire -> collisions -> apply power-ups -> progression.

    Usage:
        game = Game()
        while True:
            events = game.update(dt, ControlSignals(fire=True))
            snapshot = game.snapshot()
            # UI renders snapshot, reacts to events
    """

    def __init__(
        self,
        width: int = VIEWPORT_WIDTH,
        height: int = VIEWPORT_HEIGHT,
        rng: Optional[random.Random] = None,
    ):
        self.store = EntityStore(width, height)

        # Systems
        self.movement = MovementSystem()
        self.spawner = SpawnSystem(rng)
        self.collisions = CollisionSystem()
        self.powerups = PowerUpSystem()
        self.progression = ProgressionStateMachine()

        # Simulation clock (seconds); only advances while the game runs
        self.elapsed: float = 0.0
        self.tick_number: int = 0
        self._last_shot: Optional[float] = None

        self.controls = ControlSignals()

        # Events raised by commands between updates
        self._pending: List[GameEvent] = []
        self._events: List[GameEvent] = []

        self.spawner.populate_level(self.store)

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    @property
    def phase(self) -> GamePhase:
        return self.progression.phase

    @property
    def score(self) -> int:
        return self.store.progress.score

    @property
    def lives(self) -> int:
        return self.store.progress.lives

    @property
    def hits(self) -> int:
        return self.store.progress.hits

    @property
    def level(self) -> int:
        return self.store.progress.level

    def snapshot(self) -> GameSnapshot:
        """Immutable view of the current state."""
        return take_snapshot(self.store, self.phase)

    def effect_time_remaining(self, effect: PowerUpType) -> float:
        """Seconds left on a timed power-up (0.0 if inactive)."""
        return self.powerups.remaining(effect, self.elapsed)

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def set_controls(self, controls: ControlSignals) -> None:
        """Set the held controls. Anything that isn't ControlSignals is ignored."""
        if isinstance(controls, ControlSignals):
            self.controls = controls

    def toggle_pause(self) -> bool:
        """Pause or resume. Returns False if ignored (game over)."""
        change = self.progression.toggle_pause()
        if change is None:
            return False
        logger.info(f"Game {'paused' if change[1] == GamePhase.PAUSED else 'resumed'}")
        self._pending.append(PhaseChangedEvent(*change))
        return True

    def restart(self) -> bool:
        """
        Start a new game. Only valid from GAME_OVER.
        Resets score, lives, hits, level, effects and the alien grid.
        """
        before = self._progress_values()
        change = self.progression.restart()
        if change is None:
            return False

        self.store.reset()
        self.powerups.reset(self.store)
        self.spawner.populate_level(self.store)
        self.elapsed = 0.0
        self.tick_number = 0
        self._last_shot = None
        self.controls = ControlSignals()

        logger.info("Game restarted")
        self._pending.append(PhaseChangedEvent(*change))
        self._pending.extend(self._progress_events(before))
        return True

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: float = TICK_SECONDS, controls: Optional[ControlSignals] = None) -> List[GameEvent]:
        """
        Advance one tick. dt is the elapsed time in seconds, used for
        power-up expiry and fire cooldown; movement is per tick.
        Returns list of events that occurred.
        """
        self._events = self._pending
        self._pending = []

        if controls is not None:
            self.set_controls(controls)

        # PAUSED and GAME_OVER don't update
        if not self.progression.is_running:
            return self._events

        before = self._progress_values()
        self.elapsed += max(0.0, dt)
        self.tick_number += 1

        if self.phase == GamePhase.LEVEL_CLEARED:
            self._record_phase_change(self.progression.begin_next_level(self.store, self.spawner))
        else:
            self._update_playing()

        self._events.extend(self._progress_events(before))
        return self._events

    def _update_playing(self) -> None:
        store = self.store
        now = self.elapsed

        for effect in self.powerups.expire(store, now):
            self._events.append(PowerUpExpiredEvent(effect))

        # Movement
        controls = self.controls
        self.movement.move_player(store, bool(controls.move_left), bool(controls.move_right))
        if controls.fire:
            self._try_fire(now)
        self.movement.move_player_projectiles(store)
        self.movement.move_alien_projectiles(store)
        self.movement.move_swarm(store)
        self.movement.move_powerups(store)

        # Spawning
        self.spawner.maybe_alien_shot(store)

        # Collisions
        report = self.collisions.update(store)
        self._record_collisions(report)

        # Power-ups found this tick
        for power_up_type in report.collected:
            self.powerups.apply(store, power_up_type, now)
            self._events.append(PowerUpCollectedEvent(power_up_type))

        # Progression
        self._record_phase_change(self.progression.evaluate(store))

    def _try_fire(self, now: float) -> None:
        """Fire unless the cooldown since the last shot is still running."""
        if self._last_shot is not None and now - self._last_shot < SHOOT_DELAY - TIME_EPSILON:
            return
        self.spawner.fire_player_shot(self.store)
        self._last_shot = now

    def _record_collisions(self, report: CollisionReport) -> None:
        for alien in report.destroyed:
            self._events.append(AlienDestroyedEvent(alien.alien_type, alien.alien_type.points))

        if report.hits_taken:
            progress = self.store.progress
            if report.lives_lost:
                logger.debug(f"Life lost, {progress.lives} remaining")
            self._events.append(PlayerHitEvent(
                hits=progress.hits,
                lives=progress.lives,
                life_lost=report.lives_lost > 0,
            ))

    def _record_phase_change(self, change: Optional[PhaseChange]) -> None:
        if change is not None:
            self._events.append(PhaseChangedEvent(*change))

    def _progress_values(self) -> Tuple[int, int, int]:
        progress = self.store.progress
        return (progress.score, progress.lives, progress.level)

    def _progress_events(self, before: Tuple[int, int, int]) -> List[GameEvent]:
        """Change events for score, lives and level, only where they differ."""
        old_score, old_lives, old_level = before
        new_score, new_lives, new_level = self._progress_values()

        events: List[GameEvent] = []
        if new_score != old_score:
            events.append(ScoreChangedEvent(old_score, new_score))
        if new_lives != old_lives:
            events.append(LivesChangedEvent(old_lives, new_lives))
        if new_level != old_level:
            events.append(LevelChangedEvent(old_level, new_level))
        return events

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def step_ticks(self, count: int, controls: Optional[ControlSignals] = None) -> List[GameEvent]:
        """Run `count` ticks of TICK_SECONDS. Returns all events."""
        all_events = []
        for _ in range(count):
            all_events.extend(self.update(TICK_SECONDS, controls))
        return all_events

    def simulate(self, seconds: float, dt: float = TICK_SECONDS) -> List[GameEvent]:
        """
        Simulate the game for a number of seconds.
        Stops early when the game is paused or over.
        """
        all_events = []
        elapsed = 0.0
        while elapsed < seconds and self.progression.is_running:
            all_events.extend(self.update(dt))
            elapsed += dt
        return all_events
