"""
Power-up effects and their expiry deadlines.
NO UI DEPENDENCIES.
"""
import logging
from typing import Dict, List, Optional

from .entities import PowerUpType
from .store import EntityStore
from .constants import SHIELD_DURATION, SPREAD_SHOT_DURATION

logger = logging.getLogger(__name__)


# Timed effects and how long they last (seconds)
EFFECT_DURATIONS = {
    PowerUpType.SHIELD: SHIELD_DURATION,
    PowerUpType.SPREAD_SHOT: SPREAD_SHOT_DURATION,
}


class EffectTimers:
    """
    Deadline table: at most one pending deadline per timed effect.

    Scheduling an effect that is already pending replaces its deadline,
    so a superseded deadline can never fire.
    """

    def __init__(self):
        self._deadlines: Dict[PowerUpType, float] = {}

    def schedule(self, effect: PowerUpType, deadline: float) -> None:
        self._deadlines[effect] = deadline

    def deadline(self, effect: PowerUpType) -> Optional[float]:
        return self._deadlines.get(effect)

    def pop_expired(self, now: float) -> List[PowerUpType]:
        """Remove and return every effect whose deadline is at or before `now`."""
        expired = [effect for effect, deadline in self._deadlines.items() if deadline <= now]
        for effect in expired:
            del self._deadlines[effect]
        return expired

    def clear(self) -> None:
        self._deadlines.clear()

    def __len__(self) -> int:
        return len(self._deadlines)


class PowerUpSystem:
    """
    Applies collected power-ups and expires timed ones.

    Times are in seconds on the game's simulation clock.
    """

    def __init__(self):
        self.timers = EffectTimers()

    def apply(self, store: EntityStore, power_up_type: PowerUpType, now: float) -> None:
        """Apply one collected power-up at time `now`."""
        player = store.player

        if power_up_type == PowerUpType.EXTRA_LIFE:
            store.progress.lives += 1

        elif power_up_type == PowerUpType.SHIELD:
            player.has_shield = True
            self.timers.schedule(PowerUpType.SHIELD, now + EFFECT_DURATIONS[PowerUpType.SHIELD])

        elif power_up_type == PowerUpType.SPREAD_SHOT:
            player.has_spread_shot = True
            self.timers.schedule(
                PowerUpType.SPREAD_SHOT, now + EFFECT_DURATIONS[PowerUpType.SPREAD_SHOT]
            )

        logger.debug(f"Power-up {power_up_type.name} collected at t={now:.2f}s")

    def expire(self, store: EntityStore, now: float) -> List[PowerUpType]:
        """Clear flags whose deadline has passed. Returns the expired effects."""
        expired = self.timers.pop_expired(now)
        for effect in expired:
            if effect == PowerUpType.SHIELD:
                store.player.has_shield = False
            elif effect == PowerUpType.SPREAD_SHOT:
                store.player.has_spread_shot = False
            logger.debug(f"Power-up {effect.name} expired at t={now:.2f}s")
        return expired

    def remaining(self, effect: PowerUpType, now: float) -> float:
        """Seconds left on a timed effect (0.0 if inactive)."""
        deadline = self.timers.deadline(effect)
        if deadline is None:
            return 0.0
        return max(0.0, deadline - now)

    def reset(self, store: EntityStore) -> None:
        """Drop all pending deadlines and clear every effect flag."""
        self.timers.clear()
        store.player.has_shield = False
        store.player.has_spread_shot = False
