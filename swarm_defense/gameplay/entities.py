"""
Entity types: Player, Alien, Projectile, PowerUp.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum, auto

from .constants import (
    PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED,
    ALIEN_WIDTH, ALIEN_HEIGHT,
    PROJECTILE_WIDTH, PROJECTILE_HEIGHT,
    POWERUP_WIDTH, POWERUP_HEIGHT,
    BASIC_ALIEN_POINTS, CARRIER_ALIEN_POINTS,
)


class PowerUpType(Enum):
    """Collectible effects dropped by carrier aliens."""
    EXTRA_LIFE = auto()
    SHIELD = auto()
    SPREAD_SHOT = auto()


class AlienType(Enum):
    """Alien variants. Carriers drop a power-up when destroyed."""
    BASIC = auto()
    EXTRA_LIFE_CARRIER = auto()
    SHIELD_CARRIER = auto()
    SPREAD_SHOT_CARRIER = auto()

    @property
    def is_carrier(self) -> bool:
        return self is not AlienType.BASIC

    @property
    def points(self) -> int:
        """Score awarded for destroying this alien."""
        return CARRIER_ALIEN_POINTS if self.is_carrier else BASIC_ALIEN_POINTS

    @property
    def drop(self) -> Optional[PowerUpType]:
        """The power-up this alien drops, or None for basic aliens."""
        return CARRIER_DROPS.get(self)


# Carrier alien -> power-up it drops
CARRIER_DROPS = {
    AlienType.EXTRA_LIFE_CARRIER: PowerUpType.EXTRA_LIFE,
    AlienType.SHIELD_CARRIER: PowerUpType.SHIELD,
    AlienType.SPREAD_SHOT_CARRIER: PowerUpType.SPREAD_SHOT,
}

CARRIER_TYPES = tuple(CARRIER_DROPS)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right
    - y increases downward
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def overlaps(self, other: 'Rect') -> bool:
        """True if both axis projections overlap. Touching edges don't count."""
        return (
            self.x < other.right and
            self.right > other.x and
            self.y < other.bottom and
            self.bottom > other.y
        )


@dataclass
class Projectile:
    """
    A shot in flight.

    Player projectiles travel along `angle` (0 is straight up);
    alien projectiles ignore it and fall straight down.
    """
    x: float
    y: float
    angle: float = 0.0
    width: int = PROJECTILE_WIDTH
    height: int = PROJECTILE_HEIGHT

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class Player:
    """The player's ship. Never destroyed, only loses lives."""
    x: float
    y: float
    width: int = PLAYER_WIDTH
    height: int = PLAYER_HEIGHT
    speed: float = PLAYER_SPEED
    projectiles: List[Projectile] = field(default_factory=list)
    has_shield: bool = False
    has_spread_shot: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return self.rect.center


@dataclass
class Alien:
    """
    A member of the swarm.

    Dead aliens stay in the grid (alive=False) until the next level
    replaces it.
    """
    x: float
    y: float
    alien_type: AlienType = AlienType.BASIC
    alive: bool = True
    width: int = ALIEN_WIDTH
    height: int = ALIEN_HEIGHT

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return self.rect.center


@dataclass
class PowerUp:
    """A dropped power-up drifting toward the player."""
    x: float
    y: float
    power_up_type: PowerUpType
    width: int = POWERUP_WIDTH
    height: int = POWERUP_HEIGHT

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return self.rect.center

    @classmethod
    def centered_on(cls, rect: Rect, power_up_type: PowerUpType) -> 'PowerUp':
        """Create a power-up whose centre matches the centre of `rect`."""
        cx, cy = rect.center
        return cls(
            x=cx - POWERUP_WIDTH / 2,
            y=cy - POWERUP_HEIGHT / 2,
            power_up_type=power_up_type,
        )
