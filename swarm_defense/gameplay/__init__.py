"""
Gameplay core: entities, systems and the Game orchestrator.
NO UI DEPENDENCIES.
"""
from .entities import AlienType, PowerUpType
from .game import Game, ControlSignals, GameEvent
from .progression import GamePhase
from .snapshot import GameSnapshot

__all__ = [
    "AlienType",
    "ControlSignals",
    "Game",
    "GameEvent",
    "GamePhase",
    "GameSnapshot",
    "PowerUpType",
]
