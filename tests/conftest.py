"""
Pytest fixtures for Swarm Defense tests.
"""
import random

import pytest

from swarm_defense.gameplay.game import Game
from swarm_defense.gameplay.store import EntityStore


class StubRandom(random.Random):
    """
    Random whose random() always returns `value`.

    Integer draws (choice, randrange) go through getrandbits, which is
    delegated to a separate generator seeded with `seed`, so picks vary
    but stay deterministic.
    """

    def __init__(self, value: float = 0.99, seed: int = 0):
        self._picks = random.Random(seed)
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value

    def getrandbits(self, k: int) -> int:
        return self._picks.getrandbits(k)


@pytest.fixture
def quiet_rng() -> StubRandom:
    """No carriers are rolled and aliens never fire."""
    return StubRandom(0.99)


@pytest.fixture
def carrier_rng() -> StubRandom:
    """Every alien is a carrier; aliens still never fire at level 1."""
    return StubRandom(0.05)


@pytest.fixture
def game(quiet_rng) -> Game:
    """A game with no randomness in play."""
    return Game(rng=quiet_rng)


@pytest.fixture
def store() -> EntityStore:
    """An empty store with the default viewport."""
    return EntityStore()
