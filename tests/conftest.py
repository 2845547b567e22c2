import os
import random
import sys

import pytest

# Ensure shinobi can be imported without installation
sys.path.append(os.getcwd())


class StubRandom(random.Random):
    """Random source with fixed draws, for exact damage arithmetic."""

    def __init__(self, draw=0.0, pick_max=True):
        super().__init__(0)
        self.draw = draw
        self.pick_max = pick_max

    def randint(self, a, b):
        return b if self.pick_max else a

    def random(self):
        return self.draw


@pytest.fixture
def stub_rng():
    """Factory for StubRandom. draw < 0.7 makes a healthy enemy attack."""
    return StubRandom


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from shinobi.core.events import EventBus
    return EventBus()


@pytest.fixture
def player_snapshot():
    from shinobi.battle.actor import PlayerSnapshot
    return PlayerSnapshot(
        id="player_001",
        name="Naruto",
        max_hp=100,
        max_chakra=50,
        strength=12,
        defense=6,
    )


@pytest.fixture
def enemy_config():
    from shinobi.battle.actor import EnemyConfig, EnemyType
    return EnemyConfig(
        id="enemy_001",
        name="Bandit",
        enemy_type=EnemyType.WEAK,
        max_hp=80,
        attack_power=10,
        defense=4,
    )
