import random

import pytest

from shinobi.battle.actor import EnemyType
from shinobi.battle.enemies import (
    create_boss_enemy,
    create_random_enemy,
    create_strong_enemy,
    create_weak_enemy,
)


@pytest.mark.parametrize("factory,expected", [
    (create_weak_enemy, (EnemyType.WEAK, 60, 6, 2)),
    (create_strong_enemy, (EnemyType.STRONG, 120, 12, 6)),
    (create_boss_enemy, (EnemyType.BOSS, 200, 18, 10)),
])
def test_presets(factory, expected):
    config = factory(id="e1", name="Foe")
    assert (config.enemy_type, config.max_hp, config.attack_power, config.defense) == expected
    assert config.id == "e1"
    assert config.name == "Foe"


def test_random_enemy_covers_every_tier():
    rng = random.Random(8)
    tiers = {create_random_enemy("e", "Mysterious Foe", rng).enemy_type for _ in range(100)}
    assert tiers == set(EnemyType)


def test_random_enemy_is_seeded():
    a = [create_random_enemy("e", "Foe", random.Random(4)).enemy_type for _ in range(3)]
    b = [create_random_enemy("e", "Foe", random.Random(4)).enemy_type for _ in range(3)]
    assert a == b
