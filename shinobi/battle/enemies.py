"""
Enemy presets by tier.
"""

from __future__ import annotations

import random

from shinobi.battle.actor import EnemyConfig, EnemyType


# (max_hp, attack_power, defense)
ENEMY_PRESETS: dict[EnemyType, tuple[int, int, int]] = {
    EnemyType.WEAK: (60, 6, 2),
    EnemyType.STRONG: (120, 12, 6),
    EnemyType.BOSS: (200, 18, 10),
}


def create_enemy_config(enemy_type: EnemyType, id: str, name: str) -> EnemyConfig:
    """Build an EnemyConfig from the tier's preset stats."""
    max_hp, attack_power, defense = ENEMY_PRESETS[enemy_type]
    return EnemyConfig(
        id=id,
        name=name,
        enemy_type=enemy_type,
        max_hp=max_hp,
        attack_power=attack_power,
        defense=defense,
    )


def create_weak_enemy(id: str, name: str) -> EnemyConfig:
    return create_enemy_config(EnemyType.WEAK, id, name)


def create_strong_enemy(id: str, name: str) -> EnemyConfig:
    return create_enemy_config(EnemyType.STRONG, id, name)


def create_boss_enemy(id: str, name: str) -> EnemyConfig:
    return create_enemy_config(EnemyType.BOSS, id, name)


def create_random_enemy(id: str, name: str, rng: random.Random) -> EnemyConfig:
    """Pick a tier uniformly and build its preset."""
    enemy_type = rng.choice(list(ENEMY_PRESETS))
    return create_enemy_config(enemy_type, id, name)
