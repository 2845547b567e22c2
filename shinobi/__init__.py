"""
Shinobi Battle

Turn-based battle engine for a ninja RPG.

Quick Start:
    from shinobi.battle import BattleEngine, ActionKind, PlayerSnapshot
    from shinobi.battle import create_weak_enemy

    engine = BattleEngine(seed=7)
    state = engine.create_battle(
        PlayerSnapshot(id="p1", name="Naruto", strength=12, defense=6),
        create_weak_enemy(id="e1", name="Bandit"),
    )
    while not state.is_over:
        engine.submit_player_action(state, ActionKind.ATTACK)
    print(state.status_text)

For a rematch, call create_battle again with the same snapshot and enemy
config. States are never reset in place.
"""

__version__ = "0.1.0"

from shinobi.core import Component, EventBus, Event
from shinobi.battle import (
    ActionKind,
    BattleConfig,
    BattleEngine,
    BattleEvent,
    BattlePhase,
    BattleState,
    EnemyConfig,
    EnemyType,
    PlayerSnapshot,
)

__all__ = [
    # Core
    "Component",
    "EventBus",
    "Event",
    # Battle
    "ActionKind",
    "BattleConfig",
    "BattleEngine",
    "BattleEvent",
    "BattlePhase",
    "BattleState",
    "EnemyConfig",
    "EnemyType",
    "PlayerSnapshot",
]
