"""
Battle module - turn-based combat between one player and one enemy.

Provides:
- Battle actors (player, enemy) built from plain snapshots
- Action resolution (attack, defend)
- Enemy AI
- Round controller with win/lose detection, log and rewards
"""

from shinobi.battle.actor import (
    Combatant,
    Player,
    Enemy,
    EnemyType,
    EnemyConfig,
    PlayerSnapshot,
    create_player,
    create_enemy,
)
from shinobi.battle.actions import (
    ActionKind,
    AttackResult,
    roll_raw_damage,
    compute_damage,
    resolve_attack,
    resolve_defend,
)
from shinobi.battle.ai import EnemyAI
from shinobi.battle.config import BattleConfig, ExpReward
from shinobi.battle.enemies import (
    ENEMY_PRESETS,
    create_enemy_config,
    create_weak_enemy,
    create_strong_enemy,
    create_boss_enemy,
    create_random_enemy,
)
from shinobi.battle.errors import BattleError, InvalidStateError, InvariantViolation
from shinobi.battle.system import (
    BattleEngine,
    BattleState,
    BattlePhase,
    BattleEvent,
    BattleLogEntry,
    BattleRewards,
)

__all__ = [
    # Actor
    "Combatant",
    "Player",
    "Enemy",
    "EnemyType",
    "EnemyConfig",
    "PlayerSnapshot",
    "create_player",
    "create_enemy",
    # Actions
    "ActionKind",
    "AttackResult",
    "roll_raw_damage",
    "compute_damage",
    "resolve_attack",
    "resolve_defend",
    # AI
    "EnemyAI",
    # Config
    "BattleConfig",
    "ExpReward",
    # Enemies
    "ENEMY_PRESETS",
    "create_enemy_config",
    "create_weak_enemy",
    "create_strong_enemy",
    "create_boss_enemy",
    "create_random_enemy",
    # Errors
    "BattleError",
    "InvalidStateError",
    "InvariantViolation",
    # System
    "BattleEngine",
    "BattleState",
    "BattlePhase",
    "BattleEvent",
    "BattleLogEntry",
    "BattleRewards",
]
