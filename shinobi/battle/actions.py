"""
Battle actions - attack and defend resolution.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shinobi.battle.actor import Combatant
from shinobi.battle.config import BattleConfig
from shinobi.battle.errors import InvariantViolation

logger = logging.getLogger(__name__)


class ActionKind(Enum):
    """Actions a combatant can take in a round."""
    ATTACK = "attack"
    DEFEND = "defend"


@dataclass(frozen=True)
class AttackResult:
    """Result of resolving one attack."""
    attacker_id: str
    defender_id: str
    raw: int
    mitigated: int
    damage: int
    defended: bool
    description: str


def roll_raw_damage(attack_stat: int, rng: random.Random) -> int:
    """Roll raw damage uniformly in [attack_stat // 2, attack_stat]."""
    if attack_stat <= 0:
        return 0
    return rng.randint(attack_stat // 2, attack_stat)


def compute_damage(
    raw: int,
    defense_stat: int,
    defending: bool,
    reduction: float = 0.5,
) -> tuple[int, int]:
    """
    Mitigate a raw damage roll.

    Args:
        raw: Raw damage rolled by the attacker
        defense_stat: Defender's defense; blocks defense_stat // 2
        defending: Whether the defender braced this round
        reduction: Multiplier applied to mitigated damage when defending

    Returns:
        (mitigated, final) damage, both >= 0
    """
    mitigated = max(0, raw - defense_stat // 2)
    final = math.floor(mitigated * reduction) if defending else mitigated
    return mitigated, max(0, final)


def _describe_attack(attacker: Combatant, defender: Combatant, damage: int, defended: bool) -> str:
    if damage == 0:
        return f"{attacker.name} attacks {defender.name} but the attack is blocked!"
    if defended:
        return (
            f"{attacker.name} attacks {defender.name}! "
            f"Partially blocked, {damage} damage taken."
        )
    return f"{attacker.name} attacks {defender.name} for {damage} damage!"


def resolve_attack(
    attacker: Combatant,
    defender: Combatant,
    rng: random.Random,
    config: Optional[BattleConfig] = None,
) -> AttackResult:
    """
    Resolve a basic attack and apply it to the defender.

    Raises:
        InvariantViolation: If either side is already defeated
    """
    if not defender.is_alive:
        raise InvariantViolation(f"{defender.name} is already defeated")
    if not attacker.is_alive:
        raise InvariantViolation(f"{attacker.name} cannot act while defeated")

    reduction = (config or BattleConfig()).defend_reduction
    raw = roll_raw_damage(attacker.attack_stat, rng)
    mitigated, final = compute_damage(
        raw, defender.defense_stat, defender.is_defending, reduction
    )
    dealt = defender.take_damage(final)

    logger.debug(
        "%s -> %s: raw=%d mitigated=%d final=%d defending=%s",
        attacker.id, defender.id, raw, mitigated, dealt, defender.is_defending,
    )

    return AttackResult(
        attacker_id=attacker.id,
        defender_id=defender.id,
        raw=raw,
        mitigated=mitigated,
        damage=dealt,
        defended=defender.is_defending,
        description=_describe_attack(attacker, defender, dealt, defender.is_defending),
    )


def resolve_defend(combatant: Combatant) -> str:
    """Put the combatant into a defending stance. Returns the log text."""
    combatant.start_defend()
    return f"{combatant.name} takes a defensive stance!"
