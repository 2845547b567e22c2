"""
Enemy AI - stateless Attack/Defend policy driven by remaining HP.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from shinobi.battle.actions import ActionKind
from shinobi.battle.actor import Combatant
from shinobi.battle.config import BattleConfig

logger = logging.getLogger(__name__)


class EnemyAI:
    """
    Chooses the enemy's action each round.

    Healthy enemies press the attack; below the low-HP threshold they
    split evenly between attacking and defending. The policy keeps no
    memory between turns.
    """

    def __init__(self, config: Optional[BattleConfig] = None):
        self.config = config or BattleConfig()

    def attack_chance(self, enemy: Combatant) -> float:
        """Probability of choosing Attack at the enemy's current HP."""
        if enemy.hp_fraction < self.config.low_hp_threshold:
            return self.config.low_hp_attack_chance
        return self.config.attack_chance

    def action_weights(self, enemy: Combatant) -> dict[ActionKind, float]:
        """Full distribution over the enemy's actions."""
        attack = self.attack_chance(enemy)
        return {ActionKind.ATTACK: attack, ActionKind.DEFEND: 1.0 - attack}

    def choose_action(self, enemy: Combatant, rng: random.Random) -> ActionKind:
        """Sample an action with a single uniform draw."""
        chance = self.attack_chance(enemy)
        action = ActionKind.ATTACK if rng.random() < chance else ActionKind.DEFEND
        logger.debug(
            "%s at %.2f HP chooses %s (attack chance %.2f)",
            enemy.id, enemy.hp_fraction, action.value, chance,
        )
        return action
