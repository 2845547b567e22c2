"""
Battle configuration.

Tunables for the enemy AI, defend mitigation and experience rewards.
Defaults reproduce the stock game; a JSON file can override any of them.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from shinobi.battle.actor import EnemyType


class ExpReward(BaseModel):
    """Experience reward formula: base + step * roll."""
    model_config = ConfigDict(frozen=True)

    base: int = Field(ge=0)
    step: int = Field(default=1, ge=0)


def _default_exp_rewards() -> dict[EnemyType, ExpReward]:
    return {
        EnemyType.WEAK: ExpReward(base=25, step=1),
        EnemyType.STRONG: ExpReward(base=50, step=2),
        EnemyType.BOSS: ExpReward(base=100, step=5),
    }


class BattleConfig(BaseModel):
    """
    Configuration for the battle engine.

    Attributes:
        low_hp_threshold: HP fraction below which the enemy turns cautious
        low_hp_attack_chance: Attack probability while below the threshold
        attack_chance: Attack probability otherwise
        defend_reduction: Multiplier applied to mitigated damage on a defender
        exp_rewards: Experience formula per enemy tier
        exp_roll_max: Upper bound (inclusive) of the experience roll
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    low_hp_threshold: float = Field(default=0.30, ge=0.0, le=1.0)
    low_hp_attack_chance: float = Field(default=0.50, ge=0.0, le=1.0)
    attack_chance: float = Field(default=0.70, ge=0.0, le=1.0)
    defend_reduction: float = Field(default=0.5, ge=0.0, le=1.0)
    exp_rewards: dict[EnemyType, ExpReward] = Field(default_factory=_default_exp_rewards)
    exp_roll_max: int = Field(default=10, ge=0)

    @classmethod
    def from_file(cls, path: str | Path) -> BattleConfig:
        """Load a config from a JSON file. Missing keys keep their defaults."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    def exp_reward_for(self, enemy_type: EnemyType) -> ExpReward:
        return self.exp_rewards.get(enemy_type, ExpReward(base=0, step=0))
