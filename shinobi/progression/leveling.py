"""
Leveling - experience gain and level-up growth on player snapshots.

Everything here works by value: the input snapshot is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from shinobi.battle.actor import PlayerSnapshot
from shinobi.components import Experience, xp_to_next_level
from shinobi.progression.jutsu import Jutsu, JutsuUnlockTable

# Stat growth per level gained
HP_PER_LEVEL = 20
CHAKRA_PER_LEVEL = 10
STRENGTH_PER_LEVEL = 2
DEFENSE_PER_LEVEL = 1


@dataclass
class LevelUpResult:
    """Outcome of awarding experience."""
    snapshot: PlayerSnapshot
    exp_gained: int
    levels_gained: int = 0
    unlocked_jutsu: list[Jutsu] = field(default_factory=list)

    @property
    def leveled_up(self) -> bool:
        return self.levels_gained > 0

    @property
    def summary(self) -> str:
        parts = [f"Gained {self.exp_gained} XP!"]
        if self.leveled_up:
            parts.append(f"Level up! Now level {self.snapshot.level}!")
        for jutsu in self.unlocked_jutsu:
            parts.append(f"Unlocked Jutsu: {jutsu.name}!")
        return " ".join(parts)


def award_experience(
    snapshot: PlayerSnapshot,
    amount: int,
    jutsu_table: Optional[JutsuUnlockTable] = None,
) -> LevelUpResult:
    """
    Add experience to a player and apply any level-ups.

    Each level grants max HP, max chakra, strength and defense, refills
    HP and chakra, and unlocks that level's jutsu if it is not already
    known.

    Args:
        snapshot: Player before the award
        amount: XP to add
        jutsu_table: Unlock table (defaults to the stock table)

    Returns:
        LevelUpResult holding the new snapshot
    """
    table = jutsu_table or JutsuUnlockTable()
    exp = Experience(current=snapshot.xp, level=snapshot.level)
    levels = exp.add_exp(amount)

    if not levels:
        return LevelUpResult(
            snapshot=snapshot.model_copy(update={"xp": exp.current}),
            exp_gained=amount,
        )

    known = list(snapshot.known_jutsu)
    unlocked = []
    for level in range(snapshot.level + 1, exp.level + 1):
        jutsu = table.get_jutsu_unlocked_at_level(level)
        if jutsu and jutsu.name not in known:
            known.append(jutsu.name)
            unlocked.append(jutsu)

    max_hp = snapshot.max_hp + HP_PER_LEVEL * levels
    max_chakra = snapshot.max_chakra + CHAKRA_PER_LEVEL * levels
    leveled = PlayerSnapshot(
        id=snapshot.id,
        name=snapshot.name,
        max_hp=max_hp,
        current_hp=max_hp,
        max_chakra=max_chakra,
        current_chakra=max_chakra,
        strength=snapshot.strength + STRENGTH_PER_LEVEL * levels,
        defense=snapshot.defense + DEFENSE_PER_LEVEL * levels,
        level=exp.level,
        xp=exp.current,
        known_jutsu=known,
    )
    return LevelUpResult(
        snapshot=leveled,
        exp_gained=amount,
        levels_gained=levels,
        unlocked_jutsu=unlocked,
    )


def starting_jutsu(level: int = 1, jutsu_table: Optional[JutsuUnlockTable] = None) -> list[str]:
    """Names of every jutsu a new player of this level starts with."""
    table = jutsu_table or JutsuUnlockTable()
    return [j.name for j in table.get_all_jutsu_up_to_level(level)]
