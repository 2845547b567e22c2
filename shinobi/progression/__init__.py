"""
Progression module - experience, levels and jutsu unlocks.
"""

from shinobi.progression.jutsu import Jutsu, JutsuType, JutsuUnlockTable, DEFAULT_JUTSU
from shinobi.progression.leveling import (
    LevelUpResult,
    award_experience,
    starting_jutsu,
    xp_to_next_level,
)

__all__ = [
    "Jutsu",
    "JutsuType",
    "JutsuUnlockTable",
    "DEFAULT_JUTSU",
    "LevelUpResult",
    "award_experience",
    "starting_jutsu",
    "xp_to_next_level",
]
