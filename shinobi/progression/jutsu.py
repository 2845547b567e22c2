"""
Jutsu table - which technique unlocks at which level.

Battles do not cast jutsu yet; the table feeds progression (level-up
unlocks) and the UI.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class JutsuType(Enum):
    """Jutsu families."""
    NINJUTSU = "ninjutsu"
    TAIJUTSU = "taijutsu"
    GENJUTSU = "genjutsu"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Jutsu:
    """Static data for a jutsu."""
    name: str
    chakra_cost: int
    min_damage: int
    max_damage: int
    jutsu_type: JutsuType
    description: str = ""

    def can_use(self, available_chakra: int) -> bool:
        return available_chakra >= self.chakra_cost


DEFAULT_JUTSU: dict[int, Jutsu] = {
    1: Jutsu("Basic Punch", 5, 8, 12, JutsuType.TAIJUTSU, "A basic physical attack"),
    3: Jutsu("Fireball", 10, 15, 25, JutsuType.NINJUTSU, "A basic fire technique"),
    5: Jutsu("Water Bullet", 12, 18, 28, JutsuType.NINJUTSU, "A water-based projectile attack"),
    7: Jutsu("Lightning Strike", 15, 22, 32, JutsuType.NINJUTSU, "A powerful lightning technique"),
    10: Jutsu(
        "Earth Wall", 8, 0, 0, JutsuType.NINJUTSU,
        "Creates a defensive barrier (reduces incoming damage)",
    ),
    12: Jutsu("Wind Cutter", 18, 25, 35, JutsuType.NINJUTSU, "A sharp wind-based attack"),
    15: Jutsu(
        "Shadow Clone", 20, 30, 40, JutsuType.NINJUTSU,
        "Creates shadow clones for a powerful attack",
    ),
    18: Jutsu("Chidori", 25, 35, 45, JutsuType.NINJUTSU, "A concentrated lightning technique"),
    20: Jutsu("Rasengan", 30, 40, 50, JutsuType.NINJUTSU, "A spinning chakra sphere attack"),
}


class JutsuUnlockTable:
    """
    Level-indexed jutsu unlocks.

    Usage:
        table = JutsuUnlockTable()
        jutsu = table.get_jutsu_unlocked_at_level(5)
    """

    def __init__(self, jutsu_by_level: Optional[dict[int, Jutsu]] = None):
        self._jutsu_by_level = dict(DEFAULT_JUTSU if jutsu_by_level is None else jutsu_by_level)

    @classmethod
    def load(cls, path: str | Path) -> JutsuUnlockTable:
        """
        Load a table from JSON.

        Expected format: {"<level>": {"name": ..., "chakra_cost": ...,
        "min_damage": ..., "max_damage": ..., "type": "ninjutsu",
        "description": ...}, ...}
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        table = {}
        for level, entry in data.items():
            table[int(level)] = Jutsu(
                name=entry["name"],
                chakra_cost=entry.get("chakra_cost", 0),
                min_damage=entry.get("min_damage", 0),
                max_damage=entry.get("max_damage", 0),
                jutsu_type=JutsuType(entry.get("type", "ninjutsu")),
                description=entry.get("description", ""),
            )
        logger.info("Loaded %d jutsu from %s", len(table), path)
        return cls(table)

    def get_jutsu_unlocked_at_level(self, level: int) -> Optional[Jutsu]:
        return self._jutsu_by_level.get(level)

    def get_all_jutsu_up_to_level(self, level: int) -> list[Jutsu]:
        """Every jutsu available at level, in unlock order."""
        return [
            self._jutsu_by_level[lvl]
            for lvl in sorted(self._jutsu_by_level)
            if lvl <= level
        ]

    def get_all_jutsu_levels(self) -> list[int]:
        return sorted(self._jutsu_by_level)

    def is_jutsu_available_at_level(self, jutsu_name: str, level: int) -> bool:
        return any(j.name == jutsu_name for j in self.get_all_jutsu_up_to_level(level))

    @property
    def total_jutsu_count(self) -> int:
        return len(self._jutsu_by_level)

    @property
    def max_jutsu_level(self) -> int:
        return max(self._jutsu_by_level, default=0)
