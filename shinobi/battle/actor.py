"""
Battle actors - participants in combat.

Combatants are built by value from plain snapshots (PlayerSnapshot,
EnemyConfig) so that a battle never writes back into the caller's data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import Field

from shinobi.components import Health, Chakra, Experience
from shinobi.core.component import Component


class EnemyType(Enum):
    """Enemy tier. Drives presets and experience rewards."""
    WEAK = "weak"
    STRONG = "strong"
    BOSS = "boss"


class PlayerSnapshot(Component):
    """
    Plain-data view of the player, handed to and from persistence.

    current_hp and current_chakra default to their maximums and are
    clamped into range.
    """
    id: str
    name: str
    max_hp: int = Field(default=100, gt=0)
    current_hp: Optional[int] = None
    max_chakra: int = Field(default=50, ge=0)
    current_chakra: Optional[int] = None
    strength: int = Field(default=10, ge=0)
    defense: int = Field(default=5, ge=0)
    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0)
    known_jutsu: list[str] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        hp = self.max_hp if self.current_hp is None else self.current_hp
        self.current_hp = max(0, min(hp, self.max_hp))
        chakra = self.max_chakra if self.current_chakra is None else self.current_chakra
        self.current_chakra = max(0, min(chakra, self.max_chakra))


class EnemyConfig(Component):
    """Static data for one enemy."""
    id: str
    name: str
    enemy_type: EnemyType = EnemyType.WEAK
    max_hp: int = Field(gt=0)
    attack_power: int = Field(ge=0)
    defense: int = Field(default=0, ge=0)


@dataclass
class Combatant(ABC):
    """
    A participant in battle.

    Wraps components for uniform access by the resolver and the engine.
    Subclasses supply attack_stat.
    """
    id: str
    name: str
    health: Health
    defense: int = 0

    # Battle state
    is_defending: bool = False

    @property
    @abstractmethod
    def attack_stat(self) -> int:
        """Stat that scales raw damage."""

    @property
    def defense_stat(self) -> int:
        return self.defense

    @property
    def is_alive(self) -> bool:
        return not self.health.is_dead

    @property
    def current_hp(self) -> int:
        return self.health.current

    @property
    def max_hp(self) -> int:
        return self.health.max_hp

    @property
    def hp_fraction(self) -> float:
        """Current HP as a fraction of max HP."""
        return self.health.percent

    def take_damage(self, amount: int) -> int:
        """Apply already-mitigated damage. Returns HP actually lost."""
        return self.health.take_damage(amount)

    def start_defend(self) -> None:
        self.is_defending = True

    def end_defend(self) -> None:
        self.is_defending = False


@dataclass
class Player(Combatant):
    """The player's combatant. Strength is the attack stat."""
    strength: int = 10
    chakra: Chakra = field(default_factory=Chakra)
    experience: Experience = field(default_factory=Experience)
    known_jutsu: list[str] = field(default_factory=list)

    @property
    def attack_stat(self) -> int:
        return self.strength

    @property
    def level(self) -> int:
        return self.experience.level

    @property
    def current_chakra(self) -> int:
        return self.chakra.current

    @property
    def max_chakra(self) -> int:
        return self.chakra.max_chakra

    def to_snapshot(self) -> PlayerSnapshot:
        """Plain-data copy for persistence."""
        return PlayerSnapshot(
            id=self.id,
            name=self.name,
            max_hp=self.max_hp,
            current_hp=self.current_hp,
            max_chakra=self.max_chakra,
            current_chakra=self.current_chakra,
            strength=self.strength,
            defense=self.defense,
            level=self.level,
            xp=self.experience.current,
            known_jutsu=list(self.known_jutsu),
        )


@dataclass
class Enemy(Combatant):
    """An enemy combatant. Attack power is the attack stat."""
    attack_power: int = 0
    enemy_type: EnemyType = EnemyType.WEAK

    @property
    def attack_stat(self) -> int:
        return self.attack_power


def create_player(snapshot: PlayerSnapshot) -> Player:
    """Create a Player from a snapshot. The snapshot is not retained."""
    return Player(
        id=snapshot.id,
        name=snapshot.name,
        health=Health(current=snapshot.current_hp, max_hp=snapshot.max_hp),
        defense=snapshot.defense,
        strength=snapshot.strength,
        chakra=Chakra(current=snapshot.current_chakra, max_chakra=snapshot.max_chakra),
        experience=Experience(current=snapshot.xp, level=snapshot.level),
        known_jutsu=list(snapshot.known_jutsu),
    )


def create_enemy(config: EnemyConfig) -> Enemy:
    """Create a fresh, full-health Enemy from its config."""
    return Enemy(
        id=config.id,
        name=config.name,
        health=Health(current=config.max_hp, max_hp=config.max_hp),
        defense=config.defense,
        attack_power=config.attack_power,
        enemy_type=config.enemy_type,
    )
