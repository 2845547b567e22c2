"""
Character components - health, chakra, experience.
"""

from __future__ import annotations

from pydantic import Field

from shinobi.core.component import Component


class Health(Component):
    """
    Health points tracking.

    Attributes:
        current: Current HP, kept within [0, max_hp]
        max_hp: Maximum HP
    """
    current: int = 100
    max_hp: int = Field(default=100, gt=0)

    def model_post_init(self, __context) -> None:
        """Ensure current stays inside [0, max_hp]."""
        self.current = max(0, min(self.current, self.max_hp))

    @property
    def is_dead(self) -> bool:
        return self.current <= 0

    @property
    def percent(self) -> float:
        """Get health as a fraction (0-1)."""
        return self.current / self.max_hp

    @property
    def is_full(self) -> bool:
        return self.current >= self.max_hp

    def take_damage(self, amount: int) -> int:
        """
        Take damage, clamping at zero.

        Args:
            amount: Damage to take (negative amounts count as zero)

        Returns:
            Actual damage dealt
        """
        actual = min(max(0, amount), self.current)
        self.current -= actual
        return actual

    def heal(self, amount: int) -> int:
        """
        Heal, clamping at max_hp.

        Returns:
            Actual amount healed
        """
        old = self.current
        self.current = min(self.current + max(0, amount), self.max_hp)
        return self.current - old

    def restore_full(self) -> None:
        self.current = self.max_hp


class Chakra(Component):
    """
    Chakra pool. Reserved for jutsu; Attack and Defend never spend it.

    Attributes:
        current: Current chakra
        max_chakra: Maximum chakra
    """
    current: int = 50
    max_chakra: int = Field(default=50, ge=0)

    def model_post_init(self, __context) -> None:
        self.current = max(0, min(self.current, self.max_chakra))

    @property
    def percent(self) -> float:
        if self.max_chakra <= 0:
            return 0.0
        return self.current / self.max_chakra

    def can_spend(self, amount: int) -> bool:
        return self.current >= amount

    def spend(self, amount: int) -> bool:
        """
        Spend chakra.

        Returns:
            True if successful, False if insufficient chakra
        """
        if not self.can_spend(amount):
            return False
        self.current -= amount
        return True

    def restore(self, amount: int) -> int:
        """
        Restore chakra.

        Returns:
            Actual amount restored
        """
        old = self.current
        self.current = min(self.current + max(0, amount), self.max_chakra)
        return self.current - old


def xp_to_next_level(level: int) -> int:
    """XP needed to advance from level to level + 1."""
    return level * 100 + (level - 1) * 50


class Experience(Component):
    """
    Experience and leveling tracking.

    Attributes:
        current: XP accumulated toward the next level
        level: Current level
    """
    current: int = Field(default=0, ge=0)
    level: int = Field(default=1, ge=1)

    @property
    def to_next_level(self) -> int:
        return xp_to_next_level(self.level)

    @property
    def progress(self) -> float:
        """Get progress to next level (0-1)."""
        return self.current / self.to_next_level

    def add_exp(self, amount: int) -> int:
        """
        Add experience points.

        Args:
            amount: XP to add

        Returns:
            Number of levels gained
        """
        self.current += max(0, amount)

        levels_gained = 0
        while self.current >= self.to_next_level:
            self.current -= self.to_next_level
            self.level += 1
            levels_gained += 1

        return levels_gained
