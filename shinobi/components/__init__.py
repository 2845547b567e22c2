"""
Shinobi Components - Data-only component definitions.

All components are Pydantic models containing only data and the
small amount of bookkeeping needed to keep that data in bounds.
"""

from shinobi.components.character import (
    Health,
    Chakra,
    Experience,
    xp_to_next_level,
)

__all__ = [
    "Health",
    "Chakra",
    "Experience",
    "xp_to_next_level",
]
