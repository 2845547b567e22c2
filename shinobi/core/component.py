"""
Component base class for data-only models.

Components are plain data containers validated by Pydantic. Battle
logic lives in the resolver and the engine, not here, which keeps:
- Serialization trivial (snapshots for persistence)
- Copy-by-value cheap (model_copy)
- Testing easy

Usage:
    class Health(Component):
        current: int
        max_hp: int
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Component(BaseModel):
    """
    Base class for all components and value records.

    Components are data-only containers using Pydantic for:
    - Automatic validation
    - JSON serialization
    - Type hints
    - Default values
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Unknown keys are a caller mistake
        extra='forbid',
    )

    def clone(self) -> Component:
        """Create a deep copy of this component."""
        return self.model_copy(deep=True)
