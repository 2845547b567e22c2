"""
Core module.

Exports:
- Component: Pydantic base for data-only models
- EventBus, Event: Event system
"""

from shinobi.core.component import Component
from shinobi.core.events import EventBus, Event, EventHandler

__all__ = [
    "Component",
    "EventBus",
    "Event",
    "EventHandler",
]
