"""
Typed event bus for decoupled communication.

Event types are Enum members so listeners never match on magic strings.
The battle engine publishes through this bus so that presentation and
persistence layers can react to a round without the engine knowing
about them.

Usage:
    class BattleEvent(Enum):
        ROUND_COMPLETED = auto()

    bus.subscribe(BattleEvent.ROUND_COMPLETED, on_round)
    bus.publish(BattleEvent.ROUND_COMPLETED, turn_number=3)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Dictionary of event-specific data
        consumed: Whether a handler stopped propagation
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)
    consumed: bool = False

    def consume(self) -> None:
        """Mark event as consumed (stops propagation)."""
        self.consumed = True

    def get(self, key: str, default: Any = None) -> Any:
        """Get event data by key."""
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


@dataclass(eq=False)
class _Subscription:
    priority: int
    handler: EventHandler
    one_shot: bool = False


class EventBus:
    """
    Synchronous publish/subscribe hub.

    Features:
    - Typed events (Enum-based)
    - Priority ordering (higher first, ties in subscription order)
    - One-shot handlers
    - Event consumption (stops propagation)
    - Events published from inside a handler are queued, not nested
    """

    def __init__(self):
        self._handlers: dict[Enum, list[_Subscription]] = {}
        self._event_queue: list[Event] = []
        self._is_publishing = False

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        one_shot: bool = False,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback function(event: Event)
            priority: Higher priority handlers are called first (default 0)
            one_shot: If True, handler is removed after first call
        """
        subs = self._handlers.setdefault(event_type, [])
        index = len(subs)
        for i, sub in enumerate(subs):
            if priority > sub.priority:
                index = i
                break
        subs.insert(index, _Subscription(priority, handler, one_shot))

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """Remove every subscription of handler for event_type."""
        subs = self._handlers.get(event_type)
        if not subs:
            return
        self._handlers[event_type] = [s for s in subs if s.handler != handler]

    def has_subscribers(self, event_type: Enum) -> bool:
        """Check whether anything listens for event_type."""
        return bool(self._handlers.get(event_type))

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Args:
            event_type: The event type
            **data: Event data as keyword arguments

        Returns:
            The Event object (check .consumed to see if it was handled)
        """
        event = Event(type=event_type, data=data)
        if self._is_publishing:
            self._event_queue.append(event)
        else:
            self._dispatch(event)
        return event

    def clear(self, event_type: Enum | None = None) -> None:
        """Clear handlers for one event type, or all of them."""
        if event_type is None:
            self._handlers.clear()
        else:
            self._handlers.pop(event_type, None)

    def _dispatch(self, event: Event) -> None:
        self._is_publishing = True
        try:
            self._call_handlers(event)
        finally:
            self._is_publishing = False

        while self._event_queue:
            self._dispatch(self._event_queue.pop(0))

    def _call_handlers(self, event: Event) -> None:
        subs = self._handlers.get(event.type)
        if not subs:
            return

        spent = []
        for sub in list(subs):
            try:
                sub.handler(event)
            except Exception:
                # A broken listener must not break the publisher
                logger.exception("Error in event handler for %s", event.type)

            if sub.one_shot:
                spent.append(sub)
            if event.consumed:
                break

        for sub in spent:
            if sub in subs:
                subs.remove(sub)
