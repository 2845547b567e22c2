import logging
from enum import Enum, auto

from shinobi.core.events import EventBus, Event


class MockEvent(Enum):
    TEST_EVENT = auto()
    OTHER_EVENT = auto()


def test_event_bus_subscribe_publish(event_bus):
    received = []

    def handler(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, handler)
    event_bus.publish(MockEvent.TEST_EVENT, data="test")

    assert len(received) == 1
    assert received[0].type == MockEvent.TEST_EVENT
    assert received[0]["data"] == "test"
    assert received[0].get("missing", 5) == 5


def test_event_bus_unsubscribe(event_bus):
    received = []

    def handler(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, handler)
    event_bus.unsubscribe(MockEvent.TEST_EVENT, handler)
    event_bus.publish(MockEvent.TEST_EVENT)

    assert received == []
    assert not event_bus.has_subscribers(MockEvent.TEST_EVENT)


def test_event_priority(event_bus):
    order = []

    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("low"), priority=1)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("high"), priority=10)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("normal"), priority=5)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("normal2"), priority=5)

    event_bus.publish(MockEvent.TEST_EVENT)

    assert order == ["high", "normal", "normal2", "low"]


def test_event_consumption(event_bus):
    received = []

    def consumer(event):
        received.append("consumer")
        event.consume()

    def later_handler(event):
        received.append("later")

    event_bus.subscribe(MockEvent.TEST_EVENT, consumer, priority=10)
    event_bus.subscribe(MockEvent.TEST_EVENT, later_handler, priority=5)

    event = event_bus.publish(MockEvent.TEST_EVENT)

    assert received == ["consumer"]
    assert event.consumed


def test_one_shot_handler(event_bus):
    calls = []
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: calls.append(1), one_shot=True)

    event_bus.publish(MockEvent.TEST_EVENT)
    event_bus.publish(MockEvent.TEST_EVENT)

    assert calls == [1]


def test_failing_handler_is_logged_and_skipped(event_bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    event_bus.subscribe(MockEvent.TEST_EVENT, broken, priority=10)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: received.append(e))

    with caplog.at_level(logging.ERROR, logger="shinobi.core.events"):
        event_bus.publish(MockEvent.TEST_EVENT)

    assert len(received) == 1
    assert "Error in event handler" in caplog.text


def test_events_published_during_dispatch_are_queued(event_bus):
    order = []

    def first(event):
        order.append("test-start")
        event_bus.publish(MockEvent.OTHER_EVENT)
        order.append("test-end")

    event_bus.subscribe(MockEvent.TEST_EVENT, first)
    event_bus.subscribe(MockEvent.OTHER_EVENT, lambda e: order.append("other"))

    event_bus.publish(MockEvent.TEST_EVENT)

    assert order == ["test-start", "test-end", "other"]


def test_clear(event_bus):
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: None)
    event_bus.subscribe(MockEvent.OTHER_EVENT, lambda e: None)

    event_bus.clear(MockEvent.TEST_EVENT)
    assert not event_bus.has_subscribers(MockEvent.TEST_EVENT)
    assert event_bus.has_subscribers(MockEvent.OTHER_EVENT)

    event_bus.clear()
    assert not event_bus.has_subscribers(MockEvent.OTHER_EVENT)


def test_publish_without_subscribers_returns_event():
    bus = EventBus()
    event = bus.publish(MockEvent.TEST_EVENT, value=1)
    assert isinstance(event, Event)
    assert not event.consumed
