"""EventBus delivery and isolation."""

import asyncio

import pytest

from dugout.shared.core import events
from dugout.shared.core.event_bus import EventBus


@pytest.mark.asyncio
async def test_publish_reaches_every_subscriber():
    bus = EventBus()
    seen = []

    async def first(payload):
        seen.append(("first", payload["route"]))

    async def second(payload):
        seen.append(("second", payload["route"]))

    await bus.subscribe(events.TOPIC_NAV_SELECT, first)
    await bus.subscribe(events.TOPIC_NAV_SELECT, second)

    scheduled = await bus.publish(events.TOPIC_NAV_SELECT, events.create_nav_select_event("/explore"))
    assert scheduled == 2
    assert await bus.wait_until_idle()
    assert sorted(seen) == [("first", "/explore"), ("second", "/explore")]


@pytest.mark.asyncio
async def test_publish_without_subscribers():
    bus = EventBus()
    assert await bus.publish("nobody.listens", {}) == 0
    assert await bus.wait_until_idle()


@pytest.mark.asyncio
async def test_duplicate_subscription_is_ignored():
    bus = EventBus()

    async def handler(payload):
        pass

    await bus.subscribe("t", handler)
    await bus.subscribe("t", handler)
    assert bus.subscriber_count("t") == 1


@pytest.mark.asyncio
async def test_failing_handler_is_isolated():
    bus = EventBus()
    seen = []

    async def broken(payload):
        raise RuntimeError("boom")

    async def ok(payload):
        seen.append(payload["team"])

    await bus.subscribe(events.TOPIC_FAVORITE_ADD, broken)
    await bus.subscribe(events.TOPIC_FAVORITE_ADD, ok)
    await bus.publish(events.TOPIC_FAVORITE_ADD, events.create_favorite_event("Chicago Cubs"))
    assert await bus.wait_until_idle()
    assert seen == ["Chicago Cubs"]


@pytest.mark.asyncio
async def test_unsubscribe():
    bus = EventBus()
    seen = []

    async def handler(payload):
        seen.append(payload)

    await bus.subscribe("t", handler)
    await bus.unsubscribe("t", handler)
    await bus.unsubscribe("t", handler)
    assert await bus.publish("t", {}) == 0
    assert seen == []


@pytest.mark.asyncio
async def test_wait_covers_chained_publishes():
    bus = EventBus()
    seen = []

    async def relay(payload):
        await bus.publish("second", payload)

    async def sink(payload):
        await asyncio.sleep(0.01)
        seen.append(payload["query"])

    await bus.subscribe("first", relay)
    await bus.subscribe("second", sink)
    await bus.publish("first", events.create_search_event("sox"))
    assert await bus.wait_until_idle()
    assert seen == ["sox"]


@pytest.mark.asyncio
async def test_wait_times_out():
    bus = EventBus()
    release = asyncio.Event()

    async def slow(payload):
        await release.wait()

    await bus.subscribe("t", slow)
    await bus.publish("t", {})
    assert await bus.wait_until_idle(timeout=0.05) is False
    release.set()
    assert await bus.wait_until_idle()


@pytest.mark.asyncio
async def test_clear_drops_subscriptions():
    bus = EventBus()

    async def handler(payload):
        pass

    await bus.subscribe("t", handler)
    bus.clear()
    assert bus.subscriber_count("t") == 0


def test_favorites_changed_payload():
    payload = events.create_favorites_changed_event(
        favorites=["Boston Red Sox"], displayed=[], last_action="added", query=""
    )
    assert payload == {
        "favorites": ["Boston Red Sox"],
        "displayed": [],
        "last_action": "added",
        "query": "",
    }
