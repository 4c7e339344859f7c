"""Shared fixtures: in-memory admin and messaging collaborators."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from datetime import timedelta

import pytest
import pytest_asyncio

from pulsarhawk.constants.enums import ControlEvent
from pulsarhawk.controllers.admin.errors import AdminRequestError
from pulsarhawk.controllers.base.base_controller import BaseController
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.dispatcher import Dispatcher
from pulsarhawk.engine.events import Control
from pulsarhawk.models.resources import (
    Consumer,
    Message,
    Namespace,
    Subscription,
    Tenant,
    Topic,
)
from pulsarhawk.models.state.app_state import AppState
from pulsarhawk.models.state.commands import SubscriptionTarget


class FakeAdmin(BaseController):
    """Admin controller answering from dictionaries."""

    def __init__(self) -> None:
        super().__init__()
        self.tenants = [Tenant(name="public"), Tenant(name="sample")]
        self.namespaces = {"public": [Namespace(name="default"), Namespace(name="functions")]}
        self.topics = {
            ("public", "default"): [
                Topic(name="orders", fqn="persistent://public/default/orders"),
                Topic(name="payments", fqn="persistent://public/default/payments"),
            ]
        }
        self.subscriptions = {
            ("public", "default", "orders"): [
                Subscription(name="A", sub_type="Shared", backlog_size=3, consumer_count=1),
                Subscription(name="B", sub_type="Exclusive", backlog_size=0, consumer_count=1),
                Subscription(name="C", sub_type="Failover", backlog_size=7, consumer_count=2),
            ]
        }
        self.consumers = {
            ("public", "default", "orders", "A"): [
                Consumer(name="consumer-1", unacked_messages=2, connected_since="today")
            ]
        }
        self.failures: dict[str, str] = {}
        self.crashes: dict[str, Exception] = {}
        self.calls: list[tuple] = []
        self.closed = False

    def _maybe_fail(self, name: str) -> None:
        if name in self.crashes:
            raise self.crashes[name]
        if name in self.failures:
            raise AdminRequestError(self.failures[name])

    async def check_connection(self) -> bool:
        return True

    async def close(self) -> None:
        self.closed = True

    async def list_tenants(self) -> list[Tenant]:
        self.calls.append(("list_tenants",))
        self._maybe_fail("list_tenants")
        return list(self.tenants)

    async def list_namespaces(self, tenant: str) -> list[Namespace]:
        self.calls.append(("list_namespaces", tenant))
        self._maybe_fail("list_namespaces")
        return list(self.namespaces.get(tenant, []))

    async def list_topics(self, tenant: str, namespace: str) -> list[Topic]:
        self.calls.append(("list_topics", tenant, namespace))
        self._maybe_fail("list_topics")
        return list(self.topics.get((tenant, namespace), []))

    async def list_subscriptions(
        self, tenant: str, namespace: str, topic: str
    ) -> list[Subscription]:
        self.calls.append(("list_subscriptions", tenant, namespace, topic))
        self._maybe_fail("list_subscriptions")
        return list(self.subscriptions.get((tenant, namespace, topic), []))

    async def list_consumers(
        self, tenant: str, namespace: str, topic: str, subscription: str
    ) -> list[Consumer]:
        self.calls.append(("list_consumers", tenant, namespace, topic, subscription))
        self._maybe_fail("list_consumers")
        return list(self.consumers.get((tenant, namespace, topic, subscription), []))

    async def delete_subscription(self, target: SubscriptionTarget) -> None:
        self.calls.append(("delete_subscription", target))
        self._maybe_fail("delete_subscription")

    async def seek_subscription(self, target: SubscriptionTarget, time_delta: timedelta) -> None:
        self.calls.append(("seek_subscription", target, time_delta))
        self._maybe_fail("seek_subscription")

    async def skip_all_messages(self, target: SubscriptionTarget) -> None:
        self.calls.append(("skip_all_messages", target))
        self._maybe_fail("skip_all_messages")

    def mutation_calls(self) -> list[tuple]:
        return [call for call in self.calls if not call[0].startswith("list_")]


class FakeStream:
    """Consumer stream fed by the test through ``feed`` and ``end``."""

    def __init__(self, subscription_name: str) -> None:
        self.subscription_name = subscription_name
        self._queue: asyncio.Queue[Message | None] = asyncio.Queue()
        self.acked: list[Message] = []
        self.close_calls = 0

    def feed(self, message: Message) -> None:
        self._queue.put_nowait(message)

    def end(self) -> None:
        self._queue.put_nowait(None)

    async def receive(self) -> Message | None:
        return await self._queue.get()

    async def ack(self, message: Message) -> None:
        self.acked.append(message)

    async def close(self) -> None:
        self.close_calls += 1


class FakeListener:
    """Messaging client handing out FakeStreams."""

    def __init__(self) -> None:
        self.streams: list[FakeStream] = []
        self.subscriptions: list[tuple[str, str]] = []

    async def subscribe(self, topic_fqn: str, subscription_name: str) -> FakeStream:
        self.subscriptions.append((topic_fqn, subscription_name))
        stream = FakeStream(subscription_name)
        self.streams.append(stream)
        return stream


class FakeClipboard:
    def __init__(self) -> None:
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        self.copied.append(text)


async def drain_events(dispatcher: Dispatcher, settle: float = 0.05) -> int:
    """Dispatch events until the channel stays quiet for ``settle`` seconds."""
    handled = 0
    while True:
        event = await dispatcher.channel.get(timeout=settle)
        if event is None:
            return handled
        dispatcher.dispatch(event)
        handled += 1


@pytest.fixture
def fake_admin() -> FakeAdmin:
    return FakeAdmin()


@pytest.fixture
def fake_listener() -> FakeListener:
    return FakeListener()


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest_asyncio.fixture
async def dispatcher(
    fake_admin: FakeAdmin,
    fake_listener: FakeListener,
    fake_clipboard: FakeClipboard,
) -> AsyncIterator[Dispatcher]:
    """Dispatcher wired to fakes; notifications stay up for the whole test."""
    dispatcher = Dispatcher(
        AppState(cluster_name="test"),
        fake_admin,  # type: ignore[arg-type]
        fake_listener,  # type: ignore[arg-type]
        EventChannel(),
        clipboard=fake_clipboard,  # type: ignore[arg-type]
        info_seconds=60,
        error_seconds=60,
    )
    yield dispatcher
    await dispatcher.shutdown(grace=0.1)


@pytest.fixture
def drain() -> Callable[..., object]:
    return drain_events


@pytest_asyncio.fixture
async def topics_dispatcher(dispatcher: Dispatcher) -> Dispatcher:
    """Dispatcher browsing the topics of ``public/default``."""

    dispatcher.start()
    await drain_events(dispatcher)
    dispatcher.dispatch(Control(ControlEvent.ENTER))
    await drain_events(dispatcher)
    dispatcher.dispatch(Control(ControlEvent.ENTER))
    await drain_events(dispatcher)
    return dispatcher
