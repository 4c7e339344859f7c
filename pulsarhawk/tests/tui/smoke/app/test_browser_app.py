"""Smoke tests driving PulsarHawkApp through real key presses.

The admin API and the websocket consumer are replaced by in-memory fakes so
the full input -> dispatcher -> renderer path runs without a cluster.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from pulsarhawk.app import PulsarHawkApp
from pulsarhawk.models.resources import Message
from pulsarhawk.models.state.active_resource import (
    Listening,
    Namespaces,
    Subscriptions,
    Tenants,
    Topics,
)
from pulsarhawk.models.state.app_settings import AppSettings
from pulsarhawk.screens import BrowserScreen

SETTLE = 0.3


@pytest.fixture
def app(fake_admin: Any, fake_listener: Any) -> PulsarHawkApp:
    return PulsarHawkApp(
        AppSettings(cluster_name="smoke"),
        admin=fake_admin,
        listener=fake_listener,
        idle_interval=0.01,
    )


@pytest.mark.smoke
class TestBrowserApp:
    """End-to-end browsing."""

    @pytest.mark.asyncio
    async def test_starts_on_tenants(self, app: PulsarHawkApp) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause(SETTLE)
            assert isinstance(app.screen, BrowserScreen)
            snapshot = app.browser.last_snapshot
            assert snapshot is not None
            assert snapshot.active_resource == Tenants()
            assert [t.name for t in snapshot.tenants.all] == ["public", "sample"]
            assert snapshot.cluster_name == "smoke"

    @pytest.mark.asyncio
    async def test_drill_down_and_back(self, app: PulsarHawkApp) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause(SETTLE)
            await pilot.press("enter")
            await pilot.pause(SETTLE)
            assert app.state.active_resource == Namespaces()
            await pilot.press("enter")
            await pilot.pause(SETTLE)
            assert app.state.active_resource == Topics()
            await pilot.press("enter")
            await pilot.pause(SETTLE)
            assert app.state.active_resource == Subscriptions()
            assert app.browser.last_snapshot.active_resource == Subscriptions()
            await pilot.press("escape")
            await pilot.pause(SETTLE)
            assert app.state.active_resource == Topics()

    @pytest.mark.asyncio
    async def test_search_typing_swallows_command_keys(self, app: PulsarHawkApp) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause(SETTLE)
            await pilot.press("slash", "s", "a")
            await pilot.pause(SETTLE)
            tenants = app.state.store.tenants
            assert tenants.search is not None
            assert tenants.search.value == "sa"
            assert [t.name for t in tenants.filtered] == ["sample"]
            assert app.state.input_modal is None

    @pytest.mark.asyncio
    async def test_seek_dialog_flow(self, app: PulsarHawkApp, fake_admin: Any) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause(SETTLE)
            for _ in range(3):
                await pilot.press("enter")
                await pilot.pause(SETTLE)
            await pilot.press("s")
            await pilot.pause(SETTLE)
            assert app.browser.last_snapshot.input_modal is not None
            await pilot.press("d", "backspace", "backspace", "6", "enter")
            await pilot.pause(SETTLE)
            assert app.state.input_modal is None
            assert [call[0] for call in fake_admin.mutation_calls()] == ["seek_subscription"]
            assert app.state.notification.message == "6 hours seeked."

    @pytest.mark.asyncio
    async def test_live_tail(self, app: PulsarHawkApp, fake_listener: Any) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause(SETTLE)
            await pilot.press("enter")
            await pilot.pause(SETTLE)
            await pilot.press("enter")
            await pilot.pause(SETTLE)
            await pilot.press("ctrl+s")
            await pilot.pause(SETTLE)
            assert isinstance(app.state.active_resource, Listening)
            fake_listener.streams[0].feed(Message(body=b'{"a":1}'))
            await pilot.pause(SETTLE)
            snapshot = app.browser.last_snapshot
            assert len(snapshot.messages.all) == 1
            assert snapshot.messages.cursor == 0
            await pilot.press("escape")
            await pilot.pause(SETTLE)
            assert app.state.active_resource == Topics()

    @pytest.mark.asyncio
    async def test_quit_closes_admin(self, app: PulsarHawkApp, fake_admin: Any) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause(SETTLE)
            await pilot.press("ctrl+q")
            await asyncio.sleep(SETTLE)
        assert fake_admin.closed
