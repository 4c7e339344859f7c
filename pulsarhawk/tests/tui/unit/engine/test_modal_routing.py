"""Unit tests for dialogs, input gating and subscription operations."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

import pytest
import pytest_asyncio

from pulsarhawk.constants.enums import ControlEvent
from pulsarhawk.constants.limits import MAX_SEEK_HOURS_DIGITS
from pulsarhawk.engine.dispatcher import Dispatcher
from pulsarhawk.engine.events import CharInput, Control
from pulsarhawk.engine.operations import describe, seek_hours
from pulsarhawk.models.state.active_resource import Subscriptions
from pulsarhawk.models.state.commands import (
    DeleteSubscription,
    SeekSubscription,
    SkipAllMessages,
    SubscriptionTarget,
)

TARGET = SubscriptionTarget("public", "default", "orders", "A")


@pytest_asyncio.fixture
async def subscriptions_dispatcher(topics_dispatcher: Dispatcher, drain: Any) -> Dispatcher:
    topics_dispatcher.dispatch(Control(ControlEvent.ENTER))
    await drain(topics_dispatcher)
    assert topics_dispatcher.state.active_resource == Subscriptions()
    return topics_dispatcher


@pytest.mark.unit
class TestDescribe:
    """Tests for operation result messages."""

    def test_delete(self) -> None:
        assert describe(DeleteSubscription(TARGET)) == (
            "Subscription deleted.",
            "Failed to delete subscription",
        )

    def test_skip(self) -> None:
        assert describe(SkipAllMessages(TARGET)) == (
            "All messages skipped successfully.",
            "Failed to skip messages",
        )

    def test_seek_plural_and_singular(self) -> None:
        assert describe(SeekSubscription(TARGET, timedelta(hours=24)))[0] == "24 hours seeked."
        assert describe(SeekSubscription(TARGET, timedelta(hours=1)))[0] == "1 hour seeked."

    def test_seek_hours(self) -> None:
        assert seek_hours(SeekSubscription(TARGET, timedelta(hours=48))) == 48


@pytest.mark.unit
class TestInputGating:
    """Keys bound to commands type characters while input is captured."""

    @pytest.mark.asyncio
    async def test_delete_key_does_not_confirm_in_numeric_modal(
        self, subscriptions_dispatcher: Dispatcher
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        assert dispatcher.state.input_modal is not None
        assert dispatcher.state.input_modal.value == "24"

        dispatcher.dispatch(Control(ControlEvent.DELETE, "d"))
        assert dispatcher.state.confirmation is None
        assert dispatcher.state.input_modal.value == "24"

        dispatcher.dispatch(CharInput("7"))
        assert dispatcher.state.input_modal.value == "247"

    @pytest.mark.asyncio
    async def test_navigation_keys_type_into_search(
        self, subscriptions_dispatcher: Dispatcher
    ) -> None:
        dispatcher = subscriptions_dispatcher
        subscriptions = dispatcher.state.store.subscriptions
        dispatcher.dispatch(Control(ControlEvent.SEARCH, "/"))
        dispatcher.dispatch(Control(ControlEvent.DOWN, "j"))
        dispatcher.dispatch(Control(ControlEvent.SKIP, "x"))
        assert subscriptions.search.value == "jx"
        assert dispatcher.state.confirmation is None
        assert subscriptions.cursor is None

    @pytest.mark.asyncio
    async def test_arrow_keys_without_char_are_dropped_while_capturing(
        self, subscriptions_dispatcher: Dispatcher
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEARCH, "/"))
        dispatcher.dispatch(Control(ControlEvent.DOWN))
        assert dispatcher.state.store.subscriptions.search.value == ""
        assert dispatcher.state.store.subscriptions.cursor == 0

    @pytest.mark.asyncio
    async def test_backspace_and_clear_edit_modal(
        self, subscriptions_dispatcher: Dispatcher
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        dispatcher.dispatch(Control(ControlEvent.BACKSPACE))
        assert dispatcher.state.input_modal.value == "2"
        dispatcher.dispatch(Control(ControlEvent.CLEAR_INPUT))
        assert dispatcher.state.input_modal.value == ""

    @pytest.mark.asyncio
    async def test_search_ignored_while_modal_open(
        self, subscriptions_dispatcher: Dispatcher
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        dispatcher.dispatch(Control(ControlEvent.SEARCH, "/"))
        assert dispatcher.state.store.subscriptions.search is None
        assert dispatcher.state.input_modal.value == "24"

    @pytest.mark.asyncio
    async def test_non_ascii_digit_is_not_typed(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        dispatcher.dispatch(Control(ControlEvent.CLEAR_INPUT))
        dispatcher.dispatch(CharInput("²"))
        assert dispatcher.state.input_modal.value == ""
        assert dispatcher.dispatch(Control(ControlEvent.ENTER)) is True
        await drain(dispatcher)
        assert dispatcher.state.input_modal is not None
        assert fake_admin.mutation_calls() == []

    @pytest.mark.asyncio
    async def test_long_hours_value_is_capped(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        dispatcher.dispatch(Control(ControlEvent.CLEAR_INPUT))
        for _ in range(11):
            dispatcher.dispatch(CharInput("9"))
        assert dispatcher.state.input_modal.value == "9" * MAX_SEEK_HOURS_DIGITS
        assert dispatcher.dispatch(Control(ControlEvent.ENTER)) is True
        await drain(dispatcher)
        hours = int("9" * MAX_SEEK_HOURS_DIGITS)
        assert fake_admin.mutation_calls() == [
            ("seek_subscription", TARGET, timedelta(hours=hours))
        ]


@pytest.mark.unit
class TestConfirmationGate:
    """While a confirmation is open only navigation and answers get through."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("control", "char"),
        [
            (ControlEvent.SEEK, "s"),
            (ControlEvent.SKIP, "x"),
            (ControlEvent.DELETE, "d"),
            (ControlEvent.SEARCH, "/"),
            (ControlEvent.SUBSCRIBE, None),
            (ControlEvent.CYCLE_SIDE, None),
            (ControlEvent.YANK, "y"),
            (ControlEvent.BACKSPACE, None),
            (ControlEvent.CLEAR_INPUT, None),
        ],
    )
    async def test_other_controls_are_ignored(
        self,
        subscriptions_dispatcher: Dispatcher,
        fake_admin: Any,
        drain: Any,
        control: ControlEvent,
        char: str | None,
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.DELETE, "d"))
        confirmation = dispatcher.state.confirmation
        dispatcher.dispatch(Control(control, char))
        dispatcher.dispatch(CharInput("7"))
        await drain(dispatcher)
        assert dispatcher.state.confirmation == confirmation
        assert dispatcher.state.input_modal is None
        assert dispatcher.state.store.subscriptions.search is None
        assert dispatcher.state.active_resource == Subscriptions()
        assert fake_admin.mutation_calls() == []

    @pytest.mark.asyncio
    async def test_seek_cannot_stack_on_delete(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.DELETE, "d"))
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        dispatcher.dispatch(Control(ControlEvent.ENTER))
        await drain(dispatcher)
        assert dispatcher.state.confirmation is None
        assert dispatcher.state.input_modal is None
        assert fake_admin.mutation_calls() == []


@pytest.mark.unit
class TestConfirmation:
    """Delete and skip confirmations."""

    @pytest.mark.asyncio
    async def test_delete_accept_runs_and_refreshes(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.DOWN, "j"))
        dispatcher.dispatch(Control(ControlEvent.DELETE, "d"))
        confirmation = dispatcher.state.confirmation
        assert confirmation is not None
        assert confirmation.message == "Delete 'B' subscription?"
        assert fake_admin.mutation_calls() == []

        fake_admin.subscriptions[("public", "default", "orders")] = [
            sub for sub in fake_admin.subscriptions[("public", "default", "orders")]
            if sub.name != "B"
        ]
        calls_before = len(fake_admin.calls)
        dispatcher.dispatch(Control(ControlEvent.ACCEPT, "a"))
        assert dispatcher.state.confirmation is None
        await drain(dispatcher)

        target = SubscriptionTarget("public", "default", "orders", "B")
        assert fake_admin.mutation_calls() == [("delete_subscription", target)]
        assert ("list_subscriptions", "public", "default", "orders") in fake_admin.calls[
            calls_before:
        ]
        assert dispatcher.state.notification.message == "Subscription deleted."
        subscriptions = dispatcher.state.store.subscriptions
        assert [s.name for s in subscriptions.filtered] == ["A", "C"]
        assert subscriptions.cursor == 0

    @pytest.mark.asyncio
    async def test_refuse_discards(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SKIP, "x"))
        assert dispatcher.state.confirmation.message == "Skip all 'A' messages?"
        dispatcher.dispatch(Control(ControlEvent.REFUSE, "n"))
        await drain(dispatcher)
        assert dispatcher.state.confirmation is None
        assert fake_admin.mutation_calls() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "control", [ControlEvent.UP, ControlEvent.DOWN, ControlEvent.BACK, ControlEvent.ENTER]
    )
    async def test_navigation_dismisses_confirmation(
        self,
        subscriptions_dispatcher: Dispatcher,
        fake_admin: Any,
        drain: Any,
        control: ControlEvent,
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.DELETE, "d"))
        dispatcher.dispatch(Control(control))
        await drain(dispatcher)
        assert dispatcher.state.confirmation is None
        assert dispatcher.state.active_resource == Subscriptions()
        assert fake_admin.mutation_calls() == []

    @pytest.mark.asyncio
    async def test_failed_skip_notifies_error(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        fake_admin.failures["skip_all_messages"] = "HTTP 403 Forbidden"
        dispatcher.dispatch(Control(ControlEvent.SKIP, "x"))
        dispatcher.dispatch(Control(ControlEvent.ACCEPT, "a"))
        await drain(dispatcher)
        notification = dispatcher.state.notification
        assert notification.is_error
        assert notification.message == "Failed to skip messages :[ HTTP 403 Forbidden"

    @pytest.mark.asyncio
    async def test_unexpected_mutation_error_notifies(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        fake_admin.crashes["delete_subscription"] = UnicodeDecodeError(
            "utf-8", b"\xff", 0, 1, "invalid start byte"
        )
        dispatcher.dispatch(Control(ControlEvent.DELETE, "d"))
        dispatcher.dispatch(Control(ControlEvent.ACCEPT, "a"))
        await drain(dispatcher)
        notification = dispatcher.state.notification
        assert notification.is_error
        assert notification.message.startswith(
            "Failed to delete subscription :[ Unexpected error: UnicodeDecodeError"
        )
        assert dispatcher.state.active_resource == Subscriptions()

    @pytest.mark.asyncio
    async def test_delete_ignored_on_topics(self, topics_dispatcher: Dispatcher) -> None:
        topics_dispatcher.dispatch(Control(ControlEvent.DELETE, "d"))
        assert topics_dispatcher.state.confirmation is None


@pytest.mark.unit
class TestSeek:
    """The seek input flow."""

    @pytest.mark.asyncio
    async def test_seek_submits_without_confirmation(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        assert dispatcher.state.input_modal.message == "Seek A subscription for:"
        dispatcher.dispatch(Control(ControlEvent.CLEAR_INPUT))
        dispatcher.dispatch(CharInput("1"))
        dispatcher.dispatch(Control(ControlEvent.ENTER))
        assert dispatcher.state.input_modal is None
        assert dispatcher.state.confirmation is None
        await drain(dispatcher)
        assert fake_admin.mutation_calls() == [
            ("seek_subscription", TARGET, timedelta(hours=1))
        ]
        assert dispatcher.state.notification.message == "1 hour seeked."
        assert dispatcher.state.active_resource == Subscriptions()

    @pytest.mark.asyncio
    async def test_enter_on_empty_buffer_keeps_modal(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        dispatcher.dispatch(Control(ControlEvent.CLEAR_INPUT))
        dispatcher.dispatch(Control(ControlEvent.ENTER))
        await drain(dispatcher)
        assert dispatcher.state.input_modal is not None
        assert fake_admin.mutation_calls() == []
        assert dispatcher.state.active_resource == Subscriptions()

    @pytest.mark.asyncio
    async def test_back_closes_modal_without_navigating(
        self, subscriptions_dispatcher: Dispatcher, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        dispatcher.dispatch(Control(ControlEvent.BACK))
        await drain(dispatcher)
        assert dispatcher.state.input_modal is None
        assert dispatcher.state.active_resource == Subscriptions()

    @pytest.mark.asyncio
    async def test_seek_keeps_selection_when_item_disappears(
        self, subscriptions_dispatcher: Dispatcher, fake_admin: Any, drain: Any
    ) -> None:
        dispatcher = subscriptions_dispatcher
        dispatcher.dispatch(Control(ControlEvent.DOWN, "j"))
        dispatcher.dispatch(Control(ControlEvent.SEEK, "s"))
        fake_admin.subscriptions[("public", "default", "orders")] = [
            sub for sub in fake_admin.subscriptions[("public", "default", "orders")]
            if sub.name != "B"
        ]
        dispatcher.dispatch(Control(ControlEvent.ENTER))
        await drain(dispatcher)
        subscriptions = dispatcher.state.store.subscriptions
        assert [s.name for s in subscriptions.filtered] == ["A", "C"]
        assert subscriptions.cursor is not None
        assert 0 <= subscriptions.cursor < len(subscriptions.filtered)


@pytest.mark.unit
class TestTerminate:
    """Terminate stops the loop."""

    @pytest.mark.asyncio
    async def test_dispatch_returns_false(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.dispatch(Control(ControlEvent.TERMINATE)) is False
        assert dispatcher.dispatch(Control(ControlEvent.UP)) is True
