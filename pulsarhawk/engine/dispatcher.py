"""Single-writer event loop.

``Dispatcher.run`` is the only code that mutates AppState. It suspends only
while waiting on the event channel and renders a snapshot whenever the
channel is drained and something changed.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import TYPE_CHECKING, Any

from pulsarhawk.constants.enums import ControlEvent, SelectedPanel
from pulsarhawk.constants.limits import MAX_LIVE_MESSAGES
from pulsarhawk.constants.timeouts import (
    ERROR_NOTIFICATION_SECONDS,
    IDLE_POLL_INTERVAL,
    INFO_NOTIFICATION_SECONDS,
)
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.events import (
    CharInput,
    CommandIssued,
    Control,
    Event,
    LatestVersion,
    ListenSessionEnded,
    MessageReceived,
    MutationCompleted,
    ResourcesFetched,
)
from pulsarhawk.engine.live_tail import LiveTailController
from pulsarhawk.engine.modals import ModalController
from pulsarhawk.engine.navigation import Navigator
from pulsarhawk.engine.notifications import Notifier
from pulsarhawk.engine.operations import SubscriptionOperations
from pulsarhawk.models.state.active_resource import Listening, Subscriptions
from pulsarhawk.models.state.app_state import AppState, DrawState
from pulsarhawk.models.state.commands import (
    DeleteSubscription,
    DismissNotification,
    SkipAllMessages,
)
from pulsarhawk.utils.clipboard import ClipboardError
from pulsarhawk.utils.message_decoding import pretty_body

if TYPE_CHECKING:
    from pulsarhawk.controllers.admin.controller import PulsarAdminController
    from pulsarhawk.controllers.messaging.listener import PulsarListener
    from pulsarhawk.utils.clipboard import TextualClipboard

logger = logging.getLogger(__name__)

# Controls whose keys type characters; while a dialog or search box is
# capturing input they are delivered as text instead of commands.
CAPTURE_MASKED_CONTROLS = frozenset(
    {
        ControlEvent.UP,
        ControlEvent.DOWN,
        ControlEvent.CYCLE_SIDE,
        ControlEvent.YANK,
        ControlEvent.DELETE,
        ControlEvent.SEEK,
        ControlEvent.SKIP,
        ControlEvent.SUBSCRIBE,
        ControlEvent.ACCEPT,
        ControlEvent.REFUSE,
    }
)

# Controls still accepted while a confirmation is open; everything else is
# dropped until it is accepted, refused or dismissed.
CONFIRMATION_CONTROLS = frozenset(
    {
        ControlEvent.UP,
        ControlEvent.DOWN,
        ControlEvent.BACK,
        ControlEvent.ENTER,
        ControlEvent.ACCEPT,
        ControlEvent.REFUSE,
    }
)

Renderer = Callable[[DrawState], None]


class Dispatcher:
    """Consumes the event channel and drives every state transition."""

    def __init__(
        self,
        state: AppState,
        admin: PulsarAdminController,
        listener: PulsarListener,
        channel: EventChannel,
        *,
        render: Renderer | None = None,
        clipboard: TextualClipboard | None = None,
        max_live_messages: int = MAX_LIVE_MESSAGES,
        idle_interval: float = IDLE_POLL_INTERVAL,
        info_seconds: float = INFO_NOTIFICATION_SECONDS,
        error_seconds: float = ERROR_NOTIFICATION_SECONDS,
    ) -> None:
        self.state = state
        self.channel = channel
        self._admin = admin
        self._render = render
        self._clipboard = clipboard
        self._idle_interval = idle_interval
        self._tasks: set[asyncio.Task] = set()
        self._dirty = True

        self.notifier = Notifier(
            state, channel, self.spawn, info_seconds=info_seconds, error_seconds=error_seconds
        )
        self.modals = ModalController(state, channel)
        self.live_tail = LiveTailController(
            state, listener, channel, self.spawn, self.notifier, max_messages=max_live_messages
        )
        self.navigator = Navigator(
            state, admin, channel, self.spawn, self.notifier, self.live_tail
        )
        self.operations = SubscriptionOperations(
            admin, channel, self.spawn, self.notifier, self.navigator
        )
        self._control_handlers: dict[ControlEvent, Callable[[Control], None]] = {
            ControlEvent.ENTER: self._on_enter,
            ControlEvent.BACK: self._on_back,
            ControlEvent.UP: self._on_up,
            ControlEvent.DOWN: self._on_down,
            ControlEvent.CYCLE_SIDE: self._on_cycle_side,
            ControlEvent.SEARCH: self._on_search,
            ControlEvent.YANK: self._on_yank,
            ControlEvent.DELETE: self._on_delete,
            ControlEvent.SEEK: self._on_seek,
            ControlEvent.SKIP: self._on_skip,
            ControlEvent.SUBSCRIBE: self._on_subscribe,
            ControlEvent.ACCEPT: self._on_accept,
            ControlEvent.REFUSE: self._on_refuse,
            ControlEvent.CLEAR_INPUT: self._on_clear_input,
            ControlEvent.BACKSPACE: self._on_backspace,
        }

    # ------------------------------------------------------------------
    # Task tracking
    # ------------------------------------------------------------------

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task:
        """Run ``coro`` concurrently; its only way back is the event channel."""
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Background task %s crashed", task.get_name(), exc_info=exc)

    @property
    def tasks(self) -> frozenset[asyncio.Task]:
        return frozenset(self._tasks)

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def start(self, default_tenant: str = "") -> None:
        self.navigator.load_initial(default_tenant)

    async def run(self) -> None:
        """Process events until Terminate."""
        while True:
            event = await self.channel.get(timeout=self._idle_interval)
            if event is not None and not self.dispatch(event):
                break
            if not self.channel.pending:
                self.render_if_dirty()

    def render_if_dirty(self) -> None:
        if not self._dirty or self._render is None:
            return
        self._dirty = False
        self._render(self.state.snapshot())

    async def shutdown(self, grace: float = 1.0) -> None:
        """Stop live tailing, let tasks wind down, cancel the rest."""
        self.live_tail.stop()
        pending = set(self._tasks)
        if pending:
            _, still_running = await asyncio.wait(pending, timeout=grace)
            for task in still_running:
                task.cancel()
            if still_running:
                await asyncio.gather(*still_running, return_exceptions=True)
        await self._admin.close()

    def dispatch(self, event: Event) -> bool:
        """Apply one event. Returns False when the loop must stop."""
        self._dirty = True
        if isinstance(event, Control):
            if event.event is ControlEvent.TERMINATE:
                logger.info("Terminate requested")
                return False
            self._on_control(event)
        elif isinstance(event, CharInput):
            self._on_char(event.char)
        elif isinstance(event, ResourcesFetched):
            self.navigator.on_fetched(event)
        elif isinstance(event, CommandIssued):
            self._on_command(event)
        elif isinstance(event, MutationCompleted):
            self.operations.on_completed(event)
        elif isinstance(event, MessageReceived):
            self.live_tail.on_message(event)
        elif isinstance(event, ListenSessionEnded):
            self.live_tail.on_session_ended(event)
        elif isinstance(event, LatestVersion):
            self.state.latest_version = event.version
        else:
            raise TypeError(f"Unknown event: {event!r}")
        return True

    def _on_command(self, event: CommandIssued) -> None:
        command = event.command
        if isinstance(command, DismissNotification):
            self.notifier.dismiss(command.notification_id)
        else:
            self.operations.issue(command)

    # ------------------------------------------------------------------
    # Input routing
    # ------------------------------------------------------------------

    def _active_collection(self):
        return self.state.store.active_collection(self.state.active_resource)

    def _on_control(self, event: Control) -> None:
        if (
            self.state.confirmation is not None
            and event.event not in CONFIRMATION_CONTROLS
        ):
            return
        if event.event in CAPTURE_MASKED_CONTROLS and self.state.is_capturing_input:
            if event.char:
                self._on_char(event.char)
            return
        self._control_handlers[event.event](event)

    def _on_char(self, char: str) -> None:
        if self.state.confirmation is not None:
            return
        if self.state.input_modal is not None:
            self.modals.push_char(char)
            return
        collection = self._active_collection()
        if collection.is_capturing:
            collection.push_search_char(char)

    def _on_backspace(self, _: Control) -> None:
        if self.state.input_modal is not None:
            self.modals.pop_char()
            return
        self._active_collection().pop_search_char()

    def _on_clear_input(self, _: Control) -> None:
        if self.state.input_modal is not None:
            self.modals.clear_input()
            return
        self._active_collection().clear_search_input()

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def _on_enter(self, _: Control) -> None:
        if self.state.input_modal is not None:
            self.modals.submit_seek()
            return
        if self._active_collection().lock_search():
            return
        if self.modals.dismiss_confirmation():
            return
        self.navigator.drill_down()

    def _on_back(self, _: Control) -> None:
        collection = self._active_collection()
        if collection.is_capturing:
            collection.clear_search()
            return
        if self.modals.dismiss_any():
            return
        self.navigator.go_back()

    def _preview_focused(self) -> bool:
        return (
            isinstance(self.state.active_resource, Listening)
            and self.state.panel is SelectedPanel.PREVIEW
        )

    def _on_up(self, _: Control) -> None:
        self.modals.dismiss_confirmation()
        if self._preview_focused():
            self.state.scroll_offset = max(0, self.state.scroll_offset - 1)
            return
        self._active_collection().cursor_up()

    def _on_down(self, _: Control) -> None:
        self.modals.dismiss_confirmation()
        if self._preview_focused():
            self.state.scroll_offset += 1
            return
        self._active_collection().cursor_down()

    def _on_cycle_side(self, _: Control) -> None:
        if not isinstance(self.state.active_resource, Listening):
            return
        if self.state.panel is SelectedPanel.LIST:
            self.state.panel = SelectedPanel.PREVIEW
        else:
            self.state.panel = SelectedPanel.LIST
        self.state.scroll_offset = 0

    def _on_search(self, _: Control) -> None:
        if self.state.input_modal is not None:
            return
        self._active_collection().toggle_search()

    def _on_yank(self, _: Control) -> None:
        if not isinstance(self.state.active_resource, Listening):
            return
        message = self.state.store.selected_message()
        if message is None or self._clipboard is None:
            return
        try:
            self._clipboard.copy(pretty_body(message.body))
        except ClipboardError as exc:
            self.notifier.error(f"Failed to copy message :[ {exc}")
            return
        self.notifier.info("Message copied to clipboard.")

    def _on_delete(self, _: Control) -> None:
        if not isinstance(self.state.active_resource, Subscriptions):
            return
        target = self.navigator.subscription_target()
        if target is None:
            return
        self.modals.confirm(
            f"Delete '{target.subscription}' subscription?", DeleteSubscription(target)
        )

    def _on_skip(self, _: Control) -> None:
        if not isinstance(self.state.active_resource, Subscriptions):
            return
        target = self.navigator.subscription_target()
        if target is None:
            return
        self.modals.confirm(
            f"Skip all '{target.subscription}' messages?", SkipAllMessages(target)
        )

    def _on_seek(self, _: Control) -> None:
        active = self.state.active_resource
        target = self.navigator.subscription_target()
        if target is None:
            return
        if isinstance(active, Subscriptions):
            self.modals.open_seek(f"Seek {target.subscription} subscription for:", target)
        elif isinstance(active, Listening):
            self.modals.open_seek("Seek subscription for:", target)

    def _on_subscribe(self, _: Control) -> None:
        self.navigator.subscribe()

    def _on_accept(self, _: Control) -> None:
        self.modals.accept()

    def _on_refuse(self, _: Control) -> None:
        self.modals.refuse()
