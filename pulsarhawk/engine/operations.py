"""Subscription mutations issued from confirmed dialogs."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TYPE_CHECKING

from pulsarhawk.controllers.admin.errors import AdminError
from pulsarhawk.controllers.base.base_controller import WorkerResult
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.events import MutationCompleted
from pulsarhawk.models.state.commands import (
    DeleteSubscription,
    MutationCommand,
    SeekSubscription,
    SkipAllMessages,
)
from pulsarhawk.models.state.modals import hours_suffix

if TYPE_CHECKING:
    from pulsarhawk.controllers.admin.controller import PulsarAdminController
    from pulsarhawk.engine.navigation import Navigator
    from pulsarhawk.engine.notifications import Notifier, Spawn

logger = logging.getLogger(__name__)


def seek_hours(command: SeekSubscription) -> int:
    return int(command.time_delta.total_seconds() // 3600)


def describe(command: MutationCommand) -> tuple[str, str]:
    """Success message and failure prefix for a command."""
    if isinstance(command, DeleteSubscription):
        return "Subscription deleted.", "Failed to delete subscription"
    if isinstance(command, SkipAllMessages):
        return "All messages skipped successfully.", "Failed to skip messages"
    if isinstance(command, SeekSubscription):
        hours = str(seek_hours(command))
        return f"{hours}{hours_suffix(hours)} seeked.", "Failed to seek subscription"
    raise TypeError(f"Unknown command: {command!r}")


class SubscriptionOperations:
    """Runs mutations in the background and reports their outcome."""

    def __init__(
        self,
        admin: PulsarAdminController,
        channel: EventChannel,
        spawn: Spawn,
        notifier: Notifier,
        navigator: Navigator,
    ) -> None:
        self._admin = admin
        self._channel = channel
        self._spawn = spawn
        self._notifier = notifier
        self._navigator = navigator

    def _call(self, command: MutationCommand) -> Awaitable[None]:
        if isinstance(command, DeleteSubscription):
            return self._admin.delete_subscription(command.target)
        if isinstance(command, SkipAllMessages):
            return self._admin.skip_all_messages(command.target)
        if isinstance(command, SeekSubscription):
            return self._admin.seek_subscription(command.target, command.time_delta)
        raise TypeError(f"Unknown command: {command!r}")

    def issue(self, command: MutationCommand) -> None:
        logger.info("Issuing %s on %s", type(command).__name__, command.target)
        self._spawn(self._run(command), f"mutation-{type(command).__name__}")

    async def _run(self, command: MutationCommand) -> None:
        try:
            result = await self._admin.run_guarded(
                lambda: self._call(command),
                errors=(AdminError,),
                label=type(command).__name__,
            )
        except Exception as exc:
            logger.exception("%s crashed", type(command).__name__)
            result = WorkerResult(success=False, error=f"Unexpected error: {exc!r}")
        self._channel.put(MutationCompleted(command, result))

    def on_completed(self, event: MutationCompleted) -> None:
        success_message, failure_prefix = describe(event.command)
        if event.result.success:
            self._notifier.info(success_message)
        else:
            self._notifier.error(f"{failure_prefix} :[ {event.result.error}")
        self._navigator.refresh_subscriptions()
