"""Timed notifications.

A notification is dismissed by a DismissNotification command pushed into the
event channel after a delay, never by touching state from a timer.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from pulsarhawk.constants.timeouts import (
    ERROR_NOTIFICATION_SECONDS,
    INFO_NOTIFICATION_SECONDS,
)
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.events import CommandIssued
from pulsarhawk.models.state.app_state import AppState
from pulsarhawk.models.state.commands import DismissNotification
from pulsarhawk.models.state.modals import Notification

logger = logging.getLogger(__name__)

Spawn = Callable[[Coroutine[Any, Any, Any], str], asyncio.Task]


class Notifier:
    """Shows notifications and schedules their dismissal."""

    def __init__(
        self,
        state: AppState,
        channel: EventChannel,
        spawn: Spawn,
        *,
        info_seconds: float = INFO_NOTIFICATION_SECONDS,
        error_seconds: float = ERROR_NOTIFICATION_SECONDS,
    ) -> None:
        self._state = state
        self._channel = channel
        self._spawn = spawn
        self._info_seconds = info_seconds
        self._error_seconds = error_seconds
        self._ids = itertools.count(1)

    def info(self, message: str) -> Notification:
        return self._show(message, is_error=False)

    def error(self, message: str) -> Notification:
        logger.warning("Error notification: %s", message)
        return self._show(message, is_error=True)

    def _show(self, message: str, *, is_error: bool) -> Notification:
        notification = Notification(
            message=message, is_error=is_error, notification_id=next(self._ids)
        )
        self._state.notification = notification
        delay = self._error_seconds if is_error else self._info_seconds
        self._spawn(
            self._dismiss_later(notification.notification_id, delay),
            f"dismiss-notification-{notification.notification_id}",
        )
        return notification

    async def _dismiss_later(self, notification_id: int, delay: float) -> None:
        await asyncio.sleep(delay)
        self._channel.put(CommandIssued(DismissNotification(notification_id)))

    def dismiss(self, notification_id: int) -> bool:
        """Clear the notification if it is still the one the timer was set for."""
        current = self._state.notification
        if current is None or current.notification_id != notification_id:
            return False
        self._state.notification = None
        return True
