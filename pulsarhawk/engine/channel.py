"""Unified event channel.

Every producer (key input, fetch tasks, the live-tail task, timers) pushes
events here; the dispatcher is the only consumer.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pulsarhawk.engine.events import Event


class EventChannel:
    """FIFO of immutable events backed by an asyncio queue."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[Event] = asyncio.Queue()

    def put(self, event: Event) -> None:
        """Enqueue from code running on the event loop."""
        self._queue.put_nowait(event)

    def put_threadsafe(self, event: Event, loop: asyncio.AbstractEventLoop) -> None:
        """Enqueue from a thread other than the loop's."""
        loop.call_soon_threadsafe(self._queue.put_nowait, event)

    async def get(self, timeout: float | None = None) -> Event | None:
        """Next event, or None when ``timeout`` elapses first."""
        if timeout is None:
            return await self._queue.get()
        try:
            return await asyncio.wait_for(self._queue.get(), timeout)
        except asyncio.TimeoutError:
            return None

    def get_nowait(self) -> Event | None:
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            return None

    @property
    def pending(self) -> bool:
        return not self._queue.empty()

    def __len__(self) -> int:
        return self._queue.qsize()
