"""Base controller with async task-friendly patterns for pulsarhawk.

Controllers talk to the cluster over the network. They are only ever awaited
inside background tasks, never by the dispatcher itself, and report outcomes
wrapped in ``WorkerResult`` so failures travel back as plain data.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for background operations."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class AsyncControllerMixin:
    """Mixin providing task-friendly async patterns for controllers."""

    async def run_guarded(
        self,
        call: Callable[[], Awaitable[Any]],
        *,
        errors: tuple[type[BaseException], ...],
        label: str,
    ) -> WorkerResult:
        """Await ``call`` and wrap its outcome.

        Only exceptions listed in ``errors`` become failed results; anything
        else propagates to the task that runs the call.
        """
        started = time.monotonic()
        try:
            data = await call()
        except errors as exc:
            duration_ms = (time.monotonic() - started) * 1000
            logger.warning("%s failed after %.0fms: %s", label, duration_ms, exc)
            return WorkerResult(success=False, error=str(exc), duration_ms=duration_ms)
        duration_ms = (time.monotonic() - started) * 1000
        logger.debug("%s finished in %.0fms", label, duration_ms)
        return WorkerResult(success=True, data=data, duration_ms=duration_ms)


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class with task-friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific cluster access.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the cluster endpoint is reachable.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release network resources held by the controller."""
        ...
