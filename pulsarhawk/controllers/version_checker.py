"""Periodic check for the latest released version."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from pulsarhawk.constants.timeouts import VERSION_CHECK_INTERVAL, VERSION_CHECK_TIMEOUT
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.events import LatestVersion

logger = logging.getLogger(__name__)


class VersionChecker:
    """Polls a release endpoint and posts LatestVersion events.

    The endpoint is expected to answer like the GitHub "latest release" API,
    with a ``tag_name`` field. Failures are logged and retried on the next
    interval.
    """

    def __init__(
        self,
        release_url: str,
        channel: EventChannel,
        *,
        interval: float = VERSION_CHECK_INTERVAL,
    ) -> None:
        self._release_url = release_url
        self._channel = channel
        self._interval = interval

    async def fetch_latest(self) -> str | None:
        timeout = aiohttp.ClientTimeout(total=VERSION_CHECK_TIMEOUT)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(
                    self._release_url, headers={"Accept": "application/json"}
                ) as response:
                    if response.status >= 400:
                        logger.warning(
                            "Release check returned HTTP %s", response.status
                        )
                        return None
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            logger.warning("Release check failed: %s", exc)
            return None

        tag = payload.get("tag_name") if isinstance(payload, dict) else None
        if not tag:
            return None
        return str(tag).removeprefix("v")

    async def run(self) -> None:
        while True:
            version = await self.fetch_latest()
            if version is not None:
                self._channel.put(LatestVersion(version))
            await asyncio.sleep(self._interval)
