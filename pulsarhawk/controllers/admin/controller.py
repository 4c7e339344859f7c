"""Pulsar admin controller - REST v2 calls for listing and mutating resources."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.parse import quote

import aiohttp

from pulsarhawk.constants.limits import ADMIN_FETCH_ATTEMPTS
from pulsarhawk.constants.timeouts import ADMIN_REQUEST_TIMEOUT
from pulsarhawk.controllers.admin.errors import (
    AdminDecodeError,
    AdminRequestError,
    AdminResponseError,
)
from pulsarhawk.controllers.admin.parsers import AdminParser
from pulsarhawk.controllers.auth import AuthError, TokenProvider
from pulsarhawk.controllers.base.base_controller import BaseController
from pulsarhawk.models.resources import Consumer, Namespace, Subscription, Tenant, Topic
from pulsarhawk.models.state.commands import SubscriptionTarget

logger = logging.getLogger(__name__)


def _segments(*parts: str) -> str:
    return "/".join(quote(part, safe="") for part in parts)


class PulsarAdminController(BaseController):
    """Admin API client.

    Read-only listings are retried on transport errors and timeouts; mutating
    calls are sent exactly once.
    """

    _API_PREFIX = "/admin/v2"

    def __init__(
        self,
        admin_url: str,
        token_provider: TokenProvider | None = None,
        *,
        request_timeout: float = ADMIN_REQUEST_TIMEOUT,
        fetch_attempts: int = ADMIN_FETCH_ATTEMPTS,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__()
        self._base_url = admin_url.rstrip("/")
        self._token_provider = token_provider
        self._timeout = aiohttp.ClientTimeout(total=request_timeout)
        self._fetch_attempts = max(1, fetch_attempts)
        self._now = now or (lambda: datetime.now(timezone.utc))
        self._parser = AdminParser()
        self._session: aiohttp.ClientSession | None = None

    # ------------------------------------------------------------------
    # Session and transport
    # ------------------------------------------------------------------

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _headers(self) -> dict[str, str]:
        if self._token_provider is None:
            return {}
        try:
            return await self._token_provider.headers()
        except AuthError as exc:
            raise AdminRequestError(f"Authentication failed: {exc}") from exc

    async def _request(self, method: str, path: str, *, idempotent: bool) -> Any:
        """Send one admin request and return the decoded JSON body (or None)."""
        url = f"{self._base_url}{self._API_PREFIX}/{path}"
        attempts = self._fetch_attempts if idempotent else 1
        last_error: Exception | None = None

        for attempt in range(1, attempts + 1):
            headers = await self._headers()
            try:
                async with self._get_session().request(
                    method, url, headers=headers
                ) as response:
                    if response.status >= 400:
                        detail = (await response.text(errors="replace")).strip()
                        if response.status == 401 and self._token_provider is not None:
                            self._token_provider.invalidate()
                        raise AdminResponseError(response.status, response.reason or "", detail)
                    if response.status == 204:
                        return None
                    body = await response.read()
                    if not body:
                        return None
                    try:
                        return await response.json(content_type=None)
                    except ValueError as exc:
                        raise AdminDecodeError(f"Invalid JSON from {method} {path}") from exc
            except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                last_error = exc
                if attempt < attempts:
                    logger.warning(
                        "Admin %s %s failed (attempt %s/%s), retrying: %s",
                        method,
                        path,
                        attempt,
                        attempts,
                        str(exc) or type(exc).__name__,
                    )
                    continue

        reason = str(last_error) or type(last_error).__name__
        raise AdminRequestError(f"{method} {path} failed: {reason}") from last_error

    async def _get(self, path: str) -> Any:
        return await self._request("GET", path, idempotent=True)

    @staticmethod
    def _subscription_path(target: SubscriptionTarget) -> str:
        return "persistent/" + _segments(
            target.tenant, target.namespace, target.topic
        ) + "/subscription/" + _segments(target.subscription)

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    async def check_connection(self) -> bool:
        try:
            await self._get("tenants")
        except (AdminRequestError, AdminResponseError, AdminDecodeError):
            return False
        return True

    async def list_tenants(self) -> list[Tenant]:
        return self._parser.parse_tenants(await self._get("tenants"))

    async def list_namespaces(self, tenant: str) -> list[Namespace]:
        payload = await self._get(f"namespaces/{_segments(tenant)}")
        return self._parser.parse_namespaces(payload, tenant)

    async def list_topics(self, tenant: str, namespace: str) -> list[Topic]:
        payload = await self._get(f"namespaces/{_segments(tenant, namespace)}/topics")
        return self._parser.parse_topics(payload)

    async def list_subscriptions(
        self, tenant: str, namespace: str, topic: str
    ) -> list[Subscription]:
        payload = await self._get(f"persistent/{_segments(tenant, namespace, topic)}/stats")
        return self._parser.parse_subscriptions(payload)

    async def list_consumers(
        self, tenant: str, namespace: str, topic: str, subscription: str
    ) -> list[Consumer]:
        payload = await self._get(f"persistent/{_segments(tenant, namespace, topic)}/stats")
        return self._parser.parse_consumers(payload, subscription)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def delete_subscription(self, target: SubscriptionTarget) -> None:
        await self._request("DELETE", self._subscription_path(target), idempotent=False)

    async def seek_subscription(self, target: SubscriptionTarget, time_delta: timedelta) -> None:
        """Reset the subscription cursor to ``now - time_delta``."""
        timestamp_ms = int((self._now() - time_delta).timestamp() * 1000)
        path = f"{self._subscription_path(target)}/resetcursor/{timestamp_ms}"
        await self._request("POST", path, idempotent=False)

    async def skip_all_messages(self, target: SubscriptionTarget) -> None:
        path = f"{self._subscription_path(target)}/skip_all"
        await self._request("POST", path, idempotent=False)
