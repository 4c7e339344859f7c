"""Credential resolution for admin and websocket calls."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from pulsarhawk.constants.timeouts import OAUTH_REQUEST_TIMEOUT
from pulsarhawk.models.state.app_settings import NoAuth, OAuthAuth, TokenAuth

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised when an access token cannot be obtained."""


class TokenProvider:
    """Lazily resolves and caches the bearer token for the configured auth.

    OAuth tokens are requested once with the client-credentials grant and
    reused for the lifetime of the process.
    """

    def __init__(self, auth: NoAuth | TokenAuth | OAuthAuth) -> None:
        self._auth = auth
        self._token: str | None = None
        self._lock = asyncio.Lock()

    async def get_token(self) -> str | None:
        if isinstance(self._auth, NoAuth):
            return None
        if isinstance(self._auth, TokenAuth):
            return self._auth.token
        async with self._lock:
            if self._token is None:
                self._token = await self._fetch_oauth_token(self._auth)
            return self._token

    async def headers(self) -> dict[str, str]:
        token = await self.get_token()
        if token is None:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def invalidate(self) -> None:
        """Forget a cached OAuth token so the next call requests a new one."""
        self._token = None

    @staticmethod
    async def _fetch_oauth_token(auth: OAuthAuth) -> str:
        form = {
            "grant_type": "client_credentials",
            "client_id": auth.client_id,
            "client_secret": auth.client_secret,
            "audience": auth.audience,
        }
        timeout = aiohttp.ClientTimeout(total=OAUTH_REQUEST_TIMEOUT)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    auth.token_url,
                    data=form,
                    headers={"Accept": "application/json"},
                ) as response:
                    if response.status >= 400:
                        body = await response.text()
                        raise AuthError(
                            f"Token endpoint returned {response.status}: {body.strip()}"
                        )
                    payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise AuthError(f"Token request failed: {exc}") from exc

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise AuthError("Token response has no access_token")
        logger.info("Obtained OAuth access token for client %s", auth.client_id)
        return str(token)
