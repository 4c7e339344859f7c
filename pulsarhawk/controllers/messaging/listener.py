"""Websocket consumer for live-tailing a topic."""

from __future__ import annotations

import asyncio
import base64
import binascii
import json
import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from pulsarhawk.constants.timeouts import WEBSOCKET_HEARTBEAT
from pulsarhawk.controllers.auth import AuthError, TokenProvider
from pulsarhawk.models.resources import Message

logger = logging.getLogger(__name__)


class MessagingError(Exception):
    """Raised when subscribing, receiving or acknowledging fails."""


def consumer_path(topic_fqn: str, subscription_name: str) -> str:
    """Websocket consumer path for ``persistent://tenant/ns/topic``."""
    scheme, _, rest = topic_fqn.partition("://")
    if not rest:
        scheme, rest = "persistent", topic_fqn
    return f"/ws/v2/consumer/{scheme}/{rest}/{quote(subscription_name, safe='')}"


def decode_frame(frame: dict[str, Any]) -> Message:
    """Turn a websocket delivery frame into a Message."""
    try:
        body = base64.b64decode(frame.get("payload") or "")
    except (binascii.Error, TypeError) as exc:
        raise MessagingError(f"Invalid message payload: {exc}") from exc
    properties = frame.get("properties") or {}
    if not isinstance(properties, dict):
        properties = {}
    return Message(
        body=body,
        properties=[f"{key}:{value}" for key, value in properties.items()],
        message_id=frame.get("messageId"),
        publish_time=frame.get("publishTime"),
    )


class ConsumerStream:
    """An open consumer: receive, acknowledge, close."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        ws: aiohttp.ClientWebSocketResponse,
        subscription_name: str,
    ) -> None:
        self._session = session
        self._ws = ws
        self.subscription_name = subscription_name
        self._closed = False

    async def receive(self) -> Message | None:
        """Next message, or None once the broker closed the consumer."""
        while True:
            msg = await self._ws.receive()
            if msg.type == aiohttp.WSMsgType.TEXT:
                try:
                    frame = json.loads(msg.data)
                except ValueError as exc:
                    raise MessagingError(f"Invalid frame: {exc}") from exc
                if not isinstance(frame, dict) or "messageId" not in frame:
                    logger.debug("Ignoring non-delivery frame on %s", self.subscription_name)
                    continue
                return decode_frame(frame)
            if msg.type in (
                aiohttp.WSMsgType.CLOSE,
                aiohttp.WSMsgType.CLOSING,
                aiohttp.WSMsgType.CLOSED,
            ):
                return None
            if msg.type == aiohttp.WSMsgType.ERROR:
                raise MessagingError(f"Consumer connection error: {self._ws.exception()}")

    async def ack(self, message: Message) -> None:
        if message.message_id is None:
            return
        try:
            await self._ws.send_json({"messageId": message.message_id})
        except (aiohttp.ClientError, ConnectionError, RuntimeError) as exc:
            raise MessagingError(f"Ack failed: {exc}") from exc

    async def close(self) -> None:
        """Close the consumer; calling it again is a no-op."""
        if self._closed:
            return
        self._closed = True
        try:
            await self._ws.close()
        except (aiohttp.ClientError, ConnectionError) as exc:
            raise MessagingError(f"Close failed: {exc}") from exc
        finally:
            await self._session.close()


class PulsarListener:
    """Opens non-durable exclusive consumers over the websocket API."""

    def __init__(
        self,
        pulsar_url: str,
        token_provider: TokenProvider | None = None,
        *,
        heartbeat: float = WEBSOCKET_HEARTBEAT,
    ) -> None:
        self._base_url = pulsar_url.rstrip("/")
        self._token_provider = token_provider
        self._heartbeat = heartbeat

    async def subscribe(self, topic_fqn: str, subscription_name: str) -> ConsumerStream:
        headers: dict[str, str] = {}
        if self._token_provider is not None:
            try:
                headers = await self._token_provider.headers()
            except AuthError as exc:
                raise MessagingError(f"Authentication failed: {exc}") from exc

        url = self._base_url + consumer_path(topic_fqn, subscription_name)
        params = {"subscriptionType": "Exclusive", "subscriptionMode": "NonDurable"}
        session = aiohttp.ClientSession()
        try:
            ws = await session.ws_connect(
                url, params=params, headers=headers, heartbeat=self._heartbeat
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            await session.close()
            raise MessagingError(f"Cannot subscribe to {topic_fqn}: {exc}") from exc

        logger.info("Subscribed to %s as %s", topic_fqn, subscription_name)
        return ConsumerStream(session, ws, subscription_name)
