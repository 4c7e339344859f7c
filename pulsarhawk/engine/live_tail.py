"""Live-tail controller and the background listen task."""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pulsarhawk.constants.limits import MAX_LIVE_MESSAGES
from pulsarhawk.constants.values import SUBSCRIPTION_NAME_PREFIX
from pulsarhawk.controllers.messaging.listener import MessagingError
from pulsarhawk.engine.channel import EventChannel
from pulsarhawk.engine.events import ListenSessionEnded, MessageReceived
from pulsarhawk.models.resources import Topic
from pulsarhawk.models.state.active_resource import Listening
from pulsarhawk.models.state.app_state import AppState

if TYPE_CHECKING:
    from pulsarhawk.controllers.messaging.listener import PulsarListener
    from pulsarhawk.engine.notifications import Notifier, Spawn

logger = logging.getLogger(__name__)


class Cancellation:
    """One-shot cooperative cancellation signal.

    Signalling more than once is a no-op that returns False.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.signal_count = 0

    def signal(self) -> bool:
        if self._event.is_set():
            return False
        self._event.set()
        self.signal_count += 1
        return True

    @property
    def is_set(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()


@dataclass
class ListenSession:
    subscription_name: str
    topic: Topic
    cancellation: Cancellation = field(default_factory=Cancellation)
    task: asyncio.Task | None = None


def new_subscription_name() -> str:
    return f"{SUBSCRIPTION_NAME_PREFIX}{uuid.uuid4()}"


async def run_listen_session(
    listener: PulsarListener,
    topic_fqn: str,
    subscription_name: str,
    cancellation: Cancellation,
    channel: EventChannel,
) -> None:
    """Forward messages until the stream ends or cancellation is signalled.

    Always closes the consumer and finishes with a ListenSessionEnded event.
    """
    try:
        stream = await listener.subscribe(topic_fqn, subscription_name)
    except MessagingError as exc:
        channel.put(ListenSessionEnded(subscription_name, str(exc)))
        return

    error: str | None = None
    cancelled = asyncio.ensure_future(cancellation.wait())
    try:
        while True:
            receive = asyncio.ensure_future(stream.receive())
            done, _ = await asyncio.wait(
                {receive, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
            if receive not in done:
                receive.cancel()
                await asyncio.gather(receive, return_exceptions=True)
                logger.info("Listen session %s cancelled", subscription_name)
                break
            try:
                message = receive.result()
            except MessagingError as exc:
                error = str(exc)
                logger.warning("Listen session %s failed: %s", subscription_name, exc)
                break
            if message is None:
                logger.info("Listen session %s closed by the broker", subscription_name)
                break
            channel.put(MessageReceived(subscription_name, message))
            try:
                await stream.ack(message)
            except MessagingError as exc:
                logger.warning("Ack failed on %s: %s", subscription_name, exc)
    finally:
        cancelled.cancel()
        try:
            await stream.close()
        except MessagingError as exc:
            logger.warning("Closing consumer %s failed: %s", subscription_name, exc)
        channel.put(ListenSessionEnded(subscription_name, error))


class LiveTailController:
    """Owns the current listen session and merges its messages into the store."""

    def __init__(
        self,
        state: AppState,
        listener: PulsarListener,
        channel: EventChannel,
        spawn: Spawn,
        notifier: Notifier,
        *,
        max_messages: int = MAX_LIVE_MESSAGES,
    ) -> None:
        self._state = state
        self._listener = listener
        self._channel = channel
        self._spawn = spawn
        self._notifier = notifier
        self._max_messages = max_messages
        self.session: ListenSession | None = None

    def is_current(self, subscription_name: str) -> bool:
        return self.session is not None and self.session.subscription_name == subscription_name

    def start(self, topic: Topic) -> ListenSession:
        """Switch to Listening on ``topic`` under a fresh ephemeral subscription."""
        if self.session is not None:
            self.stop()
        subscription_name = new_subscription_name()
        self._state.store.messages.clear()
        self._state.reset_listening_panel()
        self._state.active_resource = Listening(subscription_name)

        session = ListenSession(subscription_name=subscription_name, topic=topic)
        session.task = self._spawn(
            run_listen_session(
                self._listener,
                topic.fqn,
                subscription_name,
                session.cancellation,
                self._channel,
            ),
            f"listen-{subscription_name}",
        )
        self.session = session
        logger.info("Started listening on %s as %s", topic.fqn, subscription_name)
        return session

    def stop(self) -> None:
        """Signal the running session to stop and forget it."""
        session = self.session
        if session is None:
            return
        if not session.cancellation.signal():
            logger.debug("Listen session %s already signalled", session.subscription_name)
        self.session = None

    def on_message(self, event: MessageReceived) -> bool:
        if not self.is_current(event.subscription_name):
            logger.debug("Dropping message from stale session %s", event.subscription_name)
            return False
        self._state.store.messages.append(event.message, self._max_messages)
        return True

    def on_session_ended(self, event: ListenSessionEnded) -> bool:
        if not self.is_current(event.subscription_name):
            return False
        self.session = None
        if event.error:
            self._notifier.error(f"Listening stopped :[ {event.error}")
        else:
            self._notifier.info("Subscription closed by the broker.")
        return True
