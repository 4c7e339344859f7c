"""Websocket messaging client."""

from pulsarhawk.controllers.messaging.listener import (
    ConsumerStream,
    MessagingError,
    PulsarListener,
)

__all__ = [
    "ConsumerStream",
    "MessagingError",
    "PulsarListener",
]
