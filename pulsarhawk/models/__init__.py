"""Data models for pulsarhawk."""

from pulsarhawk.models.resources import (
    Consumer,
    Message,
    Namespace,
    Subscription,
    Tenant,
    Topic,
)

__all__ = [
    "Consumer",
    "Message",
    "Namespace",
    "Subscription",
    "Tenant",
    "Topic",
]
