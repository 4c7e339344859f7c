"""Deferred commands.

Mutating commands carry every identifier they need, captured when the
dialog opened, so they stay correct after the user navigates elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class SubscriptionTarget:
    """Fully scoped address of a subscription."""

    tenant: str
    namespace: str
    topic: str
    subscription: str


@dataclass(frozen=True, slots=True)
class DeleteSubscription:
    target: SubscriptionTarget


@dataclass(frozen=True, slots=True)
class SkipAllMessages:
    target: SubscriptionTarget


@dataclass(frozen=True, slots=True)
class SeekSubscription:
    target: SubscriptionTarget
    time_delta: timedelta


@dataclass(frozen=True, slots=True)
class DismissNotification:
    notification_id: int


MutationCommand: TypeAlias = DeleteSubscription | SkipAllMessages | SeekSubscription
PendingCommand: TypeAlias = MutationCommand | DismissNotification

__all__ = [
    "DeleteSubscription",
    "DismissNotification",
    "MutationCommand",
    "PendingCommand",
    "SeekSubscription",
    "SkipAllMessages",
    "SubscriptionTarget",
]
