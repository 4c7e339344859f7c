"""Active resource variants.

Exactly one variant is active at a time. It decides which collection's
cursor is live and how Enter and Back behave.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Tenants:
    label = "Tenants"


@dataclass(frozen=True, slots=True)
class Namespaces:
    label = "Namespaces"


@dataclass(frozen=True, slots=True)
class Topics:
    label = "Topics"


@dataclass(frozen=True, slots=True)
class Subscriptions:
    label = "Subscriptions"


@dataclass(frozen=True, slots=True)
class Consumers:
    label = "Consumers"


@dataclass(frozen=True, slots=True)
class Listening:
    """Live tail bound to one ephemeral subscription."""

    subscription_name: str
    label = "Listening"


ActiveResource: TypeAlias = (
    Tenants | Namespaces | Topics | Subscriptions | Consumers | Listening
)

__all__ = [
    "ActiveResource",
    "Consumers",
    "Listening",
    "Namespaces",
    "Subscriptions",
    "Tenants",
    "Topics",
]
