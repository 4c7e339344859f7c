"""Cluster resource models.

Snapshots returned by the admin API and the websocket consumer. They are
immutable once fetched and replaced wholesale on every re-fetch.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Resource(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str


class Tenant(_Resource):
    """Top-level tenant."""


class Namespace(_Resource):
    """Namespace inside a tenant, named without the tenant prefix."""


class Topic(_Resource):
    """Persistent topic.

    ``name`` is the short local name shown in lists, ``fqn`` the full
    ``persistent://tenant/namespace/topic`` URL used to subscribe.
    """

    fqn: str


class Subscription(_Resource):
    """Subscription on a topic together with its headline stats."""

    sub_type: str = Field(default="", alias="type")
    backlog_size: int = 0
    consumer_count: int = 0


class Consumer(_Resource):
    """Connected consumer of a subscription."""

    unacked_messages: int = 0
    connected_since: str = ""


class Message(BaseModel):
    """Message delivered by a listen session.

    The body is opaque bytes; properties are pre-rendered ``key:value`` strings
    kept in the order the broker sent them.
    """

    model_config = ConfigDict(frozen=True)

    body: bytes = b""
    properties: list[str] = Field(default_factory=list)
    message_id: str | None = None
    publish_time: str | None = None
