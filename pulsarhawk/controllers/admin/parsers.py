"""Admin payload parser - turns admin API JSON into resource models."""

from __future__ import annotations

from typing import Any

from pulsarhawk.controllers.admin.errors import AdminDecodeError
from pulsarhawk.models.resources import Consumer, Namespace, Subscription, Tenant, Topic


class AdminParser:
    """Parses admin API responses into sorted resource lists."""

    @staticmethod
    def _string_list(payload: Any, what: str) -> list[str]:
        if not isinstance(payload, list) or not all(isinstance(x, str) for x in payload):
            raise AdminDecodeError(f"Expected a list of {what} names")
        return payload

    @staticmethod
    def _as_int(value: Any) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0

    def parse_tenants(self, payload: Any) -> list[Tenant]:
        names = self._string_list(payload, "tenant")
        return sorted((Tenant(name=name) for name in names), key=lambda t: t.name)

    def parse_namespaces(self, payload: Any, tenant: str) -> list[Namespace]:
        """Namespaces come back as ``tenant/namespace``; the prefix is dropped."""
        prefix = f"{tenant}/"
        namespaces = [
            Namespace(name=name.removeprefix(prefix))
            for name in self._string_list(payload, "namespace")
        ]
        return sorted(namespaces, key=lambda n: n.name)

    def parse_topics(self, payload: Any) -> list[Topic]:
        """Topics keep their full URL and are named by the last path segment."""
        topics = [
            Topic(name=fqn.rsplit("/", 1)[-1], fqn=fqn)
            for fqn in self._string_list(payload, "topic")
        ]
        return sorted(topics, key=lambda t: t.name)

    def _subscription_stats(self, payload: Any) -> dict[str, dict[str, Any]]:
        if not isinstance(payload, dict):
            raise AdminDecodeError("Expected topic stats object")
        subscriptions = payload.get("subscriptions") or {}
        if not isinstance(subscriptions, dict):
            raise AdminDecodeError("Expected subscriptions mapping in topic stats")
        return subscriptions

    def parse_subscriptions(self, payload: Any) -> list[Subscription]:
        subscriptions = []
        for name, stats in self._subscription_stats(payload).items():
            stats = stats if isinstance(stats, dict) else {}
            consumers = stats.get("consumers") or []
            subscriptions.append(
                Subscription(
                    name=name,
                    sub_type=str(stats.get("type") or ""),
                    backlog_size=self._as_int(stats.get("msgBacklog")),
                    consumer_count=len(consumers) if isinstance(consumers, list) else 0,
                )
            )
        return sorted(subscriptions, key=lambda s: s.name)

    def parse_consumers(self, payload: Any, subscription: str) -> list[Consumer]:
        stats = self._subscription_stats(payload).get(subscription)
        if stats is None:
            raise AdminDecodeError(f"Subscription {subscription} not found in topic stats")
        if not isinstance(stats, dict):
            raise AdminDecodeError(f"Expected stats object for subscription {subscription}")
        raw_consumers = stats.get("consumers") or []
        if not isinstance(raw_consumers, list):
            raise AdminDecodeError(f"Expected consumer list for subscription {subscription}")
        consumers = []
        for raw in raw_consumers:
            if not isinstance(raw, dict):
                continue
            consumers.append(
                Consumer(
                    name=str(raw.get("consumerName") or ""),
                    unacked_messages=self._as_int(raw.get("unackedMessages")),
                    connected_since=str(raw.get("connectedSince") or ""),
                )
            )
        return sorted(consumers, key=lambda c: c.name)
